from typing import Dict, Optional

# Claves de icono admitidas en social_links.icon_key -> etiqueta del panel
ICON_OPTIONS: Dict[str, str] = {
    "github": "GitHub",
    "linkedin": "LinkedIn",
    "twitter": "Twitter",
    "youtube": "YouTube",
    "instagram": "Instagram",
    "mail": "Correo (Mail)",
    "messagesquare": "Mensaje (Square)",
    "link": "Otro (Enlace genérico)",
}

def normalize_icon_key(value: Optional[str]) -> Optional[str]:
    """Clave conocida en minúsculas, o None si no se puede renderizar."""
    if not value:
        return None
    key = value.strip().lower()
    return key if key in ICON_OPTIONS else None
