from typing import List, Optional

def allowed_roles(user_role: Optional[str], required_roles: List[str]) -> bool:
    """
    Verifica si el rol leído de user_roles está entre los roles permitidos.
    La comparación es exacta: "Admin" o " admin " no valen como "admin".
    """
    if not user_role:
        return False
    return user_role in required_roles
