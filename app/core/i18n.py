"""
Resolución de columnas bilingües (campo_es / campo_en) y diccionario de textos.
"""
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence


class Language(str, Enum):
    es = "es"
    en = "en"


DEFAULT_LANGUAGE = Language.es


def parse_language(value: Optional[str]) -> Language:
    """Idioma a partir de la cookie o query; cualquier otro valor cae en español."""
    try:
        return Language(value) if value else DEFAULT_LANGUAGE
    except ValueError:
        return DEFAULT_LANGUAGE


def _read(record: Any, column: str) -> Any:
    if isinstance(record, Mapping):
        return record[column]
    return getattr(record, column)


def resolve_field(record: Any, field: str, lang: Language) -> Any:
    return _read(record, f"{field}_{Language(lang).value}")


def project_record(
    record: Any,
    bilingual: Sequence[str],
    plain: Sequence[str],
    lang: Language,
) -> Dict[str, Any]:
    """Forma independiente del idioma: {campo: valor} para el render público."""
    projected = {field: _read(record, field) for field in plain}
    for field in bilingual:
        projected[field] = resolve_field(record, field, lang)
    return projected


def build_dictionary(rows: Iterable[Any], lang: Language) -> Dict[str, str]:
    return {_read(row, "key"): resolve_field(row, "text", lang) for row in rows}


class Translator:
    """Búsqueda key -> texto; si la clave no existe devuelve la propia clave."""

    def __init__(self, texts: Optional[Mapping[str, str]] = None, lang: Language = DEFAULT_LANGUAGE):
        self.texts = dict(texts or {})
        self.lang = lang

    def t(self, key: str) -> str:
        return self.texts.get(key) or key

    __call__ = t
