from pydantic import BaseModel, field_validator, model_validator
from typing import Any, ClassVar, Optional, Tuple

from app.core.ordering import Direction

def coerce_order(value: Any) -> Optional[int]:
    """Conversión numérica del campo 'order'; lo que no es número vale 0."""
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0

class OrderedDraft(BaseModel):
    order: Optional[int] = None

    @field_validator("order", mode="before")
    @classmethod
    def order_is_numeric(cls, v):
        return coerce_order(v)

class PartialUpdate(BaseModel):
    """
    Actualización parcial: los campos se pueden omitir, pero los de
    'not_null' no pueden llegar como null (son NOT NULL en la tabla).
    """
    not_null: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data):
        if isinstance(data, dict):
            nulls = [field for field in cls.not_null if field in data and data[field] is None]
            if nulls:
                raise ValueError(f"Estos campos no pueden ser null: {', '.join(nulls)}")
        return data

class ReorderRequest(BaseModel):
    index: int
    direction: Direction

class MoveRequest(BaseModel):
    direction: Direction

class MessageResponse(BaseModel):
    message: str

class UploadResponse(BaseModel):
    url: str
    message: str = "Archivo subido exitosamente."
