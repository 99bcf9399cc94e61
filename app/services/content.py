# app/services/content.py
"""
Fachadas de acceso a las seis tablas de contenido.

Cada fachada hace list/get/create/update/delete contra la base de datos de
Supabase y, para las tablas con columna 'order', reorder/move. Los errores del
almacén se convierten en ContentStoreError con el mensaje propio de cada tabla
y el texto original del error como descripción.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from sqlalchemy import func, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import ContentStoreError, ImmutableFieldError, NotFoundException
from app.core.ordering import Direction, move_item, next_order, renumber
from app.models import Experience, GeneralText, Hero, Project, SocialLink, Technology

logger = logging.getLogger(__name__)


def apply_asset(target: Dict[str, Any], field: str, url: str, append: bool = False) -> Dict[str, Any]:
    """
    Devuelve una copia de 'target' con la URL subida en un único campo:
    la reemplaza (imagen, logo, CV) o la añade al final (galería).
    """
    if not url:
        raise ValueError("La URL del archivo subido está vacía")
    draft = dict(target)
    if append:
        draft[field] = list(draft.get(field) or []) + [url]
    else:
        draft[field] = url
    return draft


def serialize_row(item: Any) -> Dict[str, Any]:
    """Columnas de una fila como dict, para respuestas de error sin esquema."""
    return {attr.key: getattr(item, attr.key) for attr in inspect(item).mapper.column_attrs}


class ContentRepository:
    model = None
    messages: Dict[str, str] = {}

    def __init__(self, db: Session):
        self.db = db

    # --- lectura ---

    def _order_by(self) -> list:
        return [self.model.created_at.asc()]

    def list(self) -> List[Any]:
        try:
            return self.db.query(self.model).order_by(*self._order_by()).all()
        except SQLAlchemyError as e:
            self._fail("list", e)

    def count(self) -> int:
        try:
            return self.db.query(func.count(self.model.id)).scalar() or 0
        except SQLAlchemyError as e:
            self._fail("list", e)

    def get(self, item_id: str) -> Any:
        try:
            item = self.db.query(self.model).filter(self.model.id == item_id).first()
        except SQLAlchemyError as e:
            self._fail("list", e)
        if not item:
            raise NotFoundException(self.messages["not_found"])
        return item

    # --- escritura ---

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    def _prepare_update(self, item: Any, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    def create(self, draft: BaseModel) -> Any:
        data = self._prepare_create(draft.model_dump(mode="json"))
        item = self.model(**data)
        try:
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
        except SQLAlchemyError as e:
            self._fail("save", e)
        logger.info(f"✅ {self.model.__tablename__}: fila {item.id} creada")
        return item

    def update(self, item_id: str, patch: BaseModel) -> Any:
        item = self.get(item_id)
        data = self._prepare_update(item, patch.model_dump(exclude_unset=True, mode="json"))
        for field, value in data.items():
            setattr(item, field, value)
        try:
            self.db.commit()
            self.db.refresh(item)
        except SQLAlchemyError as e:
            self._fail("save", e)
        return item

    def delete(self, item_id: str) -> None:
        item = self.get(item_id)
        try:
            self.db.delete(item)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("delete", e)
        logger.info(f"🗑️ {self.model.__tablename__}: fila {item_id} borrada")

    def attach_asset(self, item_id: str, field: str, url: str, append: bool = False) -> Any:
        """Guarda la URL pública de un archivo subido en un solo campo de la fila."""
        item = self.get(item_id)
        draft = apply_asset({field: getattr(item, field)}, field, url, append=append)
        setattr(item, field, draft[field])
        try:
            self.db.commit()
            self.db.refresh(item)
        except SQLAlchemyError as e:
            self._fail("save", e)
        return item

    def _store_error(self, action: str, error: SQLAlchemyError) -> ContentStoreError:
        self.db.rollback()
        description = str(getattr(error, "orig", None) or error)
        logger.error(f"❌ {self.model.__tablename__} ({action}): {description}")
        return ContentStoreError(self.messages.get(action, "Error en la base de datos"), description)

    def _fail(self, action: str, error: SQLAlchemyError):
        raise self._store_error(action, error)


class OrderedContentRepository(ContentRepository):
    """Tablas con columna 'order' renumerada de 10 en 10."""

    def _order_by(self) -> list:
        return [self.model.order.asc(), self.model.created_at.asc()]

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("order") is None:
            data["order"] = next_order(self.count())
        return data

    def _prepare_update(self, item: Any, data: Dict[str, Any]) -> Dict[str, Any]:
        if "order" in data and data["order"] is None:
            data.pop("order")
        return data

    def reorder(self, index: int, direction: Direction) -> Optional[List[Any]]:
        """
        Mueve el elemento en 'index' una posición y guarda el orden de todas las
        filas en una sola transacción. None si el movimiento no hace nada.
        Tras guardar se devuelve la tabla leída de nuevo; si falla, el
        ContentStoreError lleva en 'items' la tabla releída tras el rollback.
        """
        return self._reorder(self.list(), index, direction)

    def move(self, item_id: str, direction: Direction) -> Optional[List[Any]]:
        items = self.list()
        for index, item in enumerate(items):
            if str(item.id) == str(item_id):
                return self._reorder(items, index, direction)
        raise NotFoundException(self.messages["not_found"])

    def _reorder(self, items: List[Any], index: int, direction: Direction) -> Optional[List[Any]]:
        moved = move_item(items, index, direction)
        if moved is None:
            return None

        updates = renumber(moved)
        try:
            self.db.bulk_update_mappings(self.model, updates)
            self.db.commit()
        except SQLAlchemyError as e:
            error = self._store_error("reorder", e)
            self.db.expire_all()
            error.items = self._reread()
            raise error
        self.db.expire_all()

        logger.info(f"↕️ {self.model.__tablename__}: orden actualizado ({len(updates)} filas)")
        return self.list()

    def _reread(self) -> Optional[List[Any]]:
        try:
            return self.list()
        except ContentStoreError:
            return None


class GeneralTextRepository(ContentRepository):
    model = GeneralText
    messages = {
        "list": "Error al cargar textos",
        "save": "Error al guardar",
        "delete": "Error al borrar texto",
        "not_found": "Texto no encontrado",
        "saved": "Texto guardado exitosamente",
        "deleted": "Texto borrado exitosamente",
    }

    def _order_by(self) -> list:
        return [GeneralText.key.asc()]

    def _prepare_update(self, item: Any, data: Dict[str, Any]) -> Dict[str, Any]:
        if "key" in data:
            if data["key"] is not None and data["key"] != item.key:
                raise ImmutableFieldError("key")
            data.pop("key")
        return data


class HeroRepository(ContentRepository):
    model = Hero
    messages = {
        "list": "Error al cargar sección Hero",
        "save": "Error al guardar",
        "delete": "Error al borrar sección Hero",
        "not_found": "Sección Hero no encontrada",
        "saved": "Sección Hero actualizada",
        "deleted": "Sección Hero borrada",
    }

    def get_singleton(self) -> Hero:
        """La sección Hero es una sola fila: se usa la primera."""
        try:
            hero = self.db.query(Hero).order_by(*self._order_by()).first()
        except SQLAlchemyError as e:
            self._fail("list", e)
        if not hero:
            raise NotFoundException(self.messages["not_found"])
        return hero


class ProjectRepository(OrderedContentRepository):
    model = Project
    messages = {
        "list": "Error al cargar proyectos",
        "save": "Error al guardar",
        "delete": "Error al borrar proyecto",
        "reorder": "Error al reordenar",
        "not_found": "Proyecto no encontrado",
        "saved": "Proyecto guardado exitosamente",
        "deleted": "Proyecto borrado exitosamente",
        "reordered": "Orden actualizado",
    }


class ExperienceRepository(OrderedContentRepository):
    model = Experience
    messages = {
        "list": "Error al cargar experiencia",
        "save": "Error al guardar",
        "delete": "Error al borrar experiencia",
        "reorder": "Error al reordenar",
        "not_found": "Experiencia no encontrada",
        "saved": "Experiencia guardada exitosamente",
        "deleted": "Experiencia borrada exitosamente",
        "reordered": "Orden actualizado",
    }


class TechnologyRepository(OrderedContentRepository):
    model = Technology
    messages = {
        "list": "Error al cargar tecnologías",
        "save": "Error al guardar",
        "delete": "Error al borrar tecnología",
        "reorder": "Error al reordenar",
        "not_found": "Tecnología no encontrada",
        "saved": "Tecnología guardada exitosamente",
        "deleted": "Tecnología borrada exitosamente",
        "reordered": "Orden actualizado",
    }


class SocialLinkRepository(ContentRepository):
    model = SocialLink
    messages = {
        "list": "Error al cargar enlaces",
        "save": "Error al guardar",
        "delete": "Error al borrar enlace",
        "not_found": "Enlace no encontrado",
        "saved": "Enlace guardado exitosamente",
        "deleted": "Enlace borrado exitosamente",
    }

    def _order_by(self) -> list:
        return [SocialLink.name.asc()]
