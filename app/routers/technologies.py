from fastapi import APIRouter, Depends, File, UploadFile, status
from typing import Optional
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import MessageResponse, MoveRequest, ReorderRequest
from app.schemas.technology import (
    TechnologyCreate,
    TechnologyReorderResponse,
    TechnologyResponse,
    TechnologyUpdate,
)
from app.services.content import TechnologyRepository
from app.services.supabase_storage import SupabaseStorage, get_storage

router = APIRouter()

def get_repository(db: Session = Depends(get_db)) -> TechnologyRepository:
    return TechnologyRepository(db)

@router.get("/", response_model=list[TechnologyResponse])
def get_technologies(repo: TechnologyRepository = Depends(get_repository)):
    return repo.list()

@router.get("/{technology_id}", response_model=TechnologyResponse)
def get_technology(technology_id: str, repo: TechnologyRepository = Depends(get_repository)):
    return repo.get(technology_id)

@router.post("/", response_model=TechnologyResponse, status_code=status.HTTP_201_CREATED)
def create_technology(technology_data: TechnologyCreate, repo: TechnologyRepository = Depends(get_repository)):
    return repo.create(technology_data)

@router.put("/{technology_id}", response_model=TechnologyResponse)
def update_technology(
    technology_id: str,
    technology_data: TechnologyUpdate,
    repo: TechnologyRepository = Depends(get_repository)
):
    return repo.update(technology_id, technology_data)

@router.delete("/{technology_id}", response_model=MessageResponse)
def delete_technology(technology_id: str, repo: TechnologyRepository = Depends(get_repository)):
    repo.delete(technology_id)
    return {"message": repo.messages["deleted"]}

@router.post("/reorder", response_model=TechnologyReorderResponse)
def reorder_technologies(data: ReorderRequest, repo: TechnologyRepository = Depends(get_repository)):
    items = repo.reorder(data.index, data.direction)
    if items is None:
        return {"message": "Sin cambios", "items": repo.list()}
    return {"message": repo.messages["reordered"], "items": items}

@router.post("/{technology_id}/move", response_model=TechnologyReorderResponse)
def move_technology(technology_id: str, data: MoveRequest, repo: TechnologyRepository = Depends(get_repository)):
    items = repo.move(technology_id, data.direction)
    if items is None:
        return {"message": "Sin cambios", "items": repo.list()}
    return {"message": repo.messages["reordered"], "items": items}

@router.post("/{technology_id}/logo", response_model=TechnologyResponse)
async def upload_technology_logo(
    technology_id: str,
    file: Optional[UploadFile] = File(None),
    repo: TechnologyRepository = Depends(get_repository),
    storage: SupabaseStorage = Depends(get_storage)
):
    """Sube el logo al bucket 'technologies' y reemplaza logo_url."""
    repo.get(technology_id)
    url = await storage.uploader("technologies", allow_documents=False).upload(file)
    return repo.attach_asset(technology_id, "logo_url", url)
