from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import MessageResponse, MoveRequest, ReorderRequest
from app.schemas.experience import (
    ExperienceCreate,
    ExperienceReorderResponse,
    ExperienceResponse,
    ExperienceUpdate,
)
from app.services.content import ExperienceRepository

router = APIRouter()

def get_repository(db: Session = Depends(get_db)) -> ExperienceRepository:
    return ExperienceRepository(db)

@router.get("/", response_model=list[ExperienceResponse])
def get_experience(repo: ExperienceRepository = Depends(get_repository)):
    return repo.list()

@router.get("/{experience_id}", response_model=ExperienceResponse)
def get_experience_item(experience_id: str, repo: ExperienceRepository = Depends(get_repository)):
    return repo.get(experience_id)

@router.post("/", response_model=ExperienceResponse, status_code=status.HTTP_201_CREATED)
def create_experience(experience_data: ExperienceCreate, repo: ExperienceRepository = Depends(get_repository)):
    return repo.create(experience_data)

@router.put("/{experience_id}", response_model=ExperienceResponse)
def update_experience(
    experience_id: str,
    experience_data: ExperienceUpdate,
    repo: ExperienceRepository = Depends(get_repository)
):
    return repo.update(experience_id, experience_data)

@router.delete("/{experience_id}", response_model=MessageResponse)
def delete_experience(experience_id: str, repo: ExperienceRepository = Depends(get_repository)):
    repo.delete(experience_id)
    return {"message": repo.messages["deleted"]}

@router.post("/reorder", response_model=ExperienceReorderResponse)
def reorder_experience(data: ReorderRequest, repo: ExperienceRepository = Depends(get_repository)):
    items = repo.reorder(data.index, data.direction)
    if items is None:
        return {"message": "Sin cambios", "items": repo.list()}
    return {"message": repo.messages["reordered"], "items": items}

@router.post("/{experience_id}/move", response_model=ExperienceReorderResponse)
def move_experience(experience_id: str, data: MoveRequest, repo: ExperienceRepository = Depends(get_repository)):
    items = repo.move(experience_id, data.direction)
    if items is None:
        return {"message": "Sin cambios", "items": repo.list()}
    return {"message": repo.messages["reordered"], "items": items}
