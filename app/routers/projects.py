from fastapi import APIRouter, Depends, File, UploadFile, status
from typing import Optional
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import MessageResponse, MoveRequest, ReorderRequest
from app.schemas.project import (
    ProjectCreate,
    ProjectReorderResponse,
    ProjectResponse,
    ProjectUpdate,
)
from app.services.content import ProjectRepository
from app.services.supabase_storage import SupabaseStorage, get_storage

router = APIRouter()

BUCKET = "projects"

def get_repository(db: Session = Depends(get_db)) -> ProjectRepository:
    return ProjectRepository(db)

def _reorder_response(repo: ProjectRepository, items) -> dict:
    if items is None:
        return {"message": "Sin cambios", "items": repo.list()}
    return {"message": repo.messages["reordered"], "items": items}

@router.get("/", response_model=list[ProjectResponse])
def get_projects(repo: ProjectRepository = Depends(get_repository)):
    return repo.list()

@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: str, repo: ProjectRepository = Depends(get_repository)):
    return repo.get(project_id)

@router.post("/", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(project_data: ProjectCreate, repo: ProjectRepository = Depends(get_repository)):
    """Crea un proyecto; sin 'order' se coloca al final de la lista."""
    return repo.create(project_data)

@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    repo: ProjectRepository = Depends(get_repository)
):
    return repo.update(project_id, project_data)

@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(project_id: str, repo: ProjectRepository = Depends(get_repository)):
    repo.delete(project_id)
    return {"message": repo.messages["deleted"]}

@router.post("/reorder", response_model=ProjectReorderResponse)
def reorder_projects(data: ReorderRequest, repo: ProjectRepository = Depends(get_repository)):
    """Mueve el proyecto en la posición 'index' una posición arriba o abajo."""
    return _reorder_response(repo, repo.reorder(data.index, data.direction))

@router.post("/{project_id}/move", response_model=ProjectReorderResponse)
def move_project(project_id: str, data: MoveRequest, repo: ProjectRepository = Depends(get_repository)):
    return _reorder_response(repo, repo.move(project_id, data.direction))

@router.post("/{project_id}/image", response_model=ProjectResponse)
async def upload_project_image(
    project_id: str,
    file: Optional[UploadFile] = File(None),
    repo: ProjectRepository = Depends(get_repository),
    storage: SupabaseStorage = Depends(get_storage)
):
    """Sube la imagen principal y reemplaza image_url."""
    repo.get(project_id)
    url = await storage.uploader(BUCKET, allow_documents=False).upload(file)
    return repo.attach_asset(project_id, "image_url", url)

@router.post("/{project_id}/gallery", response_model=ProjectResponse)
async def upload_gallery_image(
    project_id: str,
    file: Optional[UploadFile] = File(None),
    repo: ProjectRepository = Depends(get_repository),
    storage: SupabaseStorage = Depends(get_storage)
):
    """Sube una imagen y la añade al final de gallery_urls."""
    repo.get(project_id)
    url = await storage.uploader(BUCKET, allow_documents=False).upload(file)
    return repo.attach_asset(project_id, "gallery_urls", url, append=True)
