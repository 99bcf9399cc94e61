from fastapi import APIRouter, Depends, File, UploadFile, status
from typing import Optional
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.hero import HeroCreate, HeroResponse, HeroUpdate
from app.services.content import HeroRepository
from app.services.supabase_storage import SupabaseStorage, get_storage

router = APIRouter()

def get_repository(db: Session = Depends(get_db)) -> HeroRepository:
    return HeroRepository(db)

@router.get("/", response_model=list[HeroResponse])
def get_hero_rows(repo: HeroRepository = Depends(get_repository)):
    return repo.list()

@router.get("/current", response_model=HeroResponse)
def get_current_hero(repo: HeroRepository = Depends(get_repository)):
    """La fila que muestra el sitio público (la primera)."""
    return repo.get_singleton()

@router.get("/{hero_id}", response_model=HeroResponse)
def get_hero(hero_id: str, repo: HeroRepository = Depends(get_repository)):
    return repo.get(hero_id)

@router.post("/", response_model=HeroResponse, status_code=status.HTTP_201_CREATED)
def create_hero(hero_data: HeroCreate, repo: HeroRepository = Depends(get_repository)):
    return repo.create(hero_data)

@router.put("/{hero_id}", response_model=HeroResponse)
def update_hero(hero_id: str, hero_data: HeroUpdate, repo: HeroRepository = Depends(get_repository)):
    return repo.update(hero_id, hero_data)

@router.delete("/{hero_id}", response_model=MessageResponse)
def delete_hero(hero_id: str, repo: HeroRepository = Depends(get_repository)):
    repo.delete(hero_id)
    return {"message": repo.messages["deleted"]}

@router.post("/{hero_id}/cv", response_model=HeroResponse)
async def upload_cv(
    hero_id: str,
    file: Optional[UploadFile] = File(None),
    repo: HeroRepository = Depends(get_repository),
    storage: SupabaseStorage = Depends(get_storage)
):
    """Sube el CV (PDF o imagen) al bucket 'cvs' y reemplaza cv_url."""
    repo.get(hero_id)
    url = await storage.uploader("cvs").upload(file)
    return repo.attach_asset(hero_id, "cv_url", url)
