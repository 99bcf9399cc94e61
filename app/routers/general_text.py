from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.general_text import GeneralTextCreate, GeneralTextResponse, GeneralTextUpdate
from app.services.content import GeneralTextRepository

router = APIRouter()

def get_repository(db: Session = Depends(get_db)) -> GeneralTextRepository:
    return GeneralTextRepository(db)

@router.get("/", response_model=list[GeneralTextResponse])
def get_general_texts(repo: GeneralTextRepository = Depends(get_repository)):
    """Textos ordenados por clave."""
    return repo.list()

@router.get("/{text_id}", response_model=GeneralTextResponse)
def get_general_text(text_id: str, repo: GeneralTextRepository = Depends(get_repository)):
    return repo.get(text_id)

@router.post("/", response_model=GeneralTextResponse, status_code=status.HTTP_201_CREATED)
def create_general_text(text_data: GeneralTextCreate, repo: GeneralTextRepository = Depends(get_repository)):
    return repo.create(text_data)

@router.put("/{text_id}", response_model=GeneralTextResponse)
def update_general_text(
    text_id: str,
    text_data: GeneralTextUpdate,
    repo: GeneralTextRepository = Depends(get_repository)
):
    """Actualiza los textos; la clave no se puede cambiar."""
    return repo.update(text_id, text_data)

@router.delete("/{text_id}", response_model=MessageResponse)
def delete_general_text(text_id: str, repo: GeneralTextRepository = Depends(get_repository)):
    repo.delete(text_id)
    return {"message": repo.messages["deleted"]}
