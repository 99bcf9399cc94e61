from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.icons import ICON_OPTIONS
from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.social_link import SocialLinkCreate, SocialLinkResponse, SocialLinkUpdate
from app.services.content import SocialLinkRepository

router = APIRouter()

def get_repository(db: Session = Depends(get_db)) -> SocialLinkRepository:
    return SocialLinkRepository(db)

@router.get("/", response_model=list[SocialLinkResponse])
def get_social_links(repo: SocialLinkRepository = Depends(get_repository)):
    return repo.list()

@router.get("/icons", response_model=dict[str, str])
def get_icon_options():
    """Claves de icono admitidas para el selector del panel."""
    return ICON_OPTIONS

@router.get("/{link_id}", response_model=SocialLinkResponse)
def get_social_link(link_id: str, repo: SocialLinkRepository = Depends(get_repository)):
    return repo.get(link_id)

@router.post("/", response_model=SocialLinkResponse, status_code=status.HTTP_201_CREATED)
def create_social_link(link_data: SocialLinkCreate, repo: SocialLinkRepository = Depends(get_repository)):
    return repo.create(link_data)

@router.put("/{link_id}", response_model=SocialLinkResponse)
def update_social_link(
    link_id: str,
    link_data: SocialLinkUpdate,
    repo: SocialLinkRepository = Depends(get_repository)
):
    return repo.update(link_id, link_data)

@router.delete("/{link_id}", response_model=MessageResponse)
def delete_social_link(link_id: str, repo: SocialLinkRepository = Depends(get_repository)):
    repo.delete(link_id)
    return {"message": repo.messages["deleted"]}
