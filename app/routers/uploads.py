from fastapi import APIRouter, Depends, File, UploadFile
from typing import Optional

from app.schemas.common import UploadResponse
from app.services.supabase_storage import SupabaseStorage, get_storage

router = APIRouter()

@router.post("/{bucket}", response_model=UploadResponse)
async def upload_file(
    bucket: str,
    file: Optional[UploadFile] = File(None),
    storage: SupabaseStorage = Depends(get_storage)
):
    """
    Sube un archivo sin tocar ninguna fila y devuelve su URL pública,
    para rellenar el formulario antes de guardar.
    """
    url = await storage.uploader(bucket).upload(file)
    return {"url": url}
