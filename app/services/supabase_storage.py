# app/services/supabase_storage.py
import logging
import uuid
from typing import Optional

from fastapi import UploadFile
from supabase import Client, create_client

from app.config import settings
from app.core.exceptions import NotFoundException, UploadError, UploadInProgressError

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg', 'avif'}
DOCUMENT_EXTENSIONS = {'pdf'}


class AssetUploader:
    """
    Sube un archivo a un bucket y devuelve su URL pública.

    Cada instancia controla su propia subida en curso; dos instancias
    distintas son independientes. La API crea un uploader por petición,
    así que el bloqueo solo aplica a quien reutilice la misma instancia
    (por ejemplo un script que suba varios archivos seguidos).
    """

    def __init__(self, client: Client, bucket: str, allow_documents: bool = True,
                 max_size_mb: Optional[int] = None):
        self.client = client
        self.bucket = bucket
        self.allow_documents = allow_documents
        self.max_size_mb = max_size_mb or settings.MAX_UPLOAD_MB
        self.is_uploading = False

    @property
    def allowed_extensions(self) -> set:
        if self.allow_documents:
            return IMAGE_EXTENSIONS | DOCUMENT_EXTENSIONS
        return IMAGE_EXTENSIONS

    async def upload(self, file: Optional[UploadFile]) -> str:
        # Validación local, antes de cualquier llamada de red
        if file is None or not file.filename:
            raise UploadError("Por favor, selecciona un archivo primero.")
        if self.is_uploading:
            raise UploadInProgressError()

        self.is_uploading = True
        try:
            filename = file.filename
            ext = filename.rsplit('.', 1)[-1].lower() if '.' in filename else ''
            if ext not in self.allowed_extensions:
                raise UploadError(
                    "Tipo de archivo no permitido.",
                    description=f"Extensiones válidas: {', '.join(sorted(self.allowed_extensions))}"
                )

            content = await file.read()
            if len(content) > self.max_size_mb * 1024 * 1024:
                raise UploadError(f"El archivo es demasiado grande (máximo {self.max_size_mb}MB)")

            # Nombre único conservando la extensión original
            storage_path = f"{uuid.uuid4().hex}.{ext}"
            content_type = file.content_type or ("application/pdf" if ext == "pdf" else f"image/{ext}")

            try:
                self.client.storage.from_(self.bucket).upload(
                    storage_path,
                    content,
                    {"content-type": content_type}
                )
            except Exception as e:
                logger.error(f"❌ Error subiendo {filename} a '{self.bucket}': {e}")
                raise UploadError("Error al subir el archivo.", description=str(e), status_code=502)

            public_url = self.client.storage.from_(self.bucket).get_public_url(storage_path)
            if not public_url:
                raise UploadError("Error al obtener la URL pública del archivo.", status_code=502)

            logger.info(f"📤 Archivo subido a '{self.bucket}': {storage_path}")
            return public_url
        finally:
            self.is_uploading = False


class SupabaseStorage:
    def __init__(self, client: Optional[Client] = None):
        self._client = client
        self.buckets = settings.buckets

    @property
    def client(self) -> Client:
        # Usar SERVICE KEY para escritura; se crea al primer uso
        if self._client is None:
            self._client = create_client(
                settings.SUPABASE_URL,
                settings.SUPABASE_SERVICE_KEY
            )
        return self._client

    def uploader(self, bucket: str, allow_documents: bool = True) -> AssetUploader:
        if bucket not in self.buckets:
            raise NotFoundException(f"Bucket '{bucket}' no encontrado")
        return AssetUploader(self.client, bucket, allow_documents=allow_documents)


# Instancia global
storage_service = SupabaseStorage()

def get_storage() -> SupabaseStorage:
    return storage_service
