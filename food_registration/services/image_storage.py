"""Storage for uploaded product and producer images.

Images live under ``<web_root>/<images_dir>`` on disk and are served by the
static mount at ``/<images_dir>``. Stored files get a random name; only the
lower-cased extension of the uploaded name is kept.
"""

import logging
import uuid
from pathlib import Path

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from food_registration.config import settings
from food_registration.core.exceptions import ImageValidationError

logger = logging.getLogger(__name__)


def has_upload(upload: UploadFile | None) -> bool:
    """Browsers send an empty file part when no image was chosen."""
    return upload is not None and bool(upload.filename)


class ImageStorage:
    """Saves and removes uploaded images under the configured web root."""

    def __init__(
        self,
        web_root: str | Path,
        images_dir: str = "images",
        allowed_extensions: list[str] | None = None,
        max_bytes: int = 5 * 1024 * 1024,
    ):
        self.web_root = Path(web_root)
        self.images_dir = images_dir.strip("/")
        self.allowed_extensions = [
            ext.lower() for ext in (allowed_extensions or [".jpg", ".jpeg", ".png"])
        ]
        self.max_bytes = max_bytes

    @property
    def directory(self) -> Path:
        return self.web_root / self.images_dir

    def _extension(self, filename: str) -> str:
        ext = Path(filename).suffix.lower()
        if ext not in self.allowed_extensions:
            allowed = ", ".join(self.allowed_extensions)
            raise ImageValidationError(f"Unsupported image type. Allowed: {allowed}")
        return ext

    async def save(self, upload: UploadFile) -> str:
        """Write the upload to disk and return its web path.

        The upload is always closed, whether or not it was accepted.
        """
        try:
            ext = self._extension(upload.filename or "")
            if upload.size is not None and upload.size > self.max_bytes:
                raise ImageValidationError("Image exceeds the maximum upload size")

            content = await upload.read()
            if not content:
                raise ImageValidationError("Image file is empty")
            if len(content) > self.max_bytes:
                raise ImageValidationError("Image exceeds the maximum upload size")

            file_name = f"{uuid.uuid4().hex}{ext}"
            target = self.directory / file_name
            await run_in_threadpool(self._write, target, content)
        finally:
            await upload.close()

        logger.info(f"Stored image {file_name} ({len(content)} bytes)")
        return f"/{self.images_dir}/{file_name}"

    @staticmethod
    def _write(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    def resolve(self, web_path: str) -> Path | None:
        """Map a web path produced by save() back to a file under the images directory."""
        prefix = f"/{self.images_dir}/"
        if not web_path.startswith(prefix):
            return None
        name = Path(web_path[len(prefix) :]).name
        if not name:
            return None
        return self.directory / name

    async def delete(self, web_path: str | None) -> bool:
        """Remove a stored image. Missing files and foreign paths are ignored."""
        if not web_path:
            return False
        path = self.resolve(web_path)
        if path is None or not path.is_file():
            return False
        await run_in_threadpool(path.unlink)
        logger.info(f"Removed image {path.name}")
        return True


def get_image_storage() -> ImageStorage:
    """Dependency returning storage configured from settings."""
    return ImageStorage(
        web_root=settings.web_root,
        images_dir=settings.images_dir,
        allowed_extensions=settings.allowed_image_extensions,
        max_bytes=settings.max_image_bytes,
    )
