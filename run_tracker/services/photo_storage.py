"""Disk storage for run photos."""

import logging
import secrets
import time
from dataclasses import dataclass
from pathlib import Path

from run_tracker.errors import UnsupportedFileType, UploadTooLarge

logger = logging.getLogger(__name__)


@dataclass
class PhotoUpload:
    """A photo received from a multipart request, already read into memory."""

    filename: str
    content_type: str | None
    content: bytes


class PhotoStorage:
    """Saves photos under ``upload_dir`` and hands back ``<url_prefix>/<name>`` references."""

    def __init__(
        self, upload_dir: str | Path, url_prefix: str = "/uploads", max_bytes: int = 5 * 1024 * 1024
    ):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes

    def validate(self, upload: PhotoUpload) -> None:
        """Reject non-image uploads and uploads over the size cap."""
        if not (upload.content_type or "").startswith("image/"):
            raise UnsupportedFileType()
        if len(upload.content) > self.max_bytes:
            raise UploadTooLarge(f"File is too large (maximum {self.max_bytes} bytes)")

    def save(self, upload: PhotoUpload) -> str:
        """Validate and write a photo, returning its public reference."""
        self.validate(upload)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

        suffix = Path(upload.filename).suffix.lower()
        name = f"photo-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"
        (self.upload_dir / name).write_bytes(upload.content)

        logger.info("Stored photo %s (%d bytes)", name, len(upload.content))
        return f"{self.url_prefix}/{name}"

    def path_for(self, reference: str) -> Path:
        """Map a public reference back to a file inside ``upload_dir``."""
        # Only the final component is used so references cannot escape upload_dir
        return self.upload_dir / Path(reference).name

    def delete(self, reference: str) -> bool:
        """Remove a stored photo. Returns False if it was already gone."""
        path = self.path_for(reference)
        if not path.is_file():
            logger.warning("Photo %s not found on disk", reference)
            return False
        path.unlink()
        logger.info("Removed photo %s", path.name)
        return True
