"""Blob storage for uploaded rental photos.

The rest of the app only ever sees the reference string returned by
``save``; raw bytes never reach the database.
"""
import os
import re
import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO

from app.config import settings
from app.errors import ValidationError
from app.logging_config import get_logger

logger = get_logger("app.services.storage")

CHUNK_SIZE = 64 * 1024


class StorageBackend(ABC):
    @abstractmethod
    def save(self, fileobj: BinaryIO, filename: str) -> str:
        """Store ``fileobj`` and return a fetchable reference (URL path)."""

    @abstractmethod
    def delete(self, ref: str) -> bool:
        pass


class LocalStorage(StorageBackend):
    """Writes files under ``root`` and serves them from ``url_prefix``."""

    def __init__(self, root: str, url_prefix: str, max_bytes: int):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes
        self.root.mkdir(parents=True, exist_ok=True)

    def _sanitize(self, filename: str) -> str:
        name = os.path.basename(filename or "")
        return re.sub(r"[^A-Za-z0-9._-]+", "_", name) or "file"

    def _key_for(self, ref: str) -> str:
        return os.path.basename(ref)

    def save(self, fileobj: BinaryIO, filename: str) -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S%f")
        key = f"{ts}-{secrets.token_hex(4)}-{self._sanitize(filename)}"
        path = self.root / key
        written = 0
        with open(path, "wb") as f:
            while True:
                chunk = fileobj.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > self.max_bytes:
                    break
                f.write(chunk)
        if written > self.max_bytes:
            path.unlink(missing_ok=True)
            limit_mb = self.max_bytes / (1024 * 1024)
            raise ValidationError.single("images", f"{filename} exceeds the {limit_mb:g}MB upload limit")
        logger.debug("Stored upload %s (%d bytes)", key, written)
        return f"{self.url_prefix}/{key}"

    def delete(self, ref: str) -> bool:
        try:
            os.remove(self.root / self._key_for(ref))
            return True
        except FileNotFoundError:
            return False


def get_storage() -> StorageBackend:
    """Dependency returning the configured blob store."""
    return LocalStorage(settings.upload_dir, settings.upload_url_prefix, settings.max_upload_bytes)
