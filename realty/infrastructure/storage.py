"""Local filesystem storage for broker verification documents."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from realty.config import get_settings
from realty.domain.errors import ValidationError

logger = logging.getLogger(__name__)

DOCUMENTS_SUBDIR = "documents"
UNKNOWN_BROKER = "unknown_broker"


def get_uploads_root() -> Path:
    """Return the configured uploads directory, creating it when missing."""

    root = Path(get_settings().uploads_dir)
    root.mkdir(parents=True, exist_ok=True)
    return root


def _file_name_part(value: str | None, fallback: str) -> str:
    name = Path((value or "").replace("\\", "/")).name
    if name in ("", ".", ".."):
        return fallback
    return name


def build_document_filename(
    broker_email: str | None, original_name: str, *, timestamp_ms: int | None = None
) -> str:
    """Return ``<email>-<millis>-<original name>`` with path separators stripped."""

    stamp = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)
    owner = _file_name_part(broker_email, UNKNOWN_BROKER)
    safe_name = _file_name_part(original_name, "document")
    return f"{owner}-{stamp}-{safe_name}"


def save_document(broker_email: str | None, original_name: str, data: bytes) -> str:
    """Write ``data`` under the documents directory and return its path."""

    directory = get_uploads_root() / DOCUMENTS_SUBDIR
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / build_document_filename(broker_email, original_name)
    if target.resolve().parent != directory.resolve():
        raise ValidationError("Invalid document name")
    target.write_bytes(data)
    logger.info("Stored document %s (%d bytes)", target, len(data))
    return str(target)


__all__ = [
    "build_document_filename",
    "get_uploads_root",
    "save_document",
]
