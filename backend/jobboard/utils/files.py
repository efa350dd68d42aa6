"""
File upload validation helpers.
"""

import os
import re
import secrets
import time
from typing import Iterable, Optional

ALLOWED_FILE_TYPES = (
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)

DOCUMENT_FILE_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)

IMAGE_FILE_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")

DEFAULT_MAX_FILE_SIZE_MB = 10


def validate_file_type(
    mimetype: str,
    allowed_types: Optional[Iterable[str]] = None,
) -> bool:
    """Return True if `mimetype` is one of the allowed types."""
    return mimetype in tuple(allowed_types or ALLOWED_FILE_TYPES)


def validate_file_size(size_in_bytes: int, max_size_mb: int = DEFAULT_MAX_FILE_SIZE_MB) -> bool:
    """Return True for a non-empty file no larger than `max_size_mb`."""
    return 0 < size_in_bytes <= max_size_mb * 1024 * 1024


def sanitize_filename(filename: str) -> str:
    """
    Make a filename safe for storage.

    Non-alphanumeric characters become underscores, runs of underscores
    collapse, the stem is capped at 100 characters and the extension is
    lower-cased.
    """
    stem, ext = os.path.splitext(os.path.basename(filename))
    stem = re.sub(r"[^a-zA-Z0-9_-]", "_", stem)
    stem = re.sub(r"_+", "_", stem).strip("_")[:100]
    return stem + ext.lower()


def generate_unique_filename(original_name: str) -> str:
    """Return `<timestamp_ms>-<random hex>-<sanitized name>`."""
    timestamp = int(time.time() * 1000)
    return f"{timestamp}-{secrets.token_hex(8)}-{sanitize_filename(original_name)}"


def extract_timestamp_from_filename(filename: str) -> Optional[int]:
    """Recover the timestamp prefix written by `generate_unique_filename`."""
    match = re.match(r"^(\d+)-", filename)
    return int(match.group(1)) if match else None
