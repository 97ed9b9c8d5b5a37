from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .engine import Document

logger = logging.getLogger(__name__)

# default include_ext; text is expected to be extracted from PDFs upstream
TEXT_EXTENSIONS = {".txt", ".md"}

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def read_document(path: Path, max_chars: int = 0) -> Optional[Document]:
    """Read a file as UTF-8 text, or None if it cannot be read.

    The extension is not checked; callers decide which files to pass in.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.warning("skipping %s: %s", path, e)
        return None
    text = raw.decode("utf-8", errors="ignore")
    if max_chars > 0:
        text = text[:max_chars]
    return Document(identifier=str(path), text=text, size_bytes=len(raw))


def format_file_size(size_bytes: int) -> str:
    if size_bytes <= 0:
        return "0 Bytes"
    value = float(size_bytes)
    i = 0
    while value >= 1024 and i < len(_SIZE_UNITS) - 1:
        value /= 1024
        i += 1
    # 1.50 -> 1.5, 2.00 -> 2
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[i]}"
