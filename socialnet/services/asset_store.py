from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from socialnet.config import settings

logger = logging.getLogger(__name__)

UPLOADS_PREFIX = "uploads/"


def normalize_relative_path(path_or_url: str) -> Optional[str]:
    """Reduce an absolute URL to its path; plain paths pass through."""
    if not path_or_url:
        return None
    if path_or_url.startswith("http"):
        parsed = urlparse(path_or_url)
        return parsed.path or None
    return path_or_url


class LocalAssetStore:
    """AssetStore over files saved by the upload endpoint under UPLOADS_DIR."""

    def __init__(self, uploads_dir: Optional[str] = None):
        self.uploads_dir = Path(uploads_dir or settings.UPLOADS_DIR)

    def delete_by_path(self, path: str) -> None:
        relative_path = normalize_relative_path(path)
        if not relative_path:
            return
        relative_path = relative_path.lstrip("/")
        if not relative_path.startswith(UPLOADS_PREFIX):
            logger.debug("Skipping asset outside uploads: %s", relative_path)
            return

        # Only the basename is trusted; nested segments are ignored.
        file_path = self.uploads_dir / Path(relative_path).name
        if not file_path.exists():
            return
        file_path.unlink()
        logger.info("Deleted asset %s", file_path)
