"""Diagnostic persistence of raw GraphQL response bodies."""

import logging
from pathlib import Path
from typing import Optional

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class RawResponseStore:
    """
    Writes the last raw GraphQL response body to a fixed local file.

    The file is overwritten on every fetch so a failing response can be
    replayed or inspected afterwards. Writes are best-effort.
    """

    def __init__(self, settings: Optional[Settings] = None, path: Optional[Path] = None):
        self.settings = settings or get_settings()
        self.path = path or self.settings.raw_response_path

    def save(self, body: str) -> bool:
        """Persist a response body. Returns False if the write failed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(body, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save raw GraphQL response to {self.path}: {e}")
            return False
        logger.debug(f"Raw GraphQL response saved to {self.path}")
        return True

