"""Local file payload source (JSON or YAML)."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .protocol import PayloadSourceError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}


class FilePayloadSource:
    """Reads the board payload from a file on disk.

    `.yml` and `.yaml` files are parsed with PyYAML; anything else is
    treated as JSON.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def fetch(self) -> Any:
        if not self.path.exists():
            logger.error("Payload file not found: %s", self.path)
            raise PayloadSourceError(f"File not found: {self.path}")

        try:
            text = self.path.read_text()
        except OSError as e:
            logger.error("Cannot read payload file %s: %s", self.path, e)
            raise PayloadSourceError(f"Cannot read {self.path}: {e}") from e

        try:
            if self.path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            logger.error("Cannot parse payload file %s: %s", self.path, e)
            raise PayloadSourceError(f"Cannot parse {self.path}: {e}") from e

        logger.info("Loaded payload from %s", self.path)
        return data
