"""Helpers for atomic JSON file operations."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from ..errors import StorageFormatError, StorageIOError


class Persistence:
    """Handles atomic JSON file operations."""

    @staticmethod
    def load_json(file_path: Path) -> Dict[str, Any]:
        """Load a JSON object from file.

        Raises:
            StorageIOError: The file is missing or cannot be read.
            StorageFormatError: The content is not a JSON object.
        """
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOError(f"Failed to read {file_path}: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageFormatError(f"Invalid JSON in {file_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageFormatError(f"Expected a JSON object in {file_path}")
        return data

    @staticmethod
    def save_json(file_path: Path, data: Dict[str, Any]) -> None:
        """Atomically save JSON to file."""
        try:
            Persistence.ensure_dir(file_path.parent)
            tmp_fd, tmp_path = tempfile.mkstemp(dir=file_path.parent, suffix=".tmp")
        except OSError as exc:
            raise StorageIOError(f"Failed to write {file_path}: {exc}") from exc
        try:
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as fp:
                json.dump(data, fp, indent=2)
                fp.flush()
                os.fsync(fp.fileno())
            os.replace(tmp_path, file_path)
        except OSError as exc:
            raise StorageIOError(f"Failed to write {file_path}: {exc}") from exc
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    @staticmethod
    def ensure_dir(dir_path: Path) -> None:
        """Create directory if it doesn't exist."""
        dir_path.mkdir(parents=True, exist_ok=True)
