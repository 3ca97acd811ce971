"""JSON-lines event log for board changes."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Union

import click

from ..state.models import Status


class EventLogger:
    """Minimal logger that appends board events to a log file."""

    def __init__(self, log_file: Union[str, Path]) -> None:
        self.log_file = Path(log_file).expanduser()
        self.write_errors = 0

    def _write(self, payload: Dict[str, Any]) -> None:
        """Append one entry; OSError is reported on stderr, never raised."""
        entry = {"timestamp": datetime.now(timezone.utc).isoformat(), **payload}
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with self.log_file.open("a", encoding="utf-8") as fp:
                fp.write(json.dumps(entry) + "\n")
        except OSError as exc:
            self.write_errors += 1
            click.echo(f"Event log unavailable ({self.log_file}): {exc}", err=True)

    def log_epic_created(self, epic_id: str, name: str) -> None:
        self._write({"event": "epic_created", "epic_id": epic_id, "name": name})

    def log_story_created(self, epic_id: str, story_id: str, name: str) -> None:
        self._write({"event": "story_created", "epic_id": epic_id, "story_id": story_id, "name": name})

    def log_epic_deleted(self, epic_id: str, story_ids: List[str]) -> None:
        self._write({"event": "epic_deleted", "epic_id": epic_id, "story_ids": story_ids})

    def log_story_deleted(self, epic_id: str, story_id: str) -> None:
        self._write({"event": "story_deleted", "epic_id": epic_id, "story_id": story_id})

    def log_epic_status(self, epic_id: str, status: Status) -> None:
        self._write({"event": "epic_status_updated", "epic_id": epic_id, "status": status.value})

    def log_story_status(self, story_id: str, status: Status) -> None:
        self._write({"event": "story_status_updated", "story_id": story_id, "status": status.value})

    def log_error(self, stage: str, message: str) -> None:
        self._write({"event": "error", "stage": stage, "message": message})

    def read_entries(self) -> List[Dict[str, Any]]:
        """Return all logged entries, oldest first."""
        if not self.log_file.exists():
            return []
        entries = []
        for line in self.log_file.read_text(encoding="utf-8").splitlines():
            if line.strip():
                entries.append(json.loads(line))
        return entries
