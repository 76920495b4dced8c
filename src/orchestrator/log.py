"""JSONL event log for batch generation.

One line per finished task, grouped in a directory per UTC day.  A file that
grows past ``max_bytes`` is closed and the next ``generation_NN.jsonl`` opened.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from project_config import get_section

__all__ = [
    "DEFAULT_EVENTS_DIR",
    "GenerationEventLog",
    "append_event",
    "configure",
    "current_log_path",
    "read_events",
]

DEFAULT_EVENTS_DIR = "logs/generation"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GenerationEventLog:
    """Append-only writer; safe to share between threads of one process."""

    def __init__(self, base_dir: str | Path, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
        self.base_dir = Path(base_dir)
        self.max_bytes = max_bytes
        self.current_path: Optional[Path] = None
        self._lock = threading.Lock()

    def _day_dir(self) -> Path:
        day = self.base_dir / _utc_now().strftime("%Y%m%d")
        day.mkdir(parents=True, exist_ok=True)
        return day

    def _has_room(self, path: Path) -> bool:
        return not path.exists() or path.stat().st_size < self.max_bytes

    def _target(self) -> Path:
        day = self._day_dir()
        current = self.current_path
        if current is not None and current.parent == day and self._has_room(current):
            return current
        index = 0
        while not self._has_room(day / f"generation_{index:02d}.jsonl"):
            index += 1
        self.current_path = day / f"generation_{index:02d}.jsonl"
        return self.current_path

    def append(self, event: Dict[str, Any]) -> Path:
        """Write ``event`` as one line, stamping ``ts`` when missing."""

        payload = dict(event)
        payload.setdefault("ts", _utc_now().isoformat(timespec="milliseconds"))
        line = json.dumps(payload, sort_keys=True, ensure_ascii=False)
        with self._lock:
            path = self._target()
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return path


_ACTIVE: Optional[GenerationEventLog] = None


def configure(base_dir: str | Path | None = None, *, max_bytes: int | None = None) -> GenerationEventLog:
    """Replace the process-wide log; ``base_dir`` defaults to ``[logging] events_dir``."""

    global _ACTIVE
    if base_dir is None:
        base_dir = get_section("logging.events_dir", default=DEFAULT_EVENTS_DIR)
    _ACTIVE = GenerationEventLog(base_dir, max_bytes or DEFAULT_MAX_BYTES)
    return _ACTIVE


def _active() -> GenerationEventLog:
    return _ACTIVE if _ACTIVE is not None else configure()


def append_event(event: Dict[str, Any]) -> Path:
    return _active().append(event)


def current_log_path() -> Path | None:
    return _ACTIVE.current_path if _ACTIVE is not None else None


def read_events(path: str | Path) -> Iterator[Dict[str, Any]]:
    with Path(path).open(encoding="utf-8") as handle:
        for line in handle:
            if line.strip():
                yield json.loads(line)
