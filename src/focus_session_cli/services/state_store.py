"""Durable key-value slot backed by a JSON file.

Reads are served from memory after the first load. Writes update memory
immediately and are flushed to disk by a single background worker, so
callers get a future instead of blocking on I/O.
"""

from __future__ import annotations

import json
import logging
import os
import time
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonStateStore:
    """Persist a flat mapping of keys to JSON values in a single file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: dict[str, Any] | None = None
        self._executor: ThreadPoolExecutor | None = None
        self._closed = False

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        if not self.path.exists():
            self._data = {}
            return self._data

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.warning("could not read state file %s: %s", self.path, e)
            self._data = {}
            return self._data

        if not raw.strip():
            self._data = {}
            return self._data

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            # Keep the corrupt payload around for inspection, start fresh
            backup = self.path.with_suffix(f".corrupt-{int(time.time())}.json")
            backup.write_bytes(raw)
            logger.warning("corrupt state file %s copied to %s", self.path, backup)
            data = {}

        if not isinstance(data, dict):
            logger.warning("state file %s does not hold a mapping, ignoring", self.path)
            data = {}

        self._data = data
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under *key*, or *default* if absent."""
        return self._load().get(key, default)

    def update(self, key: str, value: Any) -> Future:
        """Store *value* under *key* and schedule a write to disk.

        The in-memory mapping reflects the update before this returns. The
        returned future resolves to ``None`` once the file is replaced, or
        carries the exception if the write failed.
        """
        data = {**self._load(), key: value}

        future: Future = Future()
        try:
            payload = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
        except (TypeError, ValueError) as e:
            future.set_exception(e)
            return future
        self._data = data

        if self._closed:
            future.set_exception(RuntimeError("state store is closed"))
            return future

        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="focus-state"
            )
        return self._executor.submit(self._write, payload)

    def _write(self, payload: str) -> None:
        """Atomic write: temp file in the same directory, fsync, replace."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")

        with open(tmp, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp, self.path)

        try:
            os.chmod(self.path, 0o600)
        except OSError:
            logger.debug("could not restrict permissions on %s", self.path)

    def flush(self) -> None:
        """Block until every scheduled write has finished."""
        if self._executor is not None:
            self._executor.submit(lambda: None).result()

    def close(self) -> None:
        """Drain pending writes and stop the worker. Safe to call twice."""
        self._closed = True
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
