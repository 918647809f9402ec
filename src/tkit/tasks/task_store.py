# src/tkit/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import shutil
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from .line_codec import CorruptedRecord, decode_line, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


class TaskStore:
    """
    Flat-file task store (one encoded task per line, see line_codec).

    - load() never raises: a missing or unreadable file means "no tasks",
      corrupted lines are skipped and reported once as an aggregate warning.
    - save() rewrites the whole file via a sibling temp file and os.replace(),
      so readers see either the old or the new file, never a mix.
      Failures are logged and returned as a warning string.
    """

    def __init__(self, path: str | Path = "data/tkit.txt", *, app_name: str = "tkit") -> None:
        self._path = Path(path)
        self._app_name = app_name
        self.corrupted_count = 0
        self.last_warning: str | None = None
        logger.debug("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tmp_path(self) -> Path:
        return self._path.with_name(self._path.name + ".tmp")

    def _ensure_parent_dir(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.warning("Could not create data directory %s", self._path.parent, exc_info=True)

    def _warn(self, message: str) -> str:
        # Front ends print the returned text; the log line stays below the console level.
        logger.info(message)
        self.last_warning = message
        return message

    # ---- public API ----

    def load(self) -> list[Task]:
        self._ensure_parent_dir()
        self.corrupted_count = 0
        self.last_warning = None

        if not self._path.exists():
            logger.info("No data file at %s; starting with an empty list.", self._path)
            return []

        loaded: list[Task] = []
        corrupted = 0
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                for raw in fh:
                    line = raw.strip()
                    if not line or line.startswith(COMMENT_PREFIX):
                        continue
                    try:
                        loaded.append(decode_line(line))
                    except CorruptedRecord as exc:
                        corrupted += 1
                        logger.debug("Skipping corrupted record: %s", exc)
        except (OSError, UnicodeDecodeError) as exc:
            self._warn(f"Warning: could not read data file {self._path}: {exc}")
            return []

        self.corrupted_count = corrupted
        if corrupted:
            self._warn(f"Warning: {corrupted} corrupted line(s) ignored while loading.")

        logger.info("Loaded %d task(s) from %s", len(loaded), self._path)
        return loaded

    def save(self, tasks: Iterable[Task]) -> str | None:
        """Persist a full snapshot. Returns a warning message on failure, else None."""
        self._ensure_parent_dir()
        tmp = self.tmp_path
        saved_at = datetime.now().isoformat(timespec="seconds")
        header = f"{COMMENT_PREFIX} {self._app_name} save @ {saved_at}"

        try:
            with tmp.open("w", encoding="utf-8", newline="\n") as fh:
                fh.write(header + "\n")
                for task in tasks:
                    fh.write(encode_task(task) + "\n")
                fh.flush()
                os.fsync(fh.fileno())
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            return self._warn(f"Warning: failed to write data file: {exc}")

        try:
            os.replace(tmp, self._path)
        except OSError:
            logger.debug("Atomic replace failed; falling back to copy.", exc_info=True)
            try:
                shutil.copyfile(tmp, self._path)
            except OSError as exc:
                return self._warn(f"Warning: failed to finalize data file: {exc}")
            with contextlib.suppress(OSError):
                tmp.unlink()

        self.last_warning = None
        logger.debug("Saved tasks to %s", self._path)
        return None
