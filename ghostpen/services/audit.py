# ghostpen/services/audit.py
from __future__ import annotations

import logging
import os
import queue
import threading
from datetime import datetime
from typing import Any, Dict, Optional

from ghostpen.utils.storage import append_jsonl, log_dir

log = logging.getLogger("audit")

AUDIT_FILE = "audit.jsonl"


class AuditLog:
    """
    Fire-and-forget event log. `record()` only enqueues; a daemon worker
    thread appends each entry to <log dir>/audit.jsonl.
    """

    def __init__(self):
        self._queue: "queue.Queue[Dict[str, Any]]" = queue.Queue()
        self._worker: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def _ensure_worker(self) -> None:
        with self._lock:
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(target=self._run, name="audit-writer")
                self._worker.daemon = True
                self._worker.start()

    def _run(self) -> None:
        while True:
            entry = self._queue.get()
            try:
                append_jsonl(os.path.join(log_dir(), AUDIT_FILE), entry)
            except OSError as e:
                log.warning("Could not write audit event %s: %s", entry.get("event"), e)
            finally:
                self._queue.task_done()

    def record(self, event: str, details: Optional[Dict[str, Any]] = None) -> None:
        entry = {
            "timestamp": datetime.now().astimezone().isoformat(),
            "event": event,
            "details": details or {},
        }
        try:
            self._ensure_worker()
            self._queue.put_nowait(entry)
        except RuntimeError as e:
            # e.g. interpreter shutting down; the caller must not notice
            log.warning("Dropped audit event %s: %s", event, e)

    def flush(self) -> None:
        """Block until every queued entry is written. For shutdown and tests."""
        self._queue.join()


_AUDIT = None
_AUDIT_LOCK = threading.Lock()
def AUDIT() -> AuditLog:
    global _AUDIT
    if _AUDIT is None:
        with _AUDIT_LOCK:
            if _AUDIT is None:
                _AUDIT = AuditLog()
    return _AUDIT


def record(event: str, details: Optional[Dict[str, Any]] = None) -> None:
    AUDIT().record(event, details)
