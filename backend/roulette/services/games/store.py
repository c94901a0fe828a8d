import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Optional

from flask import current_app

from roulette.models import PlayedGame


class ReadWriteLock:
    """Many concurrent readers, or a single writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self):
        with self._cond:
            # Queued writers go first so a steady stream of reads cannot starve them
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class RecordStore:
    """In-memory store of played games, keyed by game uuid.

    Records are write-once: there is no update or delete. Lookups are scoped
    to the owning service, a record owned by someone else reads as missing.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._records: Dict[uuid.UUID, PlayedGame] = {}

    def insert(self, record: PlayedGame) -> None:
        with self._lock.write():
            self._records[record.uuid] = record

    def get(self, identifier: uuid.UUID, service_id: str) -> Optional[PlayedGame]:
        with self._lock.read():
            record = self._records.get(identifier)
        if record is None or record.service_id != service_id:
            return None
        return record

    def __contains__(self, identifier) -> bool:
        with self._lock.read():
            return identifier in self._records

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._records)


def get_store() -> RecordStore:
    return current_app.extensions['record_store']
