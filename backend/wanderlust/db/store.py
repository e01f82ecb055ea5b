"""
In-memory store and its FastAPI dependency.

One insertion-ordered dict per entity kind, all guarded by a single
re-entrant lock. The store lives for the life of the process and is
never persisted. The application owns one instance (app.state.store)
and hands it to routes through get_store().
"""

from typing import Dict, Iterable, List, Mapping, Optional
import logging
import threading

from fastapi import Request

from wanderlust.core.monitoring import track_performance
from wanderlust.db.models import MODEL_FOR_KIND, EntityKind, Record
from wanderlust.db.seed import SEED_DATA

logger = logging.getLogger(__name__)


class MemoryStore:
    """Keyed record collections for every entity kind."""

    def __init__(self):
        self.lock = threading.RLock()
        self._collections: Dict[EntityKind, Dict[str, Record]] = {
            kind: {} for kind in EntityKind
        }
        self._seeded = False

    @property
    def seeded(self) -> bool:
        return self._seeded

    @track_performance("Store seeding")
    def seed(self, data: Optional[Mapping[EntityKind, Iterable[dict]]] = None) -> int:
        """
        Load the seed records. Runs once per store; later calls are ignored.
        Returns the number of records loaded.
        """
        with self.lock:
            if self._seeded:
                logger.warning("Store already seeded, ignoring re-seed request")
                return 0

            data = SEED_DATA if data is None else data
            records = {
                EntityKind(kind): [MODEL_FOR_KIND[EntityKind(kind)].model_validate(row) for row in rows]
                for kind, rows in data.items()
            }

            slugs = [post.slug for post in records.get(EntityKind.BLOG, [])]
            if len(slugs) != len(set(slugs)):
                raise ValueError("Seed data contains duplicate blog slugs")

            loaded = 0
            for kind, rows in records.items():
                for record in rows:
                    self.insert(kind, record)
                    loaded += 1

            self._seeded = True
            logger.info(f"Store seeded with {loaded} records")
            return loaded

    def values(self, kind: EntityKind) -> List[Record]:
        """Snapshot of every record of a kind, in insertion order."""
        with self.lock:
            return list(self._collections[EntityKind(kind)].values())

    def get(self, kind: EntityKind, record_id: str) -> Optional[Record]:
        with self.lock:
            return self._collections[EntityKind(kind)].get(record_id)

    def count(self, kind: EntityKind) -> int:
        with self.lock:
            return len(self._collections[EntityKind(kind)])

    def insert(self, kind: EntityKind, record: Record) -> Record:
        """Add a record under its id. Ids are unique within a kind."""
        with self.lock:
            collection = self._collections[EntityKind(kind)]
            if record.id in collection:
                raise KeyError(f"Duplicate id {record.id!r} for {EntityKind(kind).value}")
            collection[record.id] = record
            return record

    def counts(self) -> Dict[str, int]:
        with self.lock:
            return {kind.value: len(rows) for kind, rows in self._collections.items()}


def get_store(request: Request) -> MemoryStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
