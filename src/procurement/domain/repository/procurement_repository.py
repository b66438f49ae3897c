"""Lock-guarded collection of Procurement aggregates.

The repository owns the aggregates.  It loads them from a ProcurementStore
once, keeps them ordered by id, and writes every change back to the store
before it becomes visible in memory.

Concurrency model: a single re-entrant lock serialises *every* operation
over the whole collection.  Callers never receive a live aggregate; they get
deep copies, and mutation happens on a working copy inside
``find_by_id_mut`` which is committed only when the block exits cleanly.
A use case that needs several steps under one lock acquisition (create:
``next_id`` + ``insert``; close: the whole remote orchestration) wraps them
in ``exclusive()``.
"""

from __future__ import annotations

import copy
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from procurement.domain.exceptions import DuplicateKeyError, EntityNotFoundError
from procurement.domain.model.procurement import Procurement
from procurement.domain.repository.procurement_store import ProcurementStore


class ProcurementRepository:

    def __init__(self, store: ProcurementStore) -> None:
        self._store = store
        self._lock = threading.RLock()
        self._procurements: dict[int, Procurement] = {
            p.id: p for p in sorted(store.load_all(), key=lambda p: p.id)
        }
        # Ids handed out in this run are never reused, even after removal
        self._highest_id = max(self._procurements, default=0)

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        """Hold the repository lock across several operations."""
        with self._lock:
            yield

    def next_id(self) -> int:
        with self._lock:
            return max(self._highest_id, max(self._procurements, default=0)) + 1

    def insert(self, procurement: Procurement) -> Procurement:
        with self._lock:
            if procurement.id in self._procurements:
                raise DuplicateKeyError(
                    f"Procurement #{procurement.id} already exists"
                )
            stored = copy.deepcopy(procurement)
            self._store.persist(stored)
            self._procurements[stored.id] = stored
            self._highest_id = max(self._highest_id, stored.id)
            return copy.deepcopy(stored)

    def find_by_id(self, procurement_id: int) -> Procurement:
        with self._lock:
            return copy.deepcopy(self._get(procurement_id))

    @contextmanager
    def find_by_id_mut(self, procurement_id: int) -> Iterator[Procurement]:
        """Yield a working copy and commit it if the block does not raise.

        The commit persists first, so a store failure leaves the in-memory
        aggregate untouched as well.
        """
        with self._lock:
            working = copy.deepcopy(self._get(procurement_id))
            yield working
            self._store.persist(working)
            self._procurements[procurement_id] = working

    def remove(self, procurement_id: int) -> None:
        with self._lock:
            self._get(procurement_id)
            self._store.delete(procurement_id)
            del self._procurements[procurement_id]

    def all(self) -> list[Procurement]:
        with self._lock:
            return [
                copy.deepcopy(self._procurements[key])
                for key in sorted(self._procurements)
            ]

    def _get(self, procurement_id: int) -> Procurement:
        procurement = self._procurements.get(procurement_id)
        if procurement is None:
            raise EntityNotFoundError(f"Procurement #{procurement_id} not found")
        return procurement
