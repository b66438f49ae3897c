"""Abstract persistent store behind the ProcurementRepository.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from procurement.domain.model.procurement import Procurement


class ProcurementStore(ABC):

    @abstractmethod
    def load_all(self) -> list[Procurement]:
        """Return every persisted procurement (called once at startup)."""

    @abstractmethod
    def persist(self, procurement: Procurement) -> None:
        """Persist a new or updated procurement."""

    @abstractmethod
    def delete(self, procurement_id: int) -> None:
        """Delete the procurement stored under *procurement_id*."""
