"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Infrastructure failures (store I/O, remote transport) are raised as
InternalError, which is deliberately *not* a DomainException: a caller may
retry an internal error, while retrying a business rule violation is
pointless until the underlying data changes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateKeyError(DomainException):
    """A uniqueness constraint would be violated."""


class InvalidChecksumError(ValidationError):
    """A unit-load identifier failed its check-digit test."""


class InvalidTransitionError(DomainException):
    """The requested status change is not an edge of the state machine."""


class InvalidStateError(DomainException):
    """The operation is not allowed in the procurement's current status."""


class IncompleteUplsError(DomainException):
    """UPL candidate coverage for a SKU does not match its ordered amount."""

    def __init__(self, sku: int, missing_count: int) -> None:
        self.sku = sku
        self.missing_count = missing_count
        if missing_count > 0:
            msg = f"SKU {sku} is still missing {missing_count} UPL(s)"
        else:
            msg = f"SKU {sku} has {-missing_count} UPL(s) more than ordered"
        super().__init__(msg)


class QuantityMismatchError(DomainException):
    def __init__(self, sku: int, ordered: int, covered: int) -> None:
        self.sku = sku
        self.ordered = ordered
        self.covered = covered
        super().__init__(
            f"UPL quantity mismatch for SKU {sku} "
            f"(ordered {ordered}, covered by UPLs {covered})"
        )


class UnknownSkuError(DomainException):
    def __init__(self, sku: int) -> None:
        self.sku = sku
        super().__init__(f"SKU {sku} is not known by the product catalog")


class MissingPriceError(DomainException):
    def __init__(self, sku: int) -> None:
        self.sku = sku
        super().__init__(f"SKU {sku} has no selling price")


class MissingExpiryError(DomainException):
    def __init__(self, sku: int) -> None:
        self.sku = sku
        super().__init__(
            f"SKU {sku} is perishable, every UPL needs a best before date"
        )


class IdConflictError(DomainException):
    """UPL ids that already exist in the unit-load registry."""

    def __init__(self, ids: list[str]) -> None:
        self.ids = list(ids)
        super().__init__(
            f"UPL id(s) already exist in the registry: {', '.join(self.ids)}"
        )


class InternalError(Exception):
    """A collaborator (store, transport, remote service) failed."""
