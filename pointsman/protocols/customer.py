"""Customer protocols."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pointsman.directory import OperationResult
    from pointsman.models import Customer


@dataclass(frozen=True)
class CustomerInfo:
    """Public customer snapshot (never carries the password)."""

    id: str
    name: str
    phone: int
    email: str
    points: int = 0


@runtime_checkable
class CustomerBackend(Protocol):
    """Protocol for loyalty customer directories."""

    def create(self, name: str, phone: int, email: str, password: str) -> "OperationResult":
        """Register a new customer with a zero balance."""
        ...

    def delete(self, customer_id: str) -> "OperationResult":
        """Remove a customer and return the removed record."""
        ...

    def find(
        self,
        id: str | None = None,
        phone: int | None = None,
        email: str | None = None,
    ) -> "OperationResult":
        """Find a customer by id, phone or email (in that priority)."""
        ...

    def list_all(self) -> list["Customer"]:
        """All customers in insertion order."""
        ...

    def update(self, customer_id: str, **fields) -> "OperationResult":
        """Overwrite supplied fields of a customer."""
        ...

    def add_points(self, customer_id: str, amount: int) -> "OperationResult":
        """Add to the balance and return the new balance."""
        ...

    def remove_points(self, customer_id: str, amount: int) -> "OperationResult":
        """Subtract from the balance and return the new balance."""
        ...
