"""Customer service - module-level API over the default directory.

The process keeps one CustomerDirectory, created on first use. These
functions mirror the directory operations and return the same
OperationResult values.
"""

import logging

from pointsman.directory import CustomerDirectory, OperationResult
from pointsman.models import Customer

logger = logging.getLogger(__name__)

_directory: CustomerDirectory | None = None


def get_directory() -> CustomerDirectory:
    """Return the process-wide directory, creating it on first use."""
    global _directory
    if _directory is None:
        _directory = CustomerDirectory()
    return _directory


def reset() -> None:
    """Discard the process-wide directory (all customers are lost)."""
    global _directory
    if _directory is not None:
        logger.info("Discarding default directory with %s customers.", len(_directory))
    _directory = None


def add_customer(name: str, phone: int, email: str, password: str) -> OperationResult:
    """Register a new customer."""
    return get_directory().create(name=name, phone=phone, email=email, password=password)


def delete_customer(customer_id: str) -> OperationResult:
    """Remove a customer by id."""
    return get_directory().delete(customer_id)


def get_customer(
    id: str | None = None,
    phone: int | None = None,
    email: str | None = None,
) -> OperationResult:
    """Find a customer by id, phone or email."""
    return get_directory().find(id=id, phone=phone, email=email)


def get_customers() -> list[Customer]:
    """All customers in insertion order."""
    return get_directory().list_all()


def update_customer(customer_id: str, **fields) -> OperationResult:
    """Update phone, email, name, password and/or points."""
    return get_directory().update(customer_id, **fields)


def add_points(customer_id: str, amount: int) -> OperationResult:
    """Add points and return the new balance."""
    return get_directory().add_points(customer_id, amount)


def remove_points(customer_id: str, amount: int) -> OperationResult:
    """Remove points and return the new balance."""
    return get_directory().remove_points(customer_id, amount)
