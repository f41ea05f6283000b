"""Pointsman models."""

from pointsman.models.customer import Customer, UPDATABLE_FIELDS

__all__ = [
    "Customer",
    "UPDATABLE_FIELDS",
]
