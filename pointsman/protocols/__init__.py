"""Pointsman protocols."""

from pointsman.protocols.customer import (
    CustomerBackend,
    CustomerInfo,
)

__all__ = [
    "CustomerBackend",
    "CustomerInfo",
]
