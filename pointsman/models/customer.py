"""Customer record (in-memory).

Records are plain dataclasses owned by a CustomerStore. The directory mutates
them in place, so every holder of a record observes the current state until
the record is deleted.
"""

from dataclasses import dataclass, field

from pointsman.protocols.customer import CustomerInfo

UPDATABLE_FIELDS = ("phone", "email", "name", "password", "points")


@dataclass
class Customer:
    """
    Loyalty program customer.

    id is assigned by the directory and never changes. password is stored
    exactly as given and kept out of repr() and CustomerInfo.
    """

    id: str
    phone: int
    email: str
    name: str
    password: str = field(repr=False)
    points: int = 0

    def __str__(self):
        return f"{self.name} ({self.id})"

    def to_info(self) -> CustomerInfo:
        """Frozen snapshot without the password."""
        return CustomerInfo(
            id=self.id,
            name=self.name,
            phone=self.phone,
            email=self.email,
            points=self.points,
        )
