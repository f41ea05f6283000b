"""In-memory customer store.

Insertion-ordered dict keyed by id. Phone and email lookups scan in insertion
order and return the first match, so results stay deterministic even if an
update left two records sharing a value.

The store does no validation beyond id bookkeeping; callers (the directory)
hold ``lock`` around every read-modify-write sequence.
"""

import threading
from collections.abc import Iterator

from pointsman.exceptions import InternalError, NotFoundError
from pointsman.models import Customer


class CustomerStore:
    def __init__(self):
        self._records: dict[str, Customer] = {}
        # Every id ever stored, deleted ones included
        self._issued_ids: set[str] = set()
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Customer]:
        return iter(list(self._records.values()))

    def __contains__(self, customer_id) -> bool:
        return customer_id in self._records

    def get(self, customer_id: str) -> Customer | None:
        return self._records.get(customer_id)

    def first_by_phone(self, phone, exclude_id: str | None = None) -> Customer | None:
        for record in self._records.values():
            if record.phone == phone and record.id != exclude_id:
                return record
        return None

    def first_by_email(self, email, exclude_id: str | None = None) -> Customer | None:
        for record in self._records.values():
            if record.email == email and record.id != exclude_id:
                return record
        return None

    def was_issued(self, customer_id: str) -> bool:
        return customer_id in self._issued_ids

    def add(self, customer: Customer) -> Customer:
        """Append a record. Raises InternalError if its id was ever issued."""
        if self.was_issued(customer.id):
            raise InternalError(
                "Generated customer id was already issued", id_collision=customer.id
            )
        self._issued_ids.add(customer.id)
        self._records[customer.id] = customer
        return customer

    def remove(self, customer_id: str) -> Customer:
        """Remove and return a record. Raises NotFoundError if absent."""
        try:
            return self._records.pop(customer_id)
        except KeyError:
            raise NotFoundError(customer_id=customer_id) from None
