"""
Pointsman customer directory.

CORE:
    CustomerDirectory.create(...)        - Register customer
    CustomerDirectory.delete(id)         - Remove customer
    CustomerDirectory.find(...)          - Lookup by id, phone or email
    CustomerDirectory.list_all()         - All customers, insertion order
    CustomerDirectory.update(id, ...)    - Overwrite fields
    CustomerDirectory.add_points(id, n)  - Credit balance
    CustomerDirectory.remove_points(id, n) - Debit balance

Every operation except list_all() returns an OperationResult. Failures are
logged and reported through the result; nothing is raised for misuse.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable

from pointsman.conf import pointsman_settings
from pointsman.exceptions import InternalError, NotFoundError, PointsmanError
from pointsman.gates import Gates
from pointsman.models import UPDATABLE_FIELDS, Customer
from pointsman.signals import (
    customer_created,
    customer_deleted,
    customer_updated,
    points_changed,
)
from pointsman.store import CustomerStore

logger = logging.getLogger(__name__)

MASKED = "********"


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a directory operation.

    Truthiness follows ``ok``, so a successful balance of 0 is still truthy.
    """

    ok: bool
    value: Any = None
    error: PointsmanError | None = None

    @classmethod
    def success(cls, value: Any) -> "OperationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: PointsmanError) -> "OperationResult":
        return cls(ok=False, error=error)

    def __bool__(self):
        return self.ok

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    def unwrap(self) -> Any:
        """Return the value, or raise the carried error."""
        if not self.ok:
            raise self.error
        return self.value


def _reported(method=None, *, quiet: tuple[type[PointsmanError], ...] = ()):
    """
    Run a directory operation, turning every raised error into a failure result.

    Errors listed in ``quiet`` are expected outcomes and logged at INFO;
    other PointsmanErrors at WARNING; internal faults with a traceback.
    """
    if method is None:
        return functools.partial(_reported, quiet=quiet)

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return OperationResult.success(method(self, *args, **kwargs))
        except InternalError as e:
            logger.exception("%s failed unexpectedly: %s", method.__name__, e)
            return OperationResult.failure(e)
        except PointsmanError as e:
            level = logging.INFO if isinstance(e, quiet) else logging.WARNING
            logger.log(level, "%s failed: %s", method.__name__, e)
            return OperationResult.failure(e)
        except Exception as e:
            logger.exception("%s failed unexpectedly", method.__name__)
            error = InternalError(detail=repr(e))
            error.__cause__ = e
            return OperationResult.failure(error)

    return wrapper


class CustomerDirectory:
    """
    In-memory loyalty customer directory.

    Owns a CustomerStore and guards it with the store's lock for the full
    duration of every operation.

    Args:
        store: Backing store (a fresh one by default)
        id_factory: Zero-argument callable for new ids. Defaults to
            POINTSMAN["ID_FACTORY"], resolved on each create.
    """

    def __init__(
        self,
        store: CustomerStore | None = None,
        id_factory: Callable[[], Any] | None = None,
    ):
        self._store = store if store is not None else CustomerStore()
        self._id_factory = id_factory

    def __len__(self):
        return len(self._store)

    def __contains__(self, customer_id):
        return customer_id in self._store

    # ======================================================================
    # CORE API
    # ======================================================================

    @_reported
    def create(self, name: str, phone: int, email: str, password: str) -> Customer:
        """
        Register a new customer with a zero balance.

        Checks run in order (G1 required fields, G2 phone, G3 email) and stop
        at the first failure.

        Returns:
            OperationResult with the created Customer
        """
        Gates.required_fields(name=name, phone=phone, email=email, password=password)

        with self._store.lock:
            Gates.phone_uniqueness(self._store, phone)
            Gates.email_uniqueness(self._store, email)

            customer = self._store.add(
                Customer(
                    id=self._new_id(),
                    phone=phone,
                    email=email,
                    name=name,
                    password=password,
                    points=0,
                )
            )

        logger.info("Added customer %s (%s).", customer.name, customer.id)
        self._send(customer_created, customer=customer)
        return customer

    @_reported
    def delete(self, customer_id: str) -> Customer:
        """
        Remove a customer.

        Returns:
            OperationResult with the removed Customer, or CUSTOMER_NOT_FOUND
        """
        with self._store.lock:
            customer = self._store.remove(customer_id)

        logger.info("Deleted customer %s (%s).", customer.name, customer_id)
        self._send(customer_deleted, customer=customer)
        return customer

    @_reported(quiet=(NotFoundError,))
    def find(
        self,
        id: str | None = None,
        phone: int | None = None,
        email: str | None = None,
    ) -> Customer:
        """
        Find a customer by id, phone or email.

        Only the first supplied key (in that order) is used.

        Returns:
            OperationResult with the first matching Customer, CUSTOMER_NOT_FOUND,
            or INVALID_CRITERION when no key is supplied
        """
        key, value = Gates.search_criterion(id=id, phone=phone, email=email)

        with self._store.lock:
            if key == "id":
                customer = self._store.get(value)
            elif key == "phone":
                customer = self._store.first_by_phone(value)
            else:
                customer = self._store.first_by_email(value)

        if customer is None:
            raise NotFoundError(**{key: value})
        return customer

    def list_all(self) -> list[Customer]:
        """
        All customers in insertion order.

        The list is new on every call; its items are the live records.
        """
        with self._store.lock:
            return list(self._store)

    @_reported
    def update(
        self,
        customer_id: str,
        phone: int | None = None,
        email: str | None = None,
        name: str | None = None,
        password: str | None = None,
        points: int | None = None,
    ) -> Customer:
        """
        Overwrite supplied fields of a customer.

        With the default settings a falsy value means "not supplied", so
        points cannot be set to 0 and text fields cannot be blanked here.
        phone/email uniqueness is not re-checked unless
        POINTSMAN["UPDATE_CHECKS_UNIQUENESS"] is enabled.

        Returns:
            OperationResult with the updated Customer, or CUSTOMER_NOT_FOUND
        """
        fields = dict(zip(UPDATABLE_FIELDS, (phone, email, name, password, points)))
        if pointsman_settings.UPDATE_IGNORES_FALSY:
            supplied = {key: value for key, value in fields.items() if value}
        else:
            supplied = {key: value for key, value in fields.items() if value is not None}

        with self._store.lock:
            customer = self._get_or_raise(customer_id)

            if pointsman_settings.UPDATE_CHECKS_UNIQUENESS:
                if "phone" in supplied:
                    Gates.phone_uniqueness(
                        self._store, supplied["phone"], exclude_customer_id=customer_id
                    )
                if "email" in supplied:
                    Gates.email_uniqueness(
                        self._store, supplied["email"], exclude_customer_id=customer_id
                    )

            changes = {}
            for key, value in supplied.items():
                old_value = getattr(customer, key)
                if old_value != value:
                    if key == "password":
                        changes[key] = {"old": MASKED, "new": MASKED}
                    else:
                        changes[key] = {"old": old_value, "new": value}
                setattr(customer, key, value)

        logger.info("Updated customer %s (%s).", customer.name, customer_id)
        if changes:
            self._send(customer_updated, customer=customer, changes=changes)
        return customer

    @_reported
    def add_points(self, customer_id: str, amount: int) -> int:
        """
        Add points to a customer's balance (amount may be negative).

        Returns:
            OperationResult with the new balance, or CUSTOMER_NOT_FOUND
        """
        customer = self._adjust_points(customer_id, amount)
        logger.info(
            "Added %s points to customer %s (%s), for a total of %s points.",
            amount, customer.name, customer_id, customer.points,
        )
        self._send(points_changed, customer=customer, delta=amount, balance=customer.points)
        return customer.points

    @_reported
    def remove_points(self, customer_id: str, amount: int) -> int:
        """
        Remove points from a customer's balance. No floor at zero.

        Returns:
            OperationResult with the new balance, or CUSTOMER_NOT_FOUND
        """
        customer = self._adjust_points(customer_id, -amount)
        logger.info(
            "Removed %s points from customer %s (%s), for a total of %s points.",
            amount, customer.name, customer_id, customer.points,
        )
        self._send(points_changed, customer=customer, delta=-amount, balance=customer.points)
        return customer.points

    # ======================================================================
    # Internals
    # ======================================================================

    def _get_or_raise(self, customer_id: str) -> Customer:
        customer = self._store.get(customer_id)
        if customer is None:
            raise NotFoundError(customer_id=customer_id)
        return customer

    def _adjust_points(self, customer_id: str, delta: int) -> Customer:
        with self._store.lock:
            customer = self._get_or_raise(customer_id)
            customer.points += delta
        return customer

    def _new_id(self) -> str:
        factory = self._id_factory or pointsman_settings.id_factory()
        customer_id = str(factory())
        if not customer_id:
            raise InternalError("Empty customer id generated")
        return customer_id

    @staticmethod
    def _send(signal, **kwargs) -> None:
        for receiver, response in signal.send_robust(sender=Customer, **kwargs):
            if isinstance(response, Exception):
                logger.error(
                    "Signal receiver %r failed: %s",
                    receiver,
                    response,
                    exc_info=(type(response), response, response.__traceback__),
                )
