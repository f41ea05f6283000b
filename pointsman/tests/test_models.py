"""Tests for Pointsman models, store and protocols."""

import pytest

from pointsman.directory import CustomerDirectory
from pointsman.exceptions import InternalError, NotFoundError
from pointsman.models import Customer
from pointsman.protocols import CustomerBackend, CustomerInfo
from pointsman.store import CustomerStore


def make_customer(customer_id="cust-1", phone=1234567890, email="john@doe.io"):
    return Customer(
        id=customer_id,
        phone=phone,
        email=email,
        name="John Doe",
        password="password",
    )


class TestCustomer:
    """Tests for the Customer record."""

    def test_defaults(self):
        assert make_customer().points == 0

    def test_str(self):
        assert str(make_customer()) == "John Doe (cust-1)"

    def test_repr_hides_password(self):
        assert "password=" not in repr(make_customer())

    def test_to_info(self):
        customer = make_customer()
        customer.points = 15

        info = customer.to_info()

        assert info == CustomerInfo(
            id="cust-1", name="John Doe", phone=1234567890, email="john@doe.io", points=15
        )
        assert not hasattr(info, "password")

    def test_info_is_frozen(self):
        info = make_customer().to_info()
        with pytest.raises(AttributeError):
            info.points = 1


class TestCustomerStore:
    """Tests for CustomerStore."""

    def test_add_and_get(self):
        store = CustomerStore()
        customer = store.add(make_customer())

        assert store.get("cust-1") is customer
        assert "cust-1" in store
        assert len(store) == 1

    def test_first_match_in_insertion_order(self):
        """Duplicate phones resolve to the earliest record."""
        store = CustomerStore()
        first = store.add(make_customer("a"))
        store.add(make_customer("b", email="other@doe.io"))

        assert store.first_by_phone(1234567890) is first
        assert store.first_by_phone(1234567890, exclude_id="a").id == "b"
        assert store.first_by_email("missing@doe.io") is None

    def test_remove_missing_raises(self):
        with pytest.raises(NotFoundError):
            CustomerStore().remove("missing")

    def test_issued_ids_survive_removal(self):
        store = CustomerStore()
        store.add(make_customer())
        store.remove("cust-1")

        assert store.was_issued("cust-1")
        with pytest.raises(InternalError, match="INTERNAL_ERROR") as exc_info:
            store.add(make_customer())
        assert exc_info.value.context == {"id_collision": "cust-1"}

    def test_iteration_is_snapshot(self):
        """Removing while iterating does not break the loop."""
        store = CustomerStore()
        store.add(make_customer("a"))
        store.add(make_customer("b", phone=2, email="b@doe.io"))

        for customer in store:
            store.remove(customer.id)

        assert len(store) == 0


class TestProtocols:
    """CustomerDirectory satisfies CustomerBackend."""

    def test_directory_is_backend(self):
        assert isinstance(CustomerDirectory(), CustomerBackend)
