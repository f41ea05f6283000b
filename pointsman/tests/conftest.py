"""Pytest fixtures for Pointsman tests."""

import pytest

from pointsman.directory import CustomerDirectory
from pointsman.services import customer as customer_service
from pointsman.signals import (
    customer_created,
    customer_deleted,
    customer_updated,
    points_changed,
)


@pytest.fixture(autouse=True)
def default_directory_reset():
    """Every test starts with an empty process-wide directory."""
    customer_service.reset()
    yield
    customer_service.reset()


@pytest.fixture
def directory():
    """Fresh, empty directory."""
    return CustomerDirectory()


@pytest.fixture
def customer(directory):
    """John Doe, created through the directory."""
    return directory.create(
        name="John Doe",
        phone=1234567890,
        email="john@doe.io",
        password="password",
    ).unwrap()


@pytest.fixture
def customer_b(directory, customer):
    """Second customer, created after John Doe."""
    return directory.create(
        name="Mary Major",
        phone=5551234567,
        email="mary@major.io",
        password="hunter2",
    ).unwrap()


@pytest.fixture
def signal_log():
    """Collect (signal_name, kwargs) for every Pointsman signal sent."""
    events = []
    signals = {
        "customer_created": customer_created,
        "customer_updated": customer_updated,
        "customer_deleted": customer_deleted,
        "points_changed": points_changed,
    }

    def make_receiver(signal_name):
        def receiver(sender, signal, **kwargs):
            events.append((signal_name, kwargs))

        return receiver

    receivers = {}
    for signal_name, signal in signals.items():
        receivers[signal_name] = make_receiver(signal_name)
        signal.connect(receivers[signal_name], weak=False)

    yield events

    for signal_name, signal in signals.items():
        signal.disconnect(receivers[signal_name])
