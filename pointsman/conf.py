"""
Pointsman configuration.

Usage in settings.py:
    POINTSMAN = {
        "ID_FACTORY": "uuid.uuid4",
        "UPDATE_IGNORES_FALSY": True,
        "UPDATE_CHECKS_UNIQUENESS": False,
    }
"""

from dataclasses import dataclass
from typing import Any, Callable

from django.conf import settings
from django.utils.module_loading import import_string


@dataclass
class PointsmanSettings:
    """Pointsman configuration settings."""

    # Zero-argument callable producing new customer ids (str() is applied)
    ID_FACTORY: str = "uuid.uuid4"

    # update(): falsy values (0, "", None) mean "field not supplied"
    UPDATE_IGNORES_FALSY: bool = True

    # update(): reject phone/email already used by another customer
    UPDATE_CHECKS_UNIQUENESS: bool = False

    def id_factory(self) -> Callable[[], Any]:
        return import_string(self.ID_FACTORY)


def get_pointsman_settings() -> PointsmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "POINTSMAN", {})
    return PointsmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_pointsman_settings(), name)


pointsman_settings = _LazySettings()
