"""Tests for Pointsman configuration and errors."""

import uuid

import pytest

from pointsman.conf import PointsmanSettings, get_pointsman_settings, pointsman_settings
from pointsman.exceptions import NotFoundError, PointsmanError


class TestSettings:
    """POINTSMAN settings loading."""

    def test_defaults(self):
        conf = get_pointsman_settings()

        assert conf == PointsmanSettings()
        assert conf.UPDATE_IGNORES_FALSY is True
        assert conf.UPDATE_CHECKS_UNIQUENESS is False
        assert conf.id_factory() is uuid.uuid4

    def test_lazy_proxy_rereads(self, settings):
        settings.POINTSMAN = {"UPDATE_CHECKS_UNIQUENESS": True}
        assert pointsman_settings.UPDATE_CHECKS_UNIQUENESS is True

    def test_unknown_key_rejected(self, settings):
        settings.POINTSMAN = {"NOT_A_SETTING": 1}
        with pytest.raises(TypeError):
            get_pointsman_settings()


class TestPointsmanError:
    """Structured errors."""

    def test_default_message(self):
        err = PointsmanError("CUSTOMER_NOT_FOUND")
        assert err.message == "Customer not found"
        assert str(err) == "[CUSTOMER_NOT_FOUND] Customer not found"

    def test_custom_message_and_context(self):
        err = PointsmanError("INTERNAL_ERROR", message="boom", detail="x")
        assert err.as_dict() == {
            "code": "INTERNAL_ERROR",
            "message": "boom",
            "context": {"detail": "x"},
        }

    def test_unknown_code_uses_code_as_message(self):
        assert PointsmanError("SOMETHING").message == "SOMETHING"

    def test_not_found_context(self):
        err = NotFoundError(customer_id="abc")
        assert err.code == "CUSTOMER_NOT_FOUND"
        assert err.context == {"customer_id": "abc"}
