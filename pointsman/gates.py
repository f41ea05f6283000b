"""
Pointsman Gates - Validation rules.

G1: RequiredFields - name, phone, email and password must all be present
G2: PhoneUniqueness - phone cannot exist in another Customer
G3: EmailUniqueness - email cannot exist in another Customer
G4: SearchCriterion - find needs one of id, phone, email

Presence means truthy: "", 0 and None all count as absent.
"""

from dataclasses import dataclass

from pointsman.exceptions import (
    DuplicateEmailError,
    DuplicatePhoneError,
    GateError,
    InvalidCriterionError,
    ValidationError,
)
from pointsman.store import CustomerStore

SEARCH_KEYS = ("id", "phone", "email")


@dataclass
class GateResult:
    """Result of a gate check."""

    passed: bool
    gate_name: str
    message: str = ""


# =============================================================================
# Gates
# =============================================================================


class Gates:
    """Pointsman validation gates."""

    # =========================================================================
    # G1: Required Fields
    # =========================================================================

    REQUIRED_FIELDS = ("name", "phone", "email", "password")

    @classmethod
    def required_fields(cls, **values) -> GateResult:
        """
        G1: Every required field must be present (truthy).

        Args:
            **values: name, phone, email, password

        Raises:
            ValidationError: If any required field is missing
        """
        missing = [name for name in cls.REQUIRED_FIELDS if not values.get(name)]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}.",
                missing=missing,
            )

        return GateResult(True, ValidationError.gate_name)

    @classmethod
    def check_required_fields(cls, **values) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.required_fields(**values)
            return True
        except GateError:
            return False

    # =========================================================================
    # G2: Phone Uniqueness
    # =========================================================================

    @classmethod
    def phone_uniqueness(
        cls,
        store: CustomerStore,
        phone: int,
        exclude_customer_id: str | None = None,
    ) -> GateResult:
        """
        G2: phone cannot exist in another Customer.

        Args:
            store: Store to check against
            phone: Phone number
            exclude_customer_id: Customer ID to exclude from check (for updates)

        Raises:
            DuplicatePhoneError: If phone exists in another customer
        """
        existing = store.first_by_phone(phone, exclude_id=exclude_customer_id)
        if existing:
            raise DuplicatePhoneError(existing_customer_id=existing.id)

        return GateResult(True, DuplicatePhoneError.gate_name)

    @classmethod
    def check_phone_uniqueness(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.phone_uniqueness(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G3: Email Uniqueness
    # =========================================================================

    @classmethod
    def email_uniqueness(
        cls,
        store: CustomerStore,
        email: str,
        exclude_customer_id: str | None = None,
    ) -> GateResult:
        """
        G3: email cannot exist in another Customer.

        Comparison is exact; emails are stored as given.

        Raises:
            DuplicateEmailError: If email exists in another customer
        """
        existing = store.first_by_email(email, exclude_id=exclude_customer_id)
        if existing:
            raise DuplicateEmailError(existing_customer_id=existing.id)

        return GateResult(True, DuplicateEmailError.gate_name)

    @classmethod
    def check_email_uniqueness(cls, *args, **kwargs) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.email_uniqueness(*args, **kwargs)
            return True
        except GateError:
            return False

    # =========================================================================
    # G4: Search Criterion
    # =========================================================================

    @classmethod
    def search_criterion(cls, **criteria) -> tuple[str, object]:
        """
        G4: At least one of id, phone, email must be supplied.

        Keys are tried in SEARCH_KEYS order and the first present one wins;
        the others are ignored even when supplied.

        Returns:
            (key, value) of the criterion to search by

        Raises:
            InvalidCriterionError: If no search key is present
        """
        for key in SEARCH_KEYS:
            value = criteria.get(key)
            if value:
                return key, value

        raise InvalidCriterionError(supported=list(SEARCH_KEYS))

    @classmethod
    def check_search_criterion(cls, **criteria) -> bool:
        """Check without raising (returns bool)."""
        try:
            cls.search_criterion(**criteria)
            return True
        except GateError:
            return False
