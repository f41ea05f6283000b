"""Pointsman exceptions."""


class PointsmanError(Exception):
    """
    Structured exception for directory operations.

    Usage:
        result = directory.find(id="missing")
        if not result.ok and result.error_code == "CUSTOMER_NOT_FOUND":
            handle_not_found()

        try:
            customer = directory.find(id="missing").unwrap()
        except PointsmanError as e:
            if e.code == "CUSTOMER_NOT_FOUND":
                handle_not_found()
    """

    _default_messages = {
        "MISSING_FIELDS": "Missing required fields",
        "DUPLICATE_PHONE": "A customer with that phone number already exists",
        "DUPLICATE_EMAIL": "A customer with that email already exists",
        "CUSTOMER_NOT_FOUND": "Customer not found",
        "INVALID_CRITERION": "No valid search criteria provided",
        "INTERNAL_ERROR": "Unexpected internal error",
    }

    def __init__(self, code: str, message: str | None = None, **context):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.context = context
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.code}] {self.message}"

    def as_dict(self) -> dict:
        """Serializable form (code, message, context)."""
        return {"code": self.code, "message": self.message, "context": self.context}


class GateError(PointsmanError):
    """Gate validation error."""

    code = ""
    gate_name = ""

    def __init__(self, message: str | None = None, **context):
        super().__init__(self.code, message, **context)


class ValidationError(GateError):
    code = "MISSING_FIELDS"
    gate_name = "G1_RequiredFields"


class DuplicatePhoneError(GateError):
    code = "DUPLICATE_PHONE"
    gate_name = "G2_PhoneUniqueness"


class DuplicateEmailError(GateError):
    code = "DUPLICATE_EMAIL"
    gate_name = "G3_EmailUniqueness"


class InvalidCriterionError(GateError):
    code = "INVALID_CRITERION"
    gate_name = "G4_SearchCriterion"


class NotFoundError(PointsmanError):
    def __init__(self, message: str | None = None, **context):
        super().__init__("CUSTOMER_NOT_FOUND", message, **context)


class InternalError(PointsmanError):
    """Unexpected fault inside an operation (id generation, broken invariants)."""

    def __init__(self, message: str | None = None, **context):
        super().__init__("INTERNAL_ERROR", message, **context)
