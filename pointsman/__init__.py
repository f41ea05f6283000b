"""
Django Pointsman - Loyalty Customer Directory.

Usage:
    from pointsman import CustomerDirectory

    directory = CustomerDirectory()
    result = directory.create(
        name="John Doe", phone=1234567890, email="john@doe.io", password="password"
    )
    if result.ok:
        directory.add_points(result.value.id, 100)

    # Process-wide default directory
    from pointsman.services import customer as customer_service

    customer_service.add_customer("John Doe", 1234567890, "john@doe.io", "password")
"""


def __getattr__(name):
    if name == "CustomerDirectory":
        from pointsman.directory import CustomerDirectory

        return CustomerDirectory
    if name == "OperationResult":
        from pointsman.directory import OperationResult

        return OperationResult
    if name == "Customer":
        from pointsman.models import Customer

        return Customer
    if name == "PointsmanError":
        from pointsman.exceptions import PointsmanError

        return PointsmanError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["CustomerDirectory", "OperationResult", "Customer", "PointsmanError"]
__version__ = "0.1.0"
