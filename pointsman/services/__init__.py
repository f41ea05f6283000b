"""Pointsman services.

- pointsman.services.customer: module-level API over the default directory
"""

from pointsman.services import customer

__all__ = ["customer"]
