"""
Pointsman signals - public event API.

Emitted signals (sender=Customer):
- customer_created: customer
- customer_updated: customer, changes={field: {"old": ..., "new": ...}}
- customer_deleted: customer
- points_changed: customer, delta, balance

Sent after the mutation is applied. Receiver errors are logged by the
directory and do not affect the operation result.
"""

from django.dispatch import Signal

customer_created = Signal()
customer_updated = Signal()
customer_deleted = Signal()
points_changed = Signal()
