"""
Shared enumerations for database models.

Mapped to database enums so an invalid status is rejected
by the store, not only by request validation.
"""

import enum


class InvoiceStatus(str, enum.Enum):
    """Lifecycle of an invoice."""
    DRAFT = "Draft"
    AWAIT_PAYMENT = "AwaitPayment"
    PAID = "Paid"
    OVERDUE = "Overdue"
    CANCELLED = "Cancelled"
