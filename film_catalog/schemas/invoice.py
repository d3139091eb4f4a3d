"""
Pydantic schemas for invoices and their line items.
"""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from film_catalog.models.enums import InvoiceStatus


# --- Request Schemas ---

class InvoiceItemCreate(BaseModel):
    """A single line on an invoice. Order in the list is kept."""
    name: str = Field(min_length=1, max_length=64)
    description: str | None = Field(default=None, max_length=256)
    unit_price: Decimal = Field(ge=0, decimal_places=2)
    quantity: int = Field(ge=1)


class InvoiceCreate(BaseModel):
    id: uuid.UUID | None = None
    invoice_number: str = Field(min_length=1, max_length=32)
    contact_name: str = Field(min_length=1, max_length=32)
    description: str | None = Field(default=None, max_length=256)
    amount: Decimal = Field(ge=0, decimal_places=2)
    invoice_date: datetime
    due_date: datetime
    status: InvoiceStatus = InvoiceStatus.DRAFT
    invoice_items: list[InvoiceItemCreate] = Field(default_factory=list)

    @field_validator("invoice_date", "due_date")
    @classmethod
    def must_carry_offset(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("timestamp must include a timezone offset")
        return v


class InvoiceUpdate(InvoiceCreate):
    """
    Full replacement of an invoice, items included.

    ``version`` has the same meaning as on ActorUpdate.
    """
    id: uuid.UUID
    version: int | None = None


# --- Response Schemas ---

class InvoiceItemResponse(BaseModel):
    id: uuid.UUID
    position: int
    name: str
    description: str | None
    unit_price: Decimal
    quantity: int

    model_config = {"from_attributes": True}


class InvoiceResponse(BaseModel):
    id: uuid.UUID
    invoice_number: str
    contact_name: str
    description: str | None
    amount: Decimal
    invoice_date: datetime
    due_date: datetime
    status: InvoiceStatus
    version: int
    invoice_items: list[InvoiceItemResponse]

    model_config = {"from_attributes": True}
