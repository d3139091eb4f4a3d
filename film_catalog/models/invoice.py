"""
Invoice and invoice item models.

Items are owned exclusively by their invoice: they are kept
in ``position`` order and deleted along with the invoice.
"""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, Integer, DateTime, Numeric, ForeignKey,
    Enum as SAEnum, Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from film_catalog.models.base import Base
from film_catalog.models.enums import InvoiceStatus


class Invoice(Base):
    __tablename__ = "invoices"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    invoice_number: Mapped[str] = mapped_column(String(32), nullable=False)
    contact_name: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(256), nullable=True
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    invoice_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    due_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    status: Mapped[InvoiceStatus] = mapped_column(
        SAEnum(
            InvoiceStatus,
            name="invoice_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=InvoiceStatus.DRAFT,
    )
    version: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1
    )

    invoice_items: Mapped[list["InvoiceItem"]] = relationship(
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.position",
    )

    def __repr__(self) -> str:
        return (
            f"<Invoice {self.invoice_number} "
            f"{self.amount} ({self.status.value})>"
        )


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    invoice_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("invoices.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(256), nullable=True
    )
    unit_price: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    invoice: Mapped["Invoice"] = relationship(back_populates="invoice_items")

    def __repr__(self) -> str:
        return f"<InvoiceItem {self.name!r} x{self.quantity}>"
