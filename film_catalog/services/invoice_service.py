"""
Invoice service: create, read, replace and delete invoices.

An invoice owns its line items outright. Creating an invoice
creates its items, replacing it replaces the whole item list,
and deleting it deletes the items.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from film_catalog.models import Invoice, InvoiceItem
from film_catalog.schemas.invoice import (
    InvoiceCreate,
    InvoiceItemCreate,
    InvoiceUpdate,
)
from film_catalog.services.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from film_catalog.services.records import record_exists, replace_record

logger = logging.getLogger(__name__)

# Columns written by create and replace; items are handled separately
INVOICE_FIELDS = (
    "invoice_number",
    "contact_name",
    "description",
    "amount",
    "invoice_date",
    "due_date",
    "status",
)


def _build_items(items: list[InvoiceItemCreate]) -> list[InvoiceItem]:
    return [
        InvoiceItem(position=position, **item.model_dump())
        for position, item in enumerate(items)
    ]


class InvoiceService:

    def __init__(self, db: Session):
        self.db = db

    def list_invoices(self) -> list[Invoice]:
        invoices = self.db.execute(
            select(Invoice)
            .options(selectinload(Invoice.invoice_items))
            .order_by(Invoice.invoice_date)
        ).scalars().all()
        return list(invoices)

    def get_invoice(self, invoice_id: uuid.UUID) -> Invoice:
        invoice = self.db.execute(
            select(Invoice)
            .options(selectinload(Invoice.invoice_items))
            .where(Invoice.id == invoice_id)
        ).scalar_one_or_none()

        if not invoice:
            raise NotFoundError(f"Invoice with id {invoice_id} not found")
        return invoice

    def create_invoice(self, request: InvoiceCreate) -> Invoice:
        """Create an invoice and its line items in one flush."""
        if request.id is not None and record_exists(self.db, Invoice, request.id):
            raise ConflictError(f"Invoice with id {request.id} already exists")

        invoice = Invoice(
            **request.model_dump(include=set(INVOICE_FIELDS)),
            invoice_items=_build_items(request.invoice_items),
        )
        if request.id is not None:
            invoice.id = request.id
        self.db.add(invoice)

        try:
            self.db.flush()
        except IntegrityError as e:
            logger.warning("Rejected duplicate invoice id %s", invoice.id)
            raise ConflictError(
                f"Invoice with id {request.id} already exists"
            ) from e

        logger.info(
            "Created invoice %s (%s, %d items)",
            invoice.id, invoice.invoice_number, len(invoice.invoice_items),
        )
        return invoice

    def update_invoice(
        self, invoice_id: uuid.UUID, request: InvoiceUpdate
    ) -> None:
        """
        Replace an invoice and its item list.

        The items are only touched once the invoice row itself
        has been replaced, so a NotFoundError or a concurrency
        failure leaves the stored items as they were.
        """
        if request.id != invoice_id:
            raise BadRequestError(
                f"Path id {invoice_id} does not match body id {request.id}"
            )

        replace_record(
            self.db, Invoice, invoice_id,
            request.model_dump(include=set(INVOICE_FIELDS)),
            version=request.version,
        )

        # Reassigning the collection deletes the old items as orphans
        invoice = self.db.get(Invoice, invoice_id)
        invoice.invoice_items = _build_items(request.invoice_items)
        self.db.flush()

    def delete_invoice(self, invoice_id: uuid.UUID) -> None:
        """Delete an invoice; its items go with it."""
        invoice = self.db.get(Invoice, invoice_id)
        if not invoice:
            raise NotFoundError(f"Invoice with id {invoice_id} not found")

        self.db.delete(invoice)
        self.db.flush()
        logger.info("Deleted invoice %s", invoice_id)
