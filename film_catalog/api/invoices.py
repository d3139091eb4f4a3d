"""
Invoice API endpoints.

Same CRUD shape as actors and movies; invoices have no
sub-routes, their line items travel inside the invoice body.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from film_catalog.models.base import get_db
from film_catalog.services.invoice_service import InvoiceService
from film_catalog.services.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from film_catalog.schemas.invoice import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
)

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get("", response_model=list[InvoiceResponse])
def list_invoices(db: Session = Depends(get_db)):
    return InvoiceService(db).list_invoices()


@router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(
    invoice_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    service = InvoiceService(db)
    try:
        return service.get_invoice(invoice_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=InvoiceResponse, status_code=201)
def create_invoice(
    request: InvoiceCreate,
    http_request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """Create an invoice together with its line items."""
    service = InvoiceService(db)
    try:
        invoice = service.create_invoice(request)
        db.commit()
    except ConflictError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))

    response.headers["Location"] = str(
        http_request.url_for("get_invoice", invoice_id=str(invoice.id))
    )
    return service.get_invoice(invoice.id)


@router.put("/{invoice_id}", status_code=204)
def update_invoice(
    invoice_id: uuid.UUID,
    request: InvoiceUpdate,
    db: Session = Depends(get_db),
):
    """Replace an invoice, line items included."""
    service = InvoiceService(db)
    try:
        service.update_invoice(invoice_id, request)
        db.commit()
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{invoice_id}", status_code=204)
def delete_invoice(
    invoice_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    service = InvoiceService(db)
    try:
        service.delete_invoice(invoice_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
