from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from apps.biztime.core.db import get_db
from apps.biztime.schemas.company_schema import DeletedResponse
from apps.biztime.schemas.invoice_schema import (
    InvoiceCreate,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceResponse,
    InvoiceUpdate,
)
from apps.biztime.services.invoice_service import invoice_service

router = APIRouter()


def _not_found(invoice_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"No such invoice: {invoice_id}")


@router.get("", response_model=InvoiceListResponse, include_in_schema=False)
@router.get("/", response_model=InvoiceListResponse)
def list_invoices(db: Session = Depends(get_db)):
    return {"invoices": invoice_service.get_all_invoices(db)}


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice = invoice_service.get_invoice_with_company(db, invoice_id)
    if invoice is None:
        raise _not_found(invoice_id)
    return {"invoice": invoice}


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(payload: InvoiceCreate, db: Session = Depends(get_db)):
    # Unknown comp_code fails the FK constraint -> 409 via the IntegrityError handler
    return {"invoice": invoice_service.create_invoice(db, payload)}


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(invoice_id: int, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    invoice = invoice_service.update_invoice(db, invoice_id, payload)
    if not invoice:
        raise _not_found(invoice_id)
    return {"invoice": invoice}


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    if invoice_service.delete_invoice(db, invoice_id) is None:
        raise _not_found(invoice_id)
    return {"status": "deleted"}
