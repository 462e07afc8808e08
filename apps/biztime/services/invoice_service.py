import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from apps.biztime.models.company_model import Company
from apps.biztime.models.invoice_model import Invoice
from apps.biztime.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)

# Widest id any supported backend stores (signed 64-bit)
MAX_INVOICE_ID = 2**63 - 1


def is_storable_id(invoice_id: int) -> bool:
    return -MAX_INVOICE_ID - 1 <= invoice_id <= MAX_INVOICE_ID


def resolve_paid_date(
    current_paid: bool,
    current_paid_date: Optional[date],
    requested_paid: bool,
    today: date,
) -> Optional[date]:
    """
    paid_date after an update request.

    Unpaid -> Paid   : today
    Paid   -> Paid   : unchanged
    *      -> Unpaid : None
    """
    if not requested_paid:
        return None
    if not current_paid or current_paid_date is None:
        # Also repairs a paid row stored without a date
        return today
    return current_paid_date


class InvoiceService:
    """
    Thin data-access layer for invoices.

    Routes turn a None result into a 404; database errors propagate to the
    app-level error handlers.
    """

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session):
        return db.query(Invoice.id, Invoice.comp_code).order_by(Invoice.id).all()

    # ------------------------------------------------------------
    # Fetch single invoice by ID (None for ids no row can have)
    # ------------------------------------------------------------
    def _find(self, db: Session, invoice_id: int) -> Optional[Invoice]:
        if not is_storable_id(invoice_id):
            return None
        return db.query(Invoice).filter(Invoice.id == invoice_id).first()

    # ------------------------------------------------------------
    # Fetch single invoice joined with its company
    # ------------------------------------------------------------
    def get_invoice_with_company(self, db: Session, invoice_id: int) -> Optional[dict]:
        if not is_storable_id(invoice_id):
            return None

        row = (
            db.query(Invoice, Company)
            .join(Company, Invoice.comp_code == Company.code)
            .filter(Invoice.id == invoice_id)
            .first()
        )
        if row is None:
            logger.debug("Invoice %s not found", invoice_id)
            return None

        invoice, company = row
        return {
            "id": invoice.id,
            "amt": invoice.amt,
            "paid": invoice.paid,
            "add_date": invoice.add_date,
            "paid_date": invoice.paid_date,
            "company": {
                "code": company.code,
                "name": company.name,
                "description": company.description,
            },
        }

    # ------------------------------------------------------------
    # Create (always starts unpaid)
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: InvoiceCreate) -> Invoice:
        invoice = Invoice(
            comp_code=payload.comp_code,
            amt=payload.amt,
            paid=False,
            add_date=date.today(),
            paid_date=None,
        )
        db.add(invoice)
        db.commit()
        db.refresh(invoice)
        logger.info("Created invoice %s for company %r", invoice.id, invoice.comp_code)
        return invoice

    # ------------------------------------------------------------
    # Update amount / paid state
    # ------------------------------------------------------------
    def update_invoice(
        self,
        db: Session,
        invoice_id: int,
        payload: InvoiceUpdate,
    ) -> Optional[Invoice]:
        """
        Applies amt and paid, deriving paid_date from the stored paid state.

        The read and the write are separate statements with no row lock, so
        two concurrent updates race: last writer wins on amt/paid and
        paid_date may be computed from a stale paid flag.
        """
        invoice = self._find(db, invoice_id)
        if not invoice:
            return None

        was_paid = bool(invoice.paid)
        invoice.paid_date = resolve_paid_date(
            was_paid,
            invoice.paid_date,
            payload.paid,
            date.today(),
        )
        invoice.amt = payload.amt
        invoice.paid = payload.paid

        db.commit()
        db.refresh(invoice)

        if was_paid != payload.paid:
            logger.info(
                "Invoice %s marked %s (paid_date=%s)",
                invoice.id,
                "paid" if payload.paid else "unpaid",
                invoice.paid_date,
            )
        return invoice

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> Optional[int]:
        invoice = self._find(db, invoice_id)
        if not invoice:
            return None

        db.delete(invoice)
        db.commit()
        logger.info("Deleted invoice %s", invoice_id)
        return invoice_id


invoice_service = InvoiceService()
