import logging
from typing import Optional

from sqlalchemy.orm import Session
from apps.biztime.models.company_model import Company
from apps.biztime.models.invoice_model import Invoice
from apps.biztime.schemas.company_schema import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)


def list_companies(db: Session):
    return db.query(Company.code, Company.name).order_by(Company.name.asc()).all()


def get_company(db: Session, code: str) -> Optional[dict]:
    """
    Company fields plus the ids of its invoices, or None when unknown.
    """
    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        logger.debug("Company %r not found", code)
        return None

    invoice_ids = [
        row.id
        for row in db.query(Invoice.id).filter(Invoice.comp_code == code).order_by(Invoice.id)
    ]

    return {
        "code": company.code,
        "name": company.name,
        "description": company.description,
        "invoices": invoice_ids,
    }


def create_company(db: Session, payload: CompanyCreate, code: str):
    # A duplicate code surfaces as IntegrityError on commit
    company = Company(
        code=code,
        name=payload.name,
        description=payload.description,
    )
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("Created company %r", company.code)
    return company


def update_company(db: Session, code: str, payload: CompanyUpdate) -> Optional[Company]:
    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        return None

    company.name = payload.name
    company.description = payload.description
    db.commit()
    db.refresh(company)
    logger.info("Updated company %r", code)
    return company


def delete_company(db: Session, code: str) -> Optional[str]:
    """Deletes the company and, through the FK cascade, its invoices."""
    company = db.query(Company).filter(Company.code == code).first()
    if company is None:
        return None

    db.delete(company)
    db.commit()
    logger.info("Deleted company %r", code)
    return code
