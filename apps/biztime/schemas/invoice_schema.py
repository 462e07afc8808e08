from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date

from apps.biztime.schemas.company_schema import CompanyOut


# ============================================================
# Request schemas
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: str
    amt: float = Field(gt=0)


class InvoiceUpdate(BaseModel):
    """
    Full replacement of the mutable fields. paid_date is never accepted,
    it follows from the paid transition.
    """
    amt: float = Field(gt=0)
    paid: bool


# ============================================================
# OUT schemas
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str

    class Config:
        from_attributes = True


class InvoiceOut(InvoiceSummary):
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None


class InvoiceDetail(BaseModel):
    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None
    company: CompanyOut


# ============================================================
# Response envelopes
# ============================================================
class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: InvoiceDetail
