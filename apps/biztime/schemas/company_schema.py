from pydantic import BaseModel, Field
from typing import Optional, List


class CompanyCreate(BaseModel):
    # code is derived from name, never accepted from the client
    name: str = Field(min_length=1, pattern=r"\S")
    description: Optional[str] = None

    class Config:
        extra = "forbid"


class CompanyUpdate(BaseModel):
    name: str = Field(min_length=1, pattern=r"\S")
    description: Optional[str] = None


class CompanySummary(BaseModel):
    code: str
    name: str

    class Config:
        from_attributes = True


class CompanyOut(CompanySummary):
    description: Optional[str] = None


class CompanyDetail(CompanyOut):
    invoices: List[int]


# ============================================================
# Response envelopes
# ============================================================
class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class DeletedResponse(BaseModel):
    status: str = "deleted"
