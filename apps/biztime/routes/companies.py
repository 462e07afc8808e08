from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from apps.biztime.core.db import get_db
from apps.biztime.core.slug import slugify
from apps.biztime.schemas.company_schema import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
    DeletedResponse,
)
from apps.biztime.services.company_service import (
    create_company,
    delete_company,
    get_company,
    list_companies,
    update_company,
)

router = APIRouter()


def _not_found(code: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"No such company: {code}")


@router.get("", response_model=CompanyListResponse, include_in_schema=False)
@router.get("/", response_model=CompanyListResponse)
def list_companies_route(db: Session = Depends(get_db)):
    return {"companies": list_companies(db)}


@router.get("/{code}", response_model=CompanyDetailResponse)
def get_company_route(code: str, db: Session = Depends(get_db)):
    company = get_company(db, code)
    if company is None:
        raise _not_found(code)
    return {"company": company}


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
def create_company_route(payload: CompanyCreate, db: Session = Depends(get_db)):
    code = slugify(payload.name)
    if not code:
        raise HTTPException(
            status_code=400,
            detail="Company name must contain at least one letter or digit",
        )
    return {"company": create_company(db, payload, code)}


@router.put("/{code}", response_model=CompanyResponse)
def update_company_route(code: str, payload: CompanyUpdate, db: Session = Depends(get_db)):
    company = update_company(db, code, payload)
    if company is None:
        raise _not_found(code)
    return {"company": company}


@router.delete("/{code}", response_model=DeletedResponse)
def delete_company_route(code: str, db: Session = Depends(get_db)):
    if delete_company(db, code) is None:
        raise _not_found(code)
    return {"status": "deleted"}
