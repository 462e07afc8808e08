from datetime import date

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
    false,
    text,
)
from sqlalchemy.orm import relationship
from apps.biztime.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Never changed after insert
    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
    )

    amt = Column(Float, nullable=False)

    # --- Payment state ---
    # paid_date is set iff paid is true, see invoice_service.resolve_paid_date
    paid = Column(Boolean, nullable=False, default=False, server_default=false())
    add_date = Column(Date, nullable=False, default=date.today, server_default=text("CURRENT_DATE"))
    paid_date = Column(Date, nullable=True)

    # Relationship back to the company
    company = relationship("Company", back_populates="invoices")
