from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from apps.biztime.core.db import Base


class Company(Base):
    __tablename__ = "companies"

    # Slug of the name, assigned once at creation
    code = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Relationship: one-to-many (companies → invoices), deleted by the DB cascade
    invoices = relationship(
        "Invoice",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
