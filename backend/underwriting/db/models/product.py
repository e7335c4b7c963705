"""
InsuranceProduct model — the product store read by the Product Catalog.

Bounds, fixed values and cardinality limits live in the
``coverage_details`` document; see ``ProductConfig.from_record``.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from underwriting.db.models.base import Base, JSONDocument, utcnow


class InsuranceProduct(Base):
    __tablename__ = "insurance_products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    family: Mapped[str] = mapped_column(String(40), nullable=False, index=True)  # ProductFamily

    duration_months: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    base_premium: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    fixed_payment_frequency: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    coverage_details: Mapped[dict[str, Any]] = mapped_column(JSONDocument, nullable=False, default=dict)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<InsuranceProduct {self.id} family={self.family} active={self.is_active}>"
