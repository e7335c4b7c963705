"""
Policy model — one row per submitted application.

Rows are inserted from Submission Gate payloads with status
``pending``; later transitions belong to the review flows.
"""

import uuid
from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy import Boolean, Date, DateTime, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from underwriting.db.models.base import Base, JSONDocument, generate_uuid, utcnow


class Policy(Base):
    __tablename__ = "policies"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=generate_uuid)
    policy_number: Mapped[str] = mapped_column(String(40), unique=True, nullable=False, index=True)

    # ── References ───────────────────────────
    product_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("insurance_products.id"), nullable=False, index=True
    )
    client_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    agent_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # ── Term / premium ───────────────────────
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    premium_amount: Mapped[float] = mapped_column(Float, nullable=False)
    payment_frequency: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending", index=True)
    contract_details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ── Life ─────────────────────────────────
    coverage_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    ad_d_included: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    ad_d_coverage: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    beneficiaries: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(JSONDocument, nullable=True)
    num_beneficiaries: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    age_at_inscription: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    max_age_inscription: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    wellness_rebate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # ── Health ───────────────────────────────
    deductible: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    coinsurance: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    max_annual: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    has_dental: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    has_dental_basic: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    wants_dental_premium: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    has_dental_premium: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    has_vision: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    has_vision_basic: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    wants_vision: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    has_vision_full: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    dependents_details: Mapped[Optional[list[dict[str, Any]]]] = mapped_column(JSONDocument, nullable=True)
    num_dependents: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # ── Audit timestamps ─────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Policy {self.policy_number} product={self.product_id} status={self.status}>"
