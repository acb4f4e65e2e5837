from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from handset_pricing.infra.db.models.base import Base


class DeviceRow(Base):
    __tablename__ = "devices"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)  # e.g. "galaxy-s24-256gb"
    brand: Mapped[str] = mapped_column(String(30), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    storage_gb: Mapped[int] = mapped_column(Integer, nullable=False)
    list_price: Mapped[int] = mapped_column(Integer, nullable=False)  # won
    exposed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    colors: Mapped[list[DeviceColorRow]] = relationship(
        back_populates="device",
        order_by="DeviceColorRow.position",
        cascade="all, delete-orphan",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class DeviceColorRow(Base):
    __tablename__ = "device_colors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    device_id: Mapped[str] = mapped_column(
        ForeignKey("devices.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    code: Mapped[str] = mapped_column(String(30), nullable=False, default="")
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    hex: Mapped[str] = mapped_column(String(7), nullable=False, default="")

    device: Mapped[DeviceRow] = relationship(back_populates="colors")


class PlanRow(Base):
    __tablename__ = "plans"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category_id: Mapped[str] = mapped_column(String(30), nullable=False)
    category_name: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    base_price: Mapped[int] = mapped_column(Integer, nullable=False)  # won
    data: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    voice: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    sms: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    benefits: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    exposed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class SubsidyRow(Base):
    __tablename__ = "subsidies"
    __table_args__ = (
        UniqueConstraint("join_type", "device_id", "plan_id", name="uq_subsidies_combination"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    join_type: Mapped[str] = mapped_column(String(10), nullable=False)  # change | transfer | new
    device_id: Mapped[str] = mapped_column(ForeignKey("devices.id"), nullable=False)
    plan_id: Mapped[str] = mapped_column(ForeignKey("plans.id"), nullable=False)
    common_subsidy: Mapped[int] = mapped_column(Integer, nullable=False)
    additional_subsidy: Mapped[int] = mapped_column(Integer, nullable=False)
    select_subsidy: Mapped[int] = mapped_column(Integer, nullable=False)
    exposed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class PricingSettingsRow(Base):
    """Single-row table (id = 1) holding the catalog's GlobalSettings."""

    __tablename__ = "pricing_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    annual_interest_rate: Mapped[Decimal] = mapped_column(Numeric(precision=6, scale=5), nullable=False)
    rounding_unit: Mapped[int] = mapped_column(Integer, nullable=False)
    rounding_policy: Mapped[str] = mapped_column(String(20), nullable=False)
    selective_discount_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=4), nullable=False
    )
    bundle_rate_none: Mapped[Decimal] = mapped_column(Numeric(precision=5, scale=4), nullable=False)
    bundle_rate_internet: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=4), nullable=False
    )
    bundle_rate_internet_tv: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=4), nullable=False
    )
    bundle_discount_base: Mapped[str] = mapped_column(String(30), nullable=False)
    installment_months: Mapped[list[int]] = mapped_column(JSON, nullable=False)
    contract_term_months: Mapped[int] = mapped_column(Integer, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
