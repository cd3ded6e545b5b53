"""Settings-store ORM models: PayrollSetting, PayrollSettingVersion.

SQLAlchemy 2.0 async-compatible models. Every save bumps the setting's
version and appends an immutable ``PayrollSettingVersion`` row.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from payroll_core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PayrollSetting(Base):
    """Current value of a payroll configuration key."""

    __tablename__ = "payroll_settings"

    key: Mapped[str] = mapped_column(sa.String(100), primary_key=True)
    value: Mapped[dict] = mapped_column(sa.JSON, nullable=False)
    version: Mapped[int] = mapped_column(sa.Integer, nullable=False, default=1)
    updated_by: Mapped[Optional[str]] = mapped_column(sa.String(200))
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<PayrollSetting {self.key!r} v{self.version}>"


class PayrollSettingVersion(Base):
    """Immutable history record written on every save."""

    __tablename__ = "payroll_setting_versions"
    __table_args__ = (
        sa.UniqueConstraint("key", "version", name="uq_setting_version"),
    )

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(
        sa.String(100),
        sa.ForeignKey("payroll_settings.key", ondelete="CASCADE"),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(sa.Integer, nullable=False)
    value: Mapped[dict] = mapped_column(sa.JSON, nullable=False)
    changed_by: Mapped[Optional[str]] = mapped_column(sa.String(200))
    changed_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), default=_utcnow, nullable=False,
    )

    def __repr__(self) -> str:
        return f"<PayrollSettingVersion {self.key!r} v{self.version} by {self.changed_by}>"
