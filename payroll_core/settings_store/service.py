"""Settings-store service layer — versioned key-value payroll configuration.

Values are validated before they are written, so a rejected configuration is
never partially applied. Each save appends a history row with the author and
timestamp; history rows are never updated.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_core.common.constants import DEFAULT_SALARY_TEMPLATE, SettingKey
from payroll_core.common.exceptions import NotFoundException
from payroll_core.common.money import to_decimal
from payroll_core.cycle.schemas import SalaryCycleConfig
from payroll_core.cycle.service import load_cycle_config
from payroll_core.salary.breakdown import load_tax_config
from payroll_core.salary.schemas import TaxConfig
from payroll_core.salary.templates import require_valid_template
from payroll_core.settings_store.models import PayrollSetting, PayrollSettingVersion
from payroll_core.settings_store.schemas import PayrollBatchConfig

logger = logging.getLogger(__name__)


def _normalize(key: SettingKey, value: Mapping[str, Any]) -> dict[str, Any]:
    """Validate *value* for *key* and return its JSON-safe form."""
    if key == SettingKey.salary_cycle:
        return load_cycle_config(value).model_dump(mode="json")
    if key == SettingKey.tax_config:
        return load_tax_config(value).model_dump(mode="json")
    require_valid_template(value)
    return {name: str(to_decimal(pct)) for name, pct in value.items()}


class SettingsStore:
    """Async get/set over the ``payroll_settings`` table."""

    @staticmethod
    async def get_or_none(db: AsyncSession, key: SettingKey) -> Optional[PayrollSetting]:
        return await db.get(PayrollSetting, key.value)

    @staticmethod
    async def get(db: AsyncSession, key: SettingKey) -> PayrollSetting:
        """Current value of *key*; raises NotFoundException when unset."""
        setting = await SettingsStore.get_or_none(db, key)
        if setting is None:
            raise NotFoundException("PayrollSetting", key.value)
        return setting

    @staticmethod
    async def set(
        db: AsyncSession,
        key: SettingKey,
        value: Mapping[str, Any],
        author: Optional[str] = None,
    ) -> PayrollSetting:
        """Validate and store a new value, appending a history record."""
        normalized = _normalize(key, value)

        setting = await SettingsStore.get_or_none(db, key)
        if setting is None:
            setting = PayrollSetting(
                key=key.value, value=normalized, version=1, updated_by=author,
            )
            db.add(setting)
        else:
            setting.value = normalized
            setting.version += 1
            setting.updated_by = author
        await db.flush()

        db.add(
            PayrollSettingVersion(
                key=key.value,
                version=setting.version,
                value=normalized,
                changed_by=author,
            )
        )
        await db.flush()
        await db.refresh(setting)

        logger.info(
            "Saved payroll setting %s v%d (by %s)", key.value, setting.version, author,
        )
        return setting

    @staticmethod
    async def history(db: AsyncSession, key: SettingKey) -> list[PayrollSettingVersion]:
        """All saved versions of *key*, oldest first."""
        stmt = (
            select(PayrollSettingVersion)
            .where(PayrollSettingVersion.key == key.value)
            .order_by(PayrollSettingVersion.version)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())


async def load_batch_config(db: AsyncSession) -> PayrollBatchConfig:
    """Read cycle, tax and template settings once for a payroll run.

    Missing keys fall back to defaults; stored values are re-validated.
    """
    cycle_row = await SettingsStore.get_or_none(db, SettingKey.salary_cycle)
    tax_row = await SettingsStore.get_or_none(db, SettingKey.tax_config)
    template_row = await SettingsStore.get_or_none(db, SettingKey.salary_template)

    cycle = load_cycle_config(cycle_row.value) if cycle_row else SalaryCycleConfig()
    tax = load_tax_config(tax_row.value) if tax_row else TaxConfig()
    if template_row:
        template = {name: to_decimal(pct) for name, pct in template_row.value.items()}
    else:
        template = dict(DEFAULT_SALARY_TEMPLATE)
    require_valid_template(template)

    return PayrollBatchConfig(cycle=cycle, tax=tax, template=template)
