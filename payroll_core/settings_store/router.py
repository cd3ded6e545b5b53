"""Settings router — versioned payroll configuration.

Role gating is left to the calling application.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_core.common.constants import SettingKey
from payroll_core.database import get_db
from payroll_core.settings_store.schemas import (
    PayrollBatchConfig,
    SettingHistoryResponse,
    SettingOut,
    SettingUpdate,
    SettingVersionOut,
)
from payroll_core.settings_store.service import SettingsStore, load_batch_config

router = APIRouter(prefix="", tags=["settings"])


# ── GET /batch ───────────────────────────────────────────────────────

@router.get("/batch", response_model=PayrollBatchConfig)
async def get_batch_config(db: AsyncSession = Depends(get_db)):
    """Effective cycle, tax and template configuration for a payroll run."""
    return await load_batch_config(db)


# ── GET /{key} ───────────────────────────────────────────────────────

@router.get("/{key}", response_model=SettingOut)
async def get_setting(key: SettingKey, db: AsyncSession = Depends(get_db)):
    """Current value of a setting."""
    setting = await SettingsStore.get(db, key)
    return SettingOut.model_validate(setting)


# ── PUT /{key} ───────────────────────────────────────────────────────

@router.put("/{key}", response_model=SettingOut)
async def put_setting(
    key: SettingKey,
    payload: SettingUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Validate and save a new version of a setting."""
    setting = await SettingsStore.set(db, key, payload.value, author=payload.author)
    return SettingOut.model_validate(setting)


# ── GET /{key}/history ───────────────────────────────────────────────

@router.get("/{key}/history", response_model=SettingHistoryResponse)
async def get_setting_history(key: SettingKey, db: AsyncSession = Depends(get_db)):
    """Every saved version of a setting, oldest first."""
    versions = await SettingsStore.history(db, key)
    return SettingHistoryResponse(
        data=[SettingVersionOut.model_validate(v) for v in versions],
        total=len(versions),
    )
