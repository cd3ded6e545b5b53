"""Settings-store Pydantic v2 schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from payroll_core.common.constants import SettingKey
from payroll_core.cycle.schemas import SalaryCycleConfig
from payroll_core.salary.schemas import SalaryTemplate, TaxConfig


class SettingUpdate(BaseModel):
    value: Dict[str, Any]
    author: Optional[str] = None


class SettingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: SettingKey
    value: Dict[str, Any]
    version: int
    updated_by: Optional[str] = None
    updated_at: Optional[datetime] = None


class SettingVersionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: SettingKey
    version: int
    value: Dict[str, Any]
    changed_by: Optional[str] = None
    changed_at: datetime


class SettingHistoryResponse(BaseModel):
    data: List[SettingVersionOut]
    total: int


class PayrollBatchConfig(BaseModel):
    """Configuration snapshot shared by every employee in one payroll run."""

    model_config = ConfigDict(frozen=True)

    cycle: SalaryCycleConfig
    tax: TaxConfig
    template: SalaryTemplate
