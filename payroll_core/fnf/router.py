"""FnF router — Full & Final settlement computation."""

from fastapi import APIRouter

from payroll_core.fnf.schemas import SettlementInput, SettlementOut
from payroll_core.fnf.service import FnFService

router = APIRouter(prefix="", tags=["fnf"])


# ── POST /settlement ─────────────────────────────────────────────────

@router.post("/settlement", response_model=SettlementOut)
async def compute_settlement(payload: SettlementInput):
    """Compute the Full & Final settlement for an exiting employee."""
    return FnFService.compute_settlement(payload)
