"""FnF (Full & Final settlement) module."""

from payroll_core.fnf.service import FnFService

__all__ = ["FnFService"]
