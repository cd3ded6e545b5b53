"""Settings store — versioned key-value payroll configuration."""

from payroll_core.settings_store.service import SettingsStore, load_batch_config

__all__ = ["SettingsStore", "load_batch_config"]
