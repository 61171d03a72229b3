"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_bg_removal_job_service,
    get_current_user,
    get_settings_dependency,
)

__all__ = [
    "get_bg_removal_job_service",
    "get_current_user",
    "get_settings_dependency",
]
