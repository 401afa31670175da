"""Services that combine the Guitar Tools components."""

from .tuning_service import TuningService

__all__ = ["TuningService"]
