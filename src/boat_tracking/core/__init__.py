"""Status evaluation, boat registry and alert log."""

from .evaluator import evaluate
from .registry import BoatRegistry
from .alert_log import AlertLog

__all__ = [
    "evaluate",
    "BoatRegistry",
    "AlertLog",
]
