"""
Host facilities: permission exchange and foreground service.
"""

from .protocol import ForegroundHost, PermissionExchange, PromotionRefusedError
from .simulated import SimulatedHost

__all__ = [
    "ForegroundHost",
    "PermissionExchange",
    "PromotionRefusedError",
    "SimulatedHost",
]
