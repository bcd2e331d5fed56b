from .user_router import user_router
from .category_router import category_router
from .device_router import device_router
from .usage_router import usage_router
from .bill_router import bill_router
from .metrics_router import metrics_router
from .simulation_router import simulation_router

__all__ = [
    "user_router",
    "category_router",
    "device_router",
    "usage_router",
    "bill_router",
    "metrics_router",
    "simulation_router",
]
