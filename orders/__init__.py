"""
Orders domain package.

Public API:
- Domain models: Order, OrderStage, PreparedOrder, FailedOrder, BatchResult, StatusUpdate

Operations live in submodules so the store can import the models without a cycle:
- orders.processing.process_order
- orders.batch.process_multiple_orders
- orders.tracking.track_order_status
"""
from .models import (
    ORDER_STAGES,
    BatchResult,
    FailedOrder,
    Order,
    OrderStage,
    PreparedOrder,
    StatusUpdate,
)

__all__ = [
    "ORDER_STAGES",
    "BatchResult",
    "FailedOrder",
    "Order",
    "OrderStage",
    "PreparedOrder",
    "StatusUpdate",
]
