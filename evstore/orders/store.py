from __future__ import annotations

import itertools
import secrets
import time
from datetime import datetime, timezone

from .models import OrderOut, OrderRequest, OrderStatus

_orders: list[OrderOut] = []
_ids = itertools.count(1)

_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _base36(value: int) -> str:
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits)) or "0"


def _order_number() -> str:
    stamp = _base36(int(time.time() * 1000))
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(5))
    return f"EVS-{stamp}-{suffix}"


def create_order(user_id: int, request: OrderRequest) -> OrderOut:
    order = OrderOut(
        id=next(_ids),
        orderNumber=_order_number(),
        userId=user_id,
        vehicleId=request.vehicleId,
        vehicleName=request.vehicleName,
        totalPrice=request.totalPrice,
        config=request.config,
        paymentDetails=request.paymentDetails,
        status=OrderStatus.paid,
        createdAt=datetime.now(timezone.utc).isoformat(),
    )
    _orders.append(order)
    return order


def get_orders(user_id: int) -> list[OrderOut]:
    """A user's orders, newest first."""
    return [o for o in reversed(_orders) if o.userId == user_id]


def clear_orders() -> None:
    _orders.clear()
