from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class OrderStatus(str, Enum):
    pending = "Pending"
    paid = "Paid"
    processing = "Processing"
    in_production = "In Production"
    ready = "Ready for Delivery"
    delivered = "Delivered"
    cancelled = "Cancelled"


class OrderConfig(BaseModel):
    battery: str | None = None
    paint: str | None = None
    wheels: str | None = None
    interior: str | None = None
    autopilot: str | None = None


class PaymentDetails(BaseModel):
    last4: str | None = Field(default=None, pattern=r"^\d{4}$")
    brand: str | None = None


class OrderRequest(BaseModel):
    vehicleId: str = Field(..., min_length=1)
    vehicleName: str = Field(..., min_length=1)
    totalPrice: float = Field(..., gt=0)
    config: OrderConfig = Field(default_factory=OrderConfig)
    paymentDetails: PaymentDetails | None = None


class OrderOut(BaseModel):
    id: int
    orderNumber: str
    userId: int
    vehicleId: str
    vehicleName: str
    totalPrice: float
    config: OrderConfig
    paymentDetails: PaymentDetails | None = None
    status: OrderStatus
    createdAt: str


class OrderResponse(BaseModel):
    success: bool = True
    message: str
    order: OrderOut


class OrderListResponse(BaseModel):
    success: bool = True
    orders: list[OrderOut]
    count: int
