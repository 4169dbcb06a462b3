from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

class State(str, Enum):
    Open = "Open"
    InProgress = "InProgress"
    Closed = "Closed"

class PaymentMethod(str, Enum):
    Cash = "Cash"
    CreditCard = "CreditCard"
    DebitCard = "DebitCard"

class OrderItem(BaseModel):
    item_number: int
    description: str
    quantity: int

class Order(BaseModel):
    """
    Single transaction evaluated by the rules.
    Fields stay assignable after construction (state/value are updated between evaluations).
    """
    id: str
    value: int
    state: State
    total: Decimal
    payment_method: PaymentMethod

    card_number: Optional[str] = None
    is_special_interest: bool = False
    capture_date: Optional[datetime] = None
    delivery_date: Optional[datetime] = None
    items: List[OrderItem] = Field(default_factory=list)
