"""
Domain models and value objects.

Contains fundamental domain entities like Order, Person and its field types.
"""

from src.core.domain.order import (
    MESSAGE_CONSTRAINTS,
    PLACEHOLDER_PRICE,
    PLACEHOLDER_QUANTITY,
    Order,
    OrderType,
    is_valid_price,
    is_valid_quantity,
    make_order,
    parse_order,
)
from src.core.domain.person import (
    Address,
    Company,
    Email,
    Job,
    Name,
    Networth,
    OptionalText,
    Person,
    Phone,
    PhoneList,
    Remark,
    StockPlatform,
    Tag,
)

__all__ = [
    # Order module
    "MESSAGE_CONSTRAINTS",
    "PLACEHOLDER_PRICE",
    "PLACEHOLDER_QUANTITY",
    "Order",
    "OrderType",
    "is_valid_price",
    "is_valid_quantity",
    "make_order",
    "parse_order",
    # Person model
    "Person",
    "Name",
    "Phone",
    "PhoneList",
    "Email",
    "Address",
    "Remark",
    "Tag",
    "OptionalText",
    "Company",
    "Job",
    "StockPlatform",
    "Networth",
]
