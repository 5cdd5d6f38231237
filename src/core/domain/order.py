"""
Order — Модель торгового ордера клиента

Immutable Pydantic модель ордера (BUY/SELL) либо служебного состояния
(NONE — ордер не выставлен, HIDDEN — ордер скрыт от просмотра).

Две независимые фабрики сходятся к одному валидированному представлению:
- make_order(order_type, price, quantity) — структурированный ввод полей
- parse_order(description) — компактная текстовая запись "BUY 10 @ $5.50"

Грамматика цены и количества проверяется одной общей функцией,
поэтому отображение и сравнение ордеров не зависят от формы ввода.
"""

import logging
import math
import re
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

from src.core.errors import IllegalOrderFormatError, NullArgumentError

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Одна или более цифр, опционально точка и ровно 1-2 цифры
PRICE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+(\.[0-9]{1,2})?")

# Целое число со знаком (знак допускается, положительность проверяется отдельно)
QUANTITY_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

# Каноническая цена/количество для NONE и HIDDEN ордеров
PLACEHOLDER_PRICE: Final[float] = 1.0
PLACEHOLDER_QUANTITY: Final[int] = 1

# Верхняя граница количества (32-битное целое со знаком)
MAX_QUANTITY: Final[int] = 2**31 - 1

PRICE_CURRENCY_SYMBOL: Final[str] = "$"
ORDER_AT_TOKEN: Final[str] = "@"

# Количество токенов в записи "<TYPE> <QTY> @ $<PRICE>"
TRADE_FORM_TOKEN_COUNT: Final[int] = 4

MESSAGE_CONSTRAINTS: Final[str] = (
    "Orders should be NONE, HIDDEN or of the form 'BUY|SELL QUANTITY @ $PRICE', "
    "where QUANTITY is a positive integer and PRICE is a positive number "
    "with at most 2 decimal places"
)


# =============================================================================
# ENUMS
# =============================================================================


class OrderType(str, Enum):
    """Тип ордера"""

    BUY = "BUY"
    SELL = "SELL"
    NONE = "NONE"  # Ордер не выставлен
    HIDDEN = "HIDDEN"  # Ордер скрыт от просмотра


TRADE_ORDER_TYPES: Final[frozenset[OrderType]] = frozenset({OrderType.BUY, OrderType.SELL})
PLACEHOLDER_ORDER_TYPES: Final[frozenset[OrderType]] = frozenset(
    {OrderType.NONE, OrderType.HIDDEN}
)


# =============================================================================
# ORDER MODEL
# =============================================================================


class Order(BaseModel):
    """
    Модель ордера клиента.

    Immutable модель (frozen=True). Равенство структурное по
    (order_type, price, quantity), поэтому ордера, созданные разными
    фабриками, равны при одинаковых логических значениях.

    Создавать через make_order() / parse_order(): прямой конструктор
    проверяет только положительность, но не грамматику цены.
    """

    order_type: OrderType = Field(..., description="Тип ордера (BUY/SELL/NONE/HIDDEN)")
    price: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Цена за единицу, не более 2 знаков после точки",
    )
    quantity: int = Field(..., gt=0, description="Количество (строго положительное)")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        if self.is_placeholder():
            return self.order_type.value
        return (
            f"{self.order_type.value} {self.quantity} {ORDER_AT_TOKEN} "
            f"{PRICE_CURRENCY_SYMBOL}{self.price:.2f}"
        )

    def is_placeholder(self) -> bool:
        """
        Проверка, что ордер служебный (NONE/HIDDEN) и не описывает реальную сделку.

        Returns:
            True для NONE и HIDDEN
        """
        return self.order_type in PLACEHOLDER_ORDER_TYPES

    def total_value(self) -> float:
        """
        Объём ордера в деньгах.

        Returns:
            price * quantity для BUY/SELL, 0.0 для служебных ордеров
        """
        if self.is_placeholder():
            return 0.0
        return self.price * self.quantity


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_price(text: str) -> bool:
    """
    Проверка строки цены по грамматике.

    Валидна строка из цифр с опциональной дробной частью из 1-2 цифр,
    значение конечное и строго больше нуля. Пробелы, знак, экспонента и прочие
    символы не допускаются.

    Args:
        text: Строка цены (например, "5.50")

    Returns:
        True если цена валидна

    Raises:
        NullArgumentError: Если text is None
    """
    if text is None:
        raise NullArgumentError("price")
    if PRICE_PATTERN.fullmatch(text) is None:
        return False
    value = float(text)
    return math.isfinite(value) and value > 0


def is_valid_quantity(quantity: int) -> bool:
    """Количество валидно, если строго положительное."""
    return quantity > 0


def _check_price_and_quantity(price: str, quantity: int) -> None:
    """Общая проверка цены и количества для обеих фабрик."""
    if not is_valid_price(price):
        raise IllegalOrderFormatError(f"invalid price {price!r}")
    if not is_valid_quantity(quantity) or quantity > MAX_QUANTITY:
        raise IllegalOrderFormatError(f"invalid quantity {quantity!r}")


# =============================================================================
# ФАБРИКИ
# =============================================================================


def make_order(order_type: OrderType, price: str, quantity: int) -> Order:
    """
    Создание ордера из структурированных полей.

    Для NONE и HIDDEN аргументы проверяются, но ордер всегда получает
    каноническую цену 1.0 и количество 1.

    Args:
        order_type: Тип ордера
        price: Строка цены по грамматике is_valid_price
        quantity: Количество (> 0)

    Returns:
        Валидный Order

    Raises:
        NullArgumentError: Если order_type или price is None
        IllegalOrderFormatError: Если цена или количество невалидны
    """
    if order_type is None:
        raise NullArgumentError("order_type")
    if price is None:
        raise NullArgumentError("price")

    _check_price_and_quantity(price, quantity)
    if order_type in PLACEHOLDER_ORDER_TYPES:
        return Order(
            order_type=order_type, price=PLACEHOLDER_PRICE, quantity=PLACEHOLDER_QUANTITY
        )
    return Order(order_type=order_type, price=float(price), quantity=quantity)


def parse_order(description: str) -> Order:
    """
    Разбор текстовой записи ордера.

    Допустимые формы:
    - "NONE" или "HIDDEN" (с учётом регистра) → служебный ордер
      с ценой 1.0 и количеством 1
    - "<BUY|SELL> <QTY> @ $<PRICE>" → ровно 4 токена через пробельные символы

    Args:
        description: Текстовое описание ордера

    Returns:
        Валидный Order

    Raises:
        NullArgumentError: Если description is None
        IllegalOrderFormatError: При любом несоответствии грамматике
    """
    if description is None:
        raise NullArgumentError("order description")

    tokens = description.split()

    if len(tokens) == 1 and tokens[0] in {t.value for t in PLACEHOLDER_ORDER_TYPES}:
        return Order(
            order_type=OrderType(tokens[0]),
            price=PLACEHOLDER_PRICE,
            quantity=PLACEHOLDER_QUANTITY,
        )

    if len(tokens) != TRADE_FORM_TOKEN_COUNT:
        logger.debug("Rejected order %r: %d tokens", description, len(tokens))
        raise IllegalOrderFormatError(
            f"expected {TRADE_FORM_TOKEN_COUNT} tokens, got {len(tokens)} in {description!r}"
        )

    type_token, quantity_token, at_token, price_token = tokens

    if type_token not in {t.value for t in TRADE_ORDER_TYPES}:
        raise IllegalOrderFormatError(f"unknown order type {type_token!r}")
    if QUANTITY_PATTERN.fullmatch(quantity_token) is None:
        raise IllegalOrderFormatError(f"quantity {quantity_token!r} is not an integer")
    if at_token != ORDER_AT_TOKEN:
        raise IllegalOrderFormatError(f"expected {ORDER_AT_TOKEN!r}, got {at_token!r}")
    if not price_token.startswith(PRICE_CURRENCY_SYMBOL):
        raise IllegalOrderFormatError(
            f"price {price_token!r} must start with {PRICE_CURRENCY_SYMBOL!r}"
        )

    price = price_token[len(PRICE_CURRENCY_SYMBOL):]
    quantity = int(quantity_token)

    _check_price_and_quantity(price, quantity)
    return Order(order_type=OrderType(type_token), price=float(price), quantity=quantity)
