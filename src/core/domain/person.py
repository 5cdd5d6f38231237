"""
Person — Модель записи клиента

Immutable Pydantic модели полей записи и агрегата Person.

Person создаётся слоем хранения/разбора команд. Ядро только читает
существующий экземпляр и создаёт новый с изменениями — исходная запись
никогда не мутирует.

Два разных сравнения:
- == — полное структурное равенство по всем полям
- is_same_person() — узкий ключ идентичности (имя) для поиска дубликатов
"""

import re
from datetime import datetime
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.order import Order, OrderType, PLACEHOLDER_PRICE, PLACEHOLDER_QUANTITY


# =============================================================================
# ГРАММАТИКИ ПОЛЕЙ
# =============================================================================

NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
PHONE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]{3,}")
TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")

# local-part: буквенно-цифровые сегменты, разделённые одним из "+_.-"
# domain: метки через точку, последняя метка не короче 2 символов
_ALNUM: Final[str] = r"[A-Za-z0-9]+"
_DOMAIN_LABEL: Final[str] = rf"{_ALNUM}(-{_ALNUM})*"
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"{_ALNUM}([+_.-]{_ALNUM})*@({_DOMAIN_LABEL}\.)*[A-Za-z0-9]{{2,}}(-{_ALNUM})*"
)


# =============================================================================
# ОБЯЗАТЕЛЬНЫЕ ПОЛЯ
# =============================================================================


class Name(BaseModel):
    """Имя клиента: буквенно-цифровые слова через пробел."""

    full_name: str = Field(..., description="Полное имя")

    model_config = {"frozen": True}

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        if NAME_PATTERN.fullmatch(v) is None:
            raise ValueError(
                f"Name {v!r} should only contain alphanumeric characters and spaces, "
                "and it should not be blank"
            )
        return v

    def __str__(self) -> str:
        return self.full_name


class Phone(BaseModel):
    """Телефон: только цифры, не менее 3."""

    value: str = Field(..., description="Номер телефона")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if PHONE_PATTERN.fullmatch(v) is None:
            raise ValueError(f"Phone number {v!r} should only contain digits, at least 3 long")
        return v

    def __str__(self) -> str:
        return self.value


class PhoneList(BaseModel):
    """Список телефонов клиента (минимум один)."""

    phones: tuple[Phone, ...] = Field(..., min_length=1, description="Телефоны в порядке ввода")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return ", ".join(str(phone) for phone in self.phones)


class Email(BaseModel):
    """Email в формате local-part@domain."""

    value: str = Field(..., description="Адрес электронной почты")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if EMAIL_PATTERN.fullmatch(v) is None:
            raise ValueError(f"Email {v!r} should be of the format local-part@domain")
        return v

    def __str__(self) -> str:
        return self.value


class Address(BaseModel):
    """Адрес: любой текст, не начинающийся с пробельного символа."""

    value: str = Field(..., min_length=1, description="Почтовый адрес")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_address(cls, v: str) -> str:
        if v[0].isspace():
            raise ValueError("Address can take any values, and it should not be blank")
        return v

    def __str__(self) -> str:
        return self.value


# =============================================================================
# НЕОБЯЗАТЕЛЬНЫЕ ПОЛЯ
# =============================================================================


class Remark(BaseModel):
    """Заметка о клиенте с опциональной отметкой времени."""

    value: str = Field("", description="Текст заметки")
    timestamp: datetime | None = Field(None, description="Время, к которому относится заметка")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        if self.timestamp is None:
            return self.value
        return f"{self.value} ({self.timestamp:%Y-%m-%d %H:%M})"


class Tag(BaseModel):
    """Тег: одно буквенно-цифровое слово."""

    tag_name: str = Field(..., description="Имя тега")

    model_config = {"frozen": True}

    @field_validator("tag_name")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        if TAG_PATTERN.fullmatch(v) is None:
            raise ValueError(f"Tag name {v!r} should be alphanumeric")
        return v

    def __str__(self) -> str:
        return f"[{self.tag_name}]"


class OptionalText(BaseModel):
    """
    Необязательное текстовое поле с каноническим пустым значением.

    Экземпляр без аргументов (value == "") означает "поле не заполнено".
    """

    value: str = Field("", description="Текстовое значение ('' — пусто)")

    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        return self.value == ""

    def __str__(self) -> str:
        return self.value


class Company(OptionalText):
    """Компания клиента"""


class Job(OptionalText):
    """Должность клиента"""


class StockPlatform(OptionalText):
    """Брокерская платформа клиента"""


class Networth(OptionalText):
    """Оценка капитала клиента"""


# =============================================================================
# PERSON MODEL
# =============================================================================


def _placeholder_order() -> Order:
    return Order(order_type=OrderType.NONE, price=PLACEHOLDER_PRICE, quantity=PLACEHOLDER_QUANTITY)


class Person(BaseModel):
    """
    Модель записи клиента.

    Immutable модель (frozen=True). Все изменения записи должны
    создавать новый экземпляр (см. src.editor.engine.apply_edit).

    is_hidden — скрытая запись недоступна для редактирования, пока её
    явно не раскроют.
    """

    # Идентификация и контакты
    name: Name = Field(..., description="Имя (ключ идентичности)")
    phone_list: PhoneList = Field(..., description="Телефоны")
    email: Email = Field(..., description="Email")
    address: Address = Field(..., description="Адрес")

    # Финансовые данные
    order: Order = Field(default_factory=_placeholder_order, description="Текущий ордер")

    # Необязательные поля
    remark: Remark = Field(default_factory=Remark, description="Заметка")
    tags: frozenset[Tag] = Field(default_factory=frozenset, description="Теги")
    company: Company = Field(default_factory=Company, description="Компания")
    job: Job = Field(default_factory=Job, description="Должность")
    stock_platform: StockPlatform = Field(default_factory=StockPlatform, description="Платформа")
    networth: Networth = Field(default_factory=Networth, description="Капитал")

    # Видимость
    is_hidden: bool = Field(False, description="Запись скрыта и защищена от редактирования")

    model_config = {"frozen": True}

    def is_same_person(self, other: "Person | None") -> bool:
        """
        Проверка идентичности по узкому ключу (имя).

        Слабее, чем ==: две записи с одним именем, но разными телефонами,
        считаются одной и той же персоной.

        Args:
            other: Другая запись (или None)

        Returns:
            True если записи описывают одного и того же клиента
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def with_hidden(self, hidden: bool) -> "Person":
        """
        Копия записи с изменённым флагом видимости.

        Args:
            hidden: Новое значение is_hidden

        Returns:
            Новый экземпляр Person
        """
        return self.model_copy(update={"is_hidden": hidden})
