"""EditPersonDescriptor — разреженный набор изменений записи.

Каждое поле либо не задано (None — оставить как есть), либо содержит
новое значение. Дескриптор живёт одну операцию редактирования.

Соглашение об очистке полей:
- Для company, job, stock_platform и networth текст "delete"
  (точное совпадение, с учётом регистра) не сохраняется как значение:
  вместо него сохраняется пустой экземпляр типа поля, и редактирование
  очищает поле.
- Любой другой текст сохраняется как есть.
- Для этих полей можно присвоить и обычную строку: она оборачивается
  в тип поля.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Final, Iterable, Optional

from src.core.domain.order import Order
from src.core.domain.person import (
    Address,
    Company,
    Email,
    Job,
    Name,
    Networth,
    OptionalText,
    PhoneList,
    Remark,
    StockPlatform,
    Tag,
)

DELETE_SENTINEL: Final[str] = "delete"

# Поля, для которых DELETE_SENTINEL означает очистку
CLEARABLE_FIELDS: Final[dict[str, type[OptionalText]]] = {
    "company": Company,
    "job": Job,
    "stock_platform": StockPlatform,
    "networth": Networth,
}


@dataclass
class EditPersonDescriptor:
    """Изменения для записи. Каждое заданное поле заменяет поле записи целиком."""

    name: Optional[Name] = None
    phone_list: Optional[PhoneList] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    order: Optional[Order] = None
    remark: Optional[Remark] = None
    tags: Optional[Iterable[Tag]] = None
    company: Optional[Company] = None
    job: Optional[Job] = None
    stock_platform: Optional[StockPlatform] = None
    networth: Optional[Networth] = None

    def __setattr__(self, field_name: str, value: Any) -> None:
        if value is not None:
            if field_name in CLEARABLE_FIELDS:
                if isinstance(value, str):
                    value = CLEARABLE_FIELDS[field_name](value=value)
                if value.value == DELETE_SENTINEL:
                    value = CLEARABLE_FIELDS[field_name]()
            elif field_name == "tags":
                # Копия только для чтения: внешнее множество не разделяется
                value = frozenset(value)
        super().__setattr__(field_name, value)

    def copy(self) -> "EditPersonDescriptor":
        """Независимая копия (теги копируются, а не разделяются)."""
        return replace(self)

    def edited_fields(self) -> dict[str, Any]:
        """
        Только заданные поля.

        Returns:
            {имя поля: новое значение} для полей, отличных от None
        """
        return {
            f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None
        }

    def is_any_field_edited(self) -> bool:
        """True если задано хотя бы одно поле."""
        return bool(self.edited_fields())


EDITABLE_FIELDS: Final[tuple[str, ...]] = tuple(f.name for f in fields(EditPersonDescriptor))
