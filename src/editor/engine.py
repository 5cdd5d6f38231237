"""Edit Engine — применение разреженных изменений к записи клиента.

apply_edit() — чистая функция: существующая запись + дескриптор → новая
запись. Для каждого поля берётся значение из дескриптора, если оно
задано, иначе значение исходной записи. Теги заменяются целиком.

PersonEditor — сценарий редактирования поверх внешнего хранилища:
- Проверки выполняются до любых изменений хранилища
- Скрытая запись отклоняется до слияния
- Дубликат ищется только если новая запись не "та же персона"
"""

import logging
from dataclasses import dataclass
from typing import Callable, Final, Optional, Protocol, Sequence

from src.core.domain.person import Person
from src.core.errors import (
    DuplicatePersonError,
    InvalidPersonIndexError,
    NoFieldsEditedError,
    PersonHiddenError,
)
from src.editor.descriptor import EditPersonDescriptor
from src.editor.messages import MESSAGE_EDIT_PERSON_SUCCESS, format_person

logger = logging.getLogger(__name__)


# Фильтр отображения без ограничений
SHOW_ALL_PERSONS: Final[Callable[[Person], bool]] = lambda person: True


# =============================================================================
# ВНЕШНИЕ КОНТРАКТЫ
# =============================================================================


class PersonStore(Protocol):
    """Хранилище записей (реализуется вне ядра)."""

    def get_filtered_person_list(self) -> Sequence[Person]: ...

    def has_person(self, person: Person) -> bool: ...

    def set_person(self, target: Person, edited_person: Person) -> None: ...

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None: ...


@dataclass(frozen=True)
class PersonEditorConfig:
    """Конфигурация сценария редактирования."""

    # Сбросить фильтр отображения после успешного редактирования
    show_all_after_edit: bool = True


@dataclass(frozen=True)
class EditResult:
    """Результат успешного редактирования."""

    original: Person
    edited: Person
    message: str


# =============================================================================
# СЛИЯНИЕ
# =============================================================================


def apply_edit(existing: Person, descriptor: EditPersonDescriptor) -> Person:
    """
    Новая запись из существующей и дескриптора изменений.

    Чистая функция: existing не изменяется, побочных эффектов нет.
    Флаг is_hidden переносится из existing.

    Args:
        existing: Исходная запись
        descriptor: Разреженные изменения

    Returns:
        Новый экземпляр Person
    """
    values = {name: getattr(existing, name) for name in Person.model_fields}
    values.update(descriptor.edited_fields())
    return Person(**values)


# =============================================================================
# СЦЕНАРИЙ РЕДАКТИРОВАНИЯ
# =============================================================================


class PersonEditor:
    """Редактирование записи по позиции в отображаемом списке.

    Порядок проверок:
    1. Дескриптор пуст → NoFieldsEditedError
    2. Позиция вне списка → InvalidPersonIndexError
    3. Запись скрыта → PersonHiddenError
    4. Слияние (apply_edit)
    5. Не та же персона и уже есть в хранилище → DuplicatePersonError
    6. Замена записи в хранилище
    """

    def __init__(self, config: Optional[PersonEditorConfig] = None):
        self.config = config or PersonEditorConfig()

    def edit(
        self,
        store: PersonStore,
        index: int,
        descriptor: EditPersonDescriptor,
    ) -> EditResult:
        """Редактирование записи.

        Args:
            store: хранилище записей
            index: позиция в отображаемом списке (с 1)
            descriptor: изменения

        Returns:
            EditResult с исходной и новой записью

        Raises:
            NoFieldsEditedError, InvalidPersonIndexError,
            PersonHiddenError, DuplicatePersonError
        """
        descriptor = descriptor.copy()

        # 1. Пустое редактирование
        if not descriptor.is_any_field_edited():
            raise NoFieldsEditedError()

        # 2. Позиция в отображаемом списке
        shown = store.get_filtered_person_list()
        if index < 1 or index > len(shown):
            logger.warning(
                "Edit rejected: index %d outside displayed list of %d", index, len(shown)
            )
            raise InvalidPersonIndexError(index, len(shown))

        original = shown[index - 1]

        # 3. Скрытые записи не редактируются
        if original.is_hidden:
            logger.warning("Edit rejected: person %s is hidden", original.name)
            raise PersonHiddenError()

        # 4. Слияние
        edited = apply_edit(original, descriptor)

        # 5. Дубликат по ключу идентичности
        if not original.is_same_person(edited) and store.has_person(edited):
            logger.warning("Edit rejected: %s already exists", edited.name)
            raise DuplicatePersonError()

        # 6. Замена в хранилище
        store.set_person(original, edited)
        if self.config.show_all_after_edit:
            store.update_filtered_person_list(SHOW_ALL_PERSONS)

        logger.info(
            "Edited person %s (fields: %s)", edited.name, ", ".join(descriptor.edited_fields())
        )
        return EditResult(
            original=original,
            edited=edited,
            message=MESSAGE_EDIT_PERSON_SUCCESS.format(person=format_person(edited)),
        )
