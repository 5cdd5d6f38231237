"""Editor — частичное редактирование записей клиентов.

- EditPersonDescriptor: разреженный набор изменений с соглашением "delete"
- apply_edit: чистое слияние записи и дескриптора
- PersonEditor: сценарий редактирования с проверками hidden/duplicate
"""

from .descriptor import CLEARABLE_FIELDS, DELETE_SENTINEL, EDITABLE_FIELDS, EditPersonDescriptor
from .engine import (
    SHOW_ALL_PERSONS,
    EditResult,
    PersonEditor,
    PersonEditorConfig,
    PersonStore,
    apply_edit,
)
from .messages import MESSAGE_EDIT_PERSON_SUCCESS, format_person

__all__ = [
    "CLEARABLE_FIELDS",
    "DELETE_SENTINEL",
    "EDITABLE_FIELDS",
    "EditPersonDescriptor",
    "SHOW_ALL_PERSONS",
    "EditResult",
    "PersonEditor",
    "PersonEditorConfig",
    "PersonStore",
    "apply_edit",
    "MESSAGE_EDIT_PERSON_SUCCESS",
    "format_person",
]
