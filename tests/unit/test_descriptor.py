"""
Тесты для EditPersonDescriptor

Проверяет:
1. Соглашение "delete" для company/job/stock_platform/networth
2. Защитную копию тегов и представление только для чтения
3. copy(), edited_fields(), is_any_field_edited()
4. Структурное равенство дескрипторов
"""

import pytest

from src.core.domain import (
    Company,
    Email,
    Job,
    Name,
    Networth,
    StockPlatform,
    Tag,
    parse_order,
)
from src.editor import CLEARABLE_FIELDS, DELETE_SENTINEL, EDITABLE_FIELDS, EditPersonDescriptor


# =============================================================================
# СОГЛАШЕНИЕ "DELETE"
# =============================================================================


class TestDeleteSentinel:
    """Тесты для очистки полей текстом "delete" """

    @pytest.mark.parametrize(
        "field_name,field_type",
        [
            ("company", Company),
            ("job", Job),
            ("stock_platform", StockPlatform),
            ("networth", Networth),
        ],
    )
    def test_delete_stores_empty_instance(self, field_name: str, field_type) -> None:
        descriptor = EditPersonDescriptor()
        setattr(descriptor, field_name, field_type(value=DELETE_SENTINEL))

        stored = getattr(descriptor, field_name)
        assert stored == field_type()
        assert stored.is_empty()
        assert descriptor.is_any_field_edited()

    def test_delete_in_constructor(self) -> None:
        descriptor = EditPersonDescriptor(company=Company(value="delete"))
        assert descriptor.company == Company()

    @pytest.mark.parametrize("value", ["Delete", "DELETE", "delete ", " delete", "deleted", "Google"])
    def test_other_text_stored_verbatim(self, value: str) -> None:
        """Проверка точного совпадения с учётом регистра"""
        descriptor = EditPersonDescriptor(job=Job(value=value))
        assert descriptor.job == Job(value=value)

    @pytest.mark.parametrize("field_name", ["company", "job", "stock_platform", "networth"])
    def test_plain_delete_text_clears(self, field_name: str) -> None:
        """Обычная строка "delete" тоже очищает поле"""
        descriptor = EditPersonDescriptor()
        setattr(descriptor, field_name, DELETE_SENTINEL)
        assert getattr(descriptor, field_name) == CLEARABLE_FIELDS[field_name]()

    def test_plain_text_wrapped_in_field_type(self) -> None:
        descriptor = EditPersonDescriptor(company="Acme")
        assert descriptor.company == Company(value="Acme")

    def test_sentinel_only_for_clearable_fields(self) -> None:
        assert set(CLEARABLE_FIELDS) == {"company", "job", "stock_platform", "networth"}

    def test_none_means_unset(self) -> None:
        descriptor = EditPersonDescriptor(company=Company(value="Acme"))
        descriptor.company = None
        assert descriptor.company is None
        assert not descriptor.is_any_field_edited()


# =============================================================================
# ТЕГИ
# =============================================================================


class TestTags:
    """Тесты для защитной копии тегов"""

    def test_tags_copied_on_set(self) -> None:
        source = {Tag(tag_name="friends")}
        descriptor = EditPersonDescriptor(tags=source)
        source.add(Tag(tag_name="colleagues"))

        assert descriptor.tags == frozenset({Tag(tag_name="friends")})

    def test_tags_read_only(self) -> None:
        descriptor = EditPersonDescriptor(tags={Tag(tag_name="friends")})
        with pytest.raises(AttributeError):
            descriptor.tags.add(Tag(tag_name="x"))  # type: ignore[union-attr]

    def test_empty_tag_set_is_an_edit(self) -> None:
        """Пустое множество тегов — это изменение (очистить теги), а не отсутствие"""
        descriptor = EditPersonDescriptor(tags=set())
        assert descriptor.tags == frozenset()
        assert descriptor.is_any_field_edited()


# =============================================================================
# КОПИРОВАНИЕ И АГРЕГАТЫ
# =============================================================================


class TestDescriptorOperations:
    """Тесты для copy / edited_fields / is_any_field_edited"""

    @pytest.fixture
    def descriptor(self) -> EditPersonDescriptor:
        return EditPersonDescriptor(
            name=Name(full_name="Bob Choo"),
            email=Email(value="bob@example.com"),
            tags={Tag(tag_name="husband")},
            networth=Networth(value="delete"),
        )

    def test_empty_descriptor(self) -> None:
        descriptor = EditPersonDescriptor()
        assert not descriptor.is_any_field_edited()
        assert descriptor.edited_fields() == {}

    def test_order_only_counts_as_edit(self) -> None:
        descriptor = EditPersonDescriptor(order=parse_order("SELL 1 @ $2"))
        assert descriptor.is_any_field_edited()

    def test_edited_fields(self, descriptor: EditPersonDescriptor) -> None:
        assert descriptor.edited_fields() == {
            "name": Name(full_name="Bob Choo"),
            "email": Email(value="bob@example.com"),
            "tags": frozenset({Tag(tag_name="husband")}),
            "networth": Networth(),
        }

    def test_copy_equal_and_independent(self, descriptor: EditPersonDescriptor) -> None:
        copied = descriptor.copy()
        assert copied == descriptor
        assert copied is not descriptor

        copied.name = Name(full_name="Someone Else")
        assert descriptor.name == Name(full_name="Bob Choo")

    def test_equality(self, descriptor: EditPersonDescriptor) -> None:
        other = EditPersonDescriptor(
            name=Name(full_name="Bob Choo"),
            email=Email(value="bob@example.com"),
            tags=[Tag(tag_name="husband")],
            networth=Networth(),
        )
        assert other == descriptor
        other.job = Job(value="Engineer")
        assert other != descriptor

    def test_editable_fields(self) -> None:
        assert EDITABLE_FIELDS == (
            "name",
            "phone_list",
            "email",
            "address",
            "order",
            "remark",
            "tags",
            "company",
            "job",
            "stock_platform",
            "networth",
        )
