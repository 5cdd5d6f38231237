"""Сообщения для пользователя и текстовое представление записи."""

from typing import Final

from src.core.domain.person import Person

MESSAGE_EDIT_PERSON_SUCCESS: Final[str] = "Edited Person: {person}"


def format_person(person: Person) -> str:
    """
    Однострочное представление записи для сообщений.

    Пустые необязательные поля (company, job, stock_platform, networth)
    не выводятся.
    """
    tags = "".join(str(tag) for tag in sorted(person.tags, key=lambda t: t.tag_name))
    parts = [
        str(person.name),
        f"Phones: {person.phone_list}",
        f"Email: {person.email}",
        f"Address: {person.address}",
        f"Order: {person.order}",
        f"Remark: {person.remark}",
        f"Tags: {tags}",
    ]

    optional = (
        ("Company", person.company),
        ("Job", person.job),
        ("Stock Platform", person.stock_platform),
        ("Networth", person.networth),
    )
    parts.extend(f"{label}: {field}" for label, field in optional if not field.is_empty())

    return "; ".join(parts)
