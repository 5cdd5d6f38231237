"""
Errors — Единая таксономия ошибок FinClient

Диапазоны кодов:
  1xxx: Аргументы и форматы (NullArgument, IllegalOrderFormat)
  2xxx: Редактирование записей (hidden, duplicate, пустое редактирование, индекс)

Все ошибки синхронные: ни одна операция не выполняет частичных изменений
перед тем, как выбросить исключение.
"""


class FinClientError(Exception):
    """Базовая ошибка приложения."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# =============================================================================
# 1xxx: АРГУМЕНТЫ И ФОРМАТЫ
# =============================================================================


class NullArgumentError(FinClientError, TypeError):
    """Обязательный аргумент не передан (None). Нарушение контракта вызова."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(1001, f"{argument} must not be None")


class IllegalOrderFormatError(FinClientError, ValueError):
    """Цена, количество или текстовое описание ордера не соответствуют грамматике."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(1002, f"Illegal order format: {detail}")


# =============================================================================
# 2xxx: РЕДАКТИРОВАНИЕ ЗАПИСЕЙ
# =============================================================================


class PersonHiddenError(FinClientError):
    def __init__(self) -> None:
        super().__init__(2001, "This person is hidden. Reveal the person before editing.")


class DuplicatePersonError(FinClientError):
    def __init__(self) -> None:
        super().__init__(2002, "This person already exists in the address book.")


class NoFieldsEditedError(FinClientError):
    def __init__(self) -> None:
        super().__init__(2003, "At least one field to edit must be provided.")


class InvalidPersonIndexError(FinClientError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(2004, "The person index provided is invalid")
