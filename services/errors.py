"""
Error taxonomy for the recipe calculator.

Every error carries a ``user_message`` that the UI can show as-is.
"""

from __future__ import annotations
from typing import Iterable, List, Optional


class RecipeAppError(Exception):
    """Base class for all application errors."""

    user_message = "Ocorreu um erro inesperado."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.user_message)
        if message:
            self.user_message = message


class ValidationError(RecipeAppError):
    """Raised when required inputs are missing or not numeric."""

    user_message = "Preencha todos os campos obrigatórios."

    def __init__(self, message: Optional[str] = None, fields: Iterable[str] = ()):
        super().__init__(message)
        self.fields: List[str] = list(fields)


class CorruptDataError(RecipeAppError):
    """Raised when the persisted recipe collection cannot be deserialized."""

    user_message = "Os dados salvos estão corrompidos e foram ignorados."


class StorageIOError(RecipeAppError):
    """
    Raised when the backing store fails to read or write.

    ``pending_id`` is set when a new recipe was kept in memory because its
    write failed; it stays None for read failures.
    """

    user_message = "Não foi possível acessar o armazenamento local."

    def __init__(self, message: Optional[str] = None, pending_id: Optional[str] = None):
        super().__init__(message)
        self.pending_id = pending_id
