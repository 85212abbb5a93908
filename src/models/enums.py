"""Enums for model and task fields."""

from enum import StrEnum


class EmailKind(StrEnum):
    """Transactional emails sent during the account lifecycle."""

    VERIFICATION = "verification"
    WELCOME = "welcome"
    PASSWORD_RESET = "password_reset"
    RESET_SUCCESS = "reset_success"
