"""Exception hierarchy for conversion and history persistence."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for input that cannot be converted.

    ``code`` is a stable machine-readable identifier used in JSON output;
    ``str(exc)`` is the user-facing message.
    """

    code = "conversion_error"
    default_message = "Conversion failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class EmptyInputError(ConversionError):
    code = "empty_input"
    default_message = "Please enter a temperature"


class NotANumberError(ConversionError):
    code = "not_a_number"
    default_message = "Please enter a valid number"


class NonFiniteValueError(ConversionError):
    code = "non_finite_value"
    default_message = "Temperature value is not valid"


class ValueTooExtremeError(ConversionError):
    code = "value_too_extreme"
    default_message = "Temperature value is too extreme"


class ConfirmationRequiredError(ConversionError):
    """Raised for unusually large values that need explicit user approval.

    This is a soft failure: the caller should ask the user with
    :attr:`prompt` and resubmit with ``confirmed=True`` on acceptance.
    """

    code = "requires_confirmation"
    default_message = "This temperature seems unusually high. Continue anyway?"

    def __init__(self, value: float, message: str | None = None) -> None:
        super().__init__(message)
        self.value = value

    @property
    def prompt(self) -> str:
        return str(self)


class PersistenceError(Exception):
    """Base class for key-value storage failures.

    Never surfaced to users; the history store logs these and carries on
    with in-memory state.
    """


class PersistenceReadError(PersistenceError):
    """The storage backend could not be read."""


class PersistenceWriteError(PersistenceError):
    """The storage backend rejected a write (quota, permissions, ...)."""
