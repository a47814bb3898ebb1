"""Exception types shared by the semantic tree and the accessibility services."""

from typing import Any


class InvalidInputError(TypeError):
    """A public entry point received something other than a list/tuple."""


class ChildContractError(TypeError):
    """A non-component value was offered as a child component."""


def ensure_sequence(value: Any, caller: str) -> None:
    """Raise InvalidInputError unless ``value`` is an ordered list or tuple."""
    if not isinstance(value, (list, tuple)):
        raise InvalidInputError(
            f"{caller} expects a list of nodes or components, got {type(value).__name__}."
        )
