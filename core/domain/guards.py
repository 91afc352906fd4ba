"""
Guard clauses shared by the catalog aggregates.

Guards run before any assignment so a rejected call never leaves
an aggregate half-updated.
"""
from typing import Any, Optional

from core.domain.exceptions import InvalidArgumentError


def ensure_not_empty(value: Optional[str], argument: str) -> str:
    """
    Reject None and the empty string.

    Args:
        value: Value supplied by the caller
        argument: Argument name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidArgumentError: If value is None or empty
    """
    if value is None or value == "":
        raise InvalidArgumentError(f"{argument} cannot be empty", argument=argument)
    return value


def ensure_not_none(value: Any, argument: str) -> Any:
    """
    Reject a missing object reference.

    Args:
        value: Object supplied by the caller
        argument: Argument name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(f"{argument} is required", argument=argument)
    return value
