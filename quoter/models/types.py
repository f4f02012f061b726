"""Shared field types for the API models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

from quoter.safe_int import UINT256_MAX, S, Uint256Overflow


def validate_uint256(value: Any) -> int:
    """Validate a token amount given as a decimal string or int.

    Amounts travel as decimal strings because they routinely exceed the
    2^53 range JSON numbers can carry exactly.

    Args:
        value: Value to validate (string or int)

    Returns:
        The amount as an int

    Raises:
        ValueError: If value is not a valid non-negative integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint256 must be string or int, got bool")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        if not value.isascii() or not value.isdigit():
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'")
        int_value = int(value)
    else:
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    try:
        return S(int_value).to_uint256()
    except Uint256Overflow as err:
        raise ValueError(f"Uint256 out of range: {value}") from err


# 256-bit unsigned integer, parsed to int, serialized as a decimal string
Uint256 = Annotated[
    int,
    BeforeValidator(validate_uint256),
    PlainSerializer(str, return_type=str),
    Field(description="256-bit unsigned integer as decimal string"),
]
