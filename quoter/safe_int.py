"""Checked integer arithmetic for reserve and amount math.

Pool math runs on 18-decimal integers that must stay non-negative and must
never be silently truncated to a float. SafeInt wraps a Python int and
turns the two ways such math goes wrong into exceptions:
- subtracting past zero raises Underflow
- dividing by zero raises DivisionByZero

Wrap at the top of a formula, unwrap with ``.value`` at the end:

    from quoter.safe_int import S

    def mid(a: int, b: int) -> int:
        return ((S(a) + S(b)) // 2).value
"""

from __future__ import annotations

UINT256_MAX = 2**256 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would go below zero."""

    pass


class Uint256Overflow(SafeIntError):
    """Value does not fit in a uint256."""

    pass


class SafeInt:
    """Non-negative-by-construction integer used for token amounts.

    Only the operators the quoting math needs are defined. Mixed arithmetic
    with plain ints is allowed on either side.
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _unwrap(other))

    __radd__ = __add__

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        return _checked_sub(self._value, _unwrap(other))

    def __rsub__(self, other: int) -> SafeInt:
        return _checked_sub(other, self._value)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _unwrap(other))

    __rmul__ = __mul__

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        divisor = _unwrap(other)
        if divisor == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // divisor)

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Divide rounding up (for non-negative operands).

        Raises:
            DivisionByZero: If other is zero
        """
        divisor = _unwrap(other)
        if divisor == 0:
            raise DivisionByZero(f"Ceiling division by zero: {self._value}")
        return SafeInt(-(-self._value // divisor))

    def max(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(max(self._value, _unwrap(other)))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _unwrap(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _unwrap(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _unwrap(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _unwrap(other)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def to_uint256(self) -> int:
        """Unwrap, checking the value fits the contract's integer type.

        Raises:
            Uint256Overflow: If value is negative or exceeds 2^256-1
        """
        if not 0 <= self._value <= UINT256_MAX:
            raise Uint256Overflow(f"Value out of uint256 range: {self._value}")
        return self._value


def _unwrap(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


def _checked_sub(a: int, b: int) -> SafeInt:
    result = a - b
    if result < 0:
        raise Underflow(f"Underflow: {a} - {b} = {result}")
    return SafeInt(result)


# Short alias used throughout the math modules
S = SafeInt
