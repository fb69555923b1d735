"""Fixed-width unsigned 64-bit words with wraparound arithmetic."""

MASK64 = (1 << 64) - 1  # 2^64 - 1


def _value(other) -> int:
    if isinstance(other, U64):
        return other.value
    return int(other)


class U64:
    """Unsigned 64-bit integer. Every operation wraps modulo 2^64."""

    __slots__ = ('value',)

    def __init__(self, value=0):
        if isinstance(value, U64):
            value = value.value
        elif isinstance(value, str):
            value = int(value, 0)
        self.value = int(value) & MASK64

    def __add__(self, other):
        return U64(self.value + _value(other))

    def __radd__(self, other):
        return U64(_value(other) + self.value)

    def __sub__(self, other):
        return U64(self.value - _value(other))

    def __rsub__(self, other):
        return U64(_value(other) - self.value)

    def __mul__(self, other):
        return U64(self.value * _value(other))

    def __rmul__(self, other):
        return U64(_value(other) * self.value)

    def __floordiv__(self, other):
        divisor = _value(other) & MASK64
        if divisor == 0:
            raise ZeroDivisionError("U64 division by zero")
        return U64(self.value // divisor)

    def __mod__(self, other):
        divisor = _value(other) & MASK64
        if divisor == 0:
            raise ZeroDivisionError("U64 modulo by zero")
        return U64(self.value % divisor)

    def __xor__(self, other):
        return U64(self.value ^ _value(other))

    __rxor__ = __xor__

    def __and__(self, other):
        return U64(self.value & _value(other))

    __rand__ = __and__

    def __or__(self, other):
        return U64(self.value | _value(other))

    __ror__ = __or__

    def __lshift__(self, n):
        return U64(self.value << _value(n))

    def __rshift__(self, n):
        return U64(self.value >> _value(n))

    def __invert__(self):
        return U64(~self.value)

    def __eq__(self, other):
        if isinstance(other, U64):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, (U64, int)):
            return self.value < _value(other)
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, (U64, int)):
            return self.value <= _value(other)
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, (U64, int)):
            return self.value > _value(other)
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, (U64, int)):
            return self.value >= _value(other)
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    __index__ = __int__

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return f"U64(0x{self.value:016X})"

    def copy(self) -> 'U64':
        return U64(self.value)

    def to_int(self) -> int:
        return self.value


def rotl(x: U64, n: int) -> U64:
    """64-bit circular left rotation."""
    return (x << n) | (x >> (64 - n))
