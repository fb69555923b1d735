"""xoroshiro128+ pseudo-random generator (Blackman & Vigna).

Produces unsigned 64-bit values from a 128-bit state held as two U64 words.
Not suitable for cryptographic use.

Parallel, non-overlapping streams come from copying a generator and
jumping the k-th copy k times (see `streams`), never from sharing one
instance between threads.
"""

import logging
import os

from xoroshiro.splitmix import splitmix64
from xoroshiro.uint64 import U64, MASK64, rotl

logger = logging.getLogger(__name__)

RAND_MAX = U64(MASK64)  # 2^64 - 1

# Jump polynomial: advances the state by 2^64 steps.
JUMP = (U64(0xBEAC0467EBA5FACB), U64(0xD86B048B86AA9922))


class UsageError(TypeError):
    """Generator constructed or driven with invalid arguments."""


class RangeError(ValueError):
    """range() called with min > max on a strict generator."""


def _entropy_seed() -> U64:
    seed = U64(0)
    while not seed:
        seed = U64(int.from_bytes(os.urandom(8), 'little'))
    return seed


def _coerce_word(value, what: str) -> U64:
    if isinstance(value, bool) or not isinstance(value, (int, str, U64)):
        raise UsageError(f"{what} must be an integer, got {type(value).__name__}")
    try:
        return U64(value)
    except ValueError as e:
        raise UsageError(f"{what} {value!r} is not a valid 64-bit integer") from e


def _coerce_seed(seed) -> U64:
    if seed is None:
        return U64(0)
    return _coerce_word(seed, "seed")


class Xoroshiro128Plus:
    """xoroshiro128+ generator with jump and unbiased range reduction.

    A nonzero seed gives a reproducible sequence. An omitted or zero seed
    is replaced by one drawn from the OS entropy source.

    With strict=True, range(min, max) raises RangeError when min > max
    instead of returning 0.
    """

    __slots__ = ('_state', 'strict')

    RAND_MAX = RAND_MAX

    def __init__(self, seed=None, strict: bool = False):
        seed = _coerce_seed(seed)
        if seed == 0:
            seed = _entropy_seed()
            logger.debug("No seed given, using OS entropy")
        self._state = [splitmix64(seed), seed]
        self.strict = strict

    @classmethod
    def new(cls, seed=None, strict: bool = False) -> 'Xoroshiro128Plus':
        """Create a seeded generator. Equivalent to calling the class."""
        if not (isinstance(cls, type) and issubclass(cls, Xoroshiro128Plus)):
            raise UsageError("new() must be called on Xoroshiro128Plus or a subclass")
        return cls(seed, strict=strict)

    def copy(self) -> 'Xoroshiro128Plus':
        """Return an independent generator with an equal state."""
        cls = type(self)
        dup = cls.__new__(cls)
        dup._state = [self._state[0].copy(), self._state[1].copy()]
        dup.strict = self.strict
        return dup

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def getstate(self) -> tuple[int, int]:
        return self._state[0].value, self._state[1].value

    def setstate(self, state: tuple[int, int]):
        s0, s1 = (_coerce_word(w, "state word") for w in state)
        if not s0 and not s1:
            raise UsageError("xoroshiro128+ state must not be all zero")
        self._state = [s0, s1]

    def next(self) -> U64:
        """Advance the state one step and return its output."""
        s0, s1 = self._state
        result = s0 + s1

        s1 = s1 ^ s0
        self._state = [rotl(s0, 55) ^ s1 ^ (s1 << 14), rotl(s1, 36)]
        return result

    def __iter__(self):
        return self

    def __next__(self) -> U64:
        return self.next()

    def jump(self):
        """Advance the state as if next() were called 2^64 times."""
        acc0 = U64(0)
        acc1 = U64(0)
        for word in JUMP:
            for b in range(64):
                if word & (U64(1) << b):
                    acc0 = acc0 ^ self._state[0]
                    acc1 = acc1 ^ self._state[1]
                self.next()
        self._state = [acc0, acc1]

    def range(self, minimum, maximum) -> U64:
        """Uniform value in [minimum, maximum) without modulo bias.

        Raw outputs are split into `span` equal buckets of size
        RAND_MAX // span. Integer division leaves a tail at the top that
        does not fill a whole bucket; draws landing there are discarded
        and redrawn.

        minimum == maximum returns a copy of minimum. minimum > maximum
        returns 0, or raises RangeError on a strict generator.
        """
        lo = _coerce_word(minimum, "min")
        hi = _coerce_word(maximum, "max")

        if lo == hi:
            return lo.copy()
        if lo > hi:
            if self.strict:
                raise RangeError(f"empty range: min {lo.value} > max {hi.value}")
            logger.warning("range(%d, %d): min > max, returning 0", lo.value, hi.value)
            return U64(0)

        span = hi - lo
        bucket = RAND_MAX // span
        threshold = RAND_MAX - (RAND_MAX % span)
        while True:
            r = self.next()
            if r < threshold:
                return lo + r // bucket

    def __repr__(self):
        return f"Xoroshiro128Plus(state=(0x{self._state[0].value:016X}, 0x{self._state[1].value:016X}))"


def streams(seed, count: int, strict: bool = False) -> list[Xoroshiro128Plus]:
    """`count` generators from one seed; the k-th is jumped k times."""
    if count < 0:
        raise ValueError("count must be non-negative")
    gen = Xoroshiro128Plus(seed, strict=strict)
    result = []
    for _ in range(count):
        result.append(gen.copy())
        gen.jump()
    return result
