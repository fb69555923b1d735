"""splitmix64: expands a 64-bit seed into well-mixed generator state."""

from xoroshiro.uint64 import U64

GOLDEN_GAMMA = U64(0x9E3779B97F4A7C15)
MIX1 = U64(0xBF58476D1CE4E5B9)
MIX2 = U64(0x94D049BB133111EB)


def splitmix64(n) -> U64:
    """One splitmix64 step: add the golden gamma, then mix.

    splitmix64(0) == 0xE220A8397B1DCDAF, the first output of the
    reference splitmix64 sequence seeded with 0.
    """
    n = U64(n) + GOLDEN_GAMMA
    n = (n ^ (n >> 30)) * MIX1
    n = (n ^ (n >> 27)) * MIX2
    return n ^ (n >> 31)
