"""Test utilities: plain-int reference generator, statistics helpers."""

M64 = (1 << 64) - 1


def reference_splitmix64(n: int) -> int:
    n = (n + 0x9E3779B97F4A7C15) & M64
    n = ((n ^ (n >> 30)) * 0xBF58476D1CE4E5B9) & M64
    n = ((n ^ (n >> 27)) * 0x94D049BB133111EB) & M64
    return n ^ (n >> 31)


def _rotl(x: int, k: int) -> int:
    return ((x << k) & M64) | (x >> (64 - k))


def reference_step(s0: int, s1: int):
    """One xoroshiro128+ step on plain ints: (output, (s0', s1'))."""
    result = (s0 + s1) & M64
    s1 ^= s0
    return result, (_rotl(s0, 55) ^ s1 ^ ((s1 << 14) & M64), _rotl(s1, 36))


def reference_sequence(seed: int, count: int) -> list[int]:
    """Cleartext oracle: first `count` outputs for a nonzero seed."""
    state = (reference_splitmix64(seed), seed & M64)
    out = []
    for _ in range(count):
        r, state = reference_step(*state)
        out.append(r)
    return out


def chi_square(counts: list[int]) -> float:
    """Pearson chi-square statistic against a uniform distribution."""
    total = sum(counts)
    expected = total / len(counts)
    return sum((c - expected) ** 2 / expected for c in counts)


# Upper 0.1% points of the chi-square distribution by degrees of freedom.
CHI2_CRITICAL_001 = {1: 10.828, 3: 16.266, 7: 24.322, 9: 27.877}
