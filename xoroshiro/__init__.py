"""Core primitives: 64-bit words, splitmix64 seeding, xoroshiro128+ generator."""

from xoroshiro.uint64 import U64, MASK64, rotl
from xoroshiro.splitmix import splitmix64
from xoroshiro.generator import (
    Xoroshiro128Plus, RAND_MAX, JUMP, UsageError, RangeError, streams,
)

new = Xoroshiro128Plus.new
