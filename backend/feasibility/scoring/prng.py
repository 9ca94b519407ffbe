"""
Seeded pseudo-random stream for deterministic project scores.

Mulberry32 is a tiny 32-bit generator.  Every call to the scoring functions
builds its own ``Mulberry32`` from the project id, so no state is shared
between calls or requests.

All arithmetic is masked to unsigned 32 bits after every step and the stream
matches the web client's generator bit for bit.
"""

from __future__ import annotations


MASK_32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296

MULBERRY_INCREMENT = 0x6D2B79F5

SEED_MULTIPLIER = 31415927
SEED_MODULUS = 2147483647


def create_seed(project_id: int) -> int:
    """Derive a stream seed from a project id.

    The large odd multiplier spreads sequential ids across the seed space.
    Python integers never overflow, so ``abs`` is safe for any id.
    """
    return abs(project_id * SEED_MULTIPLIER) % SEED_MODULUS


class Mulberry32:
    """32-bit mulberry32 generator producing floats in [0, 1)."""

    def __init__(self, seed: int):
        self._state = seed & MASK_32

    def next_float(self) -> float:
        self._state = (self._state + MULBERRY_INCREMENT) & MASK_32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & MASK_32
        t = (t ^ ((t + (((t ^ (t >> 7)) * (t | 61)) & MASK_32)) & MASK_32)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / TWO_POW_32

    def take(self, count: int) -> list[float]:
        """Draw ``count`` consecutive values."""
        return [self.next_float() for _ in range(count)]


def stream_for_project(project_id: int) -> Mulberry32:
    return Mulberry32(create_seed(project_id))
