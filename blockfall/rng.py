"""Deterministic block generator.

The generator is a pure stream: a frozen value holding only the integer state
of a 32-bit linear congruential generator. Reading :attr:`value` never
advances it and :attr:`next` returns a *new* generator, so generators can be
copied, shared and compared freely. Two generators with equal state produce
identical infinite sequences, which is what makes whole games replayable.

:class:`BlockGenerator` maps the raw stream onto the piece catalog.
"""

from dataclasses import dataclass, replace
from typing import List

from blockfall.pieces import Piece, piece_for_value

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32

INITIAL_SEED = 12345


@dataclass(frozen=True)
class LinearGenerator:
    """Linear congruential stream ``s' = (a * s + c) mod m``.

    Attributes:
        state: Current value of the stream.
        multiplier: ``a``.
        increment: ``c``.
        modulus: ``m``.
    """

    state: int = INITIAL_SEED
    multiplier: int = LCG_MULTIPLIER
    increment: int = LCG_INCREMENT
    modulus: int = LCG_MODULUS

    @property
    def value(self) -> int:
        return self.state

    @property
    def next(self) -> "LinearGenerator":
        return replace(
            self, state=(self.multiplier * self.state + self.increment) % self.modulus
        )

    def take(self, count: int) -> List[int]:
        """Return the first ``count`` values starting with the current one."""
        values: List[int] = []
        gen = self
        for _ in range(count):
            values.append(gen.value)
            gen = gen.next
        return values


@dataclass(frozen=True)
class BlockGenerator:
    """Stream of pieces backed by a :class:`LinearGenerator`."""

    random: LinearGenerator = LinearGenerator()

    @property
    def value(self) -> Piece:
        return piece_for_value(self.random.value)

    @property
    def next(self) -> "BlockGenerator":
        return BlockGenerator(self.random.next)

    def take(self, count: int) -> List[Piece]:
        """Return the first ``count`` pieces starting with the current one."""
        return [piece_for_value(value) for value in self.random.take(count)]


def block_generator(seed: int = INITIAL_SEED) -> BlockGenerator:
    """Create a block generator seeded with ``seed`` (reduced to 32 bits)."""
    return BlockGenerator(LinearGenerator(state=seed % LCG_MODULUS))


def current(gen: BlockGenerator) -> Piece:
    """Return the current piece without advancing."""
    return gen.value


def advance(gen: BlockGenerator) -> BlockGenerator:
    """Return the generator one position further along."""
    return gen.next
