"""Spatial hashing of particles into grid cells for neighbour search."""

from __future__ import annotations

from collections.abc import Sequence

from .particle import Particle
from .vector import Int2

TABLE_SIZE = 262144
NO_PARTICLE = 0xFFFFFFFF

_MASK32 = 0xFFFFFFFF


def cell_hash(cell: Int2) -> int:
    """Hash of a grid cell, in the range [0, TABLE_SIZE)."""
    hx = (cell.x * 73856093) & _MASK32
    hy = (cell.y * 19349663) & _MASK32
    return (hx ^ hy) % TABLE_SIZE


def cell_of(particle: Particle, h: float) -> Int2:
    """The grid cell of side ``h`` that holds the particle."""
    return Int2(int(particle.position.x / h), int(particle.position.y / h))


def build_neighbour_table(particles: Sequence[Particle]) -> dict[int, int]:
    """Map each cell hash to the index where its run of particles begins.

    The particles are expected to be sorted by their ``hash``; a hash that
    appears in several separate runs maps to the start of the last one.
    Hashes with no particle are absent (look them up with NO_PARTICLE as
    the default).
    """
    table: dict[int, int] = {}
    previous = NO_PARTICLE
    for index, particle in enumerate(particles):
        if particle.hash != previous:
            table[particle.hash] = index
            previous = particle.hash
    return table