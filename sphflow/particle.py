"""Particles, rigid blocks of particles and the rectangular domain."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import Float2


@dataclass
class Geometry:
    """A rectangular domain spanning [0, L] x [0, H]."""

    L: float = 1.0
    H: float = 1.0

    @property
    def lower(self) -> tuple[float, float]:
        """Lower corner of the domain."""
        return (0.0, 0.0)

    @property
    def upper(self) -> tuple[float, float]:
        """Upper corner of the domain."""
        return (self.L, self.H)

    def center(self) -> Float2:
        """Centre point of the domain."""
        return Float2(self.L / 2, self.H / 2)


@dataclass(eq=False)
class Particle:
    """A smoothed-particle-hydrodynamics particle."""

    position: Float2 = field(default_factory=Float2)
    velocity: Float2 = field(default_factory=Float2)
    radius: float = 0.0
    mid_velocity: Float2 = field(default_factory=Float2)
    density: float = 0.0
    pressure: float = 0.0
    force: Float2 = field(default_factory=Float2)
    hash: int = 0

    def reset_force(self) -> None:
        """Clear the accumulated force."""
        self.force = Float2(0.0, 0.0)


class Body:
    """A rectangular block of equally spaced particles."""

    shrink = 0.8

    def __init__(
        self,
        m: float,
        rho: float,
        lx: float,
        ly: float,
        pos: Float2,
        vel: Float2,
    ) -> None:
        self.particle_radius = math.sqrt(m / (math.pi * rho))
        self.particles: list[Particle] = []
        diameter = 2 * self.particle_radius
        self.create_block(int(lx / diameter), int(ly / diameter), pos, vel)

    def create_block(self, nx: int, ny: int, pos: Float2, vel: Float2) -> None:
        """Append an ``nx`` by ``ny`` grid of particles whose corner is ``pos``."""
        r = self.particle_radius
        for j in range(ny):
            for i in range(nx):
                self.particles.append(
                    Particle(
                        position=Float2(pos.x + r + i * 2 * r, pos.y + r + j * 2 * r),
                        velocity=Float2(vel.x, vel.y),
                        radius=self.shrink * r,
                    )
                )