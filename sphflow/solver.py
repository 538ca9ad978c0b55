"""Smoothed-particle-hydrodynamics solver for a block of fluid in a box."""

from __future__ import annotations

import math
from collections.abc import Iterator

from .neighbours import NO_PARTICLE, build_neighbour_table, cell_hash, cell_of
from .particle import Body, Geometry, Particle
from .vector import Float2, Int2

GRAVITY = 1.0

_MIN_DISTANCE = 1e-7
_OFFSETS = (-1, 0, 1)


def default_kernel(r_vec: Float2, h: float) -> float:
    """Poly6-style smoothing kernel used for the density estimate."""
    r = r_vec.norm()
    if r <= h:
        return 4.0 / (math.pi * h**8) * (h * h - r * r) ** 3
    return 0.0


def gradient_kernel(r_vec: Float2, h: float, r: float) -> Float2:
    """Spiky-kernel gradient used for the pressure force."""
    if r <= h:
        return -30.0 / (math.pi * h**5) * (r_vec / r) * (h - r) ** 2
    return Float2(0.0, 0.0)


def laplacian_kernel(r_vec: Float2, h: float, r: float) -> float:
    """Viscosity-kernel Laplacian used for the viscous force."""
    if r <= h:
        return 40.0 / (math.pi * h**5) * (h - r)
    return 0.0


class Solver:
    """Explicit SPH integrator for particles confined to a rectangle."""

    def __init__(
        self,
        length: float = 1,
        height: float = 1,
        n: int = 1000,
        stiffness: float = 1.0,
        density: float = 100.0,
        viscosity: float = 3.5,
        kernel_particles: int = 20,
        dt: float = 0.01,
        g: float = GRAVITY,
    ) -> None:
        self.n = n
        self.stiffness = stiffness
        self.density = density
        self.viscosity = viscosity
        self.kernel_particles = kernel_particles
        self.dt = dt
        self.g = Float2(0.0, -g)
        self.velocities: list[float] = []
        self.counter = 0

        # The domain size is taken as whole units.
        self.area = Geometry(int(length), int(height))

        self.particle_mass = density / n
        self.particle_radius = math.sqrt(self.particle_mass / math.pi / density)
        self.support_radius = math.sqrt(
            kernel_particles * self.particle_mass / math.pi / density
        )
        self.smoothing = self.support_radius
        self.self_density = (
            self.particle_mass
            * (4.0 / (math.pi * self.smoothing**8))
            * self.smoothing**6
        )

        self.bodies = [
            Body(self.particle_mass, density, 1.0, 2.0, Float2(0.0, 0.0), Float2(0.0, 0.0))
        ]
        self._particles: list[Particle] = [
            particle for body in self.bodies for particle in body.particles
        ]
        self._init_mid_velocity()

    @property
    def particles(self) -> list[Particle]:
        """All particles, in the order of their last spatial sort."""
        return self._particles

    def _init_mid_velocity(self) -> None:
        table = self._evaluate_hashes()
        self._evaluate_forces(table)
        for particle in self._particles:
            particle.mid_velocity = -0.5 * self.dt * particle.force / particle.density

    def time_step(self) -> None:
        """Advance every particle by one time step."""
        table = self._evaluate_hashes()
        self.velocities.clear()
        self._evaluate_forces(table)

        for particle in self._particles:
            acceleration = particle.force / particle.density
            particle.velocity = particle.velocity + acceleration * self.dt
            particle.position = particle.position + particle.velocity * self.dt
            self.velocities.append(particle.velocity.norm())

            if self.is_collision(particle):
                contact = self.closest_point(particle)
                nx = ny = 0.0
                if contact.x == 0 or contact.x == self.area.L:
                    nx = -1.0 if contact.x == 0 else 1.0
                if contact.y == 0 or contact.y == self.area.H:
                    ny = -1.0 if contact.y == 0 else 1.0
                normal = Float2(nx, ny)
                particle.position = contact
                particle.velocity = (
                    particle.velocity - particle.velocity.dot(normal) * normal
                )
        self.counter += 1

    def is_collision(self, particle: Particle) -> bool:
        """Whether the particle touches or lies beyond the domain boundary."""
        return any(
            value <= low or value >= high
            for value, low, high in zip(particle.position, self.area.lower, self.area.upper)
        )

    def closest_point(self, particle: Particle) -> Float2:
        """The particle's position clamped to the domain."""
        coords = []
        for value, low, high in zip(particle.position, self.area.lower, self.area.upper):
            if value <= low:
                value = low
            if value >= high:
                value = high
            coords.append(value)
        return Float2(*coords)

    def squared_distance_outside(self, particle: Particle) -> float:
        """Squared distance from the particle to the domain; zero inside it."""
        total = 0.0
        for value, low, high in zip(particle.position, self.area.lower, self.area.upper):
            if value < low:
                total += (low - value) ** 2
            if value > high:
                total += (value - high) ** 2
        return total

    def _evaluate_hashes(self) -> dict[int, int]:
        for particle in self._particles:
            particle.hash = cell_hash(cell_of(particle, self.smoothing))
        self._particles.sort(key=lambda particle: particle.hash)
        return build_neighbour_table(self._particles)

    def _neighbours(
        self, index: int, particle: Particle, table: dict[int, int]
    ) -> Iterator[Particle]:
        cell = cell_of(particle, self.smoothing)
        count = len(self._particles)
        for dx in _OFFSETS:
            for dy in _OFFSETS:
                hashed = cell_hash(cell + Int2(dx, dy))
                start = table.get(hashed, NO_PARTICLE)
                if start == NO_PARTICLE:
                    continue
                for other_index in range(start, count):
                    if other_index == index:
                        continue
                    other = self._particles[other_index]
                    if other.hash != hashed:
                        break
                    yield other

    def _evaluate_forces(self, table: dict[int, int]) -> None:
        h = self.smoothing
        mass = self.particle_mass

        for index, particle in enumerate(self._particles):
            particle.reset_force()
            rho = sum(
                mass * default_kernel(particle.position - other.position, h)
                for other in self._neighbours(index, particle, table)
            )
            particle.density = self.self_density + rho
            particle.pressure = self.stiffness * (particle.density - self.density)

        for index, particle in enumerate(self._particles):
            f_pressure = Float2(0.0, 0.0)
            f_viscosity = Float2(0.0, 0.0)
            for other in self._neighbours(index, particle, table):
                offset = particle.position - other.position
                dist = offset.norm()
                if dist > _MIN_DISTANCE:
                    share = mass / other.density
                    f_pressure = f_pressure + (
                        -(particle.pressure + other.pressure) / 2
                        * share
                        * gradient_kernel(offset, h, dist)
                    )
                    f_viscosity = f_viscosity + (
                        self.viscosity
                        * (other.velocity - particle.velocity)
                        * share
                        * laplacian_kernel(other.position - particle.position, h, dist)
                    )
            particle.force = self.g * particle.density + f_pressure + f_viscosity