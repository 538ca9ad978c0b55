"""Grid node of the staggered Navier-Stokes scheme."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A velocity node holding the time history and sweep coefficients."""

    x: float
    y: float
    node_id: int
    nt: int
    dt: float
    dtau: float
    is_boundary: bool = False

    u: list[float] = field(init=False)
    v: list[float] = field(init=False)
    fi_x: list[float] = field(init=False)
    fi_y: list[float] = field(init=False)

    u_k: float = field(default=0.0, init=False)
    xu: float = field(default=0.0, init=False)
    v_k: float = field(default=0.0, init=False)
    xv: float = field(default=0.0, init=False)

    vol: float = field(default=0.0, init=False)
    const_c: float = field(init=False)
    integral_u: float = field(default=0.0, init=False)
    integral_v: float = field(default=0.0, init=False)

    aux: float = field(default=0.0, init=False)
    cux: float = field(default=0.0, init=False)
    bux: float = field(default=0.0, init=False)
    fux: float = field(default=0.0, init=False)
    avx: float = field(default=0.0, init=False)
    cvx: float = field(default=0.0, init=False)
    bvx: float = field(default=0.0, init=False)
    fvx: float = field(default=0.0, init=False)

    auy: float = field(default=0.0, init=False)
    cuy: float = field(default=0.0, init=False)
    buy: float = field(default=0.0, init=False)
    fuy: float = field(default=0.0, init=False)
    avy: float = field(default=0.0, init=False)
    cvy: float = field(default=0.0, init=False)
    bvy: float = field(default=0.0, init=False)
    fvy: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.const_c = 1 / (2 * self.dt) + 1 / self.dtau
        self.u = [0.0] * self.nt
        self.v = [0.0] * self.nt
        self.fi_x = [0.0] * self.nt
        self.fi_y = [0.0] * self.nt

    def reset(self, n: int) -> None:
        """Clear integrals and sweep coefficients before a new iteration."""
        self.integral_u = 0.0
        self.integral_v = 0.0
        for name in ("ux", "vx", "uy", "vy"):
            setattr(self, "a" + name, 0.0)
            setattr(self, "b" + name, 0.0)
            setattr(self, "f" + name, 0.0)
            setattr(self, "c" + name, self.const_c)

    def update_velocities(self, converged: bool, n: int) -> None:
        """Store the iterate at step ``n`` if converged, else apply the correction."""
        if converged:
            self.u[n] = self.u_k
            self.v[n] = self.v_k
        else:
            self.u_k += self.xu
            self.v_k += self.xv

    def evaluate_xi(self, dtau: float, dt: float, n: int) -> None:
        """Compute the explicit residual corrections for time step ``n``."""
        if not 1 <= n < self.nt:
            raise IndexError(f"time step {n} out of range 1..{self.nt - 1}")
        if self.is_boundary:
            self.xu = 0.0
            self.xv = 0.0
        else:
            self.xu = dtau * (-(self.u_k - self.u[n - 1]) / dt + self.integral_u / self.vol)
            self.xv = dtau * (-(self.v_k - self.v[n - 1]) / dt + self.integral_v / self.vol)
        self.fux += self.xu / dtau
        self.fvx += self.xv / dtau

    def abs_velocity(self, n: int) -> float:
        """Speed at time step ``n``."""
        return math.hypot(self.u[n], self.v[n])