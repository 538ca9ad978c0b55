# sphflow

A small two-dimensional smoothed particle hydrodynamics (SPH) solver,
together with a few building blocks for grid-based flow schemes and
interactive viewers. Pure Python, no dependencies.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Modules

- `sphflow.vector` – `Float2` and `Int2`, immutable 2-D vector
  dataclasses. `Float2` supports `+`, `-`, unary `-`, multiplication and
  division by a scalar, indexing and iteration, plus `norm()`, `dot()`,
  `min_val()`, `max_val()` and `replace(index, value)`.
- `sphflow.particle` – `Geometry`, a rectangle spanning `[0, L] x [0, H]`
  (`lower`, `upper`, `center()`); `Particle`, holding position, velocity,
  radius, density, pressure, force and its spatial hash
  (`reset_force()`); and `Body(m, rho, lx, ly, pos, vel)`, which fills an
  `lx` by `ly` rectangle with particles of radius `sqrt(m / (pi * rho))`
  through `create_block(nx, ny, pos, vel)`.
- `sphflow.neighbours` – spatial hashing for neighbour search:
  `cell_of(particle, h)`, `cell_hash(cell)` (a value below `TABLE_SIZE`)
  and `build_neighbour_table(particles)`, which expects particles sorted
  by hash and returns a dict from each hash to the index where its run of
  particles begins. Missing hashes are looked up with `NO_PARTICLE` as
  the default.
- `sphflow.solver` – the kernels `default_kernel`, `gradient_kernel` and
  `laplacian_kernel`, and `Solver(length, height, n, stiffness, density,
  viscosity, kernel_particles, dt, g)`. The domain size is truncated to
  whole units; the solver starts with one block of fluid, 1 wide and
  2 high, at the origin, with particle mass `density / n`. Each call to
  `time_step()` evaluates densities, pressures and forces, integrates
  every particle, records its speed in `velocities`, and puts particles
  that reach a wall back onto it with the normal velocity removed.
  `is_collision`, `closest_point` and `squared_distance_outside` expose
  the wall tests; `particles` lists all particles.
- `sphflow.colormap` – `value_color(x, striped=False)` maps a value in
  `[0, 1]` onto a seven-colour rainbow (`RAINBOW7`) and returns a
  `Color(a, r, g, b)` with 8-bit components; values outside the range are
  clamped to 0.001 and 0.999. Named RGB constants such as `RED` and
  `LIGHT_BLUE` are also provided.
- `sphflow.node` – `Node(x, y, node_id, nt, dt, dtau)`, a velocity node
  for an implicit pseudo-time-stepping Navier–Stokes scheme, holding the
  velocity history `u`, `v` and the sweep coefficients (`reset`,
  `update_velocities`, `evaluate_xi`, `abs_velocity`).
- `sphflow.tridiagonal` – `thomas(a, c, b, f)`, the Thomas algorithm for
  `a[i]*x[i-1] + c[i]*x[i] + b[i]*x[i+1] = f[i]`. It raises `ValueError`
  for empty or mismatched inputs and `ZeroDivisionError` on a zero pivot.
- `sphflow.controller` – `MoveLookController`, a camera controller fed
  with pointer and key events (`press_pointer`, `move_pointer`,
  `release_pointer`, `key_down`, `key_up` with `Key` values or their
  names, `update`, `look_target`). Its state is in `position`, `pitch`
  and `yaw`.

## Example

```python
from sphflow.solver import Solver

solver = Solver(4, 4, 1000, 1.0, 100.0, 3.5, 20, 0.01, 1.0)
for _ in range(100):
    solver.time_step()

fastest = max(solver.velocities)
print(f"{len(solver.particles)} particles, fastest at {fastest:.3f}")
```

Solving a tridiagonal system:

```python
from sphflow.tridiagonal import thomas

x = thomas([0, 1, 1], [-4, -4, -4], [1, 1, 0], [5, 5, 5])
```

## What it does not do

- It draws nothing: there is no window, canvas or renderer. Particle
  positions and `value_color` give what a viewer would need, and
  `MoveLookController` only computes camera position and direction from
  the events it is given.
- There is no complete grid-based Navier–Stokes solver: `Node` and
  `thomas` are building blocks only, with no cells, boundary conditions
  or solution loop around them.
- There is no command-line program; the package is used as a library.