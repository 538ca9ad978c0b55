"""Two-dimensional SPH fluid solver with grid-node, tridiagonal, colour-scale and camera helpers."""

__version__ = "0.1.0"

__all__ = [
    "colormap",
    "controller",
    "neighbours",
    "node",
    "particle",
    "solver",
    "tridiagonal",
    "vector",
]