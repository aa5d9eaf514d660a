"""
Sampling interface shared by noise kernels and modules.

Every sampler in PyNoisey, leaf kernel or combinator, exposes the same
``sample_2d(x, y) -> float`` method, which is what allows modules to be
nested arbitrarily and what external rasterizers consume.
"""

from typing import Protocol, Tuple, runtime_checkable

from .. import constants as cte


@runtime_checkable
class Sampler(Protocol):
    """Anything that evaluates a scalar noise field at a 2D coordinate."""

    def sample_2d(self, x: float, y: float) -> float:
        ...


def permutation_table(rng) -> Tuple[int, ...]:
    """
    Draw a permutation table from a RandomSource.

    The PERM_SIZE entries are repeated once so that the lattice hash
    ``perm[perm[i] + j]`` with ``i, j <= PERM_SIZE`` never leaves the table.

    Args:
        rng: RandomSource providing ``permutation(n)``

    Returns:
        tuple of 2 * PERM_SIZE ints

    Raises:
        ValueError: If the source does not return a permutation of
                    range(PERM_SIZE)
    """
    perm = [int(v) for v in rng.permutation(cte.PERM_SIZE)]
    if sorted(perm) != list(range(cte.PERM_SIZE)):
        raise ValueError(
            f"RandomSource.permutation({cte.PERM_SIZE}) must return a permutation "
            f"of range({cte.PERM_SIZE})"
        )
    return tuple(perm + perm)


def require_sampler(obj, role: str):
    """Raise TypeError unless obj implements the sampling interface."""
    if not isinstance(obj, Sampler):
        raise TypeError(f"{role} must provide sample_2d(x, y), got {type(obj).__name__}")
    return obj
