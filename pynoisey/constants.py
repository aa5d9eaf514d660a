"""
Constants shared across PyNoisey.

Kernel constants, permutation table sizes and the type names used by the
graph configuration live here so that samplers, combinators and the graph
builder agree on a single definition.
"""

import math

# Permutation tables hold PERM_SIZE entries and are stored twice over so that
# lattice hashing never needs to wrap an index.
PERM_SIZE = 256
PERM_MASK = PERM_SIZE - 1

# Perlin gradients are unit vectors; the largest reachable 2D value is
# sqrt(0.5), so this factor maps the output onto [-1, 1].
PERLIN_SCALE = math.sqrt(2.0)

# Simplex skew/unskew factors for 2D
SIMPLEX_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
SIMPLEX_G2 = (3.0 - math.sqrt(3.0)) / 6.0

# Squared kernel radius of a simplex corner contribution
SIMPLEX_RADIUS_SQ = 0.5

# Maps the summed corner contributions into [-1, 1]
SIMPLEX_SCALE = 70.0

# Fixed simplex gradient directions (edge midpoints of a cube, projected to 2D)
SIMPLEX_GRADIENTS = (
    (1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),
    (1.0, 0.0), (-1.0, 0.0), (1.0, 0.0), (-1.0, 0.0),
    (0.0, 1.0), (0.0, -1.0), (0.0, 1.0), (0.0, -1.0),
)

# Seed used when a caller asks for a default random source without one
DEFAULT_SEED = 1337

# Source type names accepted in graph configuration
SOURCE_PERLIN = "perlin"
SOURCE_OPENSIMPLEX = "opensimplex"

# Generator type names accepted in graph configuration
GENERATOR_FRACTAL_SUM = "fractalSum"
GENERATOR_SELECT = "select"
GENERATOR_SCALE = "scale"

# Older configuration files name the generator types after their 2D modules
GENERATOR_ALIASES = {
    "fBm2d": GENERATOR_FRACTAL_SUM,
    "select2d": GENERATOR_SELECT,
    "scale2d": GENERATOR_SCALE,
}
