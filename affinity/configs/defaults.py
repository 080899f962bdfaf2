"""
Default configuration values for affinity scoring.

The importance table maps each named importance level to the weight a
question contributes to a directional match ratio. It is exposed as a
read-only mapping; callers override it by passing their own mapping.
"""

from types import MappingProxyType

DEFAULT_IMPORTANCE = MappingProxyType({
    "irrelevant": 0,
    "a little important": 1,
    "somewhat important": 10,
    "very important": 50,
    "mandatory": 250,
})

# Significant digits used when extracting the n-th root of the ratio product
ROOT_PRECISION = 50

DEFAULT_QUANTILES = (0.1, 0.25, 0.5, 0.75, 0.9)
DEFAULT_SYMMETRY_TOLERANCE = 1e-9
