"""
Core math modules для CalcBigInt

Арифметика произвольной точности над limbs по основанию 10^9.
"""

# Limbs
from calcbigint.core.domain.limbs import (
    LIMB_BASE,
    LIMB_DIGITS,
    ZERO_MAGNITUDE,
    Ordering,
    compare_magnitudes,
    is_zero_magnitude,
    normalize_magnitude,
)

# Codec
from calcbigint.core.math.codec import InvalidFormat, format, parse

# Additive Engine
from calcbigint.core.math.additive import (
    add,
    add_magnitudes,
    subtract,
    subtract_magnitudes,
)

# Multiplicative Engine
from calcbigint.core.math.multiplicative import (
    multiply,
    multiply_magnitude_by_limb,
    multiply_magnitudes,
)

# Division Engine
from calcbigint.core.math.division import (
    DivisionByZero,
    DivisionStrategy,
    divmod,
    divmod_by_limb,
    divmod_magnitudes,
    quotient,
    remainder,
)

# GCD Engine
from calcbigint.core.math.gcd import gcd

__all__ = [
    # Limbs — Constants
    "LIMB_BASE",
    "LIMB_DIGITS",
    "ZERO_MAGNITUDE",
    # Limbs — Types
    "Ordering",
    # Limbs — Functions
    "compare_magnitudes",
    "is_zero_magnitude",
    "normalize_magnitude",
    # Codec
    "InvalidFormat",
    "format",
    "parse",
    # Additive Engine
    "add",
    "add_magnitudes",
    "subtract",
    "subtract_magnitudes",
    # Multiplicative Engine
    "multiply",
    "multiply_magnitude_by_limb",
    "multiply_magnitudes",
    # Division Engine — Exceptions
    "DivisionByZero",
    # Division Engine — Types
    "DivisionStrategy",
    # Division Engine — Functions
    "divmod",
    "divmod_by_limb",
    "divmod_magnitudes",
    "quotient",
    "remainder",
    # GCD Engine
    "gcd",
]
