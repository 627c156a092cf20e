"""Extended Greatest Common Divisor Utilities.

Provides the Extended Euclidean Algorithm for signed integers of any size, returning the GCD together with Bézout
coefficients. Also reports the two's-complement width a fixed-width port would need for the same operands.

Typical usage example:

    r = egcd(-21, 15)
    r.bezout_coeff_1 * -21 + r.bezout_coeff_2 * 15 == r.gcd
    signed_width(-21, 15)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from egcdutils.euclid import egcd
from egcdutils.euclid import ExtendedGCD
from egcdutils.euclid import signed_width

__version__ = "0.0.1"
__all__ = [
    "ExtendedGCD",
    "egcd",
    "signed_width",
]
