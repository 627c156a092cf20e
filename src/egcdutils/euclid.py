"""Provides the Extended Euclidean Algorithm over arbitrary-width signed integers.

Computes the greatest common divisor of two integers along with a pair of Bézout coefficients, iteratively so that
operand size never translates into recursion depth. Meant as a building block for modular inverses, rational
simplification and the Chinese Remainder Theorem.

Typical usage example:

    g, s, t = egcd(21, 15)
    assert s * 21 + t * 15 == g
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing


class ExtendedGCD(typing.NamedTuple):
    """Result of `egcd`: the GCD and Bézout coefficients such that bezout_coeff_1*a + bezout_coeff_2*b = gcd."""
    gcd: int
    bezout_coeff_1: int
    bezout_coeff_2: int

    def verify(self, a: int, b: int) -> bool:
        """Checks this result against the operands it was computed for.

        Args:
            a: The first operand.
            b: The second operand.

        Returns:
            True if the Bézout identity holds and the GCD is non-negative, False otherwise.
        """
        return self.gcd >= 0 and self.bezout_coeff_1 * a + self.bezout_coeff_2 * b == self.gcd


def _signed_int(no: typing.Any, name: str) -> int:
    """Validate `no` as a Python int and normalise int subclasses to a plain int."""
    # bool subclasses int.
    if isinstance(no, bool) or not isinstance(no, int):
        raise TypeError(f"`{name}` must be a Python int, not {type(no).__name__}.")
    return int(no)


def _sign(no: int) -> int:
    return (no > 0) - (no < 0)


def _euclid_states(a: int, b: int) -> typing.Iterator[tuple[int, int, int, int, int, int]]:
    """Yields every (x, s, t, y, u, v) state of the recurrence, from the seed to the one with x = 0.

    Keeps a = s*x + t*y and b = u*x + v*y at each step. Operands must already be validated.
    """
    state = abs(a), _sign(a), 0, abs(b), 0, _sign(b)
    yield state
    while state[0] != 0:
        x, s, t, y, u, v = state
        q = y // x  # x, y >= 0, so flooring equals truncation here.
        state = y - q * x, u - q * s, v - q * t, x, s, t
        yield state


def egcd(a: int, b: int) -> ExtendedGCD:
    """Computes the Extended Greatest Common Divisor of two signed integers.

    Runs the iterative Extended Euclidean Algorithm on the absolute values, maintaining
    a = s*x + t*y and b = u*x + v*y throughout. The signs of the operands are folded into the seed coefficients, so
    the final coefficients hold for the original signed `a` and `b`.

    Args:
        a: The first signed integer. Must be a Python `int`; numpy and other `numbers.Integral` types are rejected.
        b: The second signed integer. Must be a Python `int`, and must not be zero if `a` is zero.

    Returns:
        An `ExtendedGCD` of (gcd, s, t) with s*a + t*b = gcd and gcd >= 0.
        Bézout coefficients are not unique; any identity-satisfying pair may be returned.

    Raises:
        TypeError: If `a` or `b` is not a Python `int` (bool, float and numpy integers included).
        ValueError: If both `a` and `b` are zero.
    """
    a = _signed_int(a, "a")
    b = _signed_int(b, "b")
    if a == 0 and b == 0:
        raise ValueError("`a` and `b` must not both be zero.")

    for _, _, _, y, u, v in _euclid_states(a, b):
        continue
    return ExtendedGCD(y, u, v)  # pylint: disable=undefined-loop-variable


def signed_width(a: int, b: int) -> int:
    """Computes the smallest two's-complement width holding every intermediate of `egcd(a, b)`.

    All working values of the algorithm stay within [-n, n] for n = max(|a|, |b|). Python integers cannot overflow,
    but a fixed-width port of `egcd` needs at least this many bits.

    Args:
        a: The first signed integer. Must be a Python `int`.
        b: The second signed integer. Must be a Python `int`.

    Returns:
        The bit width, sign bit included. At least 1.

    Raises:
        TypeError: If `a` or `b` is not a Python `int` (bool, float and numpy integers included).
    """
    n = max(abs(_signed_int(a, "a")), abs(_signed_int(b, "b")))
    return n.bit_length() + 1
