#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""secp256k1 group arithmetic.

secp256k1 is the curve y^2 = x^3 + 7 over the prime field F_P,
with generator G of prime order N (cofactor 1).

BIP32 only needs three operations of the group:
the scalar multiplication of a point (mostly G),
the addition of two points,
and the addition of two scalars modulo N.

Points are handled in affine coordinates at the interface,
while multiplication and addition are carried out in Jacobian
coordinates (X, Y, Z), with x = X/Z^2 and y = Y/Z^3,
to avoid a modular inversion at each step.
"""

from typing import Optional, Tuple

from hdseq.alias import Point
from hdseq.exceptions import HDSeqValueError

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)
B = 7

INF: Point = (0, 0)

_JacPoint = Tuple[int, int, int]
_INFJ: _JacPoint = (1, 1, 0)


def is_valid_scalar(k: int) -> bool:
    "Return True if k is a valid private key, i.e. in 1..N-1."
    return 0 < k < N


def scalar_add_mod(a: int, b: int) -> int:
    return (a + b) % N


def is_on_curve(Q: Point) -> bool:
    x, y = Q
    if y == 0:
        return False
    if not (0 <= x < P and 0 < y < P):
        return False
    return (y * y - x * x * x - B) % P == 0


def y_from_x(x: int, odd: bool) -> int:
    """Return the y-coordinate of the curve point with the given x.

    Of the two candidates y and P-y, the one with the requested parity.
    P = 3 mod 4, so a square root of c is c^((P+1)/4) if c is a square.
    """

    if not 0 <= x < P:
        raise HDSeqValueError(f"invalid x-coordinate: {hex(x)}")
    c = (x * x * x + B) % P
    y = pow(c, (P + 1) // 4, P)
    if y * y % P != c:
        raise HDSeqValueError(f"invalid x-coordinate: {hex(x)}")
    return P - y if (y & 1) != odd else y


def _jac_from_aff(Q: Point) -> _JacPoint:
    return _INFJ if Q[1] == 0 else (Q[0], Q[1], 1)


def _aff_from_jac(Q: _JacPoint) -> Point:
    X, Y, Z = Q
    if Z == 0:
        return INF
    z_inv = pow(Z, P - 2, P)
    z_inv2 = z_inv * z_inv % P
    return X * z_inv2 % P, Y * z_inv2 * z_inv % P


def _double_jac(Q: _JacPoint) -> _JacPoint:
    X, Y, Z = Q
    if Z == 0 or Y == 0:
        return _INFJ
    Y2 = Y * Y % P
    S = 4 * X * Y2 % P
    M = 3 * X * X % P
    X3 = (M * M - 2 * S) % P
    Y3 = (M * (S - X3) - 8 * Y2 * Y2) % P
    Z3 = 2 * Y * Z % P
    return X3, Y3, Z3


def _add_jac(Q1: _JacPoint, Q2: _JacPoint) -> _JacPoint:
    if Q1[2] == 0:
        return Q2
    if Q2[2] == 0:
        return Q1

    X1, Y1, Z1 = Q1
    X2, Y2, Z2 = Q2
    Z1Z1 = Z1 * Z1 % P
    Z2Z2 = Z2 * Z2 % P
    U1 = X1 * Z2Z2 % P
    U2 = X2 * Z1Z1 % P
    S1 = Y1 * Z2 * Z2Z2 % P
    S2 = Y2 * Z1 * Z1Z1 % P
    if U1 == U2:
        # same x: either Q1 == Q2 or Q1 == -Q2
        return _double_jac(Q1) if S1 == S2 else _INFJ

    H = (U2 - U1) % P
    R = (S2 - S1) % P
    H2 = H * H % P
    H3 = H * H2 % P
    U1H2 = U1 * H2 % P
    X3 = (R * R - H3 - 2 * U1H2) % P
    Y3 = (R * (U1H2 - X3) - S1 * H3) % P
    Z3 = H * Z1 * Z2 % P
    return X3, Y3, Z3


def add(Q1: Point, Q2: Point) -> Point:
    "Return the sum of two affine points."
    return _aff_from_jac(_add_jac(_jac_from_aff(Q1), _jac_from_aff(Q2)))


def mult(k: int, Q: Optional[Point] = None) -> Point:
    """Return the scalar multiplication k*Q, with Q defaulting to G.

    k is reduced modulo N; plain double-and-add,
    from the most significant bit of k.
    """

    if k < 0:
        raise HDSeqValueError(f"negative scalar: {hex(k)}")
    k %= N
    QJ = _jac_from_aff(G if Q is None else Q)
    R = _INFJ
    for bit in bin(k)[2:]:
        R = _double_jac(R)
        if bit == "1":
            R = _add_jac(R, QJ)
    return _aff_from_jac(R)
