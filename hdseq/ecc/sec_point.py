#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC 1 compressed public keys.

BIP32 serializes points only in compressed form (serP):
33 bytes, i.e. the 0x02/0x03 prefix for even/odd y,
followed by the 32 bytes x-coordinate.
"""

from hdseq.alias import Octets, Point
from hdseq.ecc.curve import INF, is_on_curve, is_valid_scalar, mult, y_from_x
from hdseq.exceptions import HDSeqValueError
from hdseq.utils import bytes_from_octets

PUB_KEY_SIZE = 33


def bytes_from_point(Q: Point) -> bytes:
    "Return the 33 bytes compressed encoding of a curve point."

    if Q[1] == INF[1]:
        raise HDSeqValueError("no bytes representation for infinity point")
    if not is_on_curve(Q):
        raise HDSeqValueError(f"point not on curve: ({hex(Q[0])}, {hex(Q[1])})")
    prefix = b"\x03" if Q[1] & 1 else b"\x02"
    return prefix + Q[0].to_bytes(32, byteorder="big", signed=False)


def point_from_pub_key(pub_key: Octets) -> Point:
    "Return the curve point of a 33 bytes compressed public key."

    pub_key = bytes_from_octets(pub_key)
    if len(pub_key) != PUB_KEY_SIZE:
        err_msg = "invalid public key length: "
        err_msg += f"{len(pub_key)} bytes instead of {PUB_KEY_SIZE}"
        raise HDSeqValueError(err_msg)
    if pub_key[0] not in (0x02, 0x03):
        err_msg = "invalid public key prefix not in (0x02, 0x03): "
        err_msg += f"0x{pub_key[:1].hex()}"
        raise HDSeqValueError(err_msg)

    x = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
    return x, y_from_x(x, pub_key[0] == 0x03)


def pub_key_from_prv_key(prv_key: int) -> bytes:
    "Return the compressed public key of a private key, i.e. serP(prv_key*G)."

    if not is_valid_scalar(prv_key):
        raise HDSeqValueError("private key not in 1..n-1")
    return bytes_from_point(mult(prv_key))
