#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58Check encoding of extended keys.

Base58 leaves out 0 (zero), O (capital o), I (capital i),
and l (lower case L), so that the encoded keys can be read aloud;
each leading zero byte is encoded as a leading '1'.

Base58Check appends the first four bytes of hash256(payload)
before encoding, and verifies them when decoding.
"""

from typing import Dict, Optional

from hdseq.alias import Octets, String
from hdseq.exceptions import HDSeqValueError
from hdseq.hashes import hash256
from hdseq.utils import bytes_from_octets

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_DIGITS: Dict[str, int] = {char: digit for digit, char in enumerate(ALPHABET)}

CHECKSUM_SIZE = 4


def encode(data: bytes) -> str:
    "Return the plain Base58 encoding of data (no checksum)."

    n_zeros = len(data) - len(data.lstrip(b"\x00"))
    num = int.from_bytes(data, byteorder="big", signed=False)
    chars = []
    while num:
        num, digit = divmod(num, len(ALPHABET))
        chars.append(ALPHABET[digit])
    return ALPHABET[0] * n_zeros + "".join(reversed(chars))


def decode(text: str) -> bytes:
    "Return the bytes of a plain Base58 string (no checksum)."

    num = 0
    for char in text:
        try:
            num = num * len(ALPHABET) + _DIGITS[char]
        except KeyError as e:
            raise HDSeqValueError(f"invalid base58 character: {char!r}") from e
    n_ones = len(text) - len(text.lstrip(ALPHABET[0]))
    size = (num.bit_length() + 7) // 8
    return b"\x00" * n_ones + num.to_bytes(size, byteorder="big", signed=False)


def b58encode(payload: Octets) -> str:
    "Return the Base58Check string of payload."

    payload = bytes_from_octets(payload)
    return encode(payload + hash256(payload)[:CHECKSUM_SIZE])


def b58decode(text: String, out_size: Optional[int] = None) -> bytes:
    """Return the payload of a Base58Check string.

    The checksum is verified and, if out_size is given,
    so is the payload size.
    """

    if isinstance(text, bytes):
        text = text.decode("ascii")
    data = decode(text)

    if len(data) < CHECKSUM_SIZE:
        raise HDSeqValueError(f"invalid base58 decoded size: {len(data)} bytes")
    payload, checksum = data[:-CHECKSUM_SIZE], data[-CHECKSUM_SIZE:]
    expected = hash256(payload)[:CHECKSUM_SIZE]
    if checksum != expected:
        err_msg = f"invalid checksum: 0x{checksum.hex()} instead of 0x{expected.hex()}"
        raise HDSeqValueError(err_msg)

    if out_size is not None and len(payload) != out_size:
        err_msg = f"invalid decoded size: {len(payload)} bytes instead of {out_size}"
        raise HDSeqValueError(err_msg)
    return payload
