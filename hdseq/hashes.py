#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib
import hmac
from typing import Union

from Crypto.Hash import RIPEMD160

from hdseq.alias import Octets
from hdseq.utils import bytes_from_octets

# With OpenSSL 3.x hashlib may not provide ripemd160
# (it is confined to the legacy provider): pycryptodome always does.


def ripemd160(octets: Octets) -> bytes:
    """Return the RIPEMD160(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return RIPEMD160.new(octets).digest()


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash160(octets: Octets) -> bytes:
    """Return the HASH160=RIPEMD160(SHA256) of the input octet sequence."""
    return ripemd160(sha256(octets))


def hash256(octets: Octets) -> bytes:
    """Return the SHA256(SHA256(*)) of the input octet sequence."""
    return sha256(sha256(octets))


def hmac_sha512(
    key: Union[bytes, bytearray], msg: Union[bytes, bytearray, memoryview]
) -> bytes:
    """Return the 64 bytes HMAC-SHA512 of msg keyed by key.

    Both key and msg are taken as they are (no hex-string conversion)
    as they usually are secret buffers.
    """
    return hmac.new(key, msg, hashlib.sha512).digest()


def fingerprint(pub_key: Octets) -> bytes:
    "Return the 4 bytes BIP32 fingerprint of a SEC serialized public key."
    return hash160(pub_key)[:4]
