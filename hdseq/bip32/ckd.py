#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 child key derivation: CKDpriv and CKDpub.

A single derivation step computes

    I = HMAC-SHA512(parent_chain_code, msg)

where msg is

- 0x00 || ser256(k) || ser32(index) for hardened private derivation,
- serP(K) || ser32(index) otherwise,

and splits I into IL (child key tweak) and IR (child chain code).

With probability lower than 2^-127 the candidate is invalid
(IL >= n, zero child private key, or child public key at infinity):
the single step then raises InvalidChildKeyError and
ckd_prv/ckd_pub proceed with the next index, as BIP32 prescribes.
The number of attempts is bounded by MAX_CKD_ATTEMPTS and
the retry never crosses the hardened boundary.
"""

import logging
from typing import Callable, NamedTuple, Optional, Union

from hdseq.bip32.der_path import MAX_INDEX, assert_valid_index, is_hardened
from hdseq.ecc.curve import N, add, is_valid_scalar, mult, scalar_add_mod
from hdseq.ecc.sec_point import (
    bytes_from_point,
    point_from_pub_key,
    pub_key_from_prv_key,
)
from hdseq.exceptions import (
    DerivationError,
    HardenedDerivationError,
    HDSeqValueError,
    InvalidChildKeyError,
)
from hdseq.hashes import hmac_sha512
from hdseq.secret import SecretBuffer

logger = logging.getLogger(__name__)

MAX_CKD_ATTEMPTS = 16

BytesLike = Union[bytes, bytearray, memoryview]


class ChildKey(NamedTuple):
    # 32 bytes private key or 33 bytes compressed public key
    key: bytes
    chain_code: bytes
    # the index actually used, after any retry
    index: int


def _assert_valid_chain_code(chain_code: BytesLike) -> None:
    if len(chain_code) != 32:
        err_msg = "invalid chain code length: "
        err_msg += f"{len(chain_code)} bytes instead of 32"
        raise HDSeqValueError(err_msg)


def _ckd_prv_step(
    prv_key: BytesLike,
    chain_code: BytesLike,
    index: int,
    pub_key: Optional[bytes] = None,
) -> ChildKey:
    "Single CKDpriv step, raising InvalidChildKeyError on invalid candidate."

    with SecretBuffer(37) as msg, SecretBuffer(prv_key) as k_bytes:
        k = int.from_bytes(k_bytes, byteorder="big", signed=False)
        if is_hardened(index):
            msg[1:33] = k_bytes
        else:
            msg[:33] = pub_key_from_prv_key(k) if pub_key is None else pub_key
        msg[33:] = index.to_bytes(4, byteorder="big", signed=False)

        with SecretBuffer(hmac_sha512(chain_code, msg)) as h, memoryview(h) as view:
            il = int.from_bytes(view[:32], byteorder="big", signed=False)
            child_chain_code = bytes(view[32:])

        if il >= N:
            raise InvalidChildKeyError(index, "IL not in 0..n-1")
        child = scalar_add_mod(il, k)
        if child == 0:
            raise InvalidChildKeyError(index, "zero private key")
        return ChildKey(
            child.to_bytes(32, byteorder="big", signed=False), child_chain_code, index
        )


def _ckd_pub_step(pub_key: BytesLike, chain_code: BytesLike, index: int) -> ChildKey:
    "Single CKDpub step, raising InvalidChildKeyError on invalid candidate."

    if is_hardened(index):
        raise HardenedDerivationError(
            f"hardened derivation from public key: {hex(index)}"
        )

    K = point_from_pub_key(pub_key)
    msg = bytes(pub_key) + index.to_bytes(4, byteorder="big", signed=False)
    with SecretBuffer(hmac_sha512(chain_code, msg)) as h, memoryview(h) as view:
        il = int.from_bytes(view[:32], byteorder="big", signed=False)
        child_chain_code = bytes(view[32:])

    if il >= N:
        raise InvalidChildKeyError(index, "IL not in 0..n-1")
    Q = add(mult(il), K)
    if Q[1] == 0:
        raise InvalidChildKeyError(index, "infinity point")
    return ChildKey(bytes_from_point(Q), child_chain_code, index)


def _ckd_with_retry(step: Callable[[int], ChildKey], index: int) -> ChildKey:

    hardened = is_hardened(index)
    for _ in range(MAX_CKD_ATTEMPTS):
        try:
            return step(index)
        except InvalidChildKeyError as e:
            logger.debug("%s, proceeding with the next index", e)
            index += 1
            if index > MAX_INDEX or is_hardened(index) != hardened:
                raise DerivationError(
                    f"index overflow while retrying: {hex(index)}"
                ) from e

    raise DerivationError(f"no valid child key in {MAX_CKD_ATTEMPTS} attempts")


def ckd_prv(
    prv_key: BytesLike,
    chain_code: BytesLike,
    index: int,
    pub_key: Optional[bytes] = None,
) -> ChildKey:
    """Return the child private key of a private key, i.e. CKDpriv.

    prv_key is the 32 bytes parent private key, possibly in a
    bytearray the caller wipes afterwards.
    For non-hardened index, the parent compressed public key can be
    provided, avoiding its computation at each call
    when many children of the same parent are derived.
    """

    if len(prv_key) != 32:
        err_msg = "invalid private key length: "
        err_msg += f"{len(prv_key)} bytes instead of 32"
        raise HDSeqValueError(err_msg)
    if not is_valid_scalar(int.from_bytes(prv_key, byteorder="big", signed=False)):
        raise HDSeqValueError("private key not in 1..n-1")
    _assert_valid_chain_code(chain_code)
    chain_code = bytes(chain_code)
    assert_valid_index(index)
    if pub_key is not None and len(pub_key) != 33:
        err_msg = "invalid public key length: "
        err_msg += f"{len(pub_key)} bytes instead of 33"
        raise HDSeqValueError(err_msg)

    return _ckd_with_retry(
        lambda i: _ckd_prv_step(prv_key, chain_code, i, pub_key), index
    )


def ckd_pub(pub_key: BytesLike, chain_code: BytesLike, index: int) -> ChildKey:
    """Return the child public key of a public key, i.e. CKDpub.

    Hardened index is not allowed: HardenedDerivationError is raised.
    """

    if len(pub_key) != 33:
        err_msg = "invalid public key length: "
        err_msg += f"{len(pub_key)} bytes instead of 33"
        raise HDSeqValueError(err_msg)
    _assert_valid_chain_code(chain_code)
    chain_code = bytes(chain_code)
    pub_key = bytes(pub_key)
    assert_valid_index(index)
    if is_hardened(index):
        raise HardenedDerivationError(
            f"hardened derivation from public key: {hex(index)}"
        )

    return _ckd_with_retry(lambda i: _ckd_pub_step(pub_key, chain_code, i), index)
