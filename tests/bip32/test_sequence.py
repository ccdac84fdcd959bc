#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdseq.bip32.sequence` module."

import pytest

from hdseq.bip32.derive import _derive
from hdseq.bip32.der_path import HARDENED
from hdseq.bip32.master import MASTER_PUB_KEY_NONE, master_pub_key_from_seed
from hdseq.bip32.sequence import (
    Chain,
    prv_key_from_seed,
    prv_keys_from_seed,
    pub_key_from_master_pub_key,
)
from hdseq.ecc.sec_point import pub_key_from_prv_key
from hdseq.exceptions import HDSeqValueError

# BIP32 test vector 1
SEED = "000102030405060708090a0b0c0d0e0f"
M_XPRV = (
    "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJ"
    "xWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
)


def _pub_key(prv_key: bytes) -> bytes:
    return pub_key_from_prv_key(int.from_bytes(prv_key, byteorder="big", signed=False))


def test_prv_key_from_seed() -> None:
    for chain in (Chain.EXTERNAL, Chain.INTERNAL):
        for index in (0, 1, 2, HARDENED - 1):
            prv_key = prv_key_from_seed(SEED, chain, index)
            assert len(prv_key) == 32
            xkey = _derive(M_XPRV, [HARDENED, chain, index])
            assert prv_key == xkey.key[1:]

    # plain int chain, bytes seed
    assert prv_key_from_seed(bytes.fromhex(SEED), 1, 5) == prv_key_from_seed(
        SEED, Chain.INTERNAL, 5
    )

    # account
    xkey = _derive(M_XPRV, "m/3h/0/9")
    assert prv_key_from_seed(SEED, Chain.EXTERNAL, 9, account=3) == xkey.key[1:]


def test_pub_key_from_master_pub_key() -> None:
    mpk = master_pub_key_from_seed(SEED)
    for chain in (Chain.EXTERNAL, Chain.INTERNAL):
        for index in (0, 1, 2, HARDENED - 1):
            pub_key = pub_key_from_master_pub_key(mpk, chain, index)
            assert len(pub_key) == 33
            assert pub_key[0] in (2, 3)
            assert pub_key == _pub_key(prv_key_from_seed(SEED, chain, index))

    mpk = master_pub_key_from_seed(SEED, 3)
    pub_key = pub_key_from_master_pub_key(mpk, Chain.INTERNAL, 4)
    assert pub_key == _pub_key(prv_key_from_seed(SEED, Chain.INTERNAL, 4, 3))


def test_distinct_keys() -> None:
    mpk = master_pub_key_from_seed(SEED)
    assert pub_key_from_master_pub_key(mpk, 0, 0) != pub_key_from_master_pub_key(
        mpk, 0, 1
    )
    assert pub_key_from_master_pub_key(mpk, 0, 0) != pub_key_from_master_pub_key(
        mpk, 1, 0
    )
    assert prv_key_from_seed(SEED, 0, 0) != prv_key_from_seed(SEED, 0, 1)

    xkey0 = _derive(M_XPRV, "m/0h/0/0")
    xkey1 = _derive(M_XPRV, "m/0h/0/1")
    assert xkey0.chain_code != xkey1.chain_code
    assert xkey0.key != xkey1.key


def test_prv_keys_from_seed() -> None:
    indexes = [5, 0, 3, 1, 3]
    expected = [prv_key_from_seed(SEED, Chain.INTERNAL, i) for i in indexes]
    assert prv_keys_from_seed(SEED, Chain.INTERNAL, indexes) == expected
    assert prv_keys_from_seed(SEED, 1, iter(indexes), max_workers=1) == expected
    assert prv_keys_from_seed(SEED, 1, (i for i in indexes), max_workers=4) == expected

    assert prv_keys_from_seed(SEED, Chain.EXTERNAL, []) == []


def test_no_collisions() -> None:
    n_keys = 10_000
    prv_keys = prv_keys_from_seed(SEED, Chain.EXTERNAL, range(n_keys))
    assert len(prv_keys) == n_keys
    assert len(set(prv_keys)) == n_keys
    assert all(len(prv_key) == 32 for prv_key in prv_keys)

    assert prv_keys[0] == prv_key_from_seed(SEED, Chain.EXTERNAL, 0)
    assert prv_keys[-1] == prv_key_from_seed(SEED, Chain.EXTERNAL, n_keys - 1)


def test_exceptions() -> None:
    for seed in (b"", "", None):
        with pytest.raises(HDSeqValueError, match="empty seed"):
            prv_key_from_seed(seed, Chain.EXTERNAL, 0)  # type: ignore
        with pytest.raises(HDSeqValueError, match="empty seed"):
            prv_keys_from_seed(seed, Chain.EXTERNAL, [0])  # type: ignore

    for chain in (2, -1, HARDENED):
        with pytest.raises(HDSeqValueError, match="invalid chain: "):
            prv_key_from_seed(SEED, chain, 0)
        with pytest.raises(HDSeqValueError, match="invalid chain: "):
            prv_keys_from_seed(SEED, chain, [0])

    mpk = master_pub_key_from_seed(SEED)
    # hardened indexes are rejected, not masked
    for index in (HARDENED, HARDENED + 1, 0xFFFFFFFF, -1):
        with pytest.raises(HDSeqValueError, match="invalid index: "):
            prv_key_from_seed(SEED, Chain.EXTERNAL, index)
        with pytest.raises(HDSeqValueError, match="invalid index: "):
            prv_keys_from_seed(SEED, Chain.EXTERNAL, [0, index])
        with pytest.raises(HDSeqValueError, match="invalid index: "):
            pub_key_from_master_pub_key(mpk, Chain.EXTERNAL, index)

    with pytest.raises(HDSeqValueError, match="invalid chain: "):
        pub_key_from_master_pub_key(mpk, 2, 0)

    with pytest.raises(HDSeqValueError, match="none master public key"):
        pub_key_from_master_pub_key(MASTER_PUB_KEY_NONE, Chain.EXTERNAL, 0)
    mpk = master_pub_key_from_seed(b"")
    with pytest.raises(HDSeqValueError, match="none master public key"):
        pub_key_from_master_pub_key(mpk, Chain.EXTERNAL, 0)
