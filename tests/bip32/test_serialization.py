#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdseq.bip32.serialization` module."

import pytest

from hdseq.bip32.derive import derive, xpub_from_xprv
from hdseq.bip32.der_path import HARDENED
from hdseq.bip32.master import (
    MASTER_PUB_KEY_NONE,
    master_prv_key_from_seed,
    master_pub_key_from_seed,
)
from hdseq.bip32.serialization import (
    master_pub_key_from_xpub,
    write_xprv,
    write_xpub,
    xprv_from_seed,
    xpub_from_master_pub_key,
)
from hdseq.bip32.xkey import XKEY_B58_SIZE, BIP32KeyData
from hdseq.exceptions import HDSeqValueError

# BIP32 test vector 1
SEED = "000102030405060708090a0b0c0d0e0f"
M_XPRV = (
    "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJ"
    "xWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
)
M_XPUB = (
    "xpub661MyMwAqRbcFtXgS5sYJABqqG9YLmC4Q1Rdap9gSE8NqtwybGhePY2gZ29ESFjqJoCu1"
    "Rupje8YtGqsefD265TMg7usUDFdp6W1EGMcet8"
)
M0H_XPUB = (
    "xpub68Gmy5EdvgibQVfPdqkBBCHxA5htiqg55crXYuXoQRKfDBFA1WEjWgP6LHhwBZeNK1VTs"
    "fTFUHCdrfp1bgwQ9xv5ski8PX9rL2dZXvgGDnw"
)


def test_xprv_from_seed() -> None:
    assert xprv_from_seed(SEED) == M_XPRV
    assert xprv_from_seed(bytes.fromhex(SEED)) == M_XPRV
    assert xpub_from_xprv(xprv_from_seed(SEED)) == M_XPUB

    xkey = BIP32KeyData.b58decode(xprv_from_seed(SEED))
    assert xkey == master_prv_key_from_seed(SEED)
    assert xkey.depth == 0
    assert xkey.index == 0
    assert xkey.parent_fingerprint == b"\x00" * 4

    tprv = xprv_from_seed(SEED, "testnet")
    assert tprv.startswith("tprv")
    assert BIP32KeyData.b58decode(tprv).key == xkey.key

    with pytest.raises(HDSeqValueError, match="empty seed"):
        xprv_from_seed(b"")
    with pytest.raises(HDSeqValueError, match="unknown network: "):
        xprv_from_seed(SEED, "signet")


def test_xpub_from_master_pub_key() -> None:
    mpk = master_pub_key_from_seed(SEED)
    xpub = xpub_from_master_pub_key(mpk)
    assert xpub == M0H_XPUB
    assert xpub == xpub_from_xprv(derive(M_XPRV, "m/0h"))

    xkey = BIP32KeyData.b58decode(xpub)
    assert xkey.depth == 1
    assert xkey.parent_fingerprint == mpk.fingerprint
    assert xkey.index == HARDENED
    assert xkey.chain_code == mpk.chain_code
    assert xkey.key == mpk.pub_key

    assert xpub_from_master_pub_key(mpk, "testnet").startswith("tpub")

    mpk = master_pub_key_from_seed(SEED, 7)
    xkey = BIP32KeyData.b58decode(xpub_from_master_pub_key(mpk))
    assert xkey.index == HARDENED + 7
    assert xpub_from_master_pub_key(mpk) == xpub_from_xprv(derive(M_XPRV, "m/7h"))

    err_msg = "no extended public key for none master public key"
    with pytest.raises(HDSeqValueError, match=err_msg):
        xpub_from_master_pub_key(MASTER_PUB_KEY_NONE)


def test_master_pub_key_from_xpub() -> None:
    for account in (0, 1, 44):
        mpk = master_pub_key_from_seed(SEED, account)
        assert master_pub_key_from_xpub(xpub_from_master_pub_key(mpk)) == mpk
        tpub = xpub_from_master_pub_key(mpk, "testnet")
        assert master_pub_key_from_xpub(tpub) == mpk
        assert master_pub_key_from_xpub(BIP32KeyData.b58decode(tpub)) == mpk

    with pytest.raises(HDSeqValueError, match="not an extended public key: "):
        master_pub_key_from_xpub(M_XPRV)
    with pytest.raises(HDSeqValueError, match="not an account node, depth: "):
        master_pub_key_from_xpub(M_XPUB)
    with pytest.raises(HDSeqValueError, match="not an account node, depth: "):
        master_pub_key_from_xpub(derive(M0H_XPUB, "m/0"))
    with pytest.raises(HDSeqValueError, match="not a hardened account node: "):
        master_pub_key_from_xpub(derive(M_XPUB, "m/0"))


def test_write_xprv() -> None:
    buf = bytearray(XKEY_B58_SIZE)
    assert write_xprv(buf, SEED) == XKEY_B58_SIZE
    assert buf.decode("ascii") == M_XPRV

    # too small, zero size included: nothing written, required size returned
    for size in (0, 1, XKEY_B58_SIZE - 1):
        buf = bytearray(b"\xff" * size)
        assert write_xprv(buf, SEED) == XKEY_B58_SIZE
        assert buf == b"\xff" * size
    assert write_xprv(None, SEED) == XKEY_B58_SIZE

    buf = bytearray(b"\xff" * 200)
    assert write_xprv(memoryview(buf)[10:], SEED) == XKEY_B58_SIZE
    assert buf[:10] == b"\xff" * 10
    assert buf[10 : 10 + XKEY_B58_SIZE].decode("ascii") == M_XPRV
    assert buf[10 + XKEY_B58_SIZE :] == b"\xff" * (200 - 10 - XKEY_B58_SIZE)


def test_write_xpub() -> None:
    mpk = master_pub_key_from_seed(SEED)

    buf = bytearray(XKEY_B58_SIZE)
    assert write_xpub(buf, mpk) == XKEY_B58_SIZE
    assert buf.decode("ascii") == M0H_XPUB

    for size in (0, 1, XKEY_B58_SIZE - 1):
        buf = bytearray(b"\xff" * size)
        assert write_xpub(buf, mpk) == XKEY_B58_SIZE
        assert buf == b"\xff" * size

    with pytest.raises(HDSeqValueError):
        write_xpub(bytearray(XKEY_B58_SIZE), MASTER_PUB_KEY_NONE)
