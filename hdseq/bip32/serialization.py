#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Extended key text form of the seed root key and of the master public key.

The master public key is serialized as the xpub of the m/account' node:
depth 1, parent fingerprint of the root key, hardened account index.
"""

from typing import Optional, Union

from hdseq.alias import String
from hdseq.bip32.der_path import HARDENED
from hdseq.bip32.master import (
    MASTER_PUB_KEY_NONE,
    MasterPubKey,
    Seed,
    master_prv_key_from_seed,
)
from hdseq.bip32.xkey import BIP32KeyData, write_bounded
from hdseq.exceptions import HDSeqValueError
from hdseq.network import XPUB_VERSIONS_ALL, network_from_name

Buffer = Optional[Union[bytearray, memoryview]]


def xprv_from_seed(seed: Seed, network: str = "mainnet") -> str:
    "Return the base58 root extended private key of the seed."
    return master_prv_key_from_seed(seed, network).b58encode()


def write_xprv(buf: Buffer, seed: Seed, network: str = "mainnet") -> int:
    """Write the root xprv of the seed into buf.

    Return the xprv length; if buf is too small
    nothing is written and the required length is returned.
    """
    return write_bounded(buf, xprv_from_seed(seed, network))


def xpub_from_master_pub_key(mpk: MasterPubKey, network: str = "mainnet") -> str:
    "Return the base58 extended public key of the m/account' node."

    if mpk == MASTER_PUB_KEY_NONE:
        raise HDSeqValueError("no extended public key for none master public key")
    mpk.assert_valid()

    xkey = BIP32KeyData(
        version=network_from_name(network).bip32_pub,
        depth=1,
        parent_fingerprint=mpk.fingerprint,
        index=mpk.account + HARDENED,
        chain_code=mpk.chain_code,
        key=mpk.pub_key,
    )
    return xkey.b58encode()


def write_xpub(buf: Buffer, mpk: MasterPubKey, network: str = "mainnet") -> int:
    """Write the xpub of the master public key into buf.

    Return the xpub length; if buf is too small
    nothing is written and the required length is returned.
    """
    return write_bounded(buf, xpub_from_master_pub_key(mpk, network))


def master_pub_key_from_xpub(xpub: Union[BIP32KeyData, String]) -> MasterPubKey:
    "Return the master public key from the xpub of an m/account' node."

    if not isinstance(xpub, BIP32KeyData):
        xpub = BIP32KeyData.b58decode(xpub)

    if xpub.version not in XPUB_VERSIONS_ALL:
        raise HDSeqValueError(f"not an extended public key: 0x{xpub.version.hex()}")
    if xpub.depth != 1:
        raise HDSeqValueError(f"not an account node, depth: {xpub.depth}")
    if not xpub.is_hardened:
        raise HDSeqValueError(f"not a hardened account node: {hex(xpub.index)}")

    return MasterPubKey(
        xpub.parent_fingerprint, xpub.chain_code, xpub.key, xpub.index - HARDENED
    )
