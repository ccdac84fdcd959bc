#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Generic BIP32 derivation of extended keys along a path."""

from dataclasses import replace

from hdseq.bip32.ckd import ckd_prv, ckd_pub
from hdseq.bip32.der_path import BIP32DerPath, indexes_from_bip32_path
from hdseq.bip32.xkey import BIP32Key, BIP32KeyData, xkey_data_from_bip32_key
from hdseq.ecc.sec_point import pub_key_from_prv_key
from hdseq.exceptions import HDSeqValueError
from hdseq.hashes import fingerprint
from hdseq.network import XPRV_VERSIONS_ALL, XPUB_VERSIONS_ALL
from hdseq.secret import SecretBuffer


def _xpub_from_xprv(xprv: BIP32Key) -> BIP32KeyData:

    xkey = xkey_data_from_bip32_key(xprv)
    if not xkey.is_private:
        raise HDSeqValueError(f"not a private key: {xkey.b58encode()}")

    i = XPRV_VERSIONS_ALL.index(xkey.version)
    return replace(
        xkey,
        version=XPUB_VERSIONS_ALL[i],
        key=pub_key_from_prv_key(xkey.prv_key_int),
    )


def xpub_from_xprv(xprv: BIP32Key) -> str:
    """Neutered Derivation (ND).

    Derivation of the extended public key corresponding to an extended
    private key ("neutered" as it removes the ability to sign transactions).
    """
    return _xpub_from_xprv(xprv).b58encode()


def _ckd(xkey: BIP32KeyData, index: int) -> BIP32KeyData:

    if xkey.is_private:
        with SecretBuffer(xkey.key) as key, memoryview(key) as prv_key:
            pub_key = pub_key_from_prv_key(xkey.prv_key_int)
            child = ckd_prv(prv_key[1:], xkey.chain_code, index, pub_key)
        child_key = b"\x00" + child.key
    else:
        pub_key = xkey.key
        child = ckd_pub(pub_key, xkey.chain_code, index)
        child_key = child.key

    return replace(
        xkey,
        depth=xkey.depth + 1,
        parent_fingerprint=fingerprint(pub_key),
        index=child.index,
        chain_code=child.chain_code,
        key=child_key,
    )


def _derive(xkey: BIP32Key, der_path: BIP32DerPath) -> BIP32KeyData:

    xkey = xkey_data_from_bip32_key(xkey)
    indexes = indexes_from_bip32_path(der_path)

    final_depth = xkey.depth + len(indexes)
    if final_depth > 255:
        raise HDSeqValueError(f"final depth greater than 255: {final_depth}")

    for index in indexes:
        xkey = _ckd(xkey, index)
    return xkey


def derive(xkey: BIP32Key, der_path: BIP32DerPath) -> str:
    """Derive a BIP32 key across a path spanning multiple depth levels.

    Valid BIP32DerPath examples:

    - string like "m/44h/0'/1H/0/10"
    - iterable integer indexes
    - one single integer index

    Hardened steps require a private extended key.
    """
    return _derive(xkey, der_path).b58encode()
