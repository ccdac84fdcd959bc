#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdseq.bip32."""

from hdseq.bip32.ckd import MAX_CKD_ATTEMPTS, ChildKey, ckd_prv, ckd_pub
from hdseq.bip32.der_path import (
    HARDENED,
    BIP32DerPath,
    indexes_from_bip32_path,
)
from hdseq.bip32.derive import derive, xpub_from_xprv
from hdseq.bip32.master import (
    MASTER_PUB_KEY_NONE,
    MasterPubKey,
    master_prv_key_from_seed,
    master_pub_key_from_seed,
)
from hdseq.bip32.sequence import (
    Chain,
    prv_key_from_seed,
    prv_keys_from_seed,
    pub_key_from_master_pub_key,
)
from hdseq.bip32.serialization import (
    master_pub_key_from_xpub,
    write_xprv,
    write_xpub,
    xprv_from_seed,
    xpub_from_master_pub_key,
)
from hdseq.bip32.xkey import BIP32Key, BIP32KeyData

__all__ = [
    "MAX_CKD_ATTEMPTS",
    "ChildKey",
    "ckd_prv",
    "ckd_pub",
    "HARDENED",
    "BIP32DerPath",
    "indexes_from_bip32_path",
    "derive",
    "xpub_from_xprv",
    "MASTER_PUB_KEY_NONE",
    "MasterPubKey",
    "master_prv_key_from_seed",
    "master_pub_key_from_seed",
    "Chain",
    "prv_key_from_seed",
    "prv_keys_from_seed",
    "pub_key_from_master_pub_key",
    "master_pub_key_from_xpub",
    "write_xprv",
    "write_xpub",
    "xprv_from_seed",
    "xpub_from_master_pub_key",
    "BIP32Key",
    "BIP32KeyData",
]
