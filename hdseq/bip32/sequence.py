#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Wallet key sequence: m/account'/chain/index.

The external chain (0) provides receive keys,
the internal chain (1) provides change keys.
Private keys require the seed;
public keys only require the master public key,
i.e. the m/account' node.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import IntEnum
from typing import Iterable, List, Optional

from hdseq.bip32.ckd import ChildKey, ckd_prv, ckd_pub
from hdseq.bip32.der_path import HARDENED
from hdseq.bip32.master import (
    MASTER_PUB_KEY_NONE,
    MasterPubKey,
    Seed,
    account_node_from_seed,
    bytes_from_seed,
)
from hdseq.ecc.sec_point import pub_key_from_prv_key
from hdseq.exceptions import DerivationError, HDSeqValueError, InvalidChildKeyError
from hdseq.secret import SecretBuffer

logger = logging.getLogger(__name__)


class Chain(IntEnum):
    EXTERNAL = 0
    INTERNAL = 1


def _assert_valid_chain(chain: int) -> None:
    if chain not in (Chain.EXTERNAL, Chain.INTERNAL):
        raise HDSeqValueError(f"invalid chain: {chain}")


def _assert_valid_index(index: int) -> None:
    if not 0 <= index < HARDENED:
        raise HDSeqValueError(f"invalid index: {index}")


def _chain_node(seed: Optional[Seed], chain: int, account: int) -> ChildKey:

    seed = bytes_from_seed(seed)
    if seed is None:
        raise HDSeqValueError("empty seed")
    _assert_valid_chain(chain)

    try:
        _, node = account_node_from_seed(seed, account)
    except InvalidChildKeyError as e:
        raise DerivationError("invalid master key") from e

    with SecretBuffer(node.key) as prv_key:
        return ckd_prv(prv_key, node.chain_code, int(chain))


def prv_key_from_seed(
    seed: Seed, chain: int, index: int, account: int = 0
) -> bytes:
    "Return the 32 bytes private key at m/account'/chain/index."

    _assert_valid_index(index)
    node = _chain_node(seed, chain, account)
    with SecretBuffer(node.key) as prv_key:
        return ckd_prv(prv_key, node.chain_code, index).key


def prv_keys_from_seed(
    seed: Seed,
    chain: int,
    indexes: Iterable[int],
    account: int = 0,
    max_workers: Optional[int] = None,
) -> List[bytes]:
    """Return the private keys at m/account'/chain/index for each index.

    The chain node is derived only once, together with its public key;
    the children are then derived concurrently.
    The order of the returned keys follows the order of indexes.
    """

    indexes = list(indexes)
    for index in indexes:
        _assert_valid_index(index)
    node = _chain_node(seed, chain, account)
    if not indexes:
        return []

    with SecretBuffer(node.key) as prv_key:
        pub_key = pub_key_from_prv_key(
            int.from_bytes(prv_key, byteorder="big", signed=False)
        )

        def child(index: int) -> bytes:
            return ckd_prv(prv_key, node.chain_code, index, pub_key).key

        logger.debug("deriving %d keys of chain %d", len(indexes), chain)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(child, indexes))


def pub_key_from_master_pub_key(mpk: MasterPubKey, chain: int, index: int) -> bytes:
    "Return the 33 bytes compressed public key at m/account'/chain/index."

    if mpk == MASTER_PUB_KEY_NONE:
        raise HDSeqValueError("none master public key")
    _assert_valid_chain(chain)
    _assert_valid_index(index)

    node = ckd_pub(mpk.pub_key, mpk.chain_code, int(chain))
    return ckd_pub(node.key, node.chain_code, index).key
