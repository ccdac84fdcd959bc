#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Master key derivation from seed.

The master (root) key is I = HMAC-SHA512(key=b"Bitcoin seed", msg=seed):
IL is the master private key and IR the master chain code.

The master public key of a wallet is not the root public key:
it is the public key of the hardened account node m/account',
together with its chain code and the fingerprint of the root key.
Any non-hardened descendant of the account node
can then be derived without access to the seed.
"""

import logging
from dataclasses import InitVar, dataclass, field
from typing import Any, Optional, Tuple, Union

from dataclasses_json import DataClassJsonMixin, config

from hdseq.bip32.ckd import ChildKey, ckd_prv
from hdseq.bip32.der_path import HARDENED
from hdseq.bip32.xkey import BIP32KeyData
from hdseq.ecc.curve import is_valid_scalar
from hdseq.ecc.sec_point import point_from_pub_key, pub_key_from_prv_key
from hdseq.exceptions import DerivationError, HDSeqValueError, InvalidChildKeyError
from hdseq.hashes import fingerprint, hmac_sha512
from hdseq.network import network_from_name
from hdseq.secret import SecretBuffer
from hdseq.utils import assert_bytes_field

logger = logging.getLogger(__name__)


_BITCOIN_SEED = b"Bitcoin seed"

Seed = Union[bytes, bytearray, memoryview, str]


def _hex_field() -> Any:
    return field(metadata=config(encoder=lambda v: v.hex(), decoder=bytes.fromhex))


@dataclass(frozen=True)
class MasterPubKey(DataClassJsonMixin):
    # fingerprint of the root key, not of the account node
    fingerprint: bytes = _hex_field()
    # chain code and public key of the m/account' node
    chain_code: bytes = _hex_field()
    pub_key: bytes = _hex_field()
    # unhardened account number
    account: int = 0
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def is_none(self) -> bool:
        return self == MASTER_PUB_KEY_NONE

    def __repr__(self) -> str:
        return (
            f"MasterPubKey(fingerprint={self.fingerprint.hex()}, "
            f"chain_code={self.chain_code.hex()}, "
            f"pub_key={self.pub_key.hex()}, account={self.account})"
        )

    def assert_valid(self) -> None:

        assert_bytes_field("fingerprint", self.fingerprint, 4)
        assert_bytes_field("chain_code", self.chain_code, 32)
        assert_bytes_field("pub_key", self.pub_key, 33)

        if not 0 <= self.account < HARDENED:
            raise HDSeqValueError(f"invalid account: {self.account}")

        if self.pub_key[0] not in (2, 3):
            err_msg = "invalid public key prefix not in (0x02, 0x03): "
            err_msg += f"0x{self.pub_key[:1].hex()}"
            raise HDSeqValueError(err_msg)
        point_from_pub_key(self.pub_key)


MASTER_PUB_KEY_NONE = MasterPubKey(
    bytes(4), bytes(32), bytes(33), 0, check_validity=False
)


def bytes_from_seed(
    seed: Optional[Seed],
) -> Optional[Union[bytes, bytearray, memoryview]]:
    if seed is None:
        return None
    if isinstance(seed, str):
        try:
            seed = bytes.fromhex(seed)
        except ValueError as e:
            raise HDSeqValueError(f"invalid hex-string seed: {e}") from e
    if not isinstance(seed, (bytes, bytearray, memoryview)):
        raise HDSeqValueError(f"invalid seed type: {type(seed).__name__}")
    return seed if len(seed) else None


def account_node_from_seed(
    seed: Union[bytes, bytearray, memoryview], account: int
) -> Tuple[bytes, ChildKey]:
    """Return the root fingerprint and the m/account' node.

    InvalidChildKeyError is raised for an invalid master private key.
    """

    if not 0 <= account < HARDENED:
        raise HDSeqValueError(f"invalid account: {account}")

    with SecretBuffer(seed) as seed_buf, SecretBuffer(
        hmac_sha512(_BITCOIN_SEED, seed_buf)
    ) as h, memoryview(h) as view:
        k = int.from_bytes(view[:32], byteorder="big", signed=False)
        if not is_valid_scalar(k):
            raise InvalidChildKeyError(0, "master private key not in 1..n-1")
        root_fingerprint = fingerprint(pub_key_from_prv_key(k))
        node = ckd_prv(view[:32], view[32:], account + HARDENED)

    return root_fingerprint, node


def master_pub_key_from_seed(
    seed: Optional[Seed], account: int = 0
) -> MasterPubKey:
    """Return the master public key of the m/account' node.

    Empty (or None) seed returns MASTER_PUB_KEY_NONE;
    so does the astronomically unlikely invalid master key.
    """

    seed = bytes_from_seed(seed)
    if seed is None:
        return MASTER_PUB_KEY_NONE

    try:
        root_fingerprint, node = account_node_from_seed(seed, account)
    except (InvalidChildKeyError, DerivationError) as e:
        logger.debug("no master public key: %s", e)
        return MASTER_PUB_KEY_NONE

    with SecretBuffer(node.key) as prv_key:
        pub_key = pub_key_from_prv_key(
            int.from_bytes(prv_key, byteorder="big", signed=False)
        )
    return MasterPubKey(
        root_fingerprint, node.chain_code, pub_key, node.index - HARDENED
    )


def master_prv_key_from_seed(
    seed: Optional[Seed], network: str = "mainnet"
) -> BIP32KeyData:
    "Return the root extended private key of the seed."

    seed = bytes_from_seed(seed)
    if seed is None:
        raise HDSeqValueError("empty seed")

    with SecretBuffer(seed) as seed_buf, SecretBuffer(
        hmac_sha512(_BITCOIN_SEED, seed_buf)
    ) as h, memoryview(h) as view, SecretBuffer(33) as key:
        key[1:] = view[:32]
        if not is_valid_scalar(int.from_bytes(key, byteorder="big", signed=False)):
            raise DerivationError("master private key not in 1..n-1")
        return BIP32KeyData(
            version=network_from_name(network).bip32_prv,
            depth=0,
            parent_fingerprint=bytes(4),
            index=0,
            chain_code=bytes(view[32:]),
            key=bytes(key),
        )
