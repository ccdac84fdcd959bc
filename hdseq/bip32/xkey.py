#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 extended key data and its serialization.

A BIP32 extended key is 78 bytes:

- [  : 4] version
- [ 4: 5] depth in the derivation path
- [ 5: 9] parent fingerprint
- [ 9:13] index (child number, big endian, hardened bit included)
- [13:45] chain code
- [45:78] compressed pub_key or [0x00][prv_key]

Its text form is the Base58Check encoding of those 78 bytes,
i.e. 111 characters starting with 'xprv'/'xpub' on mainnet
and 'tprv'/'tpub' on testnet.
"""

from dataclasses import InitVar, dataclass
from typing import Optional, Type, Union

from hdseq import base58
from hdseq.alias import BinaryData, String
from hdseq.bip32.der_path import assert_valid_index, is_hardened
from hdseq.ecc.curve import is_valid_scalar
from hdseq.ecc.sec_point import point_from_pub_key
from hdseq.exceptions import HDSeqValueError
from hdseq.network import XPRV_VERSIONS_ALL, XPUB_VERSIONS_ALL
from hdseq.utils import assert_bytes_field, bytesio_from_binarydata

XKEY_SIZE = 78
# Base58Check of XKEY_SIZE bytes plus the 4 bytes checksum
XKEY_B58_SIZE = 111


@dataclass(frozen=True)
class BIP32KeyData:
    """Decoded BIP32 extended key.

    Instances are immutable: a derivation step returns a new one
    (see dataclasses.replace). Unless check_validity is False,
    the fields are validated at construction.
    """

    version: bytes
    depth: int
    parent_fingerprint: bytes
    # an int, not 4 bytes, to avoid any byteorder ambiguity
    index: int
    chain_code: bytes
    key: bytes
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def is_private(self) -> bool:
        return self.key[0] == 0

    @property
    def is_hardened(self) -> bool:
        return is_hardened(self.index)

    @property
    def prv_key_int(self) -> int:
        if not self.is_private:
            raise HDSeqValueError("not a private key")
        return int.from_bytes(self.key[1:], byteorder="big", signed=False)

    def __repr__(self) -> str:
        key = "<private>" if self.is_private else self.key.hex()
        return (
            f"BIP32KeyData(version={self.version.hex()}, depth={self.depth}, "
            f"parent_fingerprint={self.parent_fingerprint.hex()}, "
            f"index={hex(self.index)}, chain_code={self.chain_code.hex()}, "
            f"key={key})"
        )

    def _assert_valid_key(self) -> None:

        if self.version in XPRV_VERSIONS_ALL:
            if self.key[0] != 0:
                err_msg = f"invalid private key prefix: 0x{self.key[:1].hex()}"
                raise HDSeqValueError(err_msg)
            if not is_valid_scalar(self.prv_key_int):
                raise HDSeqValueError("invalid private key not in 1..n-1")
            return

        if self.version in XPUB_VERSIONS_ALL:
            if self.key[0] not in (0x02, 0x03):
                err_msg = "invalid public key prefix not in (0x02, 0x03): "
                err_msg += f"0x{self.key[:1].hex()}"
                raise HDSeqValueError(err_msg)
            try:
                point_from_pub_key(self.key)
            except HDSeqValueError as e:
                raise HDSeqValueError(f"invalid public key: 0x{self.key.hex()}") from e
            return

        raise HDSeqValueError(f"unknown extended key version: 0x{self.version.hex()}")

    def assert_valid(self) -> None:

        assert_bytes_field("version", self.version, 4)
        if not isinstance(self.depth, int) or not 0 <= self.depth <= 255:
            raise HDSeqValueError(f"invalid depth: {self.depth}")
        assert_bytes_field("parent_fingerprint", self.parent_fingerprint, 4)
        assert_valid_index(self.index)
        assert_bytes_field("chain_code", self.chain_code, 32)
        assert_bytes_field("key", self.key, 33)

        # the root key has no parent
        if self.depth == 0:
            if self.parent_fingerprint != bytes(4):
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise HDSeqValueError(err_msg)
            if self.index != 0:
                raise HDSeqValueError(f"zero depth with non-zero index: {self.index}")

        self._assert_valid_key()

    def serialize(self) -> bytes:
        "Return the 78 bytes binary form."
        return b"".join(
            [
                self.version,
                bytes([self.depth]),
                self.parent_fingerprint,
                self.index.to_bytes(4, byteorder="big", signed=False),
                self.chain_code,
                self.key,
            ]
        )

    def b58encode(self) -> str:
        return base58.b58encode(self.serialize())

    @classmethod
    def parse(
        cls: Type["BIP32KeyData"], data: BinaryData, check_validity: bool = True
    ) -> "BIP32KeyData":
        "Return a BIP32KeyData reading 78 bytes from a stream or from Octets."

        xkey_bin = bytesio_from_binarydata(data).read(XKEY_SIZE)
        if len(xkey_bin) != XKEY_SIZE:
            err_msg = f"invalid decoded length: {len(xkey_bin)} bytes"
            err_msg += f" instead of {XKEY_SIZE}"
            raise HDSeqValueError(err_msg)

        return cls(
            version=xkey_bin[:4],
            depth=xkey_bin[4],
            parent_fingerprint=xkey_bin[5:9],
            index=int.from_bytes(xkey_bin[9:13], byteorder="big", signed=False),
            chain_code=xkey_bin[13:45],
            key=xkey_bin[45:],
            check_validity=check_validity,
        )

    @classmethod
    def b58decode(
        cls: Type["BIP32KeyData"], xkey: String, check_validity: bool = True
    ) -> "BIP32KeyData":
        "Return a BIP32KeyData from its Base58Check text, blanks stripped."

        xkey = xkey.strip()
        return cls.parse(base58.b58decode(xkey), check_validity)


BIP32Key = Union[BIP32KeyData, String]


def xkey_data_from_bip32_key(xkey: BIP32Key) -> BIP32KeyData:
    if isinstance(xkey, BIP32KeyData):
        return xkey
    return BIP32KeyData.b58decode(xkey)


def write_bounded(buf: Optional[Union[bytearray, memoryview]], text: str) -> int:
    """Write an ASCII string into a caller-supplied buffer.

    Return the string length if it fits into the buffer, in which case
    buf[:length] holds the string; otherwise return the required length
    and leave the buffer untouched, as snprintf does.
    No terminator is written, and nothing past len(buf) ever is.
    Passing None (or an empty buffer) only returns the required length.
    """

    data = text.encode("ascii")
    length = len(data)
    if buf is None or len(buf) < length:
        return length
    buf[:length] = data
    return length
