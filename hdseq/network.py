#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants and associated functions.

The BIP32 version prefixes of each network are read,
once and for all at import time, from the json files
in the _data folder; the resulting NETWORKS mapping
is not meant to be modified.
"""

import json
from dataclasses import InitVar, dataclass, field
from os import path
from types import MappingProxyType
from typing import Dict, Mapping

from dataclasses_json import DataClassJsonMixin, config

from hdseq.exceptions import HDSeqValueError
from hdseq.utils import assert_bytes_field


@dataclass(frozen=True)
class Network(DataClassJsonMixin):
    # base58 extended private key starts with 'xprv' on mainnet
    bip32_prv: bytes = field(
        metadata=config(encoder=lambda v: v.hex(), decoder=bytes.fromhex)
    )
    # base58 extended public key starts with 'xpub' on mainnet
    bip32_pub: bytes = field(
        metadata=config(encoder=lambda v: v.hex(), decoder=bytes.fromhex)
    )
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        assert_bytes_field("bip32_prv", self.bip32_prv, 4)
        assert_bytes_field("bip32_pub", self.bip32_pub, 4)

        if self.bip32_prv == self.bip32_pub:
            err_msg = f"same private/public version: {self.bip32_prv.hex()}"
            raise HDSeqValueError(err_msg)


def _load_networks() -> Mapping[str, Network]:
    datadir = path.join(path.dirname(__file__), "_data")
    networks: Dict[str, Network] = {}
    for net in ("mainnet", "testnet", "regtest"):
        filename = path.join(datadir, net + ".json")
        with open(filename, "r", encoding="ascii") as file_:
            networks[net] = Network.from_dict(json.load(file_))
    return MappingProxyType(networks)


NETWORKS = _load_networks()

XPRV_VERSIONS_ALL = tuple(net.bip32_prv for net in NETWORKS.values())
XPUB_VERSIONS_ALL = tuple(net.bip32_pub for net in NETWORKS.values())


def network_from_name(network: str) -> Network:
    network = network.strip().lower()
    try:
        return NETWORKS[network]
    except KeyError as e:
        raise HDSeqValueError(f"unknown network: {network}") from e
