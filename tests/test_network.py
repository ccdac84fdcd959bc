#!/usr/bin/env python3

# Copyright (C) 2017-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `hdseq.network` module."

import json
from pathlib import Path

import pytest

from hdseq.exceptions import HDSeqValueError
from hdseq.network import (
    NETWORKS,
    XPRV_VERSIONS_ALL,
    XPUB_VERSIONS_ALL,
    Network,
    network_from_name,
)


def test_bad_network() -> None:

    with pytest.raises(HDSeqValueError, match="invalid bip32_prv length: "):
        Network(bip32_prv=b"\x04\x88\xad", bip32_pub=b"\x04\x88\xb2\x1e")

    with pytest.raises(HDSeqValueError, match="invalid bip32_pub type: "):
        Network(bip32_prv=b"\x04\x88\xad\xe4", bip32_pub="0488b21e")

    with pytest.raises(HDSeqValueError, match="same private/public version: "):
        Network(bip32_prv=b"\x04\x88\xad\xe4", bip32_pub=b"\x04\x88\xad\xe4")

    net = Network(b"\x04\x88\xad", b"\x04\x88\xb2\x1e", check_validity=False)
    with pytest.raises(HDSeqValueError, match="invalid bip32_prv length: "):
        net.assert_valid()


def test_mainnet_versions() -> None:
    mainnet = NETWORKS["mainnet"]
    assert mainnet.bip32_prv == bytes.fromhex("0488ade4")
    assert mainnet.bip32_pub == bytes.fromhex("0488b21e")

    testnet = NETWORKS["testnet"]
    assert testnet.bip32_prv == bytes.fromhex("04358394")
    assert testnet.bip32_pub == bytes.fromhex("043587cf")
    assert NETWORKS["regtest"] == testnet


def test_all_versions() -> None:
    assert len(NETWORKS) == 3
    assert bytes.fromhex("0488ade4") in XPRV_VERSIONS_ALL
    assert bytes.fromhex("0488b21e") in XPUB_VERSIONS_ALL
    assert not set(XPRV_VERSIONS_ALL) & set(XPUB_VERSIONS_ALL)


def test_space_and_caps() -> None:
    assert network_from_name(" MainNet ") == NETWORKS["mainnet"]

    with pytest.raises(HDSeqValueError, match="unknown network: "):
        network_from_name(" MainNet2 ")


def test_immutable() -> None:
    with pytest.raises(TypeError):
        NETWORKS["mainnet"] = NETWORKS["testnet"]  # type: ignore


def test_dataclasses_json_dict(tmp_path: Path) -> None:
    for network_name, net in NETWORKS.items():
        assert net == Network.from_dict(net.to_dict())
        assert net.to_dict()["bip32_prv"] == net.bip32_prv.hex()

        filename = tmp_path / f"{network_name}.json"
        with open(filename, "w", encoding="ascii") as file_:
            json.dump(net.to_dict(), file_, indent=4)
        with open(filename, "r", encoding="ascii") as file_:
            assert net == Network.from_dict(json.load(file_))

        assert net == Network.from_json(net.to_json())
