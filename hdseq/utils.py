#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Input normalization and field checks shared across hdseq."""

from io import BytesIO
from typing import Any

from hdseq.alias import BinaryData, Octets
from hdseq.exceptions import HDSeqValueError


def bytes_from_octets(octets: Octets) -> bytes:
    "Return bytes from a bytes-like object or from a hex-string."

    if isinstance(octets, str):
        try:
            return bytes.fromhex(octets)
        except ValueError as e:
            raise HDSeqValueError(f"invalid hex-string: {e}") from e
    return bytes(octets)


def bytesio_from_binarydata(data: BinaryData) -> BytesIO:
    "Return data itself if already a stream, else a stream over its bytes."

    if isinstance(data, BytesIO):
        return data
    return BytesIO(bytes_from_octets(data))


def assert_bytes_field(name: str, value: Any, size: int) -> None:
    """Raise HDSeqValueError unless value is exactly size bytes.

    Used by the dataclasses of the package to check their fields:
    bytearray or memoryview are rejected as they could be changed
    after validation.
    """

    if not isinstance(value, bytes):
        raise HDSeqValueError(f"invalid {name} type: {type(value).__name__}")
    if len(value) != size:
        err_msg = f"invalid {name} length: {len(value)} bytes instead of {size}"
        raise HDSeqValueError(err_msg)
