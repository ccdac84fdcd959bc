#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation path.

A BIP 32 derivation path can be represented as:

- "m/0h/1/5" or "0'/1/5" string
- sequence of integer indexes (even a single int)
"""

from typing import List, Sequence, Union

from hdseq.exceptions import HDSeqValueError

HARDENED = 0x80000000
MAX_INDEX = 0xFFFFFFFF

BIP32DerPath = Union[str, Sequence[int], int]


def is_hardened(index: int) -> bool:
    return index >= HARDENED


def assert_valid_index(index: int) -> None:
    if not 0 <= index <= MAX_INDEX:
        raise HDSeqValueError(f"invalid index: {index}")


def int_from_index_str(s: str) -> int:

    s = s.strip().lower()
    hardened = False
    if s[-1:] in ("'", "h"):
        s = s[:-1]
        hardened = True

    try:
        index = int(s)
    except ValueError as e:
        raise HDSeqValueError(f"invalid index: {s}") from e
    if not 0 <= index < HARDENED:
        raise HDSeqValueError(f"invalid index: {index}")
    return index + (HARDENED if hardened else 0)


def indexes_from_bip32_path(der_path: BIP32DerPath) -> List[int]:

    if isinstance(der_path, str):
        steps = [x.strip().lower() for x in der_path.split("/")]
        if steps[0] == "m":
            steps = steps[1:]
        indexes = [int_from_index_str(s) for s in steps if s != ""]
    elif isinstance(der_path, int):
        indexes = [der_path]
    else:
        indexes = [int(i) for i in der_path]

    for index in indexes:
        assert_valid_index(index)
    if len(indexes) > 255:
        raise HDSeqValueError(f"depth greater than 255: {len(indexes)}")
    return indexes
