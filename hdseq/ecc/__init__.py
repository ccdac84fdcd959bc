#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module hdseq.ecc."""

from hdseq.ecc.curve import G, N, add, is_valid_scalar, mult, scalar_add_mod
from hdseq.ecc.sec_point import (
    bytes_from_point,
    point_from_pub_key,
    pub_key_from_prv_key,
)

__all__ = [
    "G",
    "N",
    "add",
    "is_valid_scalar",
    "mult",
    "scalar_add_mod",
    "bytes_from_point",
    "point_from_pub_key",
    "pub_key_from_prv_key",
]
