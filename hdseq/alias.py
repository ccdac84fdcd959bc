#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Type aliases for the input conventions of hdseq."""

from io import BytesIO
from typing import Tuple, Union

# raw bytes or their hex-string, e.g. "0488ade4" or "04 88 ad e4"
Octets = Union[bytes, str]

# ASCII text, e.g. a base58 extended key, given either as str or as bytes
String = Union[bytes, str]

# a stream to be read from, or Octets to be wrapped into one
BinaryData = Union[BytesIO, Octets]

# secp256k1 point in affine coordinates: y == 0 marks the point at infinity,
# as no curve point has a zero y-coordinate (the group order is odd)
Point = Tuple[int, int]
