#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are meant to discriminate between Exceptions being raised
by hdseq from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the hdseq versions are derived.

Invalid input is always an HDSeqValueError (or HDSeqTypeError);
a derivation that cannot be completed is an HDSeqRuntimeError.
"""


class HDSeqValueError(ValueError):
    pass


class HDSeqTypeError(TypeError):
    pass


class HDSeqRuntimeError(RuntimeError):
    pass


class HardenedDerivationError(HDSeqValueError):
    "Hardened child requested from a public-only parent."


class InvalidChildKeyError(HDSeqValueError):
    """Child key candidate out of range: IL >= n, zero key, or INF.

    Raised by a single derivation step and consumed by the
    retry-at-next-index loop.
    """

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"invalid child key at index {hex(index)}: {reason}")
        self.index = index
        self.reason = reason


class DerivationError(HDSeqRuntimeError):
    pass
