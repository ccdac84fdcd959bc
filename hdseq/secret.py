#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Scoped buffers for secret material.

Private scalars, HMAC outputs, seed copies, and the messages fed
to HMAC during hardened derivation are kept in a mutable bytearray
that is overwritten with zeros when the 'with' block is left,
whatever the exit path (return, exception, or generator close).

Python int and bytes objects are immutable and cannot be wiped:
scalars are converted to int only where the modular arithmetic
needs them, and never stored beyond the function scope.
"""

from types import TracebackType
from typing import Optional, Type, Union

from hdseq.exceptions import HDSeqValueError

BytesLike = Union[bytes, bytearray, memoryview]


def wipe(buf: Union[bytearray, memoryview]) -> None:
    "Overwrite a mutable buffer with zeros."
    buf[:] = bytes(len(buf))


class SecretBuffer:
    """Fixed-size bytearray zeroed on exit from its context.

    >>> with SecretBuffer(b"\\x01\\x02") as buf:
    ...     buf.hex()
    '0102'
    """

    __slots__ = ("_buf",)

    def __init__(self, data: Union[BytesLike, int] = 0) -> None:
        if isinstance(data, int):
            if data < 0:
                raise HDSeqValueError(f"negative buffer size: {data}")
            self._buf = bytearray(data)
        else:
            self._buf = bytearray(data)

    def __enter__(self) -> bytearray:
        return self._buf

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        wipe(self._buf)

    def __len__(self) -> int:
        return len(self._buf)

    def __repr__(self) -> str:
        # never leak the content
        return f"SecretBuffer(<{len(self._buf)} bytes>)"

    @property
    def is_wiped(self) -> bool:
        return not any(self._buf)
