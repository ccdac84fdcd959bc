#!/usr/bin/env python3

# Copyright (C) 2015-2022 The hdseq developers
#
# This file is part of hdseq. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of hdseq including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the hdseq package."

name = "hdseq"
__version__ = "2022.6.1"
__author__ = "The hdseq developers"
__author_email__ = "devs@hdseq.org"
__copyright__ = "Copyright (C) 2015-2022 The hdseq developers"
__license__ = "MIT License"
