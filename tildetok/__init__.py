#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
tildetok package

Internal modules for word_token_compression.py and tildeTok.py: the built-in
word table, the word registry with its token maps, suffix stemming, and
custom dictionary / config storage.
"""

from __future__ import annotations

__version__ = "1.0.0"
