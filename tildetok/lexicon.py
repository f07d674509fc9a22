#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Word registry and token maps.

Token space (first character after the sigil decides the zone):

  ~[0-9a-n][0-9a-zA-Z]        built-in word   (index 0..1467)
  ~[A-Z][0-9a-zA-Z][a-o]      suffix / stem   (see tildetok.stemmer)
  ~[o-z][0-9a-zA-Z]           custom word     (index 1500..2231)
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Mapping, Optional

from tildetok.words import BUILTIN_WORDS

SIGIL = "~"
B62 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
B62_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(B62)}

ZONE_BUILTIN = "builtin"
ZONE_CUSTOM = "custom"
ZONE_STEM = "stem"

BUILTIN_FIRST_CHARS = B62[:24]  # 0-9, a-n
CUSTOM_FIRST_CHARS = B62[24:36]  # o-z
STEM_FIRST_CHARS = B62[36:]  # A-Z

CUSTOM_START_INDEX = 1500
CUSTOM_END_INDEX = 2231
CUSTOM_CAPACITY = CUSTOM_END_INDEX - CUSTOM_START_INDEX + 1  # 732

MIN_CUSTOM_WORD_LENGTH = 4


def index_token(index: int) -> str:
    """Two-digit base-62 token for an absolute index (0..3843)."""
    if index < 0 or index >= 62 * 62:
        raise ValueError(f"token index out of range: {index}")
    return SIGIL + B62[index // 62] + B62[index % 62]


def custom_token(custom_index: int) -> str:
    """Token for the n-th custom word (0-based inside the custom range)."""
    if custom_index < 0 or custom_index >= CUSTOM_CAPACITY:
        raise ValueError(f"custom index out of range: {custom_index}")
    return index_token(CUSTOM_START_INDEX + custom_index)


def token_zone(token: object) -> Optional[str]:
    if not isinstance(token, str) or len(token) < 3 or token[0] != SIGIL:
        return None
    if any(ch not in B62_INDEX for ch in token[1:]):
        return None
    first = token[1]
    if len(token) == 3:
        if first in BUILTIN_FIRST_CHARS:
            return ZONE_BUILTIN
        if first in CUSTOM_FIRST_CHARS:
            return ZONE_CUSTOM
        return None
    if len(token) == 4 and first in STEM_FIRST_CHARS:
        return ZONE_STEM
    return None


def is_builtin_token(token: object) -> bool:
    return token_zone(token) == ZONE_BUILTIN


def is_custom_token(token: object) -> bool:
    return token_zone(token) == ZONE_CUSTOM


def is_stem_token(token: object) -> bool:
    return token_zone(token) == ZONE_STEM


class Lexicon:
    """Append-only word registry plus the word->token and token->word maps.

    Reads are plain dict/list lookups. merge_custom() is serialized by a lock
    and is expected to run before readers start (or while they are paused).
    """

    def __init__(self, words: Iterable[str] = BUILTIN_WORDS) -> None:
        self._lock = threading.Lock()
        self._words: List[str] = []
        self._index: Dict[str, int] = {}
        self._encode: Dict[str, str] = {}
        self._decode: Dict[str, str] = {}
        for word in words:
            word = str(word).lower()
            if word in self._index:
                continue
            idx = len(self._words)
            self._words.append(word)
            self._index[word] = idx
            tok = index_token(idx)
            self._encode[word] = tok
            self._decode[tok] = word
        self.builtin_count = len(self._words)
        self.custom_loaded = False
        self.custom_words = 0

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._encode

    def index_of(self, word: object) -> Optional[int]:
        if not isinstance(word, str):
            return None
        return self._index.get(word)

    def word_at(self, index: object) -> Optional[str]:
        if not isinstance(index, int) or isinstance(index, bool):
            return None
        if index < 0 or index >= len(self._words):
            return None
        return self._words[index]

    def token_for(self, word: object) -> Optional[str]:
        if not isinstance(word, str):
            return None
        return self._encode.get(word)

    def word_for(self, token: object) -> Optional[str]:
        if not isinstance(token, str):
            return None
        return self._decode.get(token)

    def sorted_words(self) -> List[str]:
        return sorted(self._words)

    def merge_custom(self, entries: object) -> int:
        """Merge a custom dictionary artifact (or a bare word->token mapping).

        Encode entries: last writer wins. Decode entries: first writer wins,
        so built-in reverse mappings are never replaced. Returns the number of
        encode entries accepted.
        """
        if not isinstance(entries, Mapping):
            return 0
        enc = entries.get("encode")
        dec = entries.get("decode")
        if enc is None and dec is None:
            enc = entries
        added = 0
        with self._lock:
            if isinstance(enc, Mapping):
                for word, tok in enc.items():
                    if not isinstance(word, str) or not isinstance(tok, str):
                        continue
                    if len(word) < MIN_CUSTOM_WORD_LENGTH:
                        continue
                    lower = word.lower()
                    self._encode[lower] = tok
                    self._decode.setdefault(tok, lower)
                    if lower not in self._index:
                        self._index[lower] = len(self._words)
                        self._words.append(lower)
                    added += 1
            if isinstance(dec, Mapping):
                for tok, word in dec.items():
                    if not isinstance(tok, str) or not isinstance(word, str):
                        continue
                    self._decode.setdefault(tok, word.lower())
            self.custom_loaded = True
            self.custom_words += added
        return added
