#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Suffix stemming: words derived from a dictionary root plus a known suffix.

A stem token is 4 characters: ~ + root high digit (A-Z) + root low digit
(base-62) + rule code (a-o). The high digit is a letter, so stem tokens never
overlap the 3-character built-in and custom zones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from tildetok.lexicon import B62, B62_INDEX, SIGIL, Lexicon


@dataclass(frozen=True)
class SuffixRule:
    code: str
    suffix: str
    e_drop: bool = False

    def apply(self, root: str) -> str:
        if self.e_drop and root.endswith("e"):
            return root[:-1] + self.suffix
        return root + self.suffix


# Code order is part of the packed format: the 4-bit rule index is the
# position in this tuple.
SUFFIX_RULES: Tuple[SuffixRule, ...] = (
    SuffixRule("a", "s"),
    SuffixRule("b", "es"),
    SuffixRule("c", "ed"),
    SuffixRule("d", "ed", e_drop=True),
    SuffixRule("e", "ing"),
    SuffixRule("f", "ing", e_drop=True),
    SuffixRule("g", "er"),
    SuffixRule("h", "er", e_drop=True),
    SuffixRule("i", "ers"),
    SuffixRule("j", "ly"),
    SuffixRule("k", "ness"),
    SuffixRule("l", "ment"),
    SuffixRule("m", "ful"),
    SuffixRule("n", "less"),
    SuffixRule("o", "tion"),
)
RULES_BY_CODE: Dict[str, SuffixRule] = {r.code: r for r in SUFFIX_RULES}
RULE_POSITION: Dict[str, int] = {r.code: i for i, r in enumerate(SUFFIX_RULES)}

# Longer / more specific endings first ("-ers" before "-er" before "-s").
STRIP_ORDER: Tuple[SuffixRule, ...] = tuple(RULES_BY_CODE[c] for c in "oklnmiefcdghjba")

MAX_STEM_ROOT_INDEX = 26 * 62 - 1


def stem_token(root_index: int, code: str) -> Optional[str]:
    if code not in RULES_BY_CODE:
        return None
    if root_index < 0 or root_index > MAX_STEM_ROOT_INDEX:
        return None
    return SIGIL + chr(ord("A") + root_index // 62) + B62[root_index % 62] + code


def parse_stem_token(token: object) -> Optional[Tuple[int, SuffixRule]]:
    if not isinstance(token, str) or len(token) != 4 or token[0] != SIGIL:
        return None
    high, low, code = token[1], token[2], token[3]
    if not ("A" <= high <= "Z"):
        return None
    if low not in B62_INDEX:
        return None
    rule = RULES_BY_CODE.get(code)
    if rule is None:
        return None
    return (ord(high) - ord("A")) * 62 + B62_INDEX[low], rule


def _root_index(root: str, lexicon: Lexicon) -> Optional[int]:
    if lexicon.token_for(root) is None:
        return None
    idx = lexicon.index_of(root)
    if idx is None or idx > MAX_STEM_ROOT_INDEX:
        return None
    return idx


def find_stem(word: str, lexicon: Lexicon) -> Optional[Tuple[int, SuffixRule]]:
    """Return (root index, rule) for the first rule that reduces `word` to a known root."""
    for rule in STRIP_ORDER:
        sfx = rule.suffix
        if len(word) <= len(sfx) or not word.endswith(sfx):
            continue
        root = word[: -len(sfx)]
        idx = _root_index(root, lexicon)
        if idx is not None:
            return idx, rule
        if rule.e_drop:
            idx = _root_index(root + "e", lexicon)
            if idx is not None:
                return idx, rule
    return None


def expand(root_index: int, rule: SuffixRule, lexicon: Lexicon) -> Optional[str]:
    root = lexicon.word_at(root_index)
    if root is None:
        return None
    return rule.apply(root)


def stem_encode(word: str, lexicon: Lexicon) -> Optional[str]:
    found = find_stem(word, lexicon)
    if found is None:
        return None
    idx, rule = found
    return stem_token(idx, rule.code)


def stem_decode(token: str, lexicon: Lexicon) -> Optional[str]:
    parsed = parse_stem_token(token)
    if parsed is None:
        return None
    idx, rule = parsed
    return expand(idx, rule, lexicon)
