#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Word token compression for English text.

Two output formats share one dictionary:

- token text: words become ~XX (built-in/custom) or ~XXX (stem) tokens,
  everything else is copied verbatim;
- packed: a prefix-free bitstream rendered as base64url.

Every public function is total: bad input degrades to pass-through or an
empty result, never an exception.
"""

from __future__ import annotations

import json
import os
import re
import threading
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional

from tildetok.lexicon import SIGIL, Lexicon
from tildetok.stemmer import (
    RULE_POSITION,
    SUFFIX_RULES,
    expand,
    find_stem,
    stem_decode,
    stem_encode,
)
from tildetok.storage import find_custom_dict, load_custom_dict_into

BASE64URL = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
BASE64URL_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(BASE64URL)}

WORD_BITS = 11
RULE_BITS = 4
CHAR_BITS = 7
END_INDEX = (1 << WORD_BITS) - 1  # 2047

TAG_WORD = (0b0, 1)
TAG_STEM = (0b10, 2)
TAG_SPACE = (0b110, 3)
TAG_CHAR = (0b111, 3)
MIN_TAG_BITS = 3

LETTER_RUN_RE = re.compile(r"[a-zA-Z]+")
LETTER_SPLIT_RE = re.compile(r"([a-zA-Z]+)")
SCANNED_WORD_RE = re.compile(r"[a-zA-Z]{4,}")
TOKEN_RE = re.compile(re.escape(SIGIL) + r"[0-9a-zA-Z]{2,3}")

_DEFAULT_LEXICON: Optional[Lexicon] = None
_DEFAULT_LOCK = threading.Lock()


def default_lexicon() -> Lexicon:
    """Process-wide lexicon, built once; merges a custom dictionary found next to this module."""
    global _DEFAULT_LEXICON
    if _DEFAULT_LEXICON is not None:
        return _DEFAULT_LEXICON
    with _DEFAULT_LOCK:
        if _DEFAULT_LEXICON is None:
            lex = Lexicon()
            path = find_custom_dict(os.path.dirname(os.path.abspath(__file__)))
            if path:
                load_custom_dict_into(lex, path)
            _DEFAULT_LEXICON = lex
    return _DEFAULT_LEXICON


def set_default_lexicon(lexicon: Optional[Lexicon]) -> None:
    """Replace the process-wide lexicon (None = rebuild lazily on next use)."""
    global _DEFAULT_LEXICON
    with _DEFAULT_LOCK:
        _DEFAULT_LEXICON = lexicon


def _lex(lexicon: Optional[Lexicon]) -> Lexicon:
    return lexicon if lexicon is not None else default_lexicon()


def coerce_text(value: object) -> str:
    try:
        return _coerce(value)
    except Exception:
        return ""


def _coerce(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple)):
        return " ".join(_coerce(v) for v in value)
    if isinstance(value, dict):
        try:
            return json.dumps(value, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            # non-string keys
            return str(value)
    return str(value)


# ---------------------------------------------------------------------------
# Token text
# ---------------------------------------------------------------------------


def _word_token(run: str, lexicon: Lexicon) -> Optional[str]:
    lower = run.lower()
    tok = lexicon.token_for(lower)
    if tok is not None:
        return tok
    return stem_encode(lower, lexicon)


def encode(value: object, lexicon: Optional[Lexicon] = None) -> str:
    text = coerce_text(value)
    if not text:
        return ""
    lex = _lex(lexicon)

    def repl(m: "re.Match[str]") -> str:
        run = m.group(0)
        tok = _word_token(run, lex)
        return tok if tok is not None else run

    return LETTER_RUN_RE.sub(repl, text)


def _expand_token(tok: str, lexicon: Lexicon) -> Optional[str]:
    if len(tok) == 3:
        return lexicon.word_for(tok)
    if len(tok) == 4 and "A" <= tok[1] <= "Z":
        return stem_decode(tok, lexicon)
    return None


def decode(value: object, lexicon: Optional[Lexicon] = None) -> str:
    text = coerce_text(value)
    if not text:
        return ""
    lex = _lex(lexicon)

    def repl(m: "re.Match[str]") -> str:
        tok = m.group(0)
        word = _expand_token(tok, lex)
        return word if word is not None else tok

    return TOKEN_RE.sub(repl, text)


def encode_to_url(value: object, lexicon: Optional[Lexicon] = None) -> str:
    return encode(value, lexicon=lexicon).replace(" ", "+")


def decode_from_url(value: object, lexicon: Optional[Lexicon] = None) -> str:
    text = coerce_text(value).replace("+", " ").replace("%20", " ")
    return decode(text, lexicon=lexicon)


def lookup(word: object, lexicon: Optional[Lexicon] = None) -> Optional[str]:
    text = coerce_text(word)
    if not text:
        return None
    return _word_token(text, _lex(lexicon))


def reverse(token: object, lexicon: Optional[Lexicon] = None) -> Optional[str]:
    text = coerce_text(token)
    if not text:
        return None
    return _expand_token(text, _lex(lexicon))


def list_words(lexicon: Optional[Lexicon] = None) -> List[str]:
    return _lex(lexicon).sorted_words()


# ---------------------------------------------------------------------------
# Packed (base64url bitstream)
# ---------------------------------------------------------------------------


class _BitWriter:
    """MSB-first bit accumulator emitting 6-bit base64url symbols."""

    def __init__(self) -> None:
        self._out: List[str] = []
        self._acc = 0
        self._bits = 0

    def write(self, code: int, length: int) -> None:
        self._acc = (self._acc << length) | (code & ((1 << length) - 1))
        self._bits += length
        while self._bits >= 6:
            shift = self._bits - 6
            self._out.append(BASE64URL[(self._acc >> shift) & 0x3F])
            self._acc &= (1 << shift) - 1
            self._bits -= 6

    def write_tag(self, tag: tuple) -> None:
        self.write(tag[0], tag[1])

    def to_base64url(self) -> str:
        out = list(self._out)
        if self._bits:
            out.append(BASE64URL[(self._acc << (6 - self._bits)) & 0x3F])
        return "".join(out)


class _BitReader:
    def __init__(self, symbols: List[int]) -> None:
        self._symbols = symbols
        self._total = len(symbols) * 6
        self._pos = 0

    def remaining(self) -> int:
        return self._total - self._pos

    def read_bit(self) -> int:
        sym = self._symbols[self._pos // 6]
        bit = (sym >> (5 - self._pos % 6)) & 1
        self._pos += 1
        return bit

    def read(self, count: int) -> int:
        value = 0
        for _ in range(count):
            value = (value << 1) | self.read_bit()
        return value


def _percent_escape(ch: str) -> str:
    raw = ch.encode("utf-8", errors="surrogatepass")
    return "".join(f"%{b:02X}" for b in raw)


def _write_raw(bw: _BitWriter, text: str) -> None:
    for ch in text:
        bw.write_tag(TAG_CHAR)
        bw.write(ord(ch) & 0x7F, CHAR_BITS)


def pack_to_base64url(value: object, lexicon: Optional[Lexicon] = None) -> str:
    text = coerce_text(value)
    if not text:
        return ""
    lex = _lex(lexicon)
    bw = _BitWriter()
    for part in LETTER_SPLIT_RE.split(text):
        if not part:
            continue
        if LETTER_RUN_RE.fullmatch(part):
            lower = part.lower()
            idx = lex.index_of(lower) if lex.token_for(lower) is not None else None
            if idx is not None and idx < END_INDEX:
                bw.write_tag(TAG_WORD)
                bw.write(idx, WORD_BITS)
                continue
            found = find_stem(lower, lex)
            if found is not None:
                root_idx, rule = found
                bw.write_tag(TAG_STEM)
                bw.write(root_idx, WORD_BITS)
                bw.write(RULE_POSITION[rule.code], RULE_BITS)
                continue
            _write_raw(bw, part)
            continue
        for ch in part:
            if ch == " ":
                bw.write_tag(TAG_SPACE)
            elif ord(ch) < 128:
                _write_raw(bw, ch)
            else:
                # Non-ASCII goes out as its %XX escape text; unpack returns that text.
                _write_raw(bw, _percent_escape(ch))
    bw.write_tag(TAG_WORD)
    bw.write(END_INDEX, WORD_BITS)
    return bw.to_base64url()


def unpack_from_base64url(value: object, lexicon: Optional[Lexicon] = None) -> str:
    text = coerce_text(value)
    if not text:
        return ""
    lex = _lex(lexicon)
    symbols = [BASE64URL_INDEX[ch] for ch in text if ch in BASE64URL_INDEX]
    br = _BitReader(symbols)
    out: List[str] = []
    while br.remaining() >= MIN_TAG_BITS:
        if br.read_bit() == 0:
            if br.remaining() < WORD_BITS:
                break
            idx = br.read(WORD_BITS)
            word = lex.word_at(idx) if idx != END_INDEX else None
            if word is None:
                break
            out.append(word)
        elif br.read_bit() == 0:
            if br.remaining() < WORD_BITS + RULE_BITS:
                break
            root_idx = br.read(WORD_BITS)
            pos = br.read(RULE_BITS)
            if pos >= len(SUFFIX_RULES):
                break
            word = expand(root_idx, SUFFIX_RULES[pos], lex)
            if word is None:
                break
            out.append(word)
        elif br.read_bit() == 0:
            out.append(" ")
        else:
            if br.remaining() < CHAR_BITS:
                break
            out.append(chr(br.read(CHAR_BITS)))
    return "".join(out)


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


def _percent(part: int, whole: int) -> str:
    if whole <= 0:
        return "0%"
    pct = Decimal(part * 100) / Decimal(whole)
    return f"{pct.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"


def stats(value: object, lexicon: Optional[Lexicon] = None) -> Dict[str, object]:
    text = coerce_text(value)
    try:
        lex = _lex(lexicon)
        encoded = encode(text, lexicon=lex)
        packed = pack_to_base64url(text, lexicon=lex)
        orig = len(text)
        saved_text = orig - len(encoded)
        saved_binary = orig - len(packed)
        words = SCANNED_WORD_RE.findall(text)
        dict_hits = 0
        stem_hits = 0
        for w in words:
            lower = w.lower()
            if lex.token_for(lower) is not None:
                dict_hits += 1
            elif find_stem(lower, lex) is not None:
                stem_hits += 1
        return {
            "original": orig,
            "text_encoded": len(encoded),
            "binary_encoded": len(packed),
            "saved_text": saved_text,
            "saved_binary": saved_binary,
            "ratio_text": _percent(saved_text, orig),
            "ratio_binary": _percent(saved_binary, orig),
            "words_scanned": len(words),
            "dict_hits": dict_hits,
            "stem_hits": stem_hits,
            "total_hits": dict_hits + stem_hits,
            "hit_rate": _percent(dict_hits + stem_hits, len(words)),
            "custom_dict_loaded": bool(lex.custom_loaded),
            "custom_words": int(lex.custom_words),
            "encoded_output": encoded,
        }
    except Exception as ex:
        return {"original": len(text), "error": str(ex) or type(ex).__name__}
