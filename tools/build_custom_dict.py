#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Build a custom tildetok dictionary from a text corpus.

Words already covered by the built-in dictionary (directly or through a
suffix stem) are rejected; the rest get ~[o-z]X tokens in alphabetical order.

Usage:
  python -m tools.build_custom_dict build   --input notes.md corpus.txt [--out tildetok-custom.json] [--zstd]
  python -m tools.build_custom_dict analyse --input corpus.txt
  python -m tools.build_custom_dict verify  tildetok-custom.json
"""

from __future__ import annotations

import argparse
import datetime as dt
import os
import re
import sys
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from tildetok import __version__
from tildetok.lexicon import (
    CUSTOM_CAPACITY,
    Lexicon,
    custom_token,
    is_builtin_token,
    is_custom_token,
    is_stem_token,
)
from tildetok.stemmer import find_stem
from tildetok.storage import CUSTOM_DICT_NAME, CustomDictError, Storage, read_custom_dict

ROOT = Path(__file__).resolve().parents[1]

DEFAULTS: Dict[str, object] = {
    "out": str(ROOT / CUSTOM_DICT_NAME),
    "top": CUSTOM_CAPACITY,
    "minlen": 4,
    "minfreq": 2,
}

ACCEPTED_EXTENSIONS = (".txt", ".md")

_MARKDOWN_RULES: Tuple[Tuple["re.Pattern[str]", str], ...] = (
    (re.compile(r"```.*?```", re.S), " "),
    (re.compile(r"`[^`]*`"), " "),
    (re.compile(r"!\[.*?\]\(.*?\)"), " "),
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),
    (re.compile(r"#{1,6}\s+"), " "),
    (re.compile(r"[*_]{1,3}([^*_]+)[*_]{1,3}"), r"\1"),
    (re.compile(r">\s+"), " "),
    (re.compile(r"[-*+]\s+"), " "),
    (re.compile(r"\d+\.\s+"), " "),
    (re.compile(r"\|[^\n]*"), " "),
    (re.compile(r"---+"), " "),
    (re.compile(r"https?://\S+"), " "),
    (re.compile(r"[^\w\s]"), " "),
)

REJECT_BUILTIN = "builtin"
REJECT_STEM = "stem"
REJECT_FREQ = "freq"
REJECT_FULL = "full"


def eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def strip_markdown(text: str) -> str:
    """Drop code, links, images, tables and markup so only prose words remain."""
    for pattern, repl in _MARKDOWN_RULES:
        text = pattern.sub(repl, text)
    return text


def read_corpus(paths: Iterable[str]) -> List[Tuple[str, str]]:
    """Return (path, text) for every readable .txt / .md input; others are reported and skipped."""
    out: List[Tuple[str, str]] = []
    for p in paths:
        ext = os.path.splitext(p)[1].lower()
        if ext not in ACCEPTED_EXTENSIONS:
            eprint(f"[WARN] skipping {p}: only .txt and .md files are accepted")
            continue
        try:
            with open(p, "r", encoding="utf-8", errors="ignore") as f:
                raw = f.read()
        except OSError as ex:
            eprint(f"[ERR] cannot read {p}: {ex}")
            continue
        out.append((p, strip_markdown(raw) if ext == ".md" else raw))
    return out


def count_words(texts: Iterable[str], minlen: int = 4) -> Counter:
    word_re = re.compile(r"[a-z]{%d,}" % max(1, int(minlen)))
    freq: Counter = Counter()
    for text in texts:
        freq.update(word_re.findall(text.lower()))
    return freq


def ranked_words(freq: Counter, minfreq: int = 2) -> List[str]:
    """Words with count >= minfreq, most frequent first, ties alphabetical."""
    kept = [w for w, n in freq.items() if n >= minfreq]
    kept.sort(key=lambda w: (-freq[w], w))
    return kept


def select_words(
    freq: Counter,
    lexicon: Optional[Lexicon] = None,
    top: int = CUSTOM_CAPACITY,
    minfreq: int = 2,
) -> Tuple[List[str], Dict[str, List[str]]]:
    """Pick custom words from a frequency table.

    Returns (accepted words sorted alphabetically, rejected words by reason).
    """
    lex = lexicon if lexicon is not None else Lexicon()
    cap = max(0, min(int(top), CUSTOM_CAPACITY))
    accepted: List[str] = []
    rejected: Dict[str, List[str]] = {REJECT_BUILTIN: [], REJECT_STEM: [], REJECT_FREQ: [], REJECT_FULL: []}
    for word, n in freq.items():
        if n < minfreq:
            rejected[REJECT_FREQ].append(word)
    for word in ranked_words(freq, minfreq):
        tok = lex.token_for(word)
        if tok is not None and is_builtin_token(tok):
            rejected[REJECT_BUILTIN].append(word)
            continue
        if find_stem(word, lex) is not None:
            rejected[REJECT_STEM].append(word)
            continue
        if len(accepted) >= cap:
            rejected[REJECT_FULL].append(word)
            continue
        accepted.append(word)
    accepted.sort()
    return accepted, rejected


def build_artifact(
    words: List[str],
    sources: Iterable[str] = (),
    minlen: int = 4,
    minfreq: int = 2,
    generated: Optional[str] = None,
) -> Dict[str, object]:
    if len(words) > CUSTOM_CAPACITY:
        raise ValueError(f"too many custom words: {len(words)} > {CUSTOM_CAPACITY}")
    encode: Dict[str, str] = {}
    decode: Dict[str, str] = {}
    for i, word in enumerate(words):
        tok = custom_token(i)
        encode[word] = tok
        decode[tok] = word
    if generated is None:
        generated = dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds")
    return {
        "name": "tildetok-custom",
        "version": __version__,
        "generated": generated,
        "sources": [str(s) for s in sources],
        "total": len(words),
        "token_range": {
            "start": custom_token(0) if words else "",
            "end": custom_token(len(words) - 1) if words else "",
        },
        "rules": {
            "min_word_length": int(minlen),
            "min_frequency": int(minfreq),
            "builtin_overlap": "rejected",
            "stem_overlap": "rejected",
            "capacity": CUSTOM_CAPACITY,
        },
        "encode": encode,
        "decode": decode,
    }


def verify_artifact(data: Dict[str, object], lexicon: Optional[Lexicon] = None) -> Tuple[List[str], List[str]]:
    """Check an artifact against the token zones. Returns (errors, warnings)."""
    lex = lexicon if lexicon is not None else Lexicon()
    errors: List[str] = []
    warns: List[str] = []
    enc = data.get("encode")
    dec = data.get("decode")
    if not isinstance(enc, dict):
        return ['missing or invalid "encode" map'], warns
    if not isinstance(dec, dict):
        dec = {}
    for word, tok in enc.items():
        if not isinstance(tok, str) or not tok.startswith("~"):
            errors.append(f'invalid token for "{word}": {tok!r}')
            continue
        if not is_custom_token(tok):
            if is_builtin_token(tok):
                errors.append(f'"{word}" uses built-in range token {tok}, must be ~[o-z]X')
            elif is_stem_token(tok):
                errors.append(f'"{word}" uses suffix range token {tok}')
            else:
                errors.append(f'"{word}" has unrecognised token format: {tok}')
            continue
        lower = str(word).lower()
        covered = lex.token_for(lower)
        if covered is None and find_stem(lower, lex) is not None:
            covered = "stem"
        if covered is not None and not is_custom_token(covered):
            warns.append(f'"{word}" is already covered by the built-in dictionary ({covered}), entry is redundant')
        if tok not in dec:
            warns.append(f'token {tok} has no reverse entry in "decode" map')
    return errors, warns


def coverage(freq: Counter, accepted: Iterable[str], lexicon: Optional[Lexicon] = None) -> Tuple[float, float]:
    """Share of corpus word occurrences (percent) covered before and after adding `accepted`."""
    lex = lexicon if lexicon is not None else Lexicon()
    extra = set(accepted)
    total = sum(freq.values())
    if total <= 0:
        return 0.0, 0.0
    base = 0
    added = 0
    for word, n in freq.items():
        if lex.token_for(word) is not None or find_stem(word, lex) is not None:
            base += n
        elif word in extra:
            added += n
    return base * 100.0 / total, (base + added) * 100.0 / total


def _load_counts(inputs: List[str], minlen: int) -> Optional[Tuple[List[str], Counter]]:
    corpus = read_corpus(inputs)
    if not corpus:
        eprint("No valid files were read.")
        return None
    for path, text in corpus:
        print(f"read {path} ({len(text)} chars)")
    return [p for p, _ in corpus], count_words((t for _, t in corpus), minlen=minlen)


def cmd_build(args: argparse.Namespace) -> int:
    loaded = _load_counts(args.input, args.minlen)
    if loaded is None:
        return 1
    sources, freq = loaded
    lex = Lexicon()
    accepted, rejected = select_words(freq, lexicon=lex, top=args.top, minfreq=args.minfreq)
    print(f"unique words scanned:       {len(ranked_words(freq, args.minfreq))}")
    print(f"rejected (already built-in): {len(rejected[REJECT_BUILTIN])}")
    print(f"rejected (covered by stems): {len(rejected[REJECT_STEM])}")
    print(f"accepted for custom dict:    {len(accepted)}")
    if args.verbose:
        for word in rejected[REJECT_BUILTIN]:
            print(f"  builtin  {word} -> {lex.token_for(word)}")
        for word in rejected[REJECT_STEM]:
            root_idx, rule = find_stem(word, lex) or (0, None)
            print(f"  stem     {word} -> {lex.word_at(root_idx)} + -{rule.suffix if rule else '?'}")
        for word in rejected[REJECT_FULL]:
            print(f"  full     {word}")
    if not accepted:
        print("No new words to add; the corpus is fully covered by the built-in dictionary.")
        return 0

    artifact = build_artifact(accepted, sources=sources, minlen=args.minlen, minfreq=args.minfreq)
    storage = Storage(config_file="", runtime_log_file="")
    out_path = storage.save_custom_dict(str(args.out), artifact, compress=bool(args.zstd))
    before, after = coverage(freq, accepted, lexicon=lex)
    print(f"token range: {artifact['token_range']['start']} .. {artifact['token_range']['end']}")
    print(f"coverage: {before:.1f}% built-in, {after:.1f}% with custom dict")
    print(f"Wrote {out_path}")
    return 0


def cmd_analyse(args: argparse.Namespace) -> int:
    loaded = _load_counts(args.input, args.minlen)
    if loaded is None:
        return 1
    sources, freq = loaded
    lex = Lexicon()
    ranked = ranked_words(freq, args.minfreq)
    covered = [w for w in ranked if lex.token_for(w) is not None or find_stem(w, lex) is not None]
    total = sum(freq.values())
    print(f"files processed:   {len(sources)}")
    print(f"total word tokens: {total}")
    print(f"unique words:      {len(freq)}")
    print(f"after freq filter: {len(ranked)} (freq >= {args.minfreq})")
    print(f"already covered:   {len(covered)}")
    print(f"genuinely new:     {len(ranked) - len(covered)}")
    print(f"custom capacity:   {CUSTOM_CAPACITY}")
    print("")
    for i, word in enumerate(ranked[:25], start=1):
        tok = lex.token_for(word)
        if tok is not None:
            status = "covered (dict)"
        elif find_stem(word, lex) is not None:
            status = "covered (stem)"
        else:
            status = "NEW"
        pct = freq[word] * 100.0 / total if total else 0.0
        print(f"{i:3d}  {word:<20} {freq[word]:>7}  {pct:5.2f}%  {status}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    try:
        data = read_custom_dict(str(args.path))
    except CustomDictError as ex:
        eprint(f"[ERR] {ex}")
        return 1
    errors, warns = verify_artifact(data)
    enc = data.get("encode")
    checked = len(enc) if isinstance(enc, dict) else 0
    for e in errors:
        eprint(f"[ERR] {e}")
    for w in warns:
        eprint(f"[WARN] {w}")
    print(f"entries: {checked}  errors: {len(errors)}  warnings: {len(warns)}")
    return 1 if errors else 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Build and check custom tildetok dictionaries.")
    sub = ap.add_subparsers(dest="command", metavar="command")
    b = sub.add_parser("build", help="scan a corpus and write a custom dictionary")
    b.add_argument("--input", "-i", nargs="+", required=True, help="Input .txt / .md files")
    b.add_argument("--out", "-o", default=DEFAULTS["out"], help=f"Output artifact (default: {DEFAULTS['out']})")
    b.add_argument("--top", type=int, default=DEFAULTS["top"], help=f"Maximum words (capped at {CUSTOM_CAPACITY})")
    b.add_argument("--minlen", type=int, default=DEFAULTS["minlen"], help="Minimum word length")
    b.add_argument("--minfreq", type=int, default=DEFAULTS["minfreq"], help="Minimum occurrences")
    b.add_argument("--zstd", action="store_true", help="Write a zstandard-compressed .json.zst artifact")
    b.add_argument("--verbose", "-v", action="store_true", help="List rejected words")
    a = sub.add_parser("analyse", help="corpus statistics only, nothing is written")
    a.add_argument("--input", "-i", nargs="+", required=True, help="Input .txt / .md files")
    a.add_argument("--minlen", type=int, default=DEFAULTS["minlen"])
    a.add_argument("--minfreq", type=int, default=DEFAULTS["minfreq"])
    v = sub.add_parser("verify", help="check an existing artifact for errors")
    v.add_argument("path", help="Artifact (.json or .json.zst)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.command == "build":
        return cmd_build(args)
    if args.command == "analyse":
        return cmd_analyse(args)
    if args.command == "verify":
        return cmd_verify(args)
    ap.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
