#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
tildeTok command line.

  python tildeTok.py encode "working together toward freedom"
  python tildeTok.py decode "~ng ~kQ ~l6 ~7N"
  python tildeTok.py pack   "working together toward freedom"
  python tildeTok.py stats  "people working together"
  echo "some text" | python tildeTok.py encode
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Dict, List, Optional, Sequence

from tildetok import __version__
from tildetok.lexicon import (
    BUILTIN_FIRST_CHARS,
    CUSTOM_CAPACITY,
    CUSTOM_END_INDEX,
    CUSTOM_START_INDEX,
    Lexicon,
    custom_token,
    index_token,
)
from tildetok.stemmer import STRIP_ORDER
from tildetok.storage import Storage, find_custom_dict, load_custom_dict_into
import word_token_compression as wtc

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_FILE = os.path.join(BASE_DIR, "tildetok.json")
RUNTIME_LOG_FILE = os.path.join(BASE_DIR, "runtime.log")
_STORAGE = Storage(config_file=CONFIG_FILE, runtime_log_file=RUNTIME_LOG_FILE)

DEFAULTS: Dict[str, object] = {
    "config": CONFIG_FILE,
    "custom_dict": "",
    "runtime_log": False,
    "runtime_log_file": RUNTIME_LOG_FILE,
}

TEXT_COMMANDS = ("encode", "decode", "url", "unurl", "pack", "unpack", "stats", "lookup", "reverse")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2


def eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def append_runtime_log(line: str) -> None:
    _STORAGE.append_runtime_log(line)


def load_config() -> Dict[str, object]:
    return _STORAGE.load_config()


def build_lexicon(custom_dict: Optional[str], use_custom: bool = True) -> Lexicon:
    lex = Lexicon()
    if not use_custom:
        return lex
    path = custom_dict or find_custom_dict(BASE_DIR)
    if not path:
        return lex
    if not os.path.isfile(path):
        eprint(f"[WARN] custom dictionary not found: {path}")
        return lex
    added = load_custom_dict_into(lex, path, storage=_STORAGE)
    if not lex.custom_loaded:
        eprint(f"[WARN] custom dictionary ignored (unreadable or invalid): {path}")
    else:
        append_runtime_log(f"lexicon ready: {len(lex)} words ({added} custom)")
    return lex


def _read_text(parts: Sequence[str]) -> str:
    if parts:
        return " ".join(parts)
    if sys.stdin is None or sys.stdin.isatty():
        return ""
    return sys.stdin.read().rstrip("\n")


def format_info(lex: Lexicon) -> List[str]:
    last_builtin = index_token(lex.builtin_count - 1) if lex.builtin_count else "-"
    lines = [
        f"tildetok {__version__}",
        "",
        "Token space:",
        f"  ~[0-9a-n][0-9a-zA-Z]     built-in   {lex.builtin_count} words, ~00 .. {last_builtin}",
        "  ~[A-Z][0-9a-zA-Z][a-o]   stem       root index + suffix rule",
        f"  ~[o-z][0-9a-zA-Z]        custom     {CUSTOM_CAPACITY} slots, "
        f"{custom_token(0)} .. {custom_token(CUSTOM_CAPACITY - 1)} "
        f"(index {CUSTOM_START_INDEX}..{CUSTOM_END_INDEX})",
        "",
        f"Built-in first chars: {BUILTIN_FIRST_CHARS}",
        "Suffix rules (checked in this order):",
    ]
    for rule in STRIP_ORDER:
        note = " (drops trailing e)" if rule.e_drop else ""
        lines.append(f"  {rule.code}  -{rule.suffix}{note}")
    lines.extend(
        [
            "",
            f"Dictionary size: {len(lex)}",
            f"Custom dictionary: {'loaded (' + str(lex.custom_words) + ' words)' if lex.custom_loaded else 'not loaded'}",
        ]
    )
    return lines


def run_command(command: str, text: str, lex: Lexicon) -> int:
    if command == "encode":
        print(wtc.encode(text, lexicon=lex))
    elif command == "decode":
        print(wtc.decode(text, lexicon=lex))
    elif command == "url":
        print(wtc.encode_to_url(text, lexicon=lex))
    elif command == "unurl":
        print(wtc.decode_from_url(text, lexicon=lex))
    elif command == "pack":
        print(wtc.pack_to_base64url(text, lexicon=lex))
    elif command == "unpack":
        print(wtc.unpack_from_base64url(text, lexicon=lex))
    elif command == "stats":
        print(json.dumps(wtc.stats(text, lexicon=lex), ensure_ascii=False, indent=2))
    elif command == "lookup":
        word = text.strip()
        tok = wtc.lookup(word, lexicon=lex)
        if tok is None:
            print(f'"{word}" not in dictionary')
            return EXIT_NOT_FOUND
        print(f'"{word}" -> "{tok}"')
    elif command == "reverse":
        tok = text.strip()
        word = wtc.reverse(tok, lexicon=lex)
        if word is None:
            print(f'"{tok}" is not a known token')
            return EXIT_NOT_FOUND
        print(f'"{tok}" -> "{word}"')
    elif command == "list":
        for word in wtc.list_words(lexicon=lex):
            print(f"{word}  {wtc.lookup(word, lexicon=lex)}")
    elif command == "info":
        print("\n".join(format_info(lex)))
    else:
        eprint(f"Unknown command: {command}")
        return EXIT_USAGE
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tildeTok.py",
        description="Compress English words to short URL-safe ~tokens.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("--config", default=DEFAULTS["config"], help=f"JSON config file (default: {DEFAULTS['config']})")
    ap.add_argument("--custom-dict", dest="custom_dict", default=None, help="custom dictionary artifact (.json or .json.zst)")
    ap.add_argument("--no-custom-dict", dest="no_custom_dict", action="store_true", help="use built-in words only")
    ap.add_argument("--log", action="store_true", help="append runtime events to the runtime log")
    sub = ap.add_subparsers(dest="command", metavar="command")
    helps = {
        "encode": "compress text to tokens",
        "decode": "expand tokens back to text",
        "url": "encode for URLs (spaces become +)",
        "unurl": "decode URL form (+ and %%20 are spaces)",
        "pack": "bit-pack text to base64url",
        "unpack": "unpack base64url back to text",
        "stats": "compression statistics (JSON)",
        "lookup": "token for one word",
        "reverse": "word for one token",
    }
    for name in TEXT_COMMANDS:
        p = sub.add_parser(name, help=helps[name])
        p.add_argument("text", nargs="*", help="input text (default: stdin)")
    sub.add_parser("list", help="all dictionary words with their tokens")
    sub.add_parser("info", help="token space rules and dictionary sizes")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if not args.command:
        ap.print_help()
        return EXIT_OK

    _STORAGE.set_paths(config_file=str(args.config), runtime_log_file=RUNTIME_LOG_FILE)
    cfg = load_config()
    log_file = str(cfg.get("runtime_log_file") or DEFAULTS["runtime_log_file"])
    _STORAGE.set_paths(config_file=str(args.config), runtime_log_file=log_file)
    _STORAGE.set_runtime_log_enabled(bool(args.log or cfg.get("runtime_log", DEFAULTS["runtime_log"])))

    custom_dict = args.custom_dict or str(cfg.get("custom_dict") or DEFAULTS["custom_dict"])
    lex = build_lexicon(custom_dict, use_custom=not args.no_custom_dict)
    wtc.set_default_lexicon(lex)

    text = _read_text(args.text) if args.command in TEXT_COMMANDS else ""
    if args.command in ("lookup", "reverse") and not text.strip():
        eprint(f"{args.command}: no input given")
        return EXIT_USAGE
    append_runtime_log(f"command={args.command} input_chars={len(text)}")
    return run_command(args.command, text, lex)


if __name__ == "__main__":
    raise SystemExit(main())
