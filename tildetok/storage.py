#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import os
import threading
import time
from typing import Dict, Optional

import zstandard

from tildetok.lexicon import Lexicon

CUSTOM_DICT_NAME = "tildetok-custom.json"
ZSTD_SUFFIX = ".zst"
CUSTOM_DICT_MAX_BYTES = 8 * 1024 * 1024


class CustomDictError(ValueError):
    pass


class CustomDictFormatError(CustomDictError):
    pass


def ts_local() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


def read_custom_dict(path: str) -> Dict[str, object]:
    """Read a custom dictionary artifact (.json or zstd-compressed .json.zst).

    Strict variant: raises CustomDictError on any problem.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read(CUSTOM_DICT_MAX_BYTES + 1)
    except OSError as ex:
        raise CustomDictError(f"cannot read {path}: {ex}") from ex
    if path.endswith(ZSTD_SUFFIX):
        try:
            raw = zstandard.ZstdDecompressor().decompress(raw, max_output_size=CUSTOM_DICT_MAX_BYTES)
        except zstandard.ZstdError as ex:
            raise CustomDictFormatError(f"invalid zstd payload in {path}: {ex}") from ex
    if len(raw) > CUSTOM_DICT_MAX_BYTES:
        raise CustomDictFormatError(f"custom dictionary too large: {path}")
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as ex:
        raise CustomDictFormatError(f"invalid JSON in {path}: {ex}") from ex
    if not isinstance(data, dict):
        raise CustomDictFormatError(f"custom dictionary must be a JSON object: {path}")
    return data


def find_custom_dict(base_dir: str) -> Optional[str]:
    """Return the custom dictionary path next to `base_dir`, plain JSON first."""
    for name in (CUSTOM_DICT_NAME, CUSTOM_DICT_NAME + ZSTD_SUFFIX):
        path = os.path.join(base_dir, name)
        if os.path.isfile(path):
            return path
    return None


class Storage:
    def __init__(self, config_file: str, runtime_log_file: str) -> None:
        self.config_file = config_file
        self.runtime_log_file = runtime_log_file
        self.runtime_log_enabled = False
        self._runtime_log_lock = threading.Lock()

    def set_paths(self, config_file: str, runtime_log_file: str) -> None:
        self.config_file = config_file
        self.runtime_log_file = runtime_log_file

    def set_runtime_log_enabled(self, enabled: bool) -> None:
        self.runtime_log_enabled = bool(enabled)

    def append_runtime_log(self, line: str) -> None:
        if not line:
            return
        if not self.runtime_log_enabled:
            return
        try:
            os.makedirs(os.path.dirname(self.runtime_log_file) or ".", exist_ok=True)
            with self._runtime_log_lock:
                with open(self.runtime_log_file, "a", encoding="utf-8") as f:
                    f.write(f"{ts_local()} {line}\n")
        except Exception:
            pass

    def load_config(self) -> Dict[str, object]:
        if not os.path.isfile(self.config_file):
            return {}
        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.loads(f.read())
        except Exception:
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def load_custom_dict(self, path: str) -> Optional[Dict[str, object]]:
        """Lenient variant of read_custom_dict(): any problem means "no custom dictionary"."""
        if not path or not os.path.isfile(path):
            return None
        try:
            return read_custom_dict(path)
        except CustomDictError as ex:
            self.append_runtime_log(f"custom dictionary ignored: {ex}")
            return None

    def save_custom_dict(self, path: str, artifact: Dict[str, object], compress: bool = False) -> str:
        raw = json.dumps(artifact, ensure_ascii=False, indent=2).encode("utf-8")
        if compress:
            if not path.endswith(ZSTD_SUFFIX):
                path += ZSTD_SUFFIX
            raw = zstandard.ZstdCompressor(level=19).compress(raw)
        tmp = path + ".tmp"
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(tmp, "wb") as f:
            f.write(raw)
        os.replace(tmp, path)
        return path


def load_custom_dict_into(lexicon: Lexicon, path: str, storage: Optional[Storage] = None) -> int:
    """Load an artifact from `path` and merge it into `lexicon`. Returns words merged."""
    if storage is None:
        storage = Storage(config_file="", runtime_log_file="")
    data = storage.load_custom_dict(path)
    if data is None:
        return 0
    added = lexicon.merge_custom(data)
    storage.append_runtime_log(f"custom dictionary loaded: {path} ({added} custom words)")
    return added
