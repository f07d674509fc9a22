#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import itertools
import os
import tempfile
import unittest
from unittest import mock

from tildetok.lexicon import CUSTOM_CAPACITY, Lexicon, custom_token
from tildetok.stemmer import MAX_STEM_ROOT_INDEX
from tildetok.words import BUILTIN_WORDS
from word_token_compression import (
    _percent,
    coerce_text,
    decode,
    decode_from_url,
    default_lexicon,
    encode,
    encode_to_url,
    list_words,
    lookup,
    pack_to_base64url,
    reverse,
    set_default_lexicon,
    stats,
    unpack_from_base64url,
)


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no text")


class _BrokenLexicon(Lexicon):
    def token_for(self, word: object):
        raise RuntimeError("lexicon unavailable")


class WordTokenCompressionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lex = Lexicon()
        set_default_lexicon(self.lex)

    def tearDown(self) -> None:
        set_default_lexicon(None)

    def test_encode_known_sentence(self) -> None:
        self.assertEqual(encode("working together toward freedom"), "~ng ~kQ ~l6 ~7N")

    def test_decode_known_sentence(self) -> None:
        self.assertEqual(decode("~ng ~kQ ~l6 ~7N"), "working together toward freedom")

    def test_encode_is_case_insensitive(self) -> None:
        self.assertEqual(encode("WORKING"), "~ng")
        self.assertEqual(decode(encode("Freedom")), "freedom")

    def test_non_latin_text_unchanged(self) -> None:
        text = "你好 🚀 12345"
        self.assertEqual(encode(text), text)
        self.assertEqual(decode(text), text)

    def test_text_without_letters_or_sigil_unchanged(self) -> None:
        text = "123 !? ... 42 -- (7)"
        self.assertEqual(encode(text), text)
        self.assertEqual(decode(text), text)

    def test_unknown_tokens_pass_through(self) -> None:
        self.assertEqual(decode("~ZZ unknown"), "~ZZ unknown")
        self.assertEqual(decode("~zZ ~Z0a"), "~zZ ~Z0a")

    def test_stem_tokens(self) -> None:
        self.assertEqual(encode("developing"), "~Fle")
        self.assertEqual(encode("workers loving"), "~Xei ~Lff")
        self.assertEqual(decode("~Xei ~Lff ~Xec"), "workers loving worked")

    def test_every_builtin_word_roundtrips(self) -> None:
        for word in BUILTIN_WORDS:
            self.assertEqual(decode(encode(word)), word)

    def test_sentence_roundtrip_with_unknown_words(self) -> None:
        text = "hello world, people working together on kindness and movement!"
        self.assertEqual(decode(encode(text)), text)

    def test_explicit_lexicon_overrides_default(self) -> None:
        lex = Lexicon()
        lex.merge_custom({"encode": {"kubernetes": "~oc"}, "decode": {"~oc": "kubernetes"}})
        self.assertEqual(encode("kubernetes cluster", lexicon=lex), "~oc cluster")
        self.assertEqual(encode("kubernetes cluster"), "kubernetes cluster")
        self.assertEqual(decode("~oc", lexicon=lex), "kubernetes")

    def test_default_lexicon_is_shared(self) -> None:
        set_default_lexicon(None)
        first = default_lexicon()
        self.assertIs(default_lexicon(), first)
        self.assertGreaterEqual(len(first), len(BUILTIN_WORDS))

    def test_default_lexicon_ignores_malformed_custom_dict(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = os.path.join(td, "tildetok-custom.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("[" * 200000)
            set_default_lexicon(None)
            with mock.patch("word_token_compression.find_custom_dict", return_value=path):
                self.assertEqual(encode("working"), "~ng")
            self.assertFalse(default_lexicon().custom_loaded)

    def test_url_variants(self) -> None:
        self.assertEqual(encode_to_url("working together"), "~ng+~kQ")
        self.assertEqual(decode_from_url("~ng+~kQ"), "working together")
        self.assertEqual(decode_from_url("~ng%20~kQ"), "working together")

    def test_lookup_and_reverse(self) -> None:
        self.assertEqual(lookup("freedom"), "~7N")
        self.assertEqual(lookup("developing"), "~Fle")
        self.assertIsNone(lookup("xyz"))
        self.assertIsNone(lookup(""))
        self.assertEqual(reverse("~7N"), "freedom")
        self.assertEqual(reverse("~Fle"), "developing")
        self.assertIsNone(reverse("~ZZ"))
        self.assertIsNone(reverse(None))

    def test_list_words_sorted(self) -> None:
        words = list_words()
        self.assertEqual(len(words), len(BUILTIN_WORDS))
        self.assertEqual(words, sorted(words))
        self.assertEqual(words[0], "abandon")

    def test_coerce_text(self) -> None:
        self.assertEqual(coerce_text(None), "")
        self.assertEqual(coerce_text(True), "true")
        self.assertEqual(coerce_text(False), "false")
        self.assertEqual(coerce_text(42), "42")
        self.assertEqual(coerce_text(b"abc"), "abc")
        self.assertEqual(coerce_text(["a", 1, None]), "a 1 ")
        self.assertEqual(coerce_text({"k": "v"}), '{"k": "v"}')
        self.assertEqual(coerce_text(_Unprintable()), "")
        self.assertEqual(coerce_text({(1, 2): 3}), "{(1, 2): 3}")

    def test_crash_freedom(self) -> None:
        samples = [
            None,
            "",
            0,
            3.5,
            True,
            b"\xff\xfe",
            ["people", ["working", {"a": 1}]],
            {"nested": {"list": [1, 2, 3]}},
            "emoji 😊🚀 and ~ sigils ~~ ~0",
            "смешанный text 你好",
            "\x00\x01\x7f",
            _Unprintable(),
        ]
        for value in samples:
            self.assertIsInstance(encode(value), str)
            self.assertIsInstance(decode(value), str)
            self.assertIsInstance(encode_to_url(value), str)
            self.assertIsInstance(decode_from_url(value), str)
            self.assertIsInstance(pack_to_base64url(value), str)
            self.assertIsInstance(unpack_from_base64url(value), str)
            self.assertIsInstance(stats(value), dict)
        self.assertEqual(encode(None), "")
        self.assertEqual(pack_to_base64url(None), "")
        self.assertEqual(unpack_from_base64url(""), "")


class PackedFormatTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lex = Lexicon()

    def _roundtrip(self, text: str) -> str:
        return unpack_from_base64url(pack_to_base64url(text, lexicon=self.lex), lexicon=self.lex)

    def test_known_packed_value(self) -> None:
        self.assertEqual(pack_to_base64url("working together toward freedom", lexicon=self.lex), "WiyhmUcw8b_4")
        self.assertEqual(unpack_from_base64url("WiyhmUcw8b_4", lexicon=self.lex), "working together toward freedom")

    def test_output_alphabet(self) -> None:
        packed = pack_to_base64url("people, working together! 100% ~tokens", lexicon=self.lex)
        self.assertRegex(packed, r"^[A-Za-z0-9_-]+$")

    def test_ascii_roundtrip(self) -> None:
        for text in (
            "hello world",
            "people working together on kindness and movement",
            "workers loved the harmless helpful writer",
            "punctuation: (a) [b] {c} ~d 1+2=3?\n\ttabs",
            " leading and trailing spaces ",
        ):
            self.assertEqual(self._roundtrip(text), text)

    def test_all_builtin_words_roundtrip(self) -> None:
        text = " ".join(BUILTIN_WORDS)
        self.assertEqual(self._roundtrip(text), text)

    def test_custom_words_roundtrip(self) -> None:
        self.lex.merge_custom({"encode": {"kubernetes": "~oc"}, "decode": {"~oc": "kubernetes"}})
        self.assertEqual(self._roundtrip("kubernetes and freedom"), "kubernetes and freedom")

    def test_non_ascii_comes_back_escaped(self) -> None:
        self.assertEqual(self._roundtrip("café"), "caf%C3%A9")
        self.assertEqual(self._roundtrip("go 🚀"), "go %F0%9F%9A%80")

    def test_truncated_payload_stops_cleanly(self) -> None:
        packed = pack_to_base64url("working together toward freedom", lexicon=self.lex)
        out = unpack_from_base64url(packed[:4], lexicon=self.lex)
        self.assertTrue("working together toward freedom".startswith(out))

    def test_invalid_characters_are_ignored(self) -> None:
        packed = pack_to_base64url("working together", lexicon=self.lex)
        noisy = "!".join(packed)
        self.assertEqual(unpack_from_base64url(noisy, lexicon=self.lex), "working together")


class StatsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lex = Lexicon()

    def test_empty_input(self) -> None:
        rep = stats("", lexicon=self.lex)
        self.assertEqual(rep["original"], 0)
        self.assertEqual(rep["ratio_text"], "0%")
        self.assertEqual(rep["ratio_binary"], "0%")
        self.assertEqual(rep["hit_rate"], "0%")
        self.assertEqual(rep["words_scanned"], 0)

    def test_dictionary_sentence(self) -> None:
        text = "people working together"
        rep = stats(text, lexicon=self.lex)
        self.assertEqual(rep["original"], len(text))
        self.assertEqual(rep["encoded_output"], "~dE ~ng ~kQ")
        self.assertEqual(rep["text_encoded"], 11)
        self.assertEqual(rep["saved_text"], 12)
        self.assertEqual(rep["ratio_text"], "52.2%")
        self.assertEqual(rep["words_scanned"], 3)
        self.assertEqual(rep["dict_hits"], 3)
        self.assertEqual(rep["stem_hits"], 0)
        self.assertEqual(rep["hit_rate"], "100.0%")
        self.assertEqual(rep["binary_encoded"], len(pack_to_base64url(text, lexicon=self.lex)))
        self.assertFalse(rep["custom_dict_loaded"])
        self.assertEqual(rep["custom_words"], 0)

    def test_stem_hits_and_totals(self) -> None:
        rep = stats("developing workers and qwzx zzzzy", lexicon=self.lex)
        self.assertEqual(rep["words_scanned"], 4)
        self.assertEqual(rep["stem_hits"], 2)
        self.assertEqual(rep["total_hits"], rep["dict_hits"] + rep["stem_hits"])

    def test_custom_dictionary_reported(self) -> None:
        self.lex.merge_custom({"kubernetes": "~oc"})
        rep = stats("kubernetes", lexicon=self.lex)
        self.assertTrue(rep["custom_dict_loaded"])
        self.assertEqual(rep["custom_words"], 1)
        self.assertEqual(rep["dict_hits"], 1)

    def test_failure_degrades_to_error_report(self) -> None:
        rep = stats("freedom", lexicon=_BrokenLexicon())
        self.assertEqual(rep["original"], 7)
        self.assertEqual(rep["error"], "lexicon unavailable")
        self.assertNotIn("encoded_output", rep)

    def test_percent_rounding(self) -> None:
        self.assertEqual(_percent(0, 0), "0%")
        self.assertEqual(_percent(1, 3), "33.3%")
        self.assertEqual(_percent(2, 3), "66.7%")
        self.assertEqual(_percent(1, 16), "6.3%")
        self.assertEqual(_percent(-5, 10), "-50.0%")


class LargeCustomDictionaryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lex = Lexicon()
        letters = "bcdfghjkmp"
        self.words = ["zq" + "".join(p) + "x" for p in itertools.product(letters, repeat=3)][:700]
        self.assertLessEqual(len(self.words), CUSTOM_CAPACITY)
        self.assertEqual(
            self.lex.merge_custom({"encode": {w: custom_token(i) for i, w in enumerate(self.words)}}),
            len(self.words),
        )

    def _word_at(self, index: int) -> str:
        word = self.lex.word_at(index)
        self.assertIsNotNone(word)
        return word

    def test_stems_stop_past_last_expressible_root(self) -> None:
        last = self._word_at(MAX_STEM_ROOT_INDEX)
        tok = lookup(last + "s", lexicon=self.lex)
        self.assertEqual(tok, "~ZZa")
        self.assertEqual(reverse(tok, lexicon=self.lex), last + "s")

        for index in (MAX_STEM_ROOT_INDEX + 1, 1700):
            word = self._word_at(index)
            self.assertIsNone(lookup(word + "s", lexicon=self.lex))
            self.assertEqual(encode(word + "s", lexicon=self.lex), word + "s")
            self.assertIsNotNone(lookup(word, lexicon=self.lex))

    def test_high_registry_indices_pack_as_raw_chars(self) -> None:
        below = self._word_at(2046)
        self.assertEqual(len(pack_to_base64url(below, lexicon=self.lex)), 4)
        for index in (2047, 2100):
            word = self._word_at(index)
            packed = pack_to_base64url(word, lexicon=self.lex)
            self.assertEqual(len(packed), 12)
            self.assertEqual(unpack_from_base64url(packed, lexicon=self.lex), word)
        text = " ".join(self._word_at(i) for i in (1500, 2046, 2047, 2160))
        self.assertEqual(unpack_from_base64url(pack_to_base64url(text, lexicon=self.lex), lexicon=self.lex), text)


if __name__ == "__main__":
    unittest.main()
