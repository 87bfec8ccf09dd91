import collections
import logging

import hangul
from keymap import get_keymap

logger = logging.getLogger(__name__)

KOREAN = "korean"
ENGLISH = "english"
MIXED = "mixed"
UNKNOWN = "unknown"

TextAnalysis = collections.namedtuple(
    "TextAnalysis",
    ["type", "korean_chars", "english_chars", "special_chars",
     "unsupported_chars", "total_chars", "has_unsupported"],
)


def _is_ascii_letter(code):
    return 0x41 <= code <= 0x5A or 0x61 <= code <= 0x7A


class TranscodingEngine:
    """Turns Hangul text into the Dubeolsik keystrokes that type it."""

    def __init__(self, keymap=None):
        self.keymap = keymap if keymap is not None else get_keymap()

    def keys_for(self, jamos):
        return "".join(self.keymap.lookup(j) for j in jamos)

    def transcode(self, text):
        if not text or not isinstance(text, str):
            return ""

        out = []
        # str iterates by code point, so surrogate pairs are never split
        for c in text:
            jamos = hangul.decompose(c)
            if jamos is None:
                jamos = hangul.decompose_jamo(c)
            if jamos is None:
                out.append(c)
            else:
                out.append(self.keys_for(jamos))
        return "".join(out)

    def analyze_text(self, text):
        if not text or not isinstance(text, str):
            return TextAnalysis(UNKNOWN, 0, 0, 0, 0, 0, False)

        korean = english = special = printable = unsupported = 0
        for c in text:
            code = ord(c)
            if hangul.is_syllable(c):
                korean += 1
            elif _is_ascii_letter(code):
                english += 1
            elif 0x20 <= code <= 0x7E:
                special += 1
                printable += 1
            elif c in "\n\r\t":
                special += 1
            else:
                unsupported += 1

        # Printable symbols count as english, so "안녕!" is mixed but "안녕\n" is not
        if korean and (english or printable):
            kind = MIXED
        elif korean:
            kind = KOREAN
        elif english or printable:
            kind = ENGLISH
        else:
            kind = UNKNOWN

        return TextAnalysis(kind, korean, english, special, unsupported,
                            len(text), unsupported > 0)

    def classify(self, text):
        return self.analyze_text(text).type

    def can_type(self, c):
        jamos = hangul.decompose(c) or hangul.decompose_jamo(c)
        if not jamos:
            return False
        return all(j in self.keymap for j in jamos)

    def diagnostics(self):
        mismatches = []
        for jamo, key in self.keymap.items():
            back = self.keymap.jamo_for(key)
            if back != jamo:
                mismatches.append(f"{key} -> {back}, expected {jamo}")
        if mismatches:
            logger.warning("Key map mismatches: %s", mismatches)

        return {
            "mapping_count": len(self.keymap),
            "reverse_mapping_count": len({k for _, k in self.keymap.items()}),
            "compound_jongseong": len(hangul.SPLIT_JONG),
            "compound_vowels": len(hangul.SPLIT_JUNG),
            "mismatches": mismatches,
        }


_default_engine = None


def default_engine():
    global _default_engine
    if _default_engine is None:
        _default_engine = TranscodingEngine()
    return _default_engine


def transcode(text):
    return default_engine().transcode(text)


def classify(text):
    return default_engine().classify(text)
