import functools
import logging

logger = logging.getLogger(__name__)

# Dubeolsik (두벌식) layout, jamo -> key
DUBEOLSIK = [
    ('ㅂ', 'q'), ('ㅃ', 'Q'),
    ('ㅈ', 'w'), ('ㅉ', 'W'),
    ('ㄷ', 'e'), ('ㄸ', 'E'),
    ('ㄱ', 'r'), ('ㄲ', 'R'),
    ('ㅅ', 't'), ('ㅆ', 'T'),
    ('ㅛ', 'y'),
    ('ㅕ', 'u'),
    ('ㅑ', 'i'),
    ('ㅐ', 'o'), ('ㅒ', 'O'),
    ('ㅔ', 'p'), ('ㅖ', 'P'),

    ('ㅁ', 'a'),
    ('ㄴ', 's'),
    ('ㅇ', 'd'),
    ('ㄹ', 'f'),
    ('ㅎ', 'g'),
    ('ㅗ', 'h'),
    ('ㅓ', 'j'),
    ('ㅏ', 'k'),
    ('ㅣ', 'l'),

    ('ㅋ', 'z'),
    ('ㅌ', 'x'),
    ('ㅊ', 'c'),
    ('ㅍ', 'v'),
    ('ㅠ', 'b'),
    ('ㅜ', 'n'),
    ('ㅡ', 'm'),
]


class KeyMapError(ValueError):
    pass


class KeyMapTable:
    """Bijective jamo <-> key table.

    Built once from a list of (jamo, key) pairs; both directions are checked
    for collisions while building, and the table is read-only afterwards.
    """

    def __init__(self, pairs=DUBEOLSIK):
        forward = {}
        for jamo, key in pairs:
            if jamo in forward:
                msg = f"Jamo '{jamo}' mapped twice: '{forward[jamo]}' and '{key}'"
                logger.error(msg)
                raise KeyMapError(msg)
            forward[jamo] = key

        inverse = {}
        for jamo, key in forward.items():
            if key in inverse:
                msg = f"Key '{key}' shared by '{inverse[key]}' and '{jamo}'"
                logger.error(msg)
                raise KeyMapError(msg)
            inverse[key] = jamo

        self._forward = forward
        self._inverse = inverse

    def __contains__(self, jamo):
        return jamo in self._forward

    def __len__(self):
        return len(self._forward)

    def items(self):
        return list(self._forward.items())

    def key_for(self, jamo):
        return self._forward.get(jamo)

    def jamo_for(self, key):
        return self._inverse.get(key)

    def lookup(self, jamo):
        key = self._forward.get(jamo)
        if key is not None:
            return key

        # Printable ASCII and composed syllables pass through
        if len(jamo) == 1:
            code = ord(jamo)
            if 0x20 <= code <= 0x7E or 0xAC00 <= code <= 0xD7A3:
                return jamo

        logger.debug("Dropping unmapped character %r (U+%04X)", jamo, ord(jamo[0]) if jamo else 0)
        return ''


@functools.lru_cache(maxsize=None)
def get_keymap():
    return KeyMapTable()
