SYLLABLE_BASE = 0xAC00 # 가
SYLLABLE_LAST = 0xD7A3 # 힣
JUNG_COUNT = 21
JONG_COUNT = 28
JUNG_JONG_COUNT = JUNG_COUNT * JONG_COUNT # 588

# Compatibility jamo, in syllable index order
CHOSEONG = [
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
]
JUNGSEONG = [
    'ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ', 'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ',
    'ㅙ', 'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ', 'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ', 'ㅣ'
]
JONGSEONG = [
    '', 'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ',
    'ㄻ', 'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
]

# Compound finals, typed as two consonants in this order
SPLIT_JONG = {
    'ㄳ': ('ㄱ', 'ㅅ'), 'ㄵ': ('ㄴ', 'ㅈ'), 'ㄶ': ('ㄴ', 'ㅎ'),
    'ㄺ': ('ㄹ', 'ㄱ'), 'ㄻ': ('ㄹ', 'ㅁ'), 'ㄼ': ('ㄹ', 'ㅂ'),
    'ㄽ': ('ㄹ', 'ㅅ'), 'ㄾ': ('ㄹ', 'ㅌ'), 'ㄿ': ('ㄹ', 'ㅍ'),
    'ㅀ': ('ㄹ', 'ㅎ'), 'ㅄ': ('ㅂ', 'ㅅ')
}

# Complex vowels without a key of their own
SPLIT_JUNG = {
    'ㅘ': ('ㅗ', 'ㅏ'), 'ㅙ': ('ㅗ', 'ㅐ'), 'ㅚ': ('ㅗ', 'ㅣ'),
    'ㅝ': ('ㅜ', 'ㅓ'), 'ㅞ': ('ㅜ', 'ㅔ'), 'ㅟ': ('ㅜ', 'ㅣ'),
    'ㅢ': ('ㅡ', 'ㅣ')
}

# Hangul Jamo, Compatibility Jamo, Jamo Extended-A, Jamo Extended-B
JAMO_BLOCKS = [
    (0x1100, 0x11FF),
    (0x3130, 0x318F),
    (0xA960, 0xA97F),
    (0xD7B0, 0xD7FF),
]


def is_syllable(c): return SYLLABLE_BASE <= ord(c) <= SYLLABLE_LAST
def is_compat_jamo(c): return 0x3131 <= ord(c) <= 0x318E


def is_jamo(c):
    code = ord(c)
    for start, end in JAMO_BLOCKS:
        if start <= code <= end:
            return True
    return False


def is_hangul(c):
    return is_syllable(c) or is_jamo(c)


def syllable_indices(c):
    """Return the (cho, jung, jong) indices of a precomposed syllable, or None."""
    if len(c) != 1 or not is_syllable(c):
        return None
    base = ord(c) - SYLLABLE_BASE
    cho = base // JUNG_JONG_COUNT
    jung = (base % JUNG_JONG_COUNT) // JONG_COUNT
    jong = base % JONG_COUNT
    return cho, jung, jong


def _index(table, value, name):
    if isinstance(value, int):
        if 0 <= value < len(table):
            return value
    elif value in table:
        return table.index(value)
    raise ValueError(f"Invalid {name}: {value!r}")


def compose(cho, jung, jong=0):
    """Build a syllable from indices or compatibility jamo.

    `jong` may be 0, '' or None for a syllable without a final.
    """
    l = _index(CHOSEONG, cho, "choseong")
    v = _index(JUNGSEONG, jung, "jungseong")
    t = _index(JONGSEONG, jong or 0, "jongseong")
    return chr(SYLLABLE_BASE + (l * JUNG_COUNT + v) * JONG_COUNT + t)


def split_jung(c):
    return list(SPLIT_JUNG.get(c, (c,)))


def split_jong(c):
    return list(SPLIT_JONG.get(c, (c,)))


def decompose(c):
    """Decompose a syllable into the jamo typed for it, in key order.

    Complex vowels and compound finals are expanded into their two
    constituents, so the result has between 2 and 5 entries.
    Returns None for anything outside U+AC00..U+D7A3.
    """
    indices = syllable_indices(c)
    if indices is None:
        return None
    cho, jung, jong = indices

    result = [CHOSEONG[cho]]
    result.extend(split_jung(JUNGSEONG[jung]))
    if jong:
        result.extend(split_jong(JONGSEONG[jong]))
    return result


def decompose_jamo(c):
    # Lone compatibility jamo, e.g. typed 'ㅋㅋ' or 'ㄺ'
    if len(c) != 1 or not is_compat_jamo(c):
        return None
    if c in SPLIT_JONG:
        return split_jong(c)
    if c in SPLIT_JUNG:
        return split_jung(c)
    return [c]
