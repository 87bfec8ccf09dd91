import pytest

import segmenter
from segmenter import CONTROL, ENGLISH, KOREAN, TextSegment, segment_by_language


def test_korean_then_english():
    segments = segment_by_language("안녕Hello")
    assert [(s.language, s.text) for s in segments] == [(KOREAN, "안녕"), (ENGLISH, "Hello")]
    assert segments[0] == TextSegment(KOREAN, "안녕", 0, 1)
    assert segments[1] == TextSegment(ENGLISH, "Hello", 2, 6)


def test_spaces_and_symbols_join_english_runs():
    segments = segment_by_language("안녕Hellow 난 jason이야!")
    assert [(s.language, s.text) for s in segments] == [
        (KOREAN, "안녕"),
        (ENGLISH, "Hellow "),
        (KOREAN, "난"),
        (ENGLISH, " jason"),
        (KOREAN, "이야"),
        (ENGLISH, "!"),
    ]


def test_control_characters_get_their_own_segment():
    segments = segment_by_language("ab\n\ncd\tx")
    assert [(s.language, s.text) for s in segments] == [
        (ENGLISH, "ab"),
        (CONTROL, "\n"),
        (CONTROL, "\n"),
        (ENGLISH, "cd"),
        (CONTROL, "\t"),
        (ENGLISH, "x"),
    ]
    assert segments[1].start == segments[1].end == 2


def test_control_splits_same_language_run():
    segments = segment_by_language("가\x01나")
    assert [(s.language, s.text) for s in segments] == [
        (KOREAN, "가"), (CONTROL, "\x01"), (KOREAN, "나")]


def test_jamo_is_korean():
    assert segmenter.classify("ㅋ") == KOREAN
    assert segmenter.classify(chr(0x1100)) == KOREAN
    assert segmenter.classify(chr(0xD7B0)) == KOREAN


def test_other_scripts_default_to_english():
    assert segmenter.classify("😀") == ENGLISH
    assert segmenter.classify("漢") == ENGLISH
    assert segmenter.classify("\x1f") == CONTROL
    assert segmenter.classify(" ") == ENGLISH


@pytest.mark.parametrize("text", [
    "",
    "a",
    "한",
    "\n",
    "Hello, 세상!\r\n\tbye 😀 ㅋㅋ",
    "\x00가\x1fb\n",
    "123 안녕 456",
])
def test_segments_cover_input(text):
    segments = segment_by_language(text)
    assert "".join(s.text for s in segments) == text
    assert sum(len(s.text) for s in segments) == len(text)
    pos = 0
    for seg in segments:
        assert seg.start == pos
        assert seg.end == pos + len(seg.text) - 1
        pos = seg.end + 1
    for a, b in zip(segments, segments[1:]):
        if a.language != CONTROL and b.language != CONTROL:
            assert a.language != b.language


def test_invalid_input_gives_no_segments():
    assert segment_by_language("") == []
    assert segment_by_language(None) == []
    assert segment_by_language(42) == []
