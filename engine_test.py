import pytest

import engine
from engine import TranscodingEngine


@pytest.fixture
def eng():
    return TranscodingEngine()


@pytest.mark.parametrize("text, keys", [
    ('가', 'rk'),
    ('안녕', 'dkssud'),
    ('안녕하세요', 'dkssudgktpdy'),
    ('닭', 'ekfr'),
    ('없', 'djqt'),
    ('갚', 'rkv'),
    ('같', 'rkx'),
    ('까', 'Rk'),
    ('과', 'rhk'),
    ('괘', 'rho'),
    ('궤', 'rnp'),
    ('돼', 'eho'),
    ('의', 'dml'),
    ('얘', 'dO'),
    ('예', 'dP'),
])
def test_transcode_syllables(eng, text, keys):
    assert eng.transcode(text) == keys


def test_transcode_passes_other_text_through(eng):
    assert eng.transcode('이야!') == 'dldi!'
    assert eng.transcode('Hello 안녕') == 'Hello dkssud'
    assert eng.transcode('😀가') == '😀rk'


def test_transcode_lone_jamo(eng):
    assert eng.transcode('ㅋㅋ') == 'zz'
    assert eng.transcode('ㄺ') == 'fr'
    assert eng.transcode('ㅘ') == 'hk'


def test_transcode_empty(eng):
    assert eng.transcode('') == ''
    assert eng.transcode(None) == ''


@pytest.mark.parametrize("text", ['가나다', '닭 먹고 싶다!', 'Hi 안녕\n', '의외로 괜찮네'])
def test_transcode_is_idempotent(eng, text):
    once = eng.transcode(text)
    assert eng.transcode(once) == once


@pytest.mark.parametrize("text, kind", [
    ('안녕', engine.KOREAN),
    ('Hello', engine.ENGLISH),
    ('123!', engine.ENGLISH),
    ('안녕Hello', engine.MIXED),
    ('안녕!', engine.MIXED),
    ('', engine.UNKNOWN),
    ('😀', engine.UNKNOWN),
    ('Привет', engine.UNKNOWN),
    ('가\n', engine.KOREAN),
    ('안녕\t', engine.KOREAN),
    ('가\r\n나', engine.KOREAN),
    ('\n\t', engine.UNKNOWN),
])
def test_classify(eng, text, kind):
    assert eng.classify(text) == kind


def test_analyze_text_counts(eng):
    result = eng.analyze_text('가a1\n😀')
    assert result.type == engine.MIXED
    assert result.korean_chars == 1
    assert result.english_chars == 1
    assert result.special_chars == 2
    assert result.unsupported_chars == 1
    assert result.total_chars == 5
    assert result.has_unsupported


def test_can_type(eng):
    assert eng.can_type('닭')
    assert eng.can_type('ㄺ')
    assert not eng.can_type('a')


def test_diagnostics(eng):
    report = eng.diagnostics()
    assert report["mapping_count"] == 33
    assert report["reverse_mapping_count"] == 33
    assert report["compound_jongseong"] == 11
    assert report["compound_vowels"] == 7
    assert report["mismatches"] == []


def test_module_helpers():
    assert engine.transcode('가') == 'rk'
    assert engine.classify('가') == engine.KOREAN


def test_whitespace_controls_are_counted_but_not_english(eng):
    result = eng.analyze_text('안녕\n')
    assert result.type == engine.KOREAN
    assert result.special_chars == 1
    assert result.english_chars == 0
