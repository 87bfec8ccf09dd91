import collections

import hangul

KOREAN = "korean"
ENGLISH = "english"
CONTROL = "control"

# start and end are inclusive offsets into the source text
TextSegment = collections.namedtuple("TextSegment", ["language", "text", "start", "end"])


def classify(c):
    if hangul.is_hangul(c):
        return KOREAN
    if ord(c) < 0x20:
        return CONTROL
    # Anything else (digits, symbols, other scripts, emoji) rides with english
    return ENGLISH


class LanguageSegmenter:
    def __init__(self, classifier=classify):
        self.classifier = classifier

    def segment(self, text):
        """Split text into maximal runs of one language.

        Control characters always get a segment of their own. Joining the
        segment texts gives back the input.
        """
        if not text or not isinstance(text, str):
            return []

        segments = []
        language = None
        buf = []
        start = 0

        for i, c in enumerate(text):
            kind = self.classifier(c)

            if kind == CONTROL:
                if buf:
                    segments.append(TextSegment(language, "".join(buf), start, i - 1))
                segments.append(TextSegment(CONTROL, c, i, i))
                language = None
                buf = []
                continue

            if buf and kind != language:
                segments.append(TextSegment(language, "".join(buf), start, i - 1))
                buf = []

            if not buf:
                language = kind
                start = i
            buf.append(c)

        if buf:
            segments.append(TextSegment(language, "".join(buf), start, len(text) - 1))

        return segments


def segment_by_language(text):
    return LanguageSegmenter().segment(text)
