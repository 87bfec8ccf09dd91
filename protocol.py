"""Line protocol for the GHOSTYPE peripheral.

Text is split into language runs and sent as newline-delimited lines:

    #CMD:HANGUL     switch the peripheral to Korean input
    #CMD:ENGLISH    switch the peripheral to English input
    #TEXT:<keys>    type the payload
    #CMD:ENTER      and TAB, SHIFT, CTRL, ALT for special keys

Korean payloads are already transcoded to Dubeolsik keystrokes, so every
line is plain ASCII for the peripheral. Example, for "안녕Hello":

    #CMD:HANGUL
    #TEXT:dkssud
    #CMD:ENGLISH
    #TEXT:Hello

An older single-record JSON form ({text, speed_cps, type}) is still produced
for simple messages; both forms serialize the same ProtocolDocument.
"""
import collections
import json
import logging

import config
import engine
import segmenter

logger = logging.getLogger(__name__)

CMD_PREFIX = "#CMD:"
TEXT_PREFIX = "#TEXT:"

HANGUL = "HANGUL"
ENGLISH = "ENGLISH"
TAB = "TAB"
ENTER = "ENTER"
SHIFT = "SHIFT"
CTRL = "CTRL"
ALT = "ALT"
TEXT = "TEXT"

COMMANDS = (HANGUL, ENGLISH, TAB, ENTER, SHIFT, CTRL, ALT)
LANGUAGE_COMMANDS = (HANGUL, ENGLISH)

CONFIG_PREFIX = "GHTYPE_CFG:"


class ProtocolCommand(collections.namedtuple("ProtocolCommand", ["token", "payload"])):
    __slots__ = ()

    def __new__(cls, token, payload=None):
        return super().__new__(cls, token, payload)

    # Only text() attaches a payload; a bare "TEXT" token is still a #CMD line
    @property
    def is_text(self):
        return self.payload is not None

    def line(self):
        if self.is_text:
            return TEXT_PREFIX + self.payload
        return CMD_PREFIX + self.token

    def __str__(self):
        return self.line()


def text(payload):
    return ProtocolCommand(TEXT, payload)


HANGUL_CMD = ProtocolCommand(HANGUL)
ENGLISH_CMD = ProtocolCommand(ENGLISH)
TAB_CMD = ProtocolCommand(TAB)
ENTER_CMD = ProtocolCommand(ENTER)
SHIFT_CMD = ProtocolCommand(SHIFT)
CTRL_CMD = ProtocolCommand(CTRL)
ALT_CMD = ProtocolCommand(ALT)

CONTROL_COMMANDS = {
    "\n": ENTER_CMD,
    "\r": ENTER_CMD,
    "\t": TAB_CMD,
}

SPECIAL_NAMES = {
    "tab": TAB_CMD,
    "enter": ENTER_CMD,
    "return": ENTER_CMD,
    "shift": SHIFT_CMD,
    "ctrl": CTRL_CMD,
    "control": CTRL_CMD,
    "alt": ALT_CMD,
}


def special_command(name):
    name = name.strip()
    if not name or any(c.isspace() or ord(c) < 0x20 for c in name):
        raise ValueError(f"Invalid command name: {name!r}")
    cmd = SPECIAL_NAMES.get(name.lower())
    if cmd is not None:
        return cmd
    return ProtocolCommand(name.upper())


Stats = collections.namedtuple(
    "Stats",
    ["total_segments", "korean_segments", "english_segments", "control_segments",
     "language_switches", "total_commands"],
)

ProtocolDocument = collections.namedtuple(
    "ProtocolDocument", ["original", "segments", "commands", "stats"])

Conversion = collections.namedtuple(
    "Conversion", ["original", "converted", "protocol", "legacy", "type", "document"])

ValidationResult = collections.namedtuple(
    "ValidationResult", ["valid", "errors", "line_count"])


def count_language_switches(segments):
    # The first language run counts as a switch from no context
    switches = 0
    current = None
    for seg in segments:
        if seg.language == segmenter.CONTROL:
            continue
        if seg.language != current:
            switches += 1
            current = seg.language
    return switches


def document_type(stats):
    if stats.korean_segments:
        return engine.MIXED if stats.english_segments else engine.KOREAN
    return engine.ENGLISH


class ProtocolEncoder:
    def __init__(self, transcoder=None, language_segmenter=None):
        self.transcoder = transcoder if transcoder is not None else engine.default_engine()
        self.segmenter = language_segmenter if language_segmenter is not None \
            else segmenter.LanguageSegmenter()

    def encode_segments(self, segments):
        commands = []
        for seg in segments:
            if seg.language == segmenter.CONTROL:
                # Unknown control characters are typed under whatever
                # language is already active
                commands.append(CONTROL_COMMANDS.get(seg.text) or text(seg.text))
            elif seg.language == segmenter.KOREAN:
                commands.append(HANGUL_CMD)
                commands.append(text(self.transcoder.transcode(seg.text)))
            else:
                commands.append(ENGLISH_CMD)
                commands.append(text(seg.text))
        return commands

    def encode(self, text):
        return self.encode_segments(self.segmenter.segment(text))

    def serialize(self, commands):
        return "\n".join(cmd.line() for cmd in commands)

    def encode_string(self, text):
        return self.serialize(self.encode(text))

    def analyze(self, text):
        segments = self.segmenter.segment(text)
        commands = self.encode_segments(segments)

        languages = [seg.language for seg in segments]
        stats = Stats(
            total_segments=len(segments),
            korean_segments=languages.count(segmenter.KOREAN),
            english_segments=languages.count(segmenter.ENGLISH),
            control_segments=languages.count(segmenter.CONTROL),
            language_switches=count_language_switches(segments),
            total_commands=len(commands),
        )
        return ProtocolDocument(text if isinstance(text, str) else "", segments, commands, stats)

    def converted_text(self, document):
        parts = []
        for seg in document.segments:
            if seg.language == segmenter.KOREAN:
                parts.append(self.transcoder.transcode(seg.text))
            else:
                parts.append(seg.text)
        return "".join(parts)

    def convert(self, text, speed_cps=None):
        """Encode text in both wire forms.

        Returns a Conversion holding the original text, the keystroke text,
        the structured protocol, the legacy JSON record, the message type and
        the analyzed document.
        """
        document = self.analyze(text)
        legacy = LegacySerializer(self, speed_cps)
        return Conversion(
            original=document.original,
            converted=self.converted_text(document),
            protocol=StructuredSerializer().serialize(document),
            legacy=legacy.serialize(document),
            type=document_type(document.stats),
            document=document,
        )


class StructuredSerializer:
    def serialize(self, document):
        return "\n".join(cmd.line() for cmd in document.commands)


class LegacySerializer:
    def __init__(self, encoder=None, speed_cps=None):
        self.encoder = encoder if encoder is not None else ProtocolEncoder()
        self.speed_cps = config.clamp_speed(
            speed_cps if speed_cps is not None else config.DEFAULT_SPEED)

    def record(self, document):
        return {
            "text": self.encoder.converted_text(document),
            "speed_cps": self.speed_cps,
            "type": document_type(document.stats),
        }

    def serialize(self, document):
        return json.dumps(self.record(document), ensure_ascii=False)


def config_message(speed_cps):
    payload = {"mode": "typing", "speed_cps": config.clamp_speed(speed_cps)}
    return CONFIG_PREFIX + json.dumps(payload)


class ProtocolValidator:
    """Structural check of a serialized protocol string.

    Never raises; problems come back as line-numbered messages.
    """

    def __init__(self, extra_commands=()):
        self.commands = set(COMMANDS) | {c.upper() for c in extra_commands}

    def validate(self, serialized):
        if not serialized or not isinstance(serialized, str):
            return ValidationResult(False, ["Protocol string is empty or invalid"], 0)

        lines = serialized.split("\n")
        errors = []
        last_command = None

        for number, raw in enumerate(lines, 1):
            line = raw.strip()
            if not line:
                continue

            if line.startswith(CMD_PREFIX):
                token = line[len(CMD_PREFIX):]
                if token not in self.commands:
                    errors.append(f"Line {number}: Unknown command '{line}'")
                last_command = token
            elif line.startswith(TEXT_PREFIX):
                if last_command not in LANGUAGE_COMMANDS:
                    errors.append(f"Line {number}: TEXT command without preceding language command")
            else:
                errors.append(f"Line {number}: Invalid protocol format '{line}'")

        if errors:
            logger.debug("Protocol has %d error(s)", len(errors))
        return ValidationResult(not errors, errors, len(lines))


_default_encoder = None


def default_encoder():
    global _default_encoder
    if _default_encoder is None:
        _default_encoder = ProtocolEncoder()
    return _default_encoder


def encode(text):
    return default_encoder().encode(text)


def serialize(commands):
    return default_encoder().serialize(commands)


def analyze(text):
    return default_encoder().analyze(text)


def convert(text, speed_cps=None):
    return default_encoder().convert(text, speed_cps)


def validate(serialized):
    return ProtocolValidator().validate(serialized)
