import argparse
import json
import logging
import sys

import config
import engine
import protocol


def read_text(args):
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def document_to_dict(document):
    return {
        "original": document.original,
        "segments": [seg._asdict() for seg in document.segments],
        "commands": [cmd.line() for cmd in document.commands],
        "stats": document.stats._asdict(),
    }


def cmd_encode(args, settings):
    print(protocol.default_encoder().encode_string(read_text(args)))
    return 0


def cmd_legacy(args, settings):
    speed = args.speed if args.speed is not None else settings.typing_speed
    print(protocol.convert(read_text(args), speed).legacy)
    return 0


def cmd_analyze(args, settings):
    document = protocol.analyze(read_text(args))
    data = document_to_dict(document)
    data["version"] = settings.protocol_version
    print(json.dumps(data, ensure_ascii=False, indent=2))
    return 0


def cmd_transcode(args, settings):
    print(engine.transcode(read_text(args)))
    return 0


def cmd_validate(args, settings):
    result = protocol.validate(read_text(args))
    for error in result.errors:
        print(error)
    print(f"{'valid' if result.valid else 'invalid'} ({result.line_count} lines)")
    return 0 if result.valid else 1


def cmd_diagnostics(args, settings):
    report = engine.default_engine().diagnostics()
    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 0 if not report["mismatches"] else 1


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ghostype",
        description="Convert Korean/English text into the GHOSTYPE keystroke protocol")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--config", default=None, help="path to config.ini")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, func, help_text in [
        ("encode", cmd_encode, "print the #CMD/#TEXT protocol"),
        ("legacy", cmd_legacy, "print the legacy JSON record"),
        ("analyze", cmd_analyze, "print segments, commands and stats as JSON"),
        ("transcode", cmd_transcode, "print Dubeolsik keystrokes"),
        ("validate", cmd_validate, "check a serialized protocol"),
    ]:
        p = sub.add_parser(name, help=help_text)
        p.add_argument("text", nargs="?", default=None, help="input text (default: stdin)")
        p.set_defaults(func=func)
        if name == "legacy":
            p.add_argument("--speed", type=int, default=None, help="typing speed, chars/sec")

    p = sub.add_parser("diagnostics", help="check the key map")
    p.set_defaults(func=cmd_diagnostics)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = config.load_settings(args.config)
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
