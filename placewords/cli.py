"""Command line front end converting between coordinates, S2 ids and placewords."""

from __future__ import annotations

import re
import sys

from placewords.codec import Placewords, PlacewordsError
from placewords.s2 import ll_to_s2, s2_to_ll
from placewords.words import WordListError

_PROG = "placewords"
_HEX = re.compile(r"[0-9a-fA-F]*")
_MASK64 = (1 << 64) - 1
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_USAGE_FORMS = (
    "<latitude> <longitude>",
    "<latE6> <lonE6>",
    "<s2pw://some.words.here>",
    "<[0-9a-fA-F]{16}>",
)
_EXAMPLES = (
    "44.911759 -116.114708",
    "44911759 -116114708",
    "54A666CFFFFFFB6F",
    "s2pw://researching.oncoming.refereed",
    "s2pw://researching.oncoming.refereed.wray",
)


def parse_hex(text: str) -> int:
    """Parse hexadecimal digits into a 64-bit value; raise ValueError on any other character."""
    if not _HEX.fullmatch(text):
        bad = next(ch for ch in text if ch not in "0123456789abcdefABCDEF")
        raise ValueError(f"Unrecognized character '{bad}'")
    return int(text, 16) & _MASK64 if text else 0


def parse_language(arg: str) -> str | None:
    """Return the language code from an "=LANG" argument, or None if it is not one.

    The code ends at the first character that is not an ASCII letter or digit.
    Raises ValueError if no code remains.
    """
    if not arg.startswith("="):
        return None
    code = []
    for ch in arg[1:]:
        if not (ch.isascii() and ch.isalnum()):
            break
        code.append(ch)
    if not code:
        raise ValueError(
            f"did not understand '{arg[1:]}'\n"
            "expecting a 2 character code like 'en' or '32'"
        )
    return "".join(code)


def _atof(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _print_location(s2: int, lat_e6: int, lon_e6: int) -> None:
    print(f"s2={s2:016X}")
    print(f"latE6={lat_e6} lonE6={lon_e6}")
    print(f"lat={lat_e6 / 1e6:.6f} lon={lon_e6 / 1e6:.6f}")


def _usage_text(prog: str) -> str:
    """Build the usage message for the given program name."""
    lines = [
        f"{'Usage' if index == 0 else '   or'}: {prog} [=LANG] {form}"
        for index, form in enumerate(_USAGE_FORMS)
    ]
    lines.append("   (South latitudes and West longitudes are negative)")
    lines.append("")
    lines.append("Examples:")
    lines.extend(f"   {prog} {example}" for example in _EXAMPLES)
    return "\n".join(lines)


def _run(args: list[str]) -> None:
    language = "en"
    if args:
        code = parse_language(args[0])
        if code is not None:
            language = code
            args = args[1:]

    codec = Placewords.for_language(language)

    if len(args) == 2:
        first, second = args
        if "." in first or "." in second:
            lat_e6 = int(_atof(first) * 1e6)
            lon_e6 = int(_atof(second) * 1e6)
        else:
            lat_e6 = _atoi(first)
            lon_e6 = _atoi(second)
        s2 = ll_to_s2(lat_e6, lon_e6)
        _print_location(s2, lat_e6, lon_e6)
        print(codec.encode(s2))
    elif len(args) == 1:
        (arg,) = args
        if ":" in arg:
            s2 = codec.decode(arg)
            _print_location(s2, *s2_to_ll(s2))
        else:
            s2 = parse_hex(arg)
            _print_location(s2, *s2_to_ll(s2))
            print(codec.encode(s2))
    else:
        print(_usage_text(_PROG))


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        _run(args)
    except (PlacewordsError, WordListError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())