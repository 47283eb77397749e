# urlspecs/preprocessing/char_stats.py

import html
import re
from dataclasses import dataclass
from urllib.parse import unquote

LETTER = "L"
DIGIT = "D"
SPECIAL = "S"

SCHEME_PREFIX_RE = re.compile(r"^[A-Za-z]+://")
WWW_PREFIX_RE = re.compile(r"^www\.")


@dataclass(frozen=True)
class CharacterStats:
    letters: int = 0
    digits: int = 0
    question_marks: int = 0
    equals_signs: int = 0
    ampersands: int = 0
    other_specials: int = 0
    continuation_rate: float = 0.0

    @property
    def length(self) -> int:
        return (self.letters + self.digits + self.question_marks
                + self.equals_signs + self.ampersands + self.other_specials)

    @property
    def delimiters(self) -> int:
        """Query delimiters: `?`, `=` and `&`."""
        return self.question_marks + self.equals_signs + self.ampersands


def char_class(c: str) -> str:
    """Three-way class used for continuation: ASCII letter, ASCII digit, anything else."""
    if ("a" <= c <= "z") or ("A" <= c <= "Z"):
        return LETTER
    if "0" <= c <= "9":
        return DIGIT
    return SPECIAL


def continuation_rate(s: str) -> float:
    """
    Share of adjacent character pairs that fall in the same class.
    0.0 for strings of length 0 or 1.
    """
    if len(s) <= 1:
        return 0.0
    classes = [char_class(c) for c in s]
    same = sum(1 for prev, cur in zip(classes, classes[1:]) if prev == cur)
    return same / (len(s) - 1)


def scan(s: str) -> CharacterStats:
    """Classify every code point of `s` into exactly one counted bucket."""
    letters = digits = qmarks = equals = amps = others = 0
    same = 0
    prev = None
    for c in s:
        cls = char_class(c)
        if cls == LETTER:
            letters += 1
        elif cls == DIGIT:
            digits += 1
        elif c == "?":
            qmarks += 1
        elif c == "=":
            equals += 1
        elif c == "&":
            amps += 1
        else:
            others += 1
        if cls == prev:
            same += 1
        prev = cls

    rate = same / (len(s) - 1) if len(s) > 1 else 0.0
    return CharacterStats(
        letters=letters,
        digits=digits,
        question_marks=qmarks,
        equals_signs=equals,
        ampersands=amps,
        other_specials=others,
        continuation_rate=rate,
    )


def unescape_for_special_count(url: str) -> str:
    """
    Reduce a URL to the text whose special characters are counted:
    strip, drop `scheme://` and a leading `www.`, then decode %XX escapes
    and HTML entities (`&amp;` -> `&`).
    """
    s = (url or "").strip()
    s = SCHEME_PREFIX_RE.sub("", s, count=1)
    s = WWW_PREFIX_RE.sub("", s, count=1)
    s = unquote(s)
    return html.unescape(s)
