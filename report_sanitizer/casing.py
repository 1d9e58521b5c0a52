from __future__ import annotations

import re
import unicodedata
from typing import Any, List

# Latin letters that have no canonical decomposition.
_DEBURRED_LETTERS = {
    '\xc6': 'Ae', '\xe6': 'ae',
    '\xd0': 'D', '\xf0': 'd',
    '\xd8': 'O', '\xf8': 'o',
    '\xde': 'Th', '\xfe': 'th',
    '\xdf': 'ss',
    'Đ': 'D', 'đ': 'd',
    'Ħ': 'H', 'ħ': 'h',
    'ı': 'i',
    'Ĳ': 'IJ', 'ĳ': 'ij',
    'ĸ': 'k',
    'Ŀ': 'L', 'ŀ': 'l',
    'Ł': 'L', 'ł': 'l',
    'ŉ': "'n",
    'Ŋ': 'N', 'ŋ': 'n',
    'Œ': 'Oe', 'œ': 'oe',
    'Ŧ': 'T', 'ŧ': 't',
    'ſ': 's',
}

_LATIN_RE = re.compile('[\xc0-\xd6\xd8-\xf6\xf8-\xff\u0100-\u017f]')
_COMBO_MARKS_RE = re.compile('[\u0300-\u036f\ufe20-\ufe2f\u20d0-\u20ff]')

_UPPER = 'A-Z\xc0-\xd6\xd8-\xde'
_LOWER = 'a-z\xdf-\xf6\xf8-\xff'
_BREAK = '\\x00-\\x2f\\x3a-\\x40\\x5b-\\x60\\x7b-\\xbf\\xd7\\xf7\\u2000-\\u206f\\s\\ufeff\\u180e'
_DINGBATS = '\\u2700-\\u27bf'
# Letters of other scripts (Cyrillic, CJK, ...): part of a word, never split on case.
_MISC = f"[^{_BREAK}0-9{_UPPER}{_LOWER}{_DINGBATS}]"

_WORD_RE = re.compile(
    # Capitalized or lowercase word: "Image", "size".
    rf"[{_UPPER}]?[{_LOWER}]+(?=[{_BREAK}]|[{_UPPER}]|\Z)"
    # Acronym ending before a boundary or the start of the next word: "XML" in "XMLHttp".
    rf"|(?:[{_UPPER}]|{_MISC})+(?=[{_BREAK}]|[{_UPPER}](?:[{_LOWER}]|{_MISC})|\Z)"
    rf"|[{_UPPER}]?(?:[{_LOWER}]|{_MISC})+"
    rf"|[{_UPPER}]+"
    r"|[0-9]*(?:1ST|2ND|3RD|(?![123])[0-9]TH)(?=\b|[a-z_])"
    r"|[0-9]*(?:1st|2nd|3rd|(?![123])[0-9]th)(?=\b|[A-Z_])"
    r"|[0-9]+"
    rf"|[{_DINGBATS}]"
)

_APOSTROPHES_RE = re.compile("['’]")

_ENV_KEY_RE = re.compile(r"[A-Z_]+")


def _deburr_letter(match) -> str:
    ch = match.group(0)
    if ch in _DEBURRED_LETTERS:
        return _DEBURRED_LETTERS[ch]
    return ''.join(c for c in unicodedata.normalize('NFD', ch) if not unicodedata.combining(c))


def deburr(text: str) -> str:
    """Strip diacritics from Latin letters ("Crème Brûlée" -> "Creme Brulee").

    Letters of other scripts are left alone, so "й" stays "й".
    """
    return _COMBO_MARKS_RE.sub('', _LATIN_RE.sub(_deburr_letter, text))


def split_words(text: str) -> List[str]:
    """Split text into words on delimiters, case changes and letter/digit transitions.

    >>> split_words('recommendedSize')
    ['recommended', 'Size']
    >>> split_words('XMLHttpRequest')
    ['XML', 'Http', 'Request']
    >>> split_words('path2')
    ['path', '2']
    """
    return _WORD_RE.findall(text)


def upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def start_case(value: Any) -> str:
    """Render a key as space separated words, each with an upper-cased first letter.

    Only the first letter of each word is changed, so acronyms and
    upper-case runs are kept: ``'fooBAR'`` becomes ``'Foo BAR'``.
    """
    text = _APOSTROPHES_RE.sub('', deburr(str(value)))
    return ' '.join(upper_first(word) for word in split_words(text))


def is_env_key(key: Any) -> bool:
    """Environment-variable style keys (``FOO_BAR``) are never renamed."""
    return bool(_ENV_KEY_RE.fullmatch(str(key)))


def transform_key(key: Any) -> str:
    if is_env_key(key):
        return str(key)
    return start_case(key)
