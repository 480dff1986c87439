# urlcanon — Query tokenizer (permissive key=value scanning)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import string
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple

from ..config import settings
from ..utils.text import to_text


_ALNUM = frozenset(string.ascii_letters + string.digits)
_KEY_CHARS = _ALNUM | frozenset("-_")
_QUOTES = "\"'"


class KeyValuePair(NamedTuple):
	key: str
	value: Optional[str]
	remainder: Optional[str]


def _rest(text: str, pos: int) -> Optional[str]:
	return text[pos:] or None


def _find_separator(text: str, pos: int, separators: Iterable[str]) -> int:
	while pos < len(text) and text[pos] not in separators:
		pos += 1
	return pos


def next_key_value_pair(text, separators: Optional[str] = None) -> Optional[KeyValuePair]:
	"""Consume one key/value pair from text.

	Keys are runs of letters, digits, '-' and '_'. A key without '=' has value
	None. A 'url' key swallows the rest of the text as its value (meta refresh
	style "0;URL=http://..."). Quoted values run to the matching quote; an
	unterminated quote yields no value and ends the scan. Returns None when
	no key is left; the returned remainder is None once nothing follows.
	"""
	text = to_text(text)
	if text is None:
		return None
	seps = frozenset(settings.query_separators if separators is None else separators)
	n = len(text)

	i = 0
	while i < n and text[i] not in _ALNUM:
		i += 1
	if i == n:
		return None
	start = i
	while i < n and text[i] in _KEY_CHARS:
		i += 1
	key = text[start:i]

	while i < n and text[i] != "=" and text[i] not in seps:
		i += 1
	if i == n:
		return KeyValuePair(key, None, None)
	if text[i] in seps:
		return KeyValuePair(key, None, _rest(text, i + 1))

	i += 1
	while i < n and ord(text[i]) <= 0x20:
		i += 1
	if key.lower() == "url":
		return KeyValuePair(key, text[i:], None)

	if i < n and text[i] in _QUOTES:
		close = text.find(text[i], i + 1)
		if close == -1:
			return KeyValuePair(key, None, None)
		value = text[i + 1:close]
		end = _find_separator(text, close + 1, seps)
	else:
		end = _find_separator(text, i, seps)
		value = text[i:end]
	return KeyValuePair(key, value, _rest(text, end + 1))


def iter_key_value_pairs(text, separators: Optional[str] = None) -> Iterator[Tuple[str, Optional[str]]]:
	"""Yield (key, value) for every pair in text."""
	remainder = to_text(text)
	while remainder is not None:
		pair = next_key_value_pair(remainder, separators)
		if pair is None:
			break
		yield pair.key, pair.value
		remainder = pair.remainder


__all__ = [
	"KeyValuePair",
	"next_key_value_pair",
	"iter_key_value_pairs",
]
