# urlcanon — Sanitizer: whitespace/control stripping, fragment and query removal
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional, Tuple

from ..utils.text import to_text


_TAB_CRLF = str.maketrans("", "", "\t\r\n")


def remove_tab_crlf(text, length: int = 0) -> Optional[str]:
	"""Strip leading/trailing spaces and delete every tab, CR and LF.

	Only the first `length` characters are used when length is non-zero.
	"""
	text = to_text(text)
	if text is None:
		return None
	if length:
		text = text[:length]
	return text.strip(" ").translate(_TAB_CRLF)


def _cut_at(text: Optional[str], marker: str) -> Tuple[Optional[str], Optional[str]]:
	if text is None:
		return None, None
	head, sep, tail = text.partition(marker)
	return head, (tail if sep else None)


def remove_fragment(text) -> Tuple[Optional[str], Optional[str]]:
	"""Split at the first '#'. Returns (url, fragment); fragment is None if absent."""
	return _cut_at(to_text(text), "#")


def remove_query(text) -> Tuple[Optional[str], Optional[str]]:
	"""Split at the first '?'. Returns (url, query); query is None if absent."""
	return _cut_at(to_text(text), "?")


__all__ = [
	"remove_tab_crlf",
	"remove_fragment",
	"remove_query",
]
