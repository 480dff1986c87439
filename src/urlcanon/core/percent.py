# urlcanon — Percent-codec: fixpoint decoding and policy-based encoding
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Dict, List, Optional

from ..utils.text import from_byte_text, to_byte_text, to_text


RESERVED_CHARS = frozenset("!*'();:@&=+$,/?#[]")

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _must_escape(code: int) -> bool:
	return code <= 0x20 or code >= 0x7F or chr(code) in "#%"


def _build_table(reserved: bool, space: Optional[str] = None) -> Dict[int, str]:
	table: Dict[int, str] = {}
	for code in range(256):
		if _must_escape(code) or (reserved and chr(code) in RESERVED_CHARS):
			table[code] = "%{:02X}".format(code)
	if space is not None:
		table[0x20] = space
	return table


_SAFE_TABLE = _build_table(reserved=False)
_FULL_TABLE = _build_table(reserved=True)
_FORM_TABLE = _build_table(reserved=True, space="+")


def _decode_to_fixpoint(raw: str) -> str:
	# After each appended byte only the last three output bytes can form a new
	# "%XX", so re-checking the tail reaches the same result as decoding pass
	# after pass, in linear time.
	out: List[str] = []
	for c in raw:
		out.append(c)
		while len(out) >= 3 and out[-3] == "%" and out[-2] in _HEX_DIGITS and out[-1] in _HEX_DIGITS:
			code = int(out[-2] + out[-1], 16)
			del out[-3:]
			out.append(chr(code))
	return "".join(out)


def unescape(text, length: int = 0) -> Optional[str]:
	"""Percent-decode until no "%XX" sequence is left.

	Invalid or incomplete escapes ("%", "%2", "%zz") are kept literally.
	Decoded bytes that are not valid UTF-8 come back as surrogate escapes.
	"""
	text = to_text(text)
	if text is None:
		return None
	if length:
		text = text[:length]
	return from_byte_text(_decode_to_fixpoint(to_byte_text(text)))


def _escape(text, length: int, table: Dict[int, str]) -> Optional[str]:
	text = to_text(text)
	if text is None:
		return None
	if length:
		text = text[:length]
	return to_byte_text(text).translate(table)


def escape(text, length: int = 0) -> Optional[str]:
	"""Escape control bytes, space, non-ASCII, '#' and '%'; reserved characters pass."""
	return _escape(text, length, _SAFE_TABLE)


def escape_full(text, length: int = 0) -> Optional[str]:
	"""Like escape() but every RFC 3986 reserved character is escaped too."""
	return _escape(text, length, _FULL_TABLE)


def form_url_encode(text) -> Optional[str]:
	"""application/x-www-form-urlencoded form: decode first, full-escape, space as '+'."""
	return _escape(unescape(text), 0, _FORM_TABLE)


__all__ = [
	"RESERVED_CHARS",
	"unescape",
	"escape",
	"escape_full",
	"form_url_encode",
]
