# urlcanon — Text helpers: UTF-8 text with escaped raw bytes
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import string
from typing import Optional, Union


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_text(value: Optional[Union[str, bytes, bytearray]]) -> Optional[str]:
	"""Return value as str.

	bytes are decoded as UTF-8; bytes that are not valid UTF-8 become lone
	surrogates (surrogateescape) so they survive the round trip unchanged.
	"""
	if value is None:
		return None
	if isinstance(value, (bytes, bytearray)):
		return bytes(value).decode("utf-8", "surrogateescape")
	return value


def to_byte_text(value: Optional[Union[str, bytes, bytearray]]) -> Optional[str]:
	"""Return the UTF-8 bytes of value as a str with one character per byte."""
	text = to_text(value)
	if text is None:
		return None
	try:
		raw = text.encode("utf-8", "surrogateescape")
	except UnicodeEncodeError:
		# surrogates outside the escape range, e.g. a lone '\ud800'
		raw = text.encode("utf-8", "surrogatepass")
	return raw.decode("latin-1")


def from_byte_text(text: str) -> str:
	"""Inverse of to_byte_text()."""
	return text.encode("latin-1").decode("utf-8", "surrogateescape")


def ascii_lower(value: str) -> str:
	# str.lower() would also fold non-ASCII letters
	return value.translate(_ASCII_LOWER)


__all__ = [
	"to_text",
	"to_byte_text",
	"from_byte_text",
	"ascii_lower",
]
