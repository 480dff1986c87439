# urlcanon — Canonicalizer (Safe Browsing canonical form)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional

from .normalize import normalize
from .percent import escape, escape_full


def canonicalize(url, length: int = 0) -> Optional[str]:
	"""Canonicalize url as described in the Safe Browsing developer guide.

	The result is the normalized URL with control bytes, spaces, non-ASCII,
	'#' and '%' escaped; reserved characters are left alone. None if url
	cannot be normalized.
	"""
	return escape(normalize(url, length))


def canonicalize_full_escape(url, length: int = 0) -> Optional[str]:
	"""Same as canonicalize() but reserved characters are escaped as well."""
	return escape_full(normalize(url, length))


__all__ = [
	"canonicalize",
	"canonicalize_full_escape",
]
