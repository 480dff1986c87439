# urlcanon — URL normalizer: scheme, host and path normalization
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import ipaddress
import logging
import re
from typing import Optional, Tuple

from ..config import settings
from ..utils.text import ascii_lower
from .paths import resolve_path
from .percent import unescape
from .sanitize import remove_fragment, remove_tab_crlf


logger = logging.getLogger(__name__)


_DIGITS_RE = re.compile(r"[0-9]+")
_PORT_RE = re.compile(r"[0-9]+(?:[/?]|$)|$")
_HOST_END_RE = re.compile(r"[/?]")


def split_scheme(text: str) -> Optional[Tuple[str, str]]:
	"""Split text into (scheme, rest) where rest follows '://'.

	A missing scheme (no ':', a ':' inside the path/query, or a bare host:port)
	falls back to the configured default. Returns None for a malformed marker
	such as 'mailto:x' or 'http:/x'.
	"""
	colon = text.find(":")
	head = text[:colon]
	if colon == -1 or "/" in head or "?" in head:
		return settings.default_scheme, (text[2:] if text.startswith("//") else text)
	if text.startswith("://", colon):
		return ascii_lower(head) or settings.default_scheme, text[colon + 3:]
	if _PORT_RE.match(text, colon + 1):
		return settings.default_scheme, text
	return None


def fold_host(host: str) -> str:
	"""Trim dots, render all-digit hosts as dotted IPv4, lowercase the rest."""
	host = host.strip(".")
	if _DIGITS_RE.fullmatch(host):
		# more than ten significant digits can never fit in 32 bits
		digits = host.lstrip("0") or "0"
		if len(digits) <= 10 and int(digits) <= 0xFFFFFFFF:
			return str(ipaddress.IPv4Address(int(digits)))
	return ascii_lower(host)


def normalize(url, length: int = 0) -> Optional[str]:
	"""Return the canonical unescaped form of url, or None if it cannot be normalized.

	Tabs/CR/LF and surrounding spaces are removed, the fragment dropped, the
	text percent-decoded to a fixpoint, the scheme defaulted and lowercased,
	the host folded and the path resolved.
	"""
	text = remove_tab_crlf(url, length)
	if not text:
		logger.debug("Nothing to normalize in %r", url)
		return None
	text, _ = remove_fragment(text)
	text = unescape(text)
	parts = split_scheme(text)
	if parts is None:
		logger.debug("Malformed scheme marker in %r", text)
		return None
	scheme, rest = parts
	m = _HOST_END_RE.search(rest)
	host_end = m.start() if m else len(rest)
	prefix = "{}://{}".format(scheme, fold_host(rest[:host_end]))
	return resolve_path(prefix + rest[host_end:], len(prefix))


__all__ = [
	"normalize",
	"split_scheme",
	"fold_host",
]
