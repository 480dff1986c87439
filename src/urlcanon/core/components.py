# urlcanon — Component extraction: scheme, hostname, base, fragment
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from functools import lru_cache
from typing import NamedTuple, Optional

import tldextract

from ..utils.text import to_text
from .normalize import normalize
from .percent import escape
from .sanitize import remove_query


_HOST_STOP_RE = re.compile(r"[/:]")


class SplitUrl(NamedTuple):
	scheme: Optional[str]
	link: Optional[str]
	query: Optional[str]


def get_scheme(url) -> Optional[str]:
	"""Return everything up to and including the first '://', or None."""
	url = to_text(url)
	if url is None:
		return None
	idx = url.find("://")
	if idx == -1:
		return None
	return url[:idx + 3]


def split(url) -> SplitUrl:
	"""Split into (scheme, link, query).

	The first '?' starts the query; a ':' before it ends the scheme. Without
	a ':' the whole text before the query is the link.
	"""
	url = to_text(url)
	if url is None:
		return SplitUrl(None, None, None)
	head, sep, query = url.partition("?")
	scheme, colon, link = head.partition(":")
	if not colon:
		return SplitUrl(None, head, query if sep else None)
	return SplitUrl(scheme, link, query if sep else None)


def _hostname(url, strip_www: bool) -> Optional[str]:
	normalized = normalize(url)
	if normalized is None:
		return None
	link = split(normalized).link or ""
	if link.startswith("//"):
		link = link[2:]
	if strip_www and link.startswith("www."):
		link = link[4:]
	return escape(_HOST_STOP_RE.split(link, 1)[0])


def get_hostname(url) -> Optional[str]:
	"""Escaped hostname of url without port and without a leading 'www.'."""
	return _hostname(url, strip_www=True)


def get_hostname_keep_www(url) -> Optional[str]:
	return _hostname(url, strip_www=False)


@lru_cache(maxsize=1)
def _tld_extractor() -> tldextract.TLDExtract:
	# bundled public suffix snapshot only, never fetched over the network
	return tldextract.TLDExtract(suffix_list_urls=())


def get_registered_domain(url) -> Optional[str]:
	"""Registered domain (eTLD+1) of url's host; IP hosts are returned unchanged."""
	host = get_hostname_keep_www(url)
	if not host:
		return host
	ext = _tld_extractor()(host)
	return ".".join([p for p in [ext.domain, ext.suffix] if p]) or host


def get_base(url, length: int = 0) -> Optional[str]:
	"""Normalized url without its query, cut after the last '/' of the path."""
	normalized = normalize(url, length)
	if normalized is None:
		return None
	without_query, _ = remove_query(normalized)
	return without_query[:without_query.rfind("/") + 1]


def get_fragment(url) -> Optional[str]:
	"""Text after the first '#' of an unescaped url, or None."""
	url = to_text(url)
	if url is None or "#" not in url:
		return None
	return url.split("#", 1)[1]


def is_absolute(url) -> bool:
	if not url:
		return False
	return to_text(url)[:8].lower().startswith(("http://", "https://"))


__all__ = [
	"SplitUrl",
	"get_scheme",
	"split",
	"get_hostname",
	"get_hostname_keep_www",
	"get_registered_domain",
	"get_base",
	"get_fragment",
	"is_absolute",
]
