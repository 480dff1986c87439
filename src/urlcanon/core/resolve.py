# urlcanon — Relative URL resolution (make absolute)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Optional

from ..utils.text import to_text
from .components import get_base, get_scheme, is_absolute
from .normalize import normalize
from .sanitize import remove_fragment


logger = logging.getLogger(__name__)


def _authority_prefix(base: str) -> str:
	# scheme://host[:port] of an already normalized URL
	start = base.index("://") + 3
	return base[:base.index("/", start)]


def make_absolute(parent_url, url) -> Optional[str]:
	"""Resolve url against the absolute parent_url and normalize the result.

	Both URLs are expected to be unescaped. The fragment of url, if any (even
	an empty one), is carried over to the result.
	"""
	if parent_url is None or url is None:
		return None
	candidate, fragment = remove_fragment(to_text(url))

	if is_absolute(candidate):
		absolute = normalize(candidate)
	else:
		base = get_base(parent_url)
		if base is None:
			logger.debug("Cannot resolve %r: bad parent %r", url, parent_url)
			return None
		if candidate.startswith("//"):
			absolute = normalize(get_scheme(base)[:-2] + candidate)
		elif candidate.startswith("/"):
			absolute = normalize(_authority_prefix(base) + candidate)
		else:
			absolute = normalize(base + candidate)

	if absolute is None:
		logger.debug("Cannot normalize %r resolved against %r", url, parent_url)
		return None
	if fragment is not None:
		absolute = "{}#{}".format(absolute, fragment)
	return absolute


__all__ = ["make_absolute"]
