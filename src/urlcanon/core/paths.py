# urlcanon — Path resolver: dot-segments and slash runs
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import List


def _resolve_segments(path: str) -> str:
	"""Resolve a path that starts with '/' (no query).

	'.' and empty segments are dropped, '..' drops the previous segment and
	stops at the root. A trailing '/', '/.' or '/..' keeps a trailing slash.
	"""
	stack: List[str] = []
	segments = path.split("/")[1:]
	trailing = False
	for seg in segments:
		trailing = seg in ("", ".", "..")
		if seg == "..":
			if stack:
				stack.pop()
		elif seg and seg != ".":
			stack.append(seg)
	if not stack:
		return "/"
	return "/" + "/".join(stack) + ("/" if trailing else "")


def resolve_path(url: str, boundary: int = 0) -> str:
	"""Resolve the path of url[boundary:], leaving url[:boundary] and the query untouched.

	boundary is the position right after the host; '..' never climbs above it.
	"""
	head, rest = url[:boundary], url[boundary:]
	path, sep, query = rest.partition("?")
	if not path.startswith("/"):
		path = "/" + path
	return head + _resolve_segments(path) + sep + query


__all__ = ["resolve_path"]
