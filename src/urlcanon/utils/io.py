# urlcanon — IO helpers (directories, URL lists, JSONL writing)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import json
import os
from typing import Any, Iterator


def ensure_dirs(*paths: str) -> None:
	for p in paths:
		if p:
			os.makedirs(p, exist_ok=True)


def read_lines(path: str) -> Iterator[str]:
	"""Yield non-blank lines of a UTF-8 file, without the line ending.

	Invalid bytes come through as surrogate escapes and are written back
	unchanged by append_jsonl().
	"""
	with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
		for line in f:
			line = line.rstrip("\r\n")
			if line.strip():
				yield line


def append_jsonl(path: str, obj: Any) -> None:
	ensure_dirs(os.path.dirname(path))
	with open(path, "a", encoding="utf-8", errors="surrogateescape") as f:
		f.write(json.dumps(obj, ensure_ascii=False) + "\n")
