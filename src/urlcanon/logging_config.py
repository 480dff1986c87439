# urlcanon — Logging configuration (rotating file + stdout)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
from typing import Optional


def configure_logging(level: str = "INFO", log_dir: str = "logs", library_level: Optional[str] = None) -> None:
	"""Configure root logger with a rotating file handler and a stream handler.

	Lines are tab-separated: time, level, logger, message. library_level, when
	given, applies to the "urlcanon" logger only, so canonicalization debug
	output can be switched on without the rest of the application.
	"""
	os.makedirs(log_dir, exist_ok=True)
	log_path = os.path.join(log_dir, "urlcanon.log")

	fmt = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"

	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.INFO))

	# Clear existing handlers in case of re-init
	for h in list(root.handlers):
		root.removeHandler(h)

	stream = logging.StreamHandler()
	stream.setFormatter(logging.Formatter(fmt))
	root.addHandler(stream)

	file_handler = logging.handlers.RotatingFileHandler(
		log_path, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
	)
	file_handler.setFormatter(logging.Formatter(fmt))
	root.addHandler(file_handler)

	lib_logger = logging.getLogger("urlcanon")
	if library_level:
		lib_logger.setLevel(getattr(logging, library_level.upper(), logging.INFO))
	else:
		lib_logger.setLevel(logging.NOTSET)
