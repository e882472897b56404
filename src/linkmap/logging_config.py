# LinkMap — Logging configuration (stdout + optional rotating file)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
from typing import Optional


LOG_FORMAT = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"


def configure_logging(level: str = "INFO", log_dir: Optional[str] = "logs") -> None:
	"""Configure the root logger with a stdout handler and, when log_dir is set,
	a rotating file handler writing linkmap.log.
	"""
	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.INFO))

	# Clear existing handlers in case of re-init
	for h in list(root.handlers):
		root.removeHandler(h)

	formatter = logging.Formatter(LOG_FORMAT)
	stream = logging.StreamHandler()
	stream.setFormatter(formatter)
	root.addHandler(stream)

	if not log_dir:
		return
	os.makedirs(log_dir, exist_ok=True)
	file_handler = logging.handlers.RotatingFileHandler(
		os.path.join(log_dir, "linkmap.log"), maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
	)
	file_handler.setFormatter(formatter)
	root.addHandler(file_handler)
