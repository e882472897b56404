# LinkMap — IO helpers (directories, file writes)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os


def ensure_dirs(*paths: str) -> None:
	for p in paths:
		os.makedirs(p, exist_ok=True)


def write_bytes(path: str, data: bytes) -> None:
	with open(path, "wb") as f:
		f.write(data)
