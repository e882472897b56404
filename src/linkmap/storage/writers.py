# LinkMap — Sitemap file writer (<root>/<host>/<host>.xml)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import os
from typing import Optional

from ..core.sitemap import SitemapDocument, render_sitemap
from ..errors import OutputError
from ..utils.io import ensure_dirs, write_bytes
from ..utils.urls import host_of


logger = logging.getLogger(__name__)


class SitemapWriter:
	"""Persist one sitemap per seed host under out_root."""

	def __init__(self, out_root: Optional[str] = None) -> None:
		self.out_root = out_root or os.getcwd()

	def path_for(self, seed: str) -> str:
		host = host_of(seed)
		return os.path.join(self.out_root, host, f"{host}.xml")

	def write(self, seed: str, doc: SitemapDocument) -> str:
		path = self.path_for(seed)
		data = render_sitemap(doc)
		try:
			ensure_dirs(os.path.dirname(path))
			write_bytes(path, data)
		except OSError as e:
			raise OutputError(f"cannot write {path}: {e}") from e
		logger.info("Wrote %s (%d urls)", path, len(doc))
		return path
