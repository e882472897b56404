# LinkMap — Sitemap document assembly and XML serialization
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Iterable, Iterator, Tuple
import xml.etree.ElementTree as ET

from ..errors import OutputError


SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


class SitemapDocument:
	"""Immutable, sorted sequence of distinct page URLs."""

	__slots__ = ("_urls",)

	def __init__(self, urls: Iterable[str]) -> None:
		self._urls: Tuple[str, ...] = tuple(sorted(set(urls)))

	@property
	def urls(self) -> Tuple[str, ...]:
		return self._urls

	def __iter__(self) -> Iterator[str]:
		return iter(self._urls)

	def __len__(self) -> int:
		return len(self._urls)

	def __repr__(self) -> str:
		return f"SitemapDocument({len(self._urls)} urls)"


def build_sitemap(urls: Iterable[str]) -> SitemapDocument:
	return SitemapDocument(urls)


def render_sitemap(doc: SitemapDocument) -> bytes:
	"""Serialize as a sitemaps.org urlset with two-space indentation."""
	root = ET.Element("urlset", xmlns=SITEMAP_NS)
	for u in doc:
		url_el = ET.SubElement(root, "url")
		ET.SubElement(url_el, "loc").text = u
	ET.indent(root, space="  ")
	try:
		body = ET.tostring(root, encoding="unicode")
	except (TypeError, ValueError) as e:
		raise OutputError(f"cannot serialize sitemap: {e}") from e
	return (XML_HEADER + body + "\n").encode("utf-8")
