# LinkMap — Extraction: anchor hrefs from HTML
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import List

from bs4 import BeautifulSoup, FeatureNotFound

from ..errors import ParseError


PARSER_CANDIDATES = ["lxml", "html.parser"]


def parse_html(content: bytes) -> BeautifulSoup:
	"""Parse HTML using lxml if available, else builtin parser."""
	for parser in PARSER_CANDIDATES:
		try:
			return BeautifulSoup(content, parser)
		except FeatureNotFound:
			continue
	return BeautifulSoup(content, "html.parser")


def extract_links(content: bytes) -> List[str]:
	"""Raw href values of every <a href> in document order."""
	try:
		soup = parse_html(content)
		return [a.get('href', '') for a in soup.find_all('a', href=True)]
	except Exception as e:
		raise ParseError(f"link extraction failed: {e}") from e
