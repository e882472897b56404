# LinkMap — Error types shared by the crawler layers
# Author: Sachin Chhetri
# Year: 2025
# License: MIT


class LinkmapError(Exception):
	"""Base class for every failure that aborts a run."""


class ConfigError(LinkmapError):
	"""Home directory or seed list could not be resolved or read."""


class FetchError(LinkmapError):
	"""Network failure while retrieving a page."""

	def __init__(self, url: str, message: str) -> None:
		super().__init__(f"{url}: {message}")
		self.url = url


class ParseError(LinkmapError):
	"""Malformed URL or link extraction failure."""


class OutputError(LinkmapError):
	"""Sitemap could not be serialized or written."""
