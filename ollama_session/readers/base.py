#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

#============================================


class ContextReader:
	"""
	Base interface for session file readers.
	"""

	name: str = "base"
	supported_suffixes: set[str] = set()

	#============================================
	def supports(self, path: Path) -> bool:
		"""
		Determine if this reader can handle the file.

		Args:
			path: File path.

		Returns:
			True if supported.
		"""
		return path.suffix.lower().lstrip(".") in self.supported_suffixes

	#============================================
	def read_text(self, path: Path) -> str:
		"""
		Read the whole file as text for the session context.

		Args:
			path: File path.

		Returns:
			File contents as text.
		"""
		raise NotImplementedError


class ReaderRegistry:
	"""
	Registry for session file readers.
	"""

	#============================================
	def __init__(self, fallback: ContextReader | None = None) -> None:
		self._readers: list[ContextReader] = []
		self._fallback = fallback

	#============================================
	def register(self, reader: ContextReader) -> None:
		"""
		Register a reader.

		Args:
			reader: Reader instance.
		"""
		self._readers.append(reader)

	#============================================
	def for_path(self, path: Path) -> ContextReader:
		"""
		Find the first reader that supports the path.

		Args:
			path: File path.

		Returns:
			Reader instance, or the fallback reader.
		"""
		for reader in self._readers:
			if reader.supports(path):
				return reader
		if self._fallback is not None:
			return self._fallback
		raise LookupError(f"No reader registered for {path.suffix or 'unknown'}")

	#============================================
	def readers(self) -> list[ContextReader]:
		"""
		Return all registered readers.
		"""
		return list(self._readers)
