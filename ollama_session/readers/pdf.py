#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from pathlib import Path

# PIP3 modules
from pypdf import PdfReader

# local repo modules
from .base import ContextReader

#============================================


class PDFReader(ContextReader):
	"""
	PDF text extractor.
	"""

	name = "pdf"
	supported_suffixes: set[str] = {"pdf"}

	#============================================
	def read_text(self, path: Path) -> str:
		"""
		Extract the text of every page.

		Args:
			path: File path.

		Returns:
			Page texts joined by newlines, blank pages included.
		"""
		text_bits: list[str] = []
		with path.open("rb") as handle:
			reader = PdfReader(handle)
			for page in reader.pages:
				text_bits.append(page.extract_text() or "")
		return "\n".join(text_bits)
