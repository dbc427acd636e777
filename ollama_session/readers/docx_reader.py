#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from pathlib import Path

# PIP3 modules
import docx

# local repo modules
from .base import ContextReader

#============================================


class DocxReader(ContextReader):
	"""
	Reader for .docx documents.
	"""

	name = "docx"
	supported_suffixes: set[str] = {"docx"}

	#============================================
	def read_text(self, path: Path) -> str:
		"""
		Read paragraph text from a docx file.

		Args:
			path: File path.

		Returns:
			Paragraphs joined by newlines, empty ones included.
		"""
		document = docx.Document(str(path))
		paragraphs = [paragraph.text for paragraph in document.paragraphs]
		return "\n".join(paragraphs)
