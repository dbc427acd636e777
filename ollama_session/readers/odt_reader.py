#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from pathlib import Path

# PIP3 modules
from odf import teletype
from odf import text
from odf.opendocument import load

# local repo modules
from .base import ContextReader

#============================================


class OdtReader(ContextReader):
	"""
	Reader for .odt documents.
	"""

	name = "odt"
	supported_suffixes: set[str] = {"odt"}

	#============================================
	def read_text(self, path: Path) -> str:
		document = load(str(path))
		snippets: list[str] = []
		for para in document.getElementsByType(text.P):
			snippets.append(teletype.extractText(para))
		return "\n".join(snippets)
