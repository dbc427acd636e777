#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from pathlib import Path

# local repo modules
from .base import ContextReader

#============================================


class TextReader(ContextReader):
	"""
	Fallback reader for plain text, code, and anything without a dedicated reader.
	"""

	name = "text"

	#============================================
	def read_text(self, path: Path) -> str:
		# whole file; malformed UTF-8 becomes U+FFFD
		return path.read_text(encoding="utf-8", errors="replace")
