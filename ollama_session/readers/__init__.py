#!/usr/bin/env python3
from __future__ import annotations

from .base import ContextReader, ReaderRegistry
from .docx_reader import DocxReader
from .odt_reader import OdtReader
from .pdf import PDFReader
from .text import TextReader

__all__ = [
	"ContextReader",
	"ReaderRegistry",
	"build_registry",
]


def build_registry() -> ReaderRegistry:
	"""
	Build default reader registry.

	Returns:
		ReaderRegistry with registered readers; plain text is the fallback.
	"""
	registry = ReaderRegistry(fallback=TextReader())
	registry.register(PDFReader())
	registry.register(DocxReader())
	registry.register(OdtReader())
	return registry
