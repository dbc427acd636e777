"""
ollama_session
==============

Blocking client for a local Ollama server with a running session context.
"""

from .client import OllamaClient
from .config import ClientConfig

__all__ = [
	"OllamaClient",
	"ClientConfig",
	"cli",
	"client",
	"config",
	"json_text",
	"readers",
	"transport",
]
