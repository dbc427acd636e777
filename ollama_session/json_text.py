#!/usr/bin/env python3
"""
Request payloads and response text extraction for the Ollama API.
"""

from __future__ import annotations

# Standard Library
import json
import re

#============================================


_ESCAPES = {
	"\\": "\\\\",
	"\"": "\\\"",
	"\n": "\\n",
	"\r": "\\r",
	"\t": "\\t",
}
_UNESCAPES = {
	"\\": "\\",
	"\"": "\"",
	"n": "\n",
	"r": "\r",
	"t": "\t",
}
_ESCAPE_RE = re.compile(r"[\\\"\n\r\t]")
_UNESCAPE_RE = re.compile(r"\\([\\\"nrt])")
_RESPONSE_FIELD_RE = re.compile(r"\"response\"\s*:\s*\"((?:[^\"\\]|\\.)*)\"", re.DOTALL)


def escape_json(text: str) -> str:
	"""
	Escape backslash, quote, newline, carriage return, and tab.

	Args:
		text: Raw string.

	Returns:
		String safe to place between JSON double quotes.
	"""
	return _ESCAPE_RE.sub(lambda match: _ESCAPES[match.group(0)], text)


#============================================

def unescape_json(text: str) -> str:
	"""
	Reverse escape_json in a single left-to-right pass.
	"""
	return _UNESCAPE_RE.sub(lambda match: _UNESCAPES[match.group(1)], text)


#============================================

def extract_generated_text(body: str) -> str:
	"""
	Pull the generated text out of a /generate response body.

	Args:
		body: Raw response body.

	Returns:
		The "response" string, or the body unchanged when there is none.
	"""
	try:
		parsed = json.loads(body)
	except ValueError:
		parsed = None
	if isinstance(parsed, dict):
		value = parsed.get("response")
		if isinstance(value, str):
			return value
		return body
	# not a JSON object, e.g. a truncated body
	match = _RESPONSE_FIELD_RE.search(body)
	if match:
		return unescape_json(match.group(1))
	return body


#============================================

def build_generate_payload(model: str, prompt: str, system: str) -> dict[str, object]:
	return {
		"model": model,
		"prompt": prompt,
		"system": system,
		"stream": False,
	}


def build_pull_payload(model: str) -> dict[str, object]:
	return {"name": model}


#============================================

def encode_payload(payload: dict[str, object]) -> bytes:
	"""
	Serialize a request payload to UTF-8 JSON bytes.
	"""
	return json.dumps(payload, ensure_ascii=False).encode("utf-8")
