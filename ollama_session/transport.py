#!/usr/bin/env python3
"""
Blocking JSON-over-HTTP calls to the Ollama API.
"""

from __future__ import annotations

# Standard Library
import logging
import urllib.error
import urllib.request

# local repo modules
from .json_text import encode_payload

#============================================


def post_json(url: str, payload: dict[str, object], timeout: float) -> str:
	"""
	POST a JSON payload and return the full response body.

	Error statuses are not raised: the server's error body is returned
	instead. Connection failures propagate as OSError subclasses.

	Args:
		url: Endpoint URL.
		payload: JSON-serializable request body.
		timeout: Socket timeout in seconds.

	Returns:
		Response body decoded as UTF-8; malformed bytes become U+FFFD.
	"""
	logging.debug("POST %s", url)
	request = urllib.request.Request(
		url,
		data=encode_payload(payload),
		headers={"Content-Type": "application/json"},
		method="POST",
	)
	try:
		with urllib.request.urlopen(request, timeout=timeout) as response:
			response_body = response.read()
	except urllib.error.HTTPError as exc:
		try:
			response_body = exc.read()
		finally:
			exc.close()
		logging.warning("Ollama returned status %s for %s", exc.code, url)
	return response_body.decode("utf-8", errors="replace")


#============================================


def server_available(base_url: str, timeout: float = 2) -> bool:
	"""
	Check if the Ollama service is up.
	"""
	try:
		request = urllib.request.Request(f"{base_url.rstrip('/')}/tags", method="GET")
		with urllib.request.urlopen(request, timeout=timeout) as response:
			return response.status < 400
	except OSError:
		return False
