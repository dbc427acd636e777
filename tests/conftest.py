"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import json
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()


class RecordingPost:
	"""
	Test-only stand-in for transport.post_json.
	"""

	def __init__(self, responses: list[str] | None = None) -> None:
		self.responses = list(responses or [])
		self.calls: list[tuple[str, dict, float]] = []

	def __call__(self, url: str, payload: dict, timeout: float) -> str:
		self.calls.append((url, payload, timeout))
		if self.responses:
			return self.responses.pop(0)
		return json.dumps({"model": payload.get("model", ""), "response": "ok", "done": True})

	def payloads(self) -> list[dict]:
		return [payload for _url, payload, _timeout in self.calls]


@pytest.fixture
def recording_post(monkeypatch) -> RecordingPost:
	import ollama_session.client as client_module

	stub = RecordingPost()
	monkeypatch.setattr(client_module, "post_json", stub)
	return stub


class _FakeOllamaHandler(BaseHTTPRequestHandler):
	def do_POST(self) -> None:
		length = int(self.headers.get("Content-Length", "0"))
		raw = self.rfile.read(length)
		self.server.requests.append(
			{
				"path": self.path,
				"content_type": self.headers.get("Content-Type"),
				"body": json.loads(raw.decode("utf-8")),
			}
		)
		status, body = self.server.replies.get(self.path, (404, {"error": "not found"}))
		if isinstance(body, bytes):
			encoded = body
		else:
			encoded = json.dumps(body).encode("utf-8")
		self.send_response(status)
		self.send_header("Content-Type", "application/json")
		self.send_header("Content-Length", str(len(encoded)))
		self.end_headers()
		self.wfile.write(encoded)

	def do_GET(self) -> None:
		encoded = json.dumps({"models": []}).encode("utf-8")
		self.send_response(200)
		self.send_header("Content-Length", str(len(encoded)))
		self.end_headers()
		self.wfile.write(encoded)

	def log_message(self, format, *args) -> None:
		return


@pytest.fixture
def fake_ollama():
	"""
	Run a local fake Ollama server; yields (server, base_url).
	"""
	server = ThreadingHTTPServer(("127.0.0.1", 0), _FakeOllamaHandler)
	server.requests = []
	server.replies = {}
	thread = threading.Thread(target=server.serve_forever, daemon=True)
	thread.start()
	host, port = server.server_address[:2]
	try:
		yield server, f"http://{host}:{port}/api"
	finally:
		server.shutdown()
		server.server_close()
		thread.join(timeout=5)
