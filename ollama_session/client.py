#!/usr/bin/env python3
"""
Ollama client with system instructions, session files, and turn history.

The client is synchronous and keeps its state in plain lists; it is not
safe to share one instance between threads.
"""

from __future__ import annotations

# Standard Library
import logging
from pathlib import Path

# local repo modules
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from .json_text import build_generate_payload, build_pull_payload
from .json_text import extract_generated_text as _extract_generated_text
from .readers import ReaderRegistry, build_registry
from .transport import post_json

#============================================


def _read_instructions(path: Path) -> str:
	return Path(path).read_text(encoding="utf-8", errors="replace")


#============================================


class OllamaClient:
	"""
	Blocking client for the Ollama /pull and /generate endpoints.
	"""

	#============================================
	def __init__(
		self,
		model: str,
		system_instructions: str | Path = "",
		*,
		base_url: str = DEFAULT_BASE_URL,
		timeout: float = DEFAULT_TIMEOUT,
		registry: ReaderRegistry | None = None,
	) -> None:
		"""
		Args:
			model: Ollama model name, e.g. "llama3.2".
			system_instructions: Instruction text, or a Path to read it from.
			base_url: API root; /pull and /generate are appended.
			timeout: Socket timeout for each request.
			registry: Readers used by add_file_to_context.
		"""
		self.model = model
		if isinstance(system_instructions, Path):
			system_instructions = _read_instructions(system_instructions)
		self.system_instructions = system_instructions
		self.base_url = base_url.rstrip("/")
		self.timeout = timeout
		self.registry = registry or build_registry()
		self._session_files: list[str] = []
		self._history: list[dict[str, str]] = []

	#============================================
	@classmethod
	def from_config(cls, config: ClientConfig) -> OllamaClient:
		"""
		Build a client from runtime config, loading instruction and context files.

		Args:
			config: Runtime configuration.

		Returns:
			Configured OllamaClient.
		"""
		instructions: str | Path = config.system_instructions
		if config.instructions_path is not None:
			instructions = config.instructions_path.expanduser()
		client = cls(
			config.model,
			instructions,
			base_url=config.normalized_base_url(),
			timeout=config.timeout,
		)
		for path in config.normalized_context_files():
			client.add_file_to_context(path)
		return client

	#============================================
	def pull_model(self) -> str:
		"""
		Ask the server to download the current model.

		Returns:
			Raw response body, whatever the HTTP status.
		"""
		logging.info("pulling model %s", self.model)
		return post_json(
			f"{self.base_url}/pull",
			build_pull_payload(self.model),
			self.timeout,
		)

	#============================================
	def add_file_to_context(self, path: str | Path) -> str:
		"""
		Read a file and keep it in the session context for later prompts.

		Args:
			path: File to read.

		Returns:
			The text read from the file.
		"""
		file_path = Path(path)
		reader = self.registry.for_path(file_path)
		contents = reader.read_text(file_path)
		self._session_files.append(f"File '{file_path.name}' contents:\n{contents}")
		logging.info("added %s to session context (%s reader)", file_path.name, reader.name)
		return contents

	#============================================
	def get_session_files(self) -> list[str]:
		return list(self._session_files)

	@property
	def session_files(self) -> list[str]:
		return self.get_session_files()

	def clear_session_files(self) -> None:
		self._session_files.clear()

	#============================================
	def build_system_context(self) -> str:
		"""
		Combine system instructions with every session file, in insertion order.
		"""
		parts = [self.system_instructions]
		for file_context in self._session_files:
			parts.append("\n\n")
			parts.append(file_context)
		return "".join(parts)

	#============================================
	def generate_text(self, prompt: str) -> str:
		"""
		Send a prompt with the full session context.

		Args:
			prompt: The user's prompt.

		Returns:
			Raw response body from /generate.
		"""
		logging.debug("generating with model %s", self.model)
		payload = build_generate_payload(self.model, prompt, self.build_system_context())
		response = post_json(f"{self.base_url}/generate", payload, self.timeout)
		self._update_history(prompt, self.extract_generated_text(response))
		return response

	#============================================
	def extract_generated_text(self, body: str) -> str:
		return _extract_generated_text(body)

	#============================================
	def generate_clean_text(self, prompt: str) -> str:
		"""
		Generate and return only the model's text.
		"""
		return self.extract_generated_text(self.generate_text(prompt))

	def respond(self, prompt: str) -> str:
		return self.generate_clean_text(prompt)

	def prompt(self, prompt: str) -> str:
		return self.generate_clean_text(prompt)

	#============================================
	def set_system_instructions(self, instructions: str) -> None:
		self.system_instructions = instructions

	def set_system_instructions_from_file(self, path: str | Path) -> None:
		self.system_instructions = _read_instructions(Path(path))

	def set_model(self, model: str) -> None:
		self.model = model

	#============================================
	def get_history(self) -> list[dict[str, str]]:
		"""
		Return the turn history as role/content dicts, oldest first.
		"""
		return [dict(entry) for entry in self._history]

	@property
	def history(self) -> list[dict[str, str]]:
		return self.get_history()

	def clear_context(self) -> None:
		"""
		Forget the turn history; session files are kept.
		"""
		self._history.clear()

	#============================================
	def _update_history(self, prompt: str, response: str) -> None:
		self._history.append({"role": "user", "content": prompt})
		self._history.append({"role": "assistant", "content": response})
