#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path
import json

# PIP3 modules
import yaml

#============================================


DEFAULT_BASE_URL = "http://localhost:11434/api"
DEFAULT_MODEL = "llama3.2"
DEFAULT_TIMEOUT = 120.0

_PATH_KEYS = {"instructions_path"}
_PATH_LIST_KEYS = {"context_files"}


def _default_context_files() -> list[Path]:
	return []


#============================================


@dataclass(slots=True)
class ClientConfig:
	"""
	Runtime configuration settings.

	Attributes:
		model: Ollama model name.
		base_url: API root; /pull and /generate are appended to it.
		timeout: Seconds to wait on each blocking HTTP call.
		system_instructions: Inline system instructions.
		instructions_path: Optional file holding system instructions.
		context_files: Files added to the session context at startup.
		verbose: Verbose logging.
	"""
	model: str = DEFAULT_MODEL
	base_url: str = DEFAULT_BASE_URL
	timeout: float = DEFAULT_TIMEOUT
	system_instructions: str = ""
	instructions_path: Path | None = None
	context_files: list[Path] = field(default_factory=_default_context_files)
	verbose: bool = False

	#============================================
	def normalized_base_url(self) -> str:
		"""
		Strip trailing slashes from the base URL.

		Returns:
			Base URL without a trailing slash.
		"""
		return self.base_url.rstrip("/")

	#============================================
	def normalized_context_files(self) -> list[Path]:
		"""
		Normalize context file paths.

		Returns:
			List of expanded, resolved Path objects.
		"""
		paths: list[Path] = [path.expanduser().resolve() for path in self.context_files]
		return paths


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	if config_path.suffix.lower() in {".yml", ".yaml"}:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = yaml.safe_load(handle)
	else:
		with config_path.open("r", encoding="utf-8") as handle:
			loaded = json.load(handle)
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise ValueError(f"Config file {config_path} must hold a mapping.")
	return loaded


#============================================


def apply_user_config(config: ClientConfig, values: dict) -> ClientConfig:
	"""
	Copy loaded config values onto a ClientConfig.

	Args:
		config: Config to update in place.
		values: Mapping from load_user_config.

	Returns:
		The same config object.
	"""
	known = set(ClientConfig.__dataclass_fields__)
	for key, value in values.items():
		if key not in known:
			raise ValueError(f"Unknown config key: {key}")
		if key in _PATH_KEYS and value is not None:
			value = Path(value).expanduser()
		elif key in _PATH_LIST_KEYS:
			if value is None:
				value = []
			if not isinstance(value, list):
				raise ValueError(f"Config key {key} must be a list of paths.")
			value = [Path(item).expanduser() for item in value]
		elif key == "timeout":
			if isinstance(value, bool) or not isinstance(value, (int, float, str)):
				raise ValueError(f"Config key timeout must be a number, got {value!r}.")
			value = float(value)
		setattr(config, key, value)
	return config
