#!/usr/bin/env python3
"""
Tests for config loading and client construction from config.
"""

from pathlib import Path

import pytest

from ollama_session.client import OllamaClient
from ollama_session.config import (
	DEFAULT_BASE_URL,
	ClientConfig,
	apply_user_config,
	load_user_config,
)


def test_defaults():
	cfg = ClientConfig()
	assert cfg.model == "llama3.2"
	assert cfg.base_url == DEFAULT_BASE_URL
	assert cfg.context_files == []


def test_missing_config_is_empty(tmp_path: Path):
	assert load_user_config(None) == {}
	assert load_user_config(tmp_path / "absent.yaml") == {}


def test_load_yaml(tmp_path: Path):
	path = tmp_path / "client.yaml"
	path.write_text(
		"model: mistral\nbase_url: http://box:11434/api/\ntimeout: 5\ncontext_files:\n  - a.txt\n",
		encoding="utf-8",
	)
	cfg = apply_user_config(ClientConfig(), load_user_config(path))
	assert cfg.model == "mistral"
	assert cfg.normalized_base_url() == "http://box:11434/api"
	assert cfg.timeout == 5.0
	assert cfg.context_files == [Path("a.txt")]


def test_load_json(tmp_path: Path):
	path = tmp_path / "client.json"
	path.write_text("{\"system_instructions\": \"Be kind.\"}", encoding="utf-8")
	cfg = apply_user_config(ClientConfig(), load_user_config(path))
	assert cfg.system_instructions == "Be kind."


def test_non_mapping_config_raises(tmp_path: Path):
	path = tmp_path / "client.yaml"
	path.write_text("- just\n- a list\n", encoding="utf-8")
	with pytest.raises(ValueError):
		load_user_config(path)


def test_unknown_key_raises():
	with pytest.raises(ValueError, match="Unknown config key"):
		apply_user_config(ClientConfig(), {"modle": "typo"})


def test_client_from_config_loads_files(tmp_path: Path):
	persona = tmp_path / "persona.txt"
	persona.write_text("From file.", encoding="utf-8")
	notes = tmp_path / "notes.txt"
	notes.write_text("remember me", encoding="utf-8")
	cfg = ClientConfig(
		model="mistral",
		base_url="http://box/api/",
		system_instructions="ignored",
		instructions_path=persona,
		context_files=[notes],
	)
	client = OllamaClient.from_config(cfg)
	assert client.model == "mistral"
	assert client.base_url == "http://box/api"
	assert client.build_system_context() == "From file.\n\nFile 'notes.txt' contents:\nremember me"


def test_blank_timeout_raises(tmp_path: Path):
	path = tmp_path / "client.yaml"
	path.write_text("timeout:\n", encoding="utf-8")
	with pytest.raises(ValueError, match="timeout"):
		apply_user_config(ClientConfig(), load_user_config(path))


@pytest.mark.parametrize("value", [True, [5], "soon"])
def test_non_numeric_timeout_raises(value):
	with pytest.raises(ValueError):
		apply_user_config(ClientConfig(), {"timeout": value})


def test_numeric_string_timeout_is_accepted():
	cfg = apply_user_config(ClientConfig(), {"timeout": "7.5"})
	assert cfg.timeout == 7.5


def test_context_files_string_raises(tmp_path: Path):
	path = tmp_path / "client.yaml"
	path.write_text("context_files: notes.txt\n", encoding="utf-8")
	with pytest.raises(ValueError, match="context_files"):
		apply_user_config(ClientConfig(), load_user_config(path))


def test_context_files_blank_is_empty():
	cfg = apply_user_config(ClientConfig(), {"context_files": None})
	assert cfg.context_files == []
