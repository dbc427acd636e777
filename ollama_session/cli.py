#!/usr/bin/env python3
"""
Command line interface for ollama-session.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# local repo modules
from .client import OllamaClient
from .config import ClientConfig, apply_user_config, load_user_config
from .transport import server_available

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Prompt a local Ollama model with a running session context."
	)
	parser.add_argument(
		"prompt",
		nargs="*",
		help="Prompt to send; omit to read prompts from stdin line by line.",
	)
	parser.add_argument(
		"-o",
		"--model",
		dest="model",
		help="Ollama model name (default llama3.2).",
	)
	instructions_group = parser.add_mutually_exclusive_group()
	instructions_group.add_argument(
		"-s",
		"--system",
		dest="system",
		help="System instructions text.",
	)
	instructions_group.add_argument(
		"-S",
		"--system-file",
		dest="system_file",
		help="Read system instructions from this file.",
	)
	parser.add_argument(
		"-f",
		"--file",
		dest="files",
		action="append",
		help="Add a file to the session context (repeatable).",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="YAML or JSON config file.",
	)
	parser.add_argument(
		"-u",
		"--base-url",
		dest="base_url",
		help="Ollama API root (default http://localhost:11434/api).",
	)
	parser.add_argument(
		"-t",
		"--timeout",
		dest="timeout",
		type=float,
		help="Request timeout in seconds.",
	)
	parser.add_argument(
		"-P",
		"--pull",
		dest="pull",
		action="store_true",
		help="Pull the model before prompting.",
	)
	parser.add_argument(
		"-r",
		"--raw",
		dest="raw",
		action="store_true",
		help="Print the raw JSON body instead of the generated text.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	parser.set_defaults(pull=False, raw=False, verbose=False)
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> ClientConfig:
	"""
	Build runtime config from the config file, then CLI flags.
	"""
	config = ClientConfig()
	if args.config_path:
		apply_user_config(config, load_user_config(Path(args.config_path).expanduser()))
	if args.model:
		config.model = args.model
	if args.system is not None:
		config.system_instructions = args.system
		config.instructions_path = None
	if args.system_file:
		config.instructions_path = Path(args.system_file).expanduser()
	if args.files:
		config.context_files = config.context_files + [Path(p).expanduser() for p in args.files]
	if args.base_url:
		config.base_url = args.base_url
	if args.timeout is not None:
		config.timeout = args.timeout
	if args.verbose:
		config.verbose = True
	return config


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def _ask(client: OllamaClient, prompt: str, raw: bool) -> None:
	if raw:
		print(client.generate_text(prompt))
	else:
		print(client.prompt(prompt))


#============================================


def run(args: argparse.Namespace, config: ClientConfig) -> None:
	"""
	Build the client and answer prompts.
	"""
	client = OllamaClient.from_config(config)
	if client.session_files:
		print(f"{_color('[CONTEXT]', '34')} {len(client.session_files)} file(s) in session context.")
	if args.pull:
		if not server_available(client.base_url):
			logging.warning("Ollama does not answer at %s; pulling anyway.", client.base_url)
		print(f"{_color('[PULL]', '34')} {client.pull_model()}")
	if args.prompt:
		_ask(client, " ".join(args.prompt), args.raw)
		return
	for line in sys.stdin:
		prompt = line.strip()
		if not prompt:
			break
		_ask(client, prompt, args.raw)


#============================================


def main(argv: list[str] | None = None) -> None:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	try:
		config = build_config(args)
	except (OSError, ValueError) as exc:
		print(f"[ERROR] {exc}", file=sys.stderr)
		raise SystemExit(1) from exc
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	try:
		run(args, config)
	except (OSError, ValueError) as exc:
		print(f"[ERROR] {exc}", file=sys.stderr)
		raise SystemExit(1) from exc


#============================================


if __name__ == "__main__":
	main()
