#!/usr/bin/env python3
"""
Repo-root runner for ollama_session.

Examples:
	python run_ollama_session.py --pull "Tell me a short joke."
	python run_ollama_session.py -s "You are a helpful assistant." -f notes.md
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from ollama_session.cli import main as cli_main

	cli_main()


if __name__ == "__main__":
	main()
