import argparse
import logging
from typing import List, Optional

from rich.console import Console

from .assistant import Assistant
from .config import Config
from .executor import CommandExecutor
from .generator import CommandGenerator
from .logger import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-assistant",
        description="""
        Translate plain language into shell commands with a local Ollama model.

        Every proposed command is shown with an explanation and only runs after you confirm it.
        """
    )
    parser.add_argument("request", nargs="*", help="(Optional) Handle a single request and exit instead of starting the interactive loop.")
    parser.add_argument("--model", help="Ollama model to use (default: $OLLAMA_MODEL or mistral:4b-instruct-v0.1).")
    parser.add_argument("--host", help="Ollama server URL (default: $OLLAMA_HOST or http://localhost:11434).")
    parser.add_argument("--shell", help="Shell executable used to run commands (default: the system shell).")
    parser.add_argument("--json-mode", action="store_true", default=None, help="Ask the model for a JSON-only reply.")
    parser.add_argument("--config", dest="config_file", help="Path to a TOML config file.")
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Show informational log messages.")
    parser.add_argument("--show-config", action="store_true", help="Print the resolved configuration and exit.")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    overrides = {
        "model": args.model,
        "host": args.host,
        "shell": args.shell,
        "json_mode": args.json_mode,
        "verbose": args.verbose,
    }
    if args.config_file:
        overrides["config_file"] = args.config_file
    return Config(**overrides)


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Parses arguments, wires the components together and runs them. Returns the exit status."""
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    setup_logging(config)

    console = Console()

    if args.show_config:
        console.print(str(config), markup=False)
        return 0

    if not config.validate():
        console.print("[bold red]Invalid configuration, see the log above.[/bold red]")
        return 1

    assistant = Assistant(
        generator=CommandGenerator(config),
        executor=CommandExecutor(shell_executable=config.shell),
        console=console,
    )

    if args.request:
        try:
            assistant.handle_request(" ".join(args.request))
        except KeyboardInterrupt:
            logger.info("Interrupted while handling a single request")
        return 0

    return assistant.run()
