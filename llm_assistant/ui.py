from typing import List

from rich.console import Console
from rich.markup import escape

from .exceptions import ExecutionError, GenerationError
from .models import CommandProposal, ExecutionResult

INPUT_PROMPT = "\n> "
CONFIRM_PROMPT = "Execute this command? (y/n): "


def display_banner(console: Console, model: str) -> None:
    """Prints the greeting shown when the interactive loop starts."""
    console.print("[bold]Ollama CLI Assistant[/bold]")
    console.print(f"[dim]Model: {escape(model)}[/dim]")
    console.print("Enter your natural language request (or 'exit' to quit)")


def _print_verbatim(console: Console, text: str) -> None:
    """Prints text exactly as given: no markup, emoji codes, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True, end="" if text.endswith("\n") else "\n")


def display_proposal(console: Console, proposal: CommandProposal, warnings: List[str]) -> None:
    """Shows the proposed command, its explanation and any risk hints."""
    console.print(f"[bold]Command:[/bold] [cyan]{escape(proposal.display_command)}[/cyan]", emoji=False)
    console.print(f"[bold]Explanation:[/bold] {escape(proposal.display_explanation)}", emoji=False)
    for warning in warnings:
        console.print(f"[bold yellow]Warning:[/bold yellow] {escape(warning)}")


def display_missing_command(console: Console) -> None:
    console.print("[yellow]The model did not propose a command to run.[/yellow]")


def display_generation_error(console: Console, error: GenerationError) -> None:
    """Shows why no proposal could be produced, with the raw reply if there is one."""
    console.print(f"[bold red]Error:[/bold red] {escape(error.message)}")
    _print_verbatim(console, f"Full Response: {error.raw_reply or 'No additional details'}")


def display_result(console: Console, result: ExecutionResult) -> None:
    """Prints stdout and stderr of a finished command, skipping empty streams."""
    if result.stdout:
        console.print("[bold green]Output:[/bold green]")
        _print_verbatim(console, result.stdout)
    if result.stderr:
        console.print("[bold red]Errors:[/bold red]")
        _print_verbatim(console, result.stderr)


def display_execution_error(console: Console, error: ExecutionError) -> None:
    console.print(f"[bold red]{escape(error.message)}[/bold red]")


def display_unexpected_error(console: Console, error: Exception) -> None:
    console.print(f"[bold red]An unexpected error occurred:[/bold red] {escape(str(error))}")


def ask_request(console: Console) -> str:
    """Reads one request line from the user."""
    return console.input(INPUT_PROMPT, markup=False)


def confirm_execution(console: Console) -> bool:
    """Asks the user to approve the command. Only 'y' or 'Y' counts as yes."""
    try:
        answer = console.input(CONFIRM_PROMPT, markup=False)
    except EOFError:
        return False
    return answer.lower() == "y"
