import logging
from typing import Optional

from rich.console import Console

from . import ui
from .exceptions import ExecutionError, GenerationError
from .executor import CommandExecutor
from .generator import CommandGenerator
from .security import assess_command

logger = logging.getLogger(__name__)

EXIT_KEYWORDS = {"exit", "quit", "q"}


class Assistant:
    """
    The interactive request, confirm and execute loop.

    Each iteration reads a request, asks the generator for a command, shows it,
    and runs it through the executor only when the user answers 'y'. Errors end
    the iteration, never the loop; only an exit keyword, end of input or an
    interrupt stops it.
    """

    def __init__(self, generator: CommandGenerator, executor: CommandExecutor, console: Optional[Console] = None):
        self.generator = generator
        self.executor = executor
        self.console = console or Console()

    def run(self) -> int:
        """Runs the loop until the user leaves. Always returns exit status 0."""
        ui.display_banner(self.console, self.generator.model)

        while True:
            try:
                try:
                    request = ui.ask_request(self.console)
                except EOFError:
                    break

                if request.lower() in EXIT_KEYWORDS:
                    break

                self.handle_request(request)

            except KeyboardInterrupt:
                logger.info("Interrupted, leaving the assistant loop")
                break
            except Exception as e:
                logger.exception(f"Unexpected error while handling a request: {e}")
                ui.display_unexpected_error(self.console, e)

        return 0

    def handle_request(self, request: str) -> None:
        """Runs one generate, display, confirm and execute cycle."""
        try:
            proposal = self.generator.generate(request)
        except GenerationError as e:
            ui.display_generation_error(self.console, e)
            return

        warnings = assess_command(proposal.command) if proposal.command else []
        ui.display_proposal(self.console, proposal, warnings)

        if not proposal.command:
            ui.display_missing_command(self.console)
            return

        if not ui.confirm_execution(self.console):
            return

        try:
            result = self.executor.execute_command(proposal.command)
        except ExecutionError as e:
            ui.display_execution_error(self.console, e)
            return

        ui.display_result(self.console, result)
