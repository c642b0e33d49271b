import logging
import subprocess
from typing import Optional

from .exceptions import ExecutionError
from .models import ExecutionResult

# Configure logging
logger = logging.getLogger(__name__)


class CommandExecutor:
    """Handles execution of shell commands."""

    def __init__(self, shell_executable: Optional[str] = None):
        """
        Initializes the executor.

        Args:
            shell_executable: Shell used to interpret commands. ``None`` uses the
                host's default interpreter.
        """
        self.shell_executable = shell_executable

    def execute_command(self, command: str) -> ExecutionResult:
        """
        Execute a single shell command line.

        The string is handed to the shell as-is, so pipes, globbing and
        redirection all apply. The call blocks until the command exits.

        Args:
            command: The shell command to execute

        Returns:
            The captured stdout, stderr and exit code.

        Raises:
            ExecutionError: If the shell process could not be started.
        """
        logger.info(f"Executing command: {command}")

        try:
            process = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                shell=True,
                executable=self.shell_executable,
            )
        except (OSError, ValueError) as e:
            logger.exception(f"Error launching command '{command}': {str(e)}")
            raise ExecutionError(f"Execution error: {str(e)}", command) from e

        # Undecodable bytes become U+FFFD instead of failing the whole run
        stdout, stderr = process.communicate()

        result = ExecutionResult(stdout=stdout or "", stderr=stderr or "", exit_code=process.returncode)

        if result.success:
            logger.info(f"Command executed successfully: {command}")
        else:
            logger.warning(f"Command failed with return code {process.returncode}: {command}")
            logger.debug(f"stderr: {stderr}")

        return result
