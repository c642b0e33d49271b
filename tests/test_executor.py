import sys
import unittest
from unittest.mock import patch, MagicMock

from llm_assistant.exceptions import ExecutionError
from llm_assistant.executor import CommandExecutor


class TestCommandExecutor(unittest.TestCase):
    """Test cases for the CommandExecutor class."""

    def setUp(self):
        """Set up test fixtures."""
        self.executor = CommandExecutor()

    @patch('llm_assistant.executor.subprocess.Popen')
    def test_execute_command_success(self, mock_popen):
        """Test successful command execution."""
        # Mock successful command execution
        process_mock = MagicMock()
        process_mock.returncode = 0
        process_mock.communicate.return_value = ("command output", "")
        mock_popen.return_value = process_mock

        result = self.executor.execute_command("echo 'hello' | tr a-z A-Z")

        # Check results
        self.assertTrue(result.success)
        self.assertEqual(result.stdout, "command output")
        self.assertEqual(result.stderr, "")
        self.assertEqual(result.exit_code, 0)

        # The whole line goes to the shell untouched
        mock_popen.assert_called_once()
        args, kwargs = mock_popen.call_args
        self.assertEqual(args[0], "echo 'hello' | tr a-z A-Z")
        self.assertTrue(kwargs["shell"])
        self.assertIsNone(kwargs["executable"])
        self.assertEqual(kwargs["errors"], "replace")

    @patch('llm_assistant.executor.subprocess.Popen')
    def test_execute_command_failure(self, mock_popen):
        """A non-zero exit is a normal result, not an error."""
        process_mock = MagicMock()
        process_mock.returncode = 1
        process_mock.communicate.return_value = ("", "command error")
        mock_popen.return_value = process_mock

        result = self.executor.execute_command("invalid_command")

        self.assertFalse(result.success)
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(result.stdout, "")
        self.assertEqual(result.stderr, "command error")

    @patch('llm_assistant.executor.subprocess.Popen')
    def test_launch_failure_raises_execution_error(self, mock_popen):
        mock_popen.side_effect = FileNotFoundError(2, "No such file or directory", "/bin/nosuchshell")

        with self.assertRaises(ExecutionError) as ctx:
            CommandExecutor(shell_executable="/bin/nosuchshell").execute_command("ls")

        self.assertEqual(ctx.exception.command, "ls")
        self.assertIn("No such file or directory", ctx.exception.message)

    @patch('llm_assistant.executor.subprocess.Popen')
    def test_configured_shell_is_used(self, mock_popen):
        process_mock = MagicMock()
        process_mock.returncode = 0
        process_mock.communicate.return_value = ("", "")
        mock_popen.return_value = process_mock

        CommandExecutor(shell_executable="/bin/bash").execute_command("echo $BASH_VERSION")

        _, kwargs = mock_popen.call_args
        self.assertEqual(kwargs["executable"], "/bin/bash")


@unittest.skipIf(sys.platform.startswith("win"), "POSIX shell semantics")
class TestCommandExecutorShell(unittest.TestCase):
    """Runs real commands through the system shell."""

    def setUp(self):
        self.executor = CommandExecutor()

    def test_echo(self):
        result = self.executor.execute_command("echo hello")

        self.assertEqual(result.exit_code, 0)
        self.assertIn("hello", result.stdout)
        self.assertEqual(result.stderr, "")

    def test_exit_code_is_reported(self):
        result = self.executor.execute_command("exit 3")

        self.assertEqual(result.exit_code, 3)
        self.assertFalse(result.success)
        self.assertEqual(result.stdout, "")
        self.assertEqual(result.stderr, "")

    def test_pipes_and_redirection_are_interpreted(self):
        result = self.executor.execute_command("printf 'b\\na\\n' | sort; echo oops 1>&2")

        self.assertEqual(result.stdout, "a\nb\n")
        self.assertEqual(result.stderr, "oops\n")

    def test_undecodable_output_is_kept(self):
        result = self.executor.execute_command("printf 'ok\\377\\376'; printf '\\377' 1>&2; exit 4")

        self.assertEqual(result.exit_code, 4)
        self.assertTrue(result.stdout.startswith("ok"))
        self.assertIn("\ufffd", result.stdout)
        self.assertIn("\ufffd", result.stderr)

    def test_missing_shell_raises_execution_error(self):
        executor = CommandExecutor(shell_executable="/nonexistent/shell")

        with self.assertRaises(ExecutionError):
            executor.execute_command("echo hello")


if __name__ == "__main__":
    unittest.main()
