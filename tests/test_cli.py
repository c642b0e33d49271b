import os
import unittest
from unittest.mock import patch

from llm_assistant.cli import build_parser, config_from_args, run_cli

MISSING_CONFIG = "/nonexistent/llm-assistant/config.toml"


class TestCli(unittest.TestCase):
    """Test cases for argument handling and wiring."""

    def test_flags_override_configuration(self):
        args = build_parser().parse_args(
            ["--model", "llama3", "--host", "http://gpu-box:11434", "--json-mode", "--shell", "/bin/zsh", "--config", MISSING_CONFIG]
        )

        with patch.dict(os.environ, {"OLLAMA_MODEL": "phi3"}, clear=True):
            config = config_from_args(args)

        self.assertEqual(config.model, "llama3")
        self.assertEqual(config.host, "http://gpu-box:11434")
        self.assertTrue(config.json_mode)
        self.assertEqual(config.shell, "/bin/zsh")
        self.assertEqual(config.config_file, MISSING_CONFIG)

    def test_unset_flags_fall_back_to_environment(self):
        args = build_parser().parse_args(["--config", MISSING_CONFIG])

        with patch.dict(os.environ, {"OLLAMA_MODEL": "phi3", "ASSISTANT_VERBOSE": "true"}, clear=True):
            config = config_from_args(args)

        self.assertEqual(config.model, "phi3")
        self.assertTrue(config.verbose)
        self.assertFalse(config.json_mode)

    @patch('llm_assistant.cli.setup_logging')
    @patch('llm_assistant.cli.Assistant')
    @patch('llm_assistant.cli.CommandGenerator')
    def test_interactive_loop_by_default(self, mock_generator, mock_assistant, mock_setup_logging):
        mock_assistant.return_value.run.return_value = 0

        with patch.dict(os.environ, {}, clear=True):
            exit_code = run_cli(["--config", MISSING_CONFIG])

        self.assertEqual(exit_code, 0)
        mock_assistant.return_value.run.assert_called_once_with()
        mock_assistant.return_value.handle_request.assert_not_called()

    @patch('llm_assistant.cli.setup_logging')
    @patch('llm_assistant.cli.Assistant')
    @patch('llm_assistant.cli.CommandGenerator')
    def test_single_request_mode(self, mock_generator, mock_assistant, mock_setup_logging):
        with patch.dict(os.environ, {}, clear=True):
            exit_code = run_cli(["--config", MISSING_CONFIG, "show", "disk", "usage"])

        self.assertEqual(exit_code, 0)
        mock_assistant.return_value.handle_request.assert_called_once_with("show disk usage")
        mock_assistant.return_value.run.assert_not_called()

    @patch('llm_assistant.cli.setup_logging')
    @patch('llm_assistant.cli.Assistant')
    @patch('llm_assistant.cli.CommandGenerator')
    def test_invalid_configuration_exits_with_error(self, mock_generator, mock_assistant, mock_setup_logging):
        with patch.dict(os.environ, {}, clear=True):
            exit_code = run_cli(["--config", MISSING_CONFIG, "--host", "localhost:11434"])

        self.assertEqual(exit_code, 1)
        mock_assistant.assert_not_called()

    @patch('llm_assistant.cli.setup_logging')
    @patch('llm_assistant.cli.CommandGenerator')
    def test_show_config(self, mock_generator, mock_setup_logging):
        with patch.dict(os.environ, {}, clear=True):
            exit_code = run_cli(["--config", MISSING_CONFIG, "--show-config"])

        self.assertEqual(exit_code, 0)
        mock_generator.assert_not_called()


if __name__ == "__main__":
    unittest.main()
