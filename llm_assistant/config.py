import os
import toml
import logging
from dataclasses import dataclass, field
from typing import Optional, Any

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "mistral:4b-instruct-v0.1"

DEFAULT_SYSTEM_PROMPT = """
You are an AI assistant that translates natural language requests into precise CLI commands.
Follow these strict guidelines:
1. Always output a valid, safe CLI command
2. Use bash/shell syntax
3. Never include sudo or destructive commands without explicit confirmation
4. Return JSON with two keys:
   - 'command': The exact CLI command to execute
   - 'explanation': A brief explanation of what the command does
5. If the request is unclear or potentially dangerous, return an error message

Examples:
Input: "List all files in the current directory"
Output: {"command": "ls -la", "explanation": "List all files in current directory, including hidden files"}

Input: "What's the disk usage of my home directory?"
Output: {"command": "du -sh ~", "explanation": "Calculate total disk usage of home directory"}
"""

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _default_config_file() -> str:
    return os.path.join(os.path.expanduser("~/.config/llm-assistant"), "config.toml")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass
class Config:
    """Configuration for the assistant.

    Values passed to the constructor win. Anything left as ``None`` is looked
    up in the environment, then in the TOML config file, then falls back to
    the built-in default.
    """

    model: Optional[str] = None
    host: Optional[str] = None
    system_prompt: Optional[str] = None
    json_mode: Optional[bool] = None
    shell: Optional[str] = None
    verbose: Optional[bool] = None
    log_file: Optional[str] = None
    config_file: str = field(default_factory=_default_config_file)
    _file_config: dict = field(init=False, repr=False)

    def __post_init__(self):
        """Resolve every unset field from env, file or defaults."""
        self._file_config = self._load_config_from_file()
        if self.model is None:
            self.model = self._get_config("OLLAMA_MODEL", DEFAULT_MODEL)
        if self.host is None:
            self.host = self._get_config("OLLAMA_HOST")
        if self.system_prompt is None:
            self.system_prompt = self._get_config("ASSISTANT_SYSTEM_PROMPT") or DEFAULT_SYSTEM_PROMPT
        if self.json_mode is None:
            self.json_mode = _to_bool(self._get_config("ASSISTANT_JSON_MODE", False))
        if self.shell is None:
            self.shell = self._get_config("ASSISTANT_SHELL") or None
        if self.verbose is None:
            self.verbose = _to_bool(self._get_config("ASSISTANT_VERBOSE", False))
        if self.log_file is None:
            self.log_file = self._get_config("ASSISTANT_LOG_FILE") or None

    def _load_config_from_file(self) -> dict:
        """Loads configuration from the TOML file, if one exists."""
        if not os.path.exists(self.config_file):
            return {}
        try:
            with open(self.config_file, 'r') as f:
                return toml.load(f)
        except (toml.TomlDecodeError, IOError) as e:
            logger.warning(f"Could not read config file at {self.config_file}: {e}")
            return {}

    def _get_config(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Get a configuration value, prioritizing environment variables,
        then the config file, and finally a default value.
        """
        # 1. Check environment variable
        value = os.environ.get(key)
        if value is not None:
            return value

        # 2. Check config file, top-level keys first, then sections
        if key in self._file_config and not isinstance(self._file_config[key], dict):
            return self._file_config[key]
        for section in self._file_config.values():
            if isinstance(section, dict) and key in section:
                return section[key]

        # 3. Return default
        return default

    def validate(self) -> bool:
        """Validate the configuration."""
        if not self.model or not str(self.model).strip():
            logger.error("No Ollama model configured. Set OLLAMA_MODEL or pass --model.")
            return False

        if self.host and not str(self.host).startswith(("http://", "https://")):
            logger.error(f"OLLAMA_HOST must be an http(s) URL, got: {self.host}")
            return False

        return True

    def __str__(self) -> str:
        """Return string representation of the configuration."""
        config_dict = self.__dict__.copy()
        del config_dict['_file_config']  # Don't print the raw file contents
        if self.system_prompt == DEFAULT_SYSTEM_PROMPT:
            config_dict['system_prompt'] = "<default>"
        else:
            config_dict['system_prompt'] = "<custom>"
        return str(config_dict)
