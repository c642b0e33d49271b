from typing import Optional


class AssistantError(Exception):
    """Base class for every error the assistant reports to the user."""


class GenerationError(AssistantError):
    """The model could not produce a usable command proposal."""

    def __init__(self, message: str, raw_reply: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.raw_reply = raw_reply


class UnparsableReplyError(GenerationError):
    """The reply contained no brace-delimited JSON object."""


class InvalidJsonError(GenerationError):
    """The reply contained a JSON-looking object that failed to parse."""


class BackendError(GenerationError):
    """The Ollama backend could not be reached or answered badly."""


class ExecutionError(AssistantError):
    """The shell process could not be launched."""

    def __init__(self, message: str, command: str):
        super().__init__(message)
        self.message = message
        self.command = command
