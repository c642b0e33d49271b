import json
import logging
import re
from typing import Any, Dict, List, Optional

import ollama

from .config import Config
from .exceptions import BackendError, InvalidJsonError, UnparsableReplyError
from .models import CommandProposal

# Configure logging
logger = logging.getLogger(__name__)

# Greedy on purpose: from the first "{" to the last "}" in the reply.
JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_object(reply: str) -> Dict[str, Any]:
    """
    Pulls the brace-delimited JSON object out of a free-text model reply.

    Raises:
        UnparsableReplyError: No brace-delimited substring was found.
        InvalidJsonError: The substring is not valid JSON.
    """
    match = JSON_OBJECT_PATTERN.search(reply)
    if not match:
        raise UnparsableReplyError("Could not parse command", raw_reply=reply)

    try:
        return json.loads(match.group(0))
    except (json.JSONDecodeError, RecursionError) as e:
        logger.error(f"Failed to parse JSON response: '{match.group(0)[:500]}'. Error: {e}")
        raise InvalidJsonError("Invalid JSON format", raw_reply=reply) from e


class CommandGenerator:
    """Turns a natural language request into a shell command using a local Ollama model."""

    def __init__(self, config: Config, client: Optional[ollama.Client] = None):
        """
        Initializes the generator.

        Args:
            config: Resolved configuration; supplies model, host and system prompt.
            client: Optional pre-built Ollama client, mostly for tests.
        """
        self.config = config
        self.model = config.model
        self.system_prompt = config.system_prompt
        self.client = client if client is not None else ollama.Client(host=config.host)
        logger.info(f"Initialized Ollama command generator with model: {self.model}")

    def build_messages(self, request: str) -> List[Dict[str, str]]:
        """Builds the chat exchange: the system prompt then the user's request."""
        return [
            {'role': 'system', 'content': self.system_prompt},
            {'role': 'user', 'content': request},
        ]

    def _send_request(self, request: str) -> str:
        """Sends the chat exchange and returns the reply text."""
        kwargs: Dict[str, Any] = {}
        if self.config.json_mode:
            kwargs['format'] = 'json'

        try:
            response = self.client.chat(model=self.model, messages=self.build_messages(request), **kwargs)
            content = response['message']['content']
        except ollama.ResponseError as e:
            logger.error(f"Ollama returned an error: {e.error}")
            raise BackendError(f"Error generating command: {e.error}", raw_reply=str(e)) from e
        except Exception as e:
            logger.error(f"Error generating command: {e}")
            raise BackendError(f"Error generating command: {str(e)}", raw_reply=str(e)) from e

        if not isinstance(content, str):
            raise BackendError("Error generating command: reply has no text content", raw_reply=repr(content))

        logger.debug(f"Raw model reply: {content}")
        return content

    def generate(self, request: str) -> CommandProposal:
        """
        Generates a shell command proposal from a natural language request.

        Args:
            request: Free text typed by the user.

        Returns:
            The proposal parsed from the model's reply.

        Raises:
            BackendError: The model could not be reached or answered badly.
            UnparsableReplyError: The reply had no JSON object in it.
            InvalidJsonError: The reply's JSON object was malformed.
        """
        reply = self._send_request(request)
        return CommandProposal.from_dict(extract_json_object(reply))
