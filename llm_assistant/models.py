from dataclasses import dataclass
from typing import Any, Dict, Optional

COMMAND_PLACEHOLDER = "N/A"
EXPLANATION_PLACEHOLDER = "No explanation"


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class CommandProposal:
    """A shell command suggested by the model, with its explanation."""

    command: Optional[str] = None
    explanation: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommandProposal":
        return cls(
            command=_as_text(data.get("command")),
            explanation=_as_text(data.get("explanation")),
        )

    @property
    def display_command(self) -> str:
        return self.command if self.command is not None else COMMAND_PLACEHOLDER

    @property
    def display_explanation(self) -> str:
        return self.explanation if self.explanation is not None else EXPLANATION_PLACEHOLDER


@dataclass(frozen=True)
class ExecutionResult:
    """Captured output of one finished shell command."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0
