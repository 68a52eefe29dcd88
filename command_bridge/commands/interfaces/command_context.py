import uuid
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class CommandContext:
    """
    Encapsulates a single invocation crossing the boundary.

    The context carries the command name and its named arguments. It is
    created per invocation by the executor and discarded once the result
    has been returned to the caller.
    """

    command_name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    invocation_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        """Validate context after initialization"""
        if not self.command_name:
            raise ValueError("command_name is required")
        if self.arguments is None:
            self.arguments = {}

    def get_argument(self, key: str, default: Any = None) -> Any:
        """Get argument value with fallback"""
        return self.arguments.get(key, default)
