"""
Driver Status - Terminal outcome of a command.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import uuid

from page_driver.exceptions import PageDriverError


@dataclass(frozen=True)
class DriverStatus:
    """
    Status the driver reports back for one command.
    
    Attributes:
        is_command_result: Marks the status as the outcome of a command
        execution_error: The error that ended the command, if any
        id: Unique status identifier
    """
    is_command_result: bool = False
    execution_error: Optional[Exception] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def success(self) -> bool:
        return self.execution_error is None

    @classmethod
    def command_result(cls, execution_error: Optional[Exception] = None) -> "DriverStatus":
        """Create the status that concludes a command."""
        return cls(is_command_result=True, execution_error=execution_error)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase payload sent back to the test runner."""
        error: Optional[Dict[str, Any]] = None
        if isinstance(self.execution_error, PageDriverError):
            error = self.execution_error.to_dict()
        elif self.execution_error is not None:
            error = {
                "code": "E-AUTOMATION",
                "message": str(self.execution_error),
                "details": {"type": type(self.execution_error).__name__},
            }
        return {
            "id": self.id,
            "isCommandResult": self.is_command_result,
            "executionError": error,
        }
