"""
page-driver - The action command execution core of an in-page test automation driver.

Given a declarative action command (click, drag, type, select, ...) this
package locates and validates the target elements, runs the matching
automation, waits for the page to settle and reports a single status.

Example:
    >>> from page_driver import parse_command, execute_action_command
    >>> command = parse_command({"type": "click", "selector": "#submit"})
    >>> handle = execute_action_command(command, 5000, context=context)
    >>> status = await handle.completion
"""

__version__ = "0.1.0"

# Public API exports
from page_driver.commands import CommandType, Role, parse_command
from page_driver.config.settings import Settings
from page_driver.driver.executor import (
    ActionCommandHandle,
    DriverContext,
    execute_action_command,
)
from page_driver.driver.status import DriverStatus
from page_driver.registry.registry import AutomationRegistry

__all__ = [
    "CommandType",
    "Role",
    "parse_command",
    "Settings",
    "ActionCommandHandle",
    "DriverContext",
    "execute_action_command",
    "DriverStatus",
    "AutomationRegistry",
    "__version__",
]
