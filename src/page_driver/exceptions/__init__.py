"""
Exceptions module - Custom exception hierarchy.

This module defines all custom exceptions used throughout page-driver,
providing clear error types for different failure scenarios.
"""

from page_driver.exceptions.base import (
    PageDriverError,
    ConfigurationError,
    CommandValidationError,
)
from page_driver.exceptions.action import (
    ActionError,
    ActionElementNotFoundError,
    ActionElementIsInvisibleError,
    ActionAdditionalElementNotFoundError,
    ActionAdditionalElementIsInvisibleError,
    ActionElementNonEditableError,
    ActionElementNotTextAreaError,
    ActionElementNonContentEditableError,
    ActionRootContainerNotFoundError,
    WaitForTimeoutError,
)

__all__ = [
    # Base exceptions
    "PageDriverError",
    "ConfigurationError",
    "CommandValidationError",
    # Action exceptions
    "ActionError",
    "ActionElementNotFoundError",
    "ActionElementIsInvisibleError",
    "ActionAdditionalElementNotFoundError",
    "ActionAdditionalElementIsInvisibleError",
    "ActionElementNonEditableError",
    "ActionElementNotTextAreaError",
    "ActionElementNonContentEditableError",
    "ActionRootContainerNotFoundError",
    "WaitForTimeoutError",
]
