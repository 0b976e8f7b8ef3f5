"""
Interfaces module - Abstract base classes for all host collaborators.

This module defines the contracts that the host page integration must
implement for the driver to locate elements and run actions.
"""

from page_driver.interfaces.dom import (
    ISelectorEvaluator,
    IDomUtils,
)
from page_driver.interfaces.automation import (
    IAutomation,
    IBarrier,
    IProgressPanel,
)

__all__ = [
    # DOM interfaces
    "ISelectorEvaluator",
    "IDomUtils",
    # Execution interfaces
    "IAutomation",
    "IBarrier",
    "IProgressPanel",
]
