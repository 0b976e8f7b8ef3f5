"""
Driver module - Action command execution.
"""

from page_driver.driver.status import DriverStatus
from page_driver.driver.wait_for import wait_for
from page_driver.driver.element_resolver import ElementResolver, ResolvedElements
from page_driver.driver.select_positions import SelectPositions, get_select_position_arguments
from page_driver.driver.automation_factory import create_automation
from page_driver.driver.barriers import NetworkActivityMonitor, RequestBarrier, PageUnloadBarrier
from page_driver.driver.progress import LoggingProgressPanel
from page_driver.driver.executor import (
    ActionCommandHandle,
    CommandExecutor,
    DriverContext,
    ExecutionPhase,
    execute_action_command,
)

__all__ = [
    "DriverStatus",
    "wait_for",
    "ElementResolver",
    "ResolvedElements",
    "SelectPositions",
    "get_select_position_arguments",
    "create_automation",
    "NetworkActivityMonitor",
    "RequestBarrier",
    "PageUnloadBarrier",
    "LoggingProgressPanel",
    "ActionCommandHandle",
    "CommandExecutor",
    "DriverContext",
    "ExecutionPhase",
    "execute_action_command",
]
