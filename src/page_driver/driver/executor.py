"""
Command Executor - Run one action command from start to finish.

``execute_action_command`` is the driver's entry point for actions. It
resolves the command's elements, runs the matching automation, waits
for requests and navigation the action caused, and reports the outcome
as a ``DriverStatus``. Failures never escape: every path ends in a
status on the completion future.

Example:
    >>> handle = execute_action_command(command, 5000, context=context)
    >>> await handle.start          # elements found, action starting
    >>> status = await handle.completion
    >>> status.execution_error is None
    True
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from page_driver.commands import Command
from page_driver.config import Settings, get_settings
from page_driver.driver.automation_factory import create_automation
from page_driver.driver.element_resolver import ElementResolver
from page_driver.driver.status import DriverStatus
from page_driver.interfaces import IBarrier, IDomUtils, IProgressPanel, ISelectorEvaluator
from page_driver.registry import AutomationRegistry

logger = logging.getLogger(__name__)


class ExecutionPhase(str, Enum):
    """Phases a command goes through."""
    RESOLVING = "resolving"
    RUNNING = "running"
    SETTLING = "settling"
    DONE = "done"


@dataclass
class DriverContext:
    """
    Collaborators the executor needs from the host page.
    
    Attributes:
        selector_evaluator: Turns selectors into elements
        dom: Element predicates and lookups
        progress_panel: Indicator shown while elements are resolved
        automations: Automation class for each command type
        request_barrier_factory: Creates a fresh request barrier per command
        page_unload_barrier: Shared barrier for pending navigation
        settings: Configuration
    """
    selector_evaluator: ISelectorEvaluator
    dom: IDomUtils
    progress_panel: IProgressPanel
    automations: AutomationRegistry
    request_barrier_factory: Callable[[], IBarrier]
    page_unload_barrier: IBarrier
    settings: Settings = field(default_factory=get_settings)


class CommandExecutor:
    """
    Drives a single command through its phases.
    
    Resolving -> Running -> Settling -> Done, or straight from
    Resolving to Done when elements cannot be resolved.
    """
    
    def __init__(self, command: Command, context: DriverContext, timeout_ms: float):
        self._command = command
        self._context = context
        self._timeout_ms = timeout_ms
        self._phase = ExecutionPhase.RESOLVING
        self._resolver = ElementResolver(
            context.selector_evaluator,
            context.dom,
            context.progress_panel,
            context.settings.driver,
        )
    
    @property
    def phase(self) -> ExecutionPhase:
        return self._phase
    
    def _set_phase(self, phase: ExecutionPhase) -> None:
        logger.debug(f"{self._command.type}: {self._phase.value} -> {phase.value}")
        self._phase = phase
    
    async def execute(self, start: "asyncio.Future[None]") -> DriverStatus:
        """
        Execute the command.
        
        Args:
            start: Future resolved once the elements are ready and the
                action is about to run
            
        Returns:
            The terminal status; errors are reported in it, never raised
            
        Raises:
            asyncio.CancelledError: If the command is cancelled; the caller
                settles the completion future
        """
        context = self._context
        request_barrier: Optional[IBarrier] = None
        try:
            elements = await self._resolver.resolve(self._command, self._timeout_ms)
        
            self._set_phase(ExecutionPhase.RUNNING)
            if not start.done():
                start.set_result(None)
        
            request_barrier = context.request_barrier_factory()
            automation = create_automation(elements, self._command, context.automations, context.dom)
            await automation.run()
        
            self._set_phase(ExecutionPhase.SETTLING)
            await asyncio.gather(
                request_barrier.wait(),
                context.page_unload_barrier.wait(),
            )
        except Exception as e:
            logger.info(f"{self._command.type} failed while {self._phase.value}: {e}")
            status = DriverStatus.command_result(execution_error=e)
        else:
            status = DriverStatus.command_result()
        finally:
            if request_barrier is not None:
                request_barrier.close()
            self._set_phase(ExecutionPhase.DONE)
        
        return status


@dataclass
class ActionCommandHandle:
    """
    The two signals of a running command.
    
    Attributes:
        start: Resolves when the target elements are ready; never
            resolves if they could not be resolved
        completion: Resolves with the DriverStatus once the command has
            finished; it never raises
        executor: The executor running the command
    """
    start: "asyncio.Future[None]"
    completion: "asyncio.Future[DriverStatus]"
    executor: CommandExecutor
    _task: Optional["asyncio.Task[None]"] = field(default=None, repr=False)
    
    @property
    def phase(self) -> ExecutionPhase:
        return self.executor.phase


def execute_action_command(
    command: Command,
    timeout_ms: Optional[float] = None,
    *,
    context: DriverContext,
) -> ActionCommandHandle:
    """
    Start executing an action command.
    
    Must be called from a running event loop. The work continues in a
    background task owned by the returned handle.
    
    Args:
        command: The action to perform
        timeout_ms: Budget for finding the target elements; defaults to
            ``settings.driver.element_availability_timeout_ms``
        context: Host collaborators
        
    Returns:
        Handle with the start and completion futures
    """
    loop = asyncio.get_running_loop()
    if timeout_ms is None:
        timeout_ms = context.settings.driver.element_availability_timeout_ms
    
    start: "asyncio.Future[None]" = loop.create_future()
    completion: "asyncio.Future[DriverStatus]" = loop.create_future()
    executor = CommandExecutor(command, context, timeout_ms)
    
    async def run_to_completion() -> None:
        try:
            status = await executor.execute(start)
        except asyncio.CancelledError as e:
            # Cancellation from a collaborator or of this task still settles the command.
            logger.info(f"{command.type} was cancelled")
            if not completion.done():
                completion.set_result(DriverStatus.command_result(execution_error=e))
            raise
        if not completion.done():
            completion.set_result(status)
    
    handle = ActionCommandHandle(start=start, completion=completion, executor=executor)
    handle._task = loop.create_task(run_to_completion())
    return handle
