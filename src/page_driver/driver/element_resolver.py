"""
Element Resolver - Locate and validate the target elements of a command.

Every selector a command carries is polled until it matches an element
and that element becomes visible. All selectors share one timeout
budget: the visibility wait only gets what the existence wait left
over. Once everything is found, type-specific checks run against the
resolved elements.
"""

import asyncio
import logging
from typing import Any, Sequence, Tuple

from page_driver.commands import Command, CommandType, Role
from page_driver.config import DriverSettings
from page_driver.exceptions import (
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
from page_driver.driver.wait_for import wait_for
from page_driver.interfaces import IDomUtils, IProgressPanel, ISelectorEvaluator

logger = logging.getLogger(__name__)

ResolvedElements = Tuple[Any, ...]


def _not_found_error(role: Role) -> ActionError:
    if role.is_primary:
        return ActionElementNotFoundError()
    return ActionAdditionalElementNotFoundError(role.argument_name)


def _invisible_error(role: Role) -> ActionError:
    if role.is_primary:
        return ActionElementIsInvisibleError()
    return ActionAdditionalElementIsInvisibleError(role.argument_name)


class ElementResolver:
    """
    Resolves the elements a command acts on.
    
    The progress panel is shown for the duration of resolution only and
    is closed exactly once, with ``success=False`` whenever resolution
    fails.
    
    Example:
        >>> resolver = ElementResolver(evaluator, dom, panel, settings.driver)
        >>> elements = await resolver.resolve(command, timeout_ms=5000)
    """
    
    def __init__(
        self,
        selector_evaluator: ISelectorEvaluator,
        dom: IDomUtils,
        progress_panel: IProgressPanel,
        settings: DriverSettings,
    ):
        self._selector_evaluator = selector_evaluator
        self._dom = dom
        self._progress_panel = progress_panel
        self._settings = settings
    
    async def resolve(self, command: Command, timeout_ms: float) -> ResolvedElements:
        """
        Resolve and validate the command's elements.
        
        Args:
            command: The command to resolve elements for
            timeout_ms: Budget shared by all waits
            
        Returns:
            Elements in the order of ``command.selector_roles()``
            
        Raises:
            ActionError: The typed error for the first check that failed
        """
        try:
            self._progress_panel.show(self._settings.progress_panel_text, timeout_ms)
            elements = await self._ensure_elements(command, timeout_ms)
            self._validate(command, elements)
        except BaseException:
            self._progress_panel.close(False)
            raise
        
        self._progress_panel.close(True)
        return elements
    
    async def _ensure_elements(self, command: Command, timeout_ms: float) -> ResolvedElements:
        roles = command.selector_roles()
        if not roles:
            return ()
        
        tasks = [
            asyncio.create_task(self._ensure_element(role, selector, timeout_ms))
            for role, selector in roles
        ]
        try:
            return tuple(await asyncio.gather(*tasks))
        except Exception:
            # First failure wins; stop polling for the other roles.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
    
    async def _ensure_element(self, role: Role, selector: str, timeout_ms: float) -> Any:
        loop = asyncio.get_running_loop()
        delay_ms = self._settings.check_element_delay_ms
        start_time = loop.time()
        
        try:
            element = await wait_for(
                lambda: self._selector_evaluator.evaluate(selector),
                delay_ms,
                timeout_ms,
            )
        except WaitForTimeoutError as e:
            logger.info(f"No element matches {role.argument_name} {selector!r}")
            raise _not_found_error(role) from e
        
        elapsed_ms = (loop.time() - start_time) * 1000
        visibility_timeout_ms = max(timeout_ms - elapsed_ms, 0)
        logger.debug(
            f"Found element for {role.argument_name} {selector!r} after {elapsed_ms:.0f}ms, "
            f"{visibility_timeout_ms:.0f}ms left for visibility"
        )
        
        try:
            return await wait_for(
                lambda: element if self._dom.is_element_visible(element) else None,
                delay_ms,
                visibility_timeout_ms,
            )
        except WaitForTimeoutError as e:
            logger.info(f"Element for {role.argument_name} {selector!r} is not visible")
            raise _invisible_error(role) from e
    
    def _validate(self, command: Command, elements: Sequence[Any]) -> None:
        command_type = command.command_type
        
        if command_type is CommandType.SELECT_TEXT:
            if not elements or not self._dom.is_editable_element(elements[0]):
                raise ActionElementNonEditableError()
        
        elif command_type is CommandType.SELECT_TEXT_AREA_CONTENT:
            if not elements or not self._dom.is_text_area_element(elements[0]):
                raise ActionElementNotTextAreaError()
        
        elif command_type is CommandType.SELECT_EDITABLE_CONTENT:
            start, end = elements
            if not self._dom.is_content_editable_element(start):
                raise ActionElementNonContentEditableError(Role.START.argument_name)
            if not self._dom.is_content_editable_element(end):
                raise ActionElementNonContentEditableError(Role.END.argument_name)
            # The selection needs a shared root to anchor the range in.
            if self._dom.get_nearest_common_ancestor(start, end) is None:
                raise ActionRootContainerNotFoundError()
