"""
Automation Factory - Build the automation that performs a command.
"""

from typing import Any, Sequence, assert_never

from page_driver.commands import (
    Command,
    Role,
    ClickCommand,
    RightClickCommand,
    DoubleClickCommand,
    HoverCommand,
    DragCommand,
    DragToElementCommand,
    TypeTextCommand,
    SelectTextCommand,
    SelectTextAreaContentCommand,
    SelectEditableContentCommand,
)
from page_driver.driver.select_positions import get_select_position_arguments
from page_driver.interfaces import IAutomation, IDomUtils
from page_driver.registry import AutomationRegistry


def create_automation(
    elements: Sequence[Any],
    command: Command,
    registry: AutomationRegistry,
    dom: IDomUtils,
) -> IAutomation:
    """
    Construct the automation for a command and its resolved elements.
    
    Args:
        elements: Resolved elements, ordered like ``command.selector_roles()``
        command: The command being executed
        registry: Source of the automation class for each command type
        dom: DOM utilities, used to compute selection positions
        
    Returns:
        An automation ready to ``run()``
        
    Raises:
        ValueError: If no automation is registered for the command type
    """
    automation_class = registry.get(command.command_type)
    by_role = dict(zip((role for role, _ in command.selector_roles()), elements))
    element = by_role.get(Role.PRIMARY)
    
    if isinstance(command, (ClickCommand, RightClickCommand, DoubleClickCommand, HoverCommand)):
        return automation_class(element, command.options)
    
    if isinstance(command, DragCommand):
        return automation_class(element, command.drag_offset_x, command.drag_offset_y, command.options)
    
    if isinstance(command, DragToElementCommand):
        return automation_class(element, by_role[Role.DESTINATION], command.options)
    
    if isinstance(command, TypeTextCommand):
        return automation_class(element, command.text, command.options)
    
    if isinstance(command, (SelectTextCommand, SelectTextAreaContentCommand)):
        positions = get_select_position_arguments(element, command, dom)
        return automation_class(element, positions.start_pos, positions.end_pos)
    
    if isinstance(command, SelectEditableContentCommand):
        return automation_class(by_role[Role.START], by_role[Role.END])
    
    assert_never(command)
