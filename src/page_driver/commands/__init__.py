"""
Commands module - Action command types and models.
"""

from page_driver.commands.type import CommandType, Role
from page_driver.commands.models import (
    ActionCommand,
    TargetedCommand,
    Command,
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
    Modifiers,
    MouseOptions,
    ClickOptions,
    TypeOptions,
    parse_command,
)

__all__ = [
    "CommandType",
    "Role",
    "ActionCommand",
    "TargetedCommand",
    "Command",
    "ClickCommand",
    "RightClickCommand",
    "DoubleClickCommand",
    "HoverCommand",
    "DragCommand",
    "DragToElementCommand",
    "TypeTextCommand",
    "SelectTextCommand",
    "SelectTextAreaContentCommand",
    "SelectEditableContentCommand",
    "Modifiers",
    "MouseOptions",
    "ClickOptions",
    "TypeOptions",
    "parse_command",
]
