"""
Command types and selector roles.
"""

from enum import Enum


class CommandType(str, Enum):
    """Action kinds the driver can execute."""
    CLICK = "click"
    RIGHT_CLICK = "right-click"
    DOUBLE_CLICK = "double-click"
    HOVER = "hover"
    DRAG = "drag"
    DRAG_TO_ELEMENT = "drag-to-element"
    TYPE_TEXT = "type-text"
    SELECT_TEXT = "select-text"
    SELECT_TEXT_AREA_CONTENT = "select-text-area-content"
    SELECT_EDITABLE_CONTENT = "select-editable-content"


class Role(str, Enum):
    """
    Position a selector occupies within a command.
    
    The value is the name of the command argument that carries the
    selector, which is what errors report back to the user.
    """
    PRIMARY = "selector"
    DESTINATION = "destinationSelector"
    START = "startSelector"
    END = "endSelector"

    @property
    def argument_name(self) -> str:
        return self.value

    @property
    def is_primary(self) -> bool:
        return self is Role.PRIMARY
