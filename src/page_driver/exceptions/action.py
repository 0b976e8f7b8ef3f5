"""
Action-related exceptions.

These form the closed set of errors an action command can report
while its target elements are being located and validated.
"""

from page_driver.exceptions.base import PageDriverError


class ActionError(PageDriverError):
    """Base exception for action-related errors."""
    code = "E-ACTION"


class ActionElementNotFoundError(ActionError):
    """
    The action's target element was not found.
    
    Raised when the primary selector does not match any element
    within the element availability timeout.
    """
    code = "E-ACTION-ELEMENT-NOT-FOUND"
    
    def __init__(self, message: str = "The specified selector does not match any element in the DOM tree."):
        super().__init__(message)


class ActionElementIsInvisibleError(ActionError):
    """
    The action's target element exists but is not visible.
    
    Raised when the element never becomes visible in what is left
    of the element availability timeout.
    """
    code = "E-ACTION-ELEMENT-IS-INVISIBLE"
    
    def __init__(self, message: str = "The element that matches the specified selector is not visible."):
        super().__init__(message)


class ActionAdditionalElementNotFoundError(ActionError):
    """
    A secondary selector of the action did not match any element.
    
    Attributes:
        argument_name: Name of the selector argument ("startSelector",
            "endSelector" or "destinationSelector")
    """
    code = "E-ACTION-ADDITIONAL-ELEMENT-NOT-FOUND"
    
    def __init__(self, argument_name: str):
        super().__init__(
            f"The specified \"{argument_name}\" does not match any element in the DOM tree.",
            {"argument_name": argument_name},
        )
        self.argument_name = argument_name


class ActionAdditionalElementIsInvisibleError(ActionError):
    """A secondary element of the action exists but is not visible."""
    code = "E-ACTION-ADDITIONAL-ELEMENT-IS-INVISIBLE"
    
    def __init__(self, argument_name: str):
        super().__init__(
            f"The element that matches the specified \"{argument_name}\" is not visible.",
            {"argument_name": argument_name},
        )
        self.argument_name = argument_name


class ActionElementNonEditableError(ActionError):
    """The select-text target is not an editable element."""
    code = "E-ACTION-ELEMENT-NON-EDITABLE"
    
    def __init__(self, message: str = "The action element is expected to be editable (an input, textarea or element with the contentEditable attribute)."):
        super().__init__(message)


class ActionElementNotTextAreaError(ActionError):
    """The select-text-area-content target is not a textarea."""
    code = "E-ACTION-ELEMENT-NOT-TEXT-AREA"
    
    def __init__(self, message: str = "The action element is expected to be a <textarea>."):
        super().__init__(message)


class ActionElementNonContentEditableError(ActionError):
    """
    A select-editable-content endpoint is not content-editable.
    
    Attributes:
        argument_name: "startSelector" or "endSelector"
    """
    code = "E-ACTION-ELEMENT-NON-CONTENT-EDITABLE"
    
    def __init__(self, argument_name: str):
        super().__init__(
            f"The element that matches the specified \"{argument_name}\" is expected to have the contentEditable attribute enabled or the entire document should be in design mode.",
            {"argument_name": argument_name},
        )
        self.argument_name = argument_name


class ActionRootContainerNotFoundError(ActionError):
    """The start and end elements of a selection have no common ancestor."""
    code = "E-ACTION-ROOT-CONTAINER-NOT-FOUND"
    
    def __init__(self, message: str = "Content between the action elements cannot be selected because the root container for the selection range cannot be found, i.e. these elements do not have a common ancestor with the contentEditable attribute."):
        super().__init__(message)


class WaitForTimeoutError(PageDriverError):
    """
    A polling wait ran out of time.
    
    Raised by ``wait_for`` and translated into a typed action error by
    the element resolver.
    """
    code = "E-WAIT-FOR-TIMEOUT"
    
    def __init__(self, timeout_ms: float):
        super().__init__(f"Condition was not met within {timeout_ms:.0f}ms", {"timeout_ms": timeout_ms})
        self.timeout_ms = timeout_ms
