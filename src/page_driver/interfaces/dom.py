"""
DOM Interface - Abstract base classes for page inspection collaborators.

This module defines the contract the host page must provide so the
driver can locate elements and check their state. Elements are opaque
to the driver: whatever object the selector evaluator returns is passed
back unchanged to the predicates below and to the automations.

Example:
    >>> element = evaluator.evaluate("#submit")
    >>> dom.is_element_visible(element)
    True
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ISelectorEvaluator(ABC):
    """
    Resolves selector expressions to live elements.
    
    Evaluation must be synchronous and free of side effects, since it
    is repeated on every polling tick.
    """

    @abstractmethod
    def evaluate(self, selector: str) -> Optional[Any]:
        """
        Evaluate a selector expression.
        
        Args:
            selector: The selector expression from the command
            
        Returns:
            The matching element, or None if nothing matches yet
        """
        ...


class IDomUtils(ABC):
    """
    Element predicates and lookups used to validate action targets.
    """

    @abstractmethod
    def is_element_visible(self, element: Any) -> bool:
        """Check whether the element is rendered and visible."""
        ...

    @abstractmethod
    def is_editable_element(self, element: Any) -> bool:
        """Check whether the element is an input, textarea or content-editable."""
        ...

    @abstractmethod
    def is_text_area_element(self, element: Any) -> bool:
        """Check whether the element is a <textarea>."""
        ...

    @abstractmethod
    def is_content_editable_element(self, element: Any) -> bool:
        """Check whether the element is content-editable (or in design mode)."""
        ...

    @abstractmethod
    def is_text_editable_element(self, element: Any) -> bool:
        """Check whether the element keeps its text in a value (input/textarea)."""
        ...

    @abstractmethod
    def get_element_value(self, element: Any) -> str:
        """Get the current value of a text-editable element."""
        ...

    @abstractmethod
    def get_first_visible_position(self, element: Any) -> int:
        """Get the first caret position with visible content in a content-editable element."""
        ...

    @abstractmethod
    def get_last_visible_position(self, element: Any) -> int:
        """Get the last caret position with visible content in a content-editable element."""
        ...

    @abstractmethod
    def get_nearest_common_ancestor(self, first: Any, second: Any) -> Optional[Any]:
        """
        Find the nearest content-editable ancestor shared by two elements.
        
        Args:
            first: Start element of a selection
            second: End element of a selection
            
        Returns:
            The common ancestor usable as a selection root, or None
        """
        ...
