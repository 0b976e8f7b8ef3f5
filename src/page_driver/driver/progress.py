"""
Progress panel that reports through the logger.
"""

import logging
from typing import Optional

from page_driver.interfaces import IProgressPanel

logger = logging.getLogger(__name__)


class LoggingProgressPanel(IProgressPanel):
    """
    Progress panel for hosts without a visual indicator.
    
    Attributes:
        visible: Whether the panel is currently shown
        text: Text of the last ``show`` call
        last_result: Value passed to the last ``close`` call
    """
    
    def __init__(self) -> None:
        self.visible = False
        self.text: Optional[str] = None
        self.last_result: Optional[bool] = None
    
    def show(self, text: str, timeout_ms: float) -> None:
        self.visible = True
        self.text = text
        logger.info(f"{text} (up to {timeout_ms / 1000:.1f}s)")
    
    def close(self, success: bool) -> None:
        self.visible = False
        self.last_result = success
        logger.debug(f"Progress panel closed, success={success}")
