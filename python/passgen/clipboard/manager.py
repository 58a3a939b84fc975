"""
Clipboard management using pyperclip.
"""

import logging
import threading
import time
from typing import Optional

import pyperclip

from ..exceptions import ClipboardError

logger = logging.getLogger(__name__)

DEFAULT_CLEAR_AFTER = 60  # seconds


class ClipboardManager:
    """Copies text to the clipboard with optional auto-clear."""

    def __init__(self, clear_after: int = DEFAULT_CLEAR_AFTER):
        """
        Initialize clipboard manager.

        Args:
            clear_after: Seconds before copied text is cleared (0 disables)
        """
        self.clear_after = max(0, clear_after)

    def copy(self, text: str) -> Optional[threading.Thread]:
        """
        Copy text to the clipboard.

        Args:
            text: Text to copy

        Returns:
            The auto-clear thread, or None if auto-clear is disabled

        Raises:
            ClipboardError: If text is empty or the clipboard is unavailable
        """
        if not text:
            raise ClipboardError("Nothing to copy")

        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Could not copy to clipboard: {e}") from e

        logger.debug("Copied text to clipboard")

        if not self.clear_after:
            return None

        clear_thread = threading.Thread(
            target=self._clear_later, args=(text, self.clear_after), daemon=True
        )
        clear_thread.start()
        return clear_thread

    def _clear_later(self, text: str, delay: float) -> None:
        """Clear the clipboard after delay seconds if it still holds text."""
        time.sleep(delay)
        self.clear_if_unchanged(text)

    def wait_for_clear(self, clear_thread: threading.Thread, text: str) -> None:
        """
        Block until the auto-clear thread has run.

        A KeyboardInterrupt clears the clipboard immediately instead.

        Args:
            clear_thread: Thread returned by copy()
            text: Text that was copied
        """
        try:
            clear_thread.join()
        except KeyboardInterrupt:
            logger.debug("Interrupted, clearing clipboard now")
            self.clear_if_unchanged(text)

    def clear_if_unchanged(self, text: str) -> bool:
        """
        Clear the clipboard if it still contains text.

        Returns:
            True if the clipboard was cleared
        """
        try:
            if pyperclip.paste() != text:
                logger.debug("Clipboard changed since copy, leaving it alone")
                return False
            pyperclip.copy("")
        except pyperclip.PyperclipException as e:
            logger.warning(f"Failed to clear clipboard: {e}")
            return False

        logger.debug("Clipboard cleared")
        return True


def get_clipboard_manager(clear_after: int = DEFAULT_CLEAR_AFTER) -> ClipboardManager:
    """
    Get a configured clipboard manager instance.

    Args:
        clear_after: Seconds before copied text is cleared (0 disables)

    Returns:
        ClipboardManager instance
    """
    return ClipboardManager(clear_after=clear_after)
