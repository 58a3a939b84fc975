"""
Clipboard integration for passgen.

Copies generated passwords to the system clipboard and clears them again
after a delay.
"""

from .manager import ClipboardManager, get_clipboard_manager

__all__ = ['ClipboardManager', 'get_clipboard_manager']
