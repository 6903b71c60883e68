# offline_translator/infrastructure/system_utils.py

import logging

import pyperclip  # System clipboard access

logger = logging.getLogger(__name__)


def get_clipboard_text() -> str:
    """
    Returns the current text of the system clipboard, or "" if it cannot be read.
    """
    try:
        clipboard_content = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.warning("Infrastructure Layer (SystemUtils): Could not read clipboard: %s", e)
        return ""
    logger.debug("Infrastructure Layer (SystemUtils): Clipboard text read (first 50 chars): %s...",
                 clipboard_content[:50])
    return clipboard_content


def set_clipboard_text(text: str) -> bool:
    """
    Puts text on the system clipboard.

    Returns:
        True if the clipboard was written.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Infrastructure Layer (SystemUtils): Could not write clipboard: %s", e)
        return False
    logger.debug("Infrastructure Layer (SystemUtils): Clipboard text set (first 50 chars): %s...", text[:50])
    return True
