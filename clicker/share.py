"""
Sharing the score as plain text through the device's share sheet.
"""

from utils.adb import AdbError, adb_connect, adb_is_device_ready, adb_start_intent
from utils.config_loader import get_config_value
from utils.logger import logger

ACTION_SEND = "android.intent.action.SEND"
EXTRA_TEXT = "android.intent.extra.TEXT"
MIME_TEXT = "text/plain"

DEFAULT_SHARE_TEXT = "Sold {sold} desserts for ${revenue}"

class ShareUnavailableError(RuntimeError):
    """No share facility could take the text."""

def format_share_text(units_sold: int, revenue: int) -> str:
    template = get_config_value("share.text", DEFAULT_SHARE_TEXT)
    return template.format(sold=units_sold, revenue=revenue)

def share_score(units_sold: int, revenue: int) -> str:
    """
    Send the score summary to the device share sheet.

    Returns the shared text. Raises ShareUnavailableError when adb or the
    device cannot handle the intent.
    """
    text = format_share_text(units_sold, revenue)
    try:
        adb_connect()
        if not adb_is_device_ready():
            raise ShareUnavailableError("No device connected")
        adb_start_intent(ACTION_SEND, MIME_TEXT, {EXTRA_TEXT: text})
    except AdbError as e:
        raise ShareUnavailableError(str(e)) from e

    logger.info(f"Shared: {text}")
    return text
