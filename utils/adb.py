"""
ADB operations for delivering intents to an Android device.
"""

import shlex
import subprocess
from typing import Dict, List, Optional
from utils.config_loader import get_config_value
from utils.logger import logger

ADB_PATH = get_config_value("adb_path", "adb")
DEVICE_IP = get_config_value("device_ip", "127.0.0.1:5555")

class AdbError(RuntimeError):
    """An adb command could not be run or exited with an error."""

def adb_run(cmd: List[str]) -> bytes:
    """Run an ADB command and return its stdout."""
    try:
        result = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=True)
        return result.stdout
    except FileNotFoundError as e:
        logger.error(f"ADB executable not found: {cmd[0]}")
        raise AdbError(f"{cmd[0]} not found") from e
    except subprocess.CalledProcessError as e:
        logger.error(f"ADB failed: {' '.join(cmd)} | Error: {e.stderr}")
        raise AdbError(f"{' '.join(cmd)} exited with {e.returncode}") from e

def adb_connect(device_ip: Optional[str] = None) -> bytes:
    return adb_run([ADB_PATH, "connect", device_ip or DEVICE_IP])

def adb_is_device_ready() -> bool:
    try:
        output = adb_run([ADB_PATH, "devices"])
    except AdbError:
        return False
    return b"device\n" in output or b"device\r\n" in output

def adb_start_intent(action: str, mime_type: str, extras: Dict[str, str]) -> bytes:
    """
    Fire an activity intent with string extras on the device.

    Raises AdbError when adb fails or the activity manager reports that no
    activity could handle the intent.
    """
    # adb shell hands the arguments to the device's shell as one line
    cmd = [ADB_PATH, "-s", DEVICE_IP, "shell", "am", "start", "-a", action, "-t", mime_type]
    for key, value in extras.items():
        cmd += ["--es", key, shlex.quote(value)]

    logger.debug(f"Intent: {action} ({mime_type})")
    output = adb_run(cmd)
    if b"Error:" in output:
        message = output.decode("utf-8", errors="replace").strip()
        logger.error(f"Intent not delivered: {message}")
        raise AdbError(message)
    return output
