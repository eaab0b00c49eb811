"""
Screen rendering and input for the clicker.

``DisplaySurface`` only composes frames, so it can be driven without a
window. ``OpenCVWindow`` puts those frames on screen and turns mouse and
keyboard input into events for the host.
"""

import time
from collections import deque
from typing import Callable, List, Optional, Tuple

import cv2
import numpy as np

from utils.assets import load_dessert_image
from utils.config_loader import get_config_value
from utils.logger import logger

EVENT_TAP = "tap"
EVENT_SHARE = "share"
EVENT_ROTATE = "rotate"
EVENT_HOME = "home"
EVENT_QUIT = "quit"

KEY_EVENTS = {
    ord("s"): EVENT_SHARE,
    ord("r"): EVENT_ROTATE,
    ord("h"): EVENT_HOME,
    ord("q"): EVENT_QUIT,
    27: EVENT_QUIT,  # Esc
}

BACKGROUND = (245, 240, 250)
TEXT_COLOR = (60, 40, 40)

class DisplaySurface:
    """Dessert image, score lines and a transient notice banner."""

    def __init__(self, width: int = None, height: int = None, image_size: int = None,
                 clock: Callable[[], float] = time.monotonic):
        self.width = width or get_config_value("window.width", 480)
        self.height = height or get_config_value("window.height", 720)
        self.image_size = image_size or get_config_value("window.image_size", 320)
        self.clock = clock

        self.image_id: Optional[str] = None
        self.revenue = 0
        self.amount_sold = 0
        self._notice: Optional[str] = None
        self._notice_until = 0.0

    def set_image(self, image_id: str):
        logger.debug(f"Showing dessert '{image_id}'")
        self.image_id = image_id

    def set_score(self, revenue: int, amount_sold: int):
        self.revenue = revenue
        self.amount_sold = amount_sold

    def show_notice(self, text: str, duration_ms: int = None):
        if duration_ms is None:
            duration_ms = get_config_value("notice_duration_ms", 3500)
        self._notice = text
        self._notice_until = self.clock() + duration_ms / 1000.0

    def active_notice(self) -> Optional[str]:
        if self._notice is not None and self.clock() >= self._notice_until:
            self._notice = None
        return self._notice

    def image_rect(self) -> Tuple[int, int, int, int]:
        x1 = (self.width - self.image_size) // 2
        y1 = (self.height - self.image_size) // 2 - 60
        return x1, y1, x1 + self.image_size, y1 + self.image_size

    def hit_test(self, x: int, y: int) -> bool:
        x1, y1, x2, y2 = self.image_rect()
        return x1 <= x < x2 and y1 <= y < y2

    def render(self) -> np.ndarray:
        frame = np.full((self.height, self.width, 3), BACKGROUND, dtype=np.uint8)

        if self.image_id is not None:
            x1, y1, x2, y2 = self.image_rect()
            frame[y1:y2, x1:x2] = load_dessert_image(self.image_id, self.image_size)

        _, _, _, bottom = self.image_rect()
        self._put_line(frame, f"Desserts Sold: {self.amount_sold}", bottom + 60)
        self._put_line(frame, f"Revenue: ${self.revenue}", bottom + 110)

        notice = self.active_notice()
        if notice:
            banner_top = self.height - 70
            cv2.rectangle(frame, (20, banner_top), (self.width - 20, self.height - 20), (70, 70, 70), -1)
            self._put_line(frame, notice, banner_top + 33, color=(255, 255, 255), scale=0.7)

        return frame

    def _put_line(self, frame: np.ndarray, text: str, y: int, color=TEXT_COLOR, scale: float = 0.9):
        (w, _), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, 2)
        cv2.putText(frame, text, ((self.width - w) // 2, y),
                    cv2.FONT_HERSHEY_SIMPLEX, scale, color, 2, cv2.LINE_AA)

class OpenCVWindow(DisplaySurface):
    """A DisplaySurface shown in a HighGUI window."""

    def __init__(self, title: str = None, **kwargs):
        super().__init__(**kwargs)
        self.title = title or get_config_value("window.title", "Dessert Clicker")
        self._events = deque()

    def open(self):
        cv2.namedWindow(self.title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(self.title, self._on_mouse)

    def close(self):
        cv2.destroyAllWindows()

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN and self.hit_test(x, y):
            self._events.append(EVENT_TAP)

    def poll_events(self, delay_ms: int = 30) -> List[str]:
        """Draw the current frame and collect input received meanwhile."""
        cv2.imshow(self.title, self.render())
        key = cv2.waitKey(delay_ms) & 0xFF
        if key in KEY_EVENTS:
            self._events.append(KEY_EVENTS[key])
        if cv2.getWindowProperty(self.title, cv2.WND_PROP_VISIBLE) < 1:
            self._events.append(EVENT_QUIT)

        events = list(self._events)
        self._events.clear()
        return events
