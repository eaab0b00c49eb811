"""
Dessert image loading.
"""

import cv2
import numpy as np
from typing import Tuple
from utils.config_loader import BASE_DIR
from utils.logger import logger

USER_ASSETS = BASE_DIR / "config" / "user_assets"
CORE_ASSETS = BASE_DIR / "assets"

_CACHE = {}

def _placeholder(image_id: str, size: int) -> np.ndarray:
    """Coloured disc with the dessert name, stable per image_id."""
    seed = sum(ord(c) for c in image_id)
    color: Tuple[int, int, int] = (80 + seed * 37 % 160, 80 + seed * 53 % 160, 80 + seed * 71 % 160)

    tile = np.full((size, size, 3), 255, dtype=np.uint8)
    cv2.circle(tile, (size // 2, size // 2), size // 2 - 8, color, thickness=-1)

    scale = 0.8
    (w, h), _ = cv2.getTextSize(image_id, cv2.FONT_HERSHEY_SIMPLEX, scale, 2)
    while w > size - 24 and scale > 0.3:
        scale -= 0.1
        (w, h), _ = cv2.getTextSize(image_id, cv2.FONT_HERSHEY_SIMPLEX, scale, 2)
    cv2.putText(tile, image_id, ((size - w) // 2, (size + h) // 2),
                cv2.FONT_HERSHEY_SIMPLEX, scale, (255, 255, 255), 2, cv2.LINE_AA)
    return tile

def load_dessert_image(image_id: str, size: int = 320) -> np.ndarray:
    """BGR image of ``size`` x ``size`` for a dessert, user assets first."""
    key = (image_id, size)
    if key in _CACHE: return _CACHE[key]

    img = None
    for folder in [USER_ASSETS, CORE_ASSETS]:
        path = folder / f"{image_id}.png"
        if path.exists():
            img = cv2.imread(str(path), cv2.IMREAD_COLOR)
            if img is not None:
                img = cv2.resize(img, (size, size), interpolation=cv2.INTER_AREA)
                break

    if img is None:
        logger.warning(f"Dessert image missing: {image_id}, using placeholder")
        img = _placeholder(image_id, size)

    _CACHE[key] = img
    return img

def clear_image_cache():
    _CACHE.clear()
