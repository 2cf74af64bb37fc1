"""
Image lookup by logical name
"""

from __future__ import annotations
import logging
import os
from typing import Dict, Optional, Set

from PIL import Image

logger = logging.getLogger(__name__)


class AssetManager:
    """
    Holds sprite sheets keyed by file stem ("icons.png" -> "icons").

    Lookups for unknown names return None; renderers skip the draw.
    """

    def __init__(self):
        self.images: Dict[str, Image.Image] = {}
        self._missing: Set[str] = set()

    def init(self, directory: Optional[str]):
        if not directory:
            return
        if not os.path.isdir(directory):
            logger.warning("Asset directory %s not found, drawing without sprites", directory)
            return
        for filename in sorted(os.listdir(directory)):
            name, ext = os.path.splitext(filename)
            if ext.lower() not in (".png", ".gif", ".bmp"):
                continue
            path = os.path.join(directory, filename)
            try:
                self.images[name] = Image.open(path).convert("RGBA")
            except OSError as e:
                logger.warning("Could not load image %s: %s", path, e)
        logger.debug("Loaded %d images from %s", len(self.images), directory)

    def add_image(self, name: str, image: Image.Image):
        self.images[name] = image

    def get_image(self, name: str) -> Optional[Image.Image]:
        image = self.images.get(name)
        if image is None and name not in self._missing:
            self._missing.add(name)
            logger.warning("Missing image '%s'", name)
        return image
