"""
Canvas capture utilities

Renders a widget to an encoded PNG and returns it as base64 text for the
generative AI calls.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice, QRect
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import QWidget

from ..config import Config

logger = logging.getLogger(__name__)


class CaptureError(Exception):
    """Raised when the whiteboard could not be captured."""
    pass


def pixmap_to_base64(
    pixmap: QPixmap,
    image_format: str = Config.CAPTURE_FORMAT,
    quality: int = Config.CAPTURE_QUALITY
) -> str:
    """
    Encode a pixmap as base64 text

    Args:
        pixmap: Rendered pixmap
        image_format: Qt image format name ("PNG")
        quality: 0-100 encoder quality

    Returns:
        Base64 encoded image (no data-URL prefix)
    """
    byte_array = QByteArray()
    buffer = QBuffer(byte_array)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    try:
        if not pixmap.save(buffer, image_format, quality):
            raise CaptureError("Failed to capture canvas image")
    finally:
        buffer.close()
    return bytes(byte_array.toBase64()).decode('ascii')


def capture_widget(widget: Optional[QWidget], height: Optional[int] = None) -> str:
    """
    Capture a widget as base64 PNG

    Args:
        widget: Widget to render (off-screen parts included)
        height: Optional height to crop to, measured from the widget top

    Returns:
        Base64 encoded PNG

    Raises:
        CaptureError: if the widget is missing or the image is too small
    """
    if widget is None:
        raise CaptureError("Canvas reference not available")

    rect = widget.rect()
    if height is not None:
        rect = QRect(0, 0, rect.width(), max(1, min(int(height), rect.height())))

    pixmap = widget.grab(rect)
    if pixmap.isNull():
        raise CaptureError("Failed to capture canvas image")

    encoded = pixmap_to_base64(pixmap)
    logger.debug(f"Canvas captured ({pixmap.width()}x{pixmap.height()}), "
                 f"base64 length: {len(encoded)}")

    if len(encoded) < Config.MIN_CAPTURE_LENGTH:
        raise CaptureError("Failed to capture canvas properly - image too small")
    return encoded


__all__ = ['CaptureError', 'pixmap_to_base64', 'capture_widget']
