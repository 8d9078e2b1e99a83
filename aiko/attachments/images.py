"""Image attachment validation and data-URI encoding.

Turns an uploaded file into the data URI used for the in-page preview and
stored on the message that carries it.
"""

import base64
import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Constants
MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10MB
NOT_AN_IMAGE = "Please select an image file."


class ImageAttachment(BaseModel):
    """An accepted image file.

    Attributes:
        filename: Original file name, if the browser sent one.
        content_type: MIME type, always image/*.
        size: Size of the raw file in bytes.
        data_uri: The file encoded as a base64 data URI.
    """

    filename: str | None = None
    content_type: str
    size: int = Field(ge=1)
    data_uri: str


class ImageAttachmentError(Exception):
    """Raised when a selected file cannot be attached."""

    pass


def _validate_image(content: bytes, content_type: str | None) -> str:
    """Validate an uploaded file before encoding.

    Args:
        content: Raw bytes of the file.
        content_type: MIME type reported by the browser.

    Returns:
        The normalized MIME type.

    Raises:
        ImageAttachmentError: If validation fails.
    """
    mime = (content_type or "").split(";")[0].strip().lower()
    if not mime.startswith("image/"):
        raise ImageAttachmentError(NOT_AN_IMAGE)

    if not content:
        raise ImageAttachmentError("The selected image is empty.")

    if len(content) > MAX_IMAGE_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise ImageAttachmentError(
            f"Image size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)"
        )

    return mime


def to_data_uri(content: bytes, content_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


def load_image(
    content: bytes,
    content_type: str | None,
    filename: str | None = None,
) -> ImageAttachment:
    """Accept an uploaded file as an image attachment.

    Args:
        content: Raw bytes of the file.
        content_type: MIME type reported by the browser.
        filename: Original file name, for logging and display.

    Returns:
        ImageAttachment with the encoded data URI.

    Raises:
        ImageAttachmentError: If the file is not an image, is empty, or is too large.
    """
    mime = _validate_image(content, content_type)
    logger.info(f"Attached image {filename or '<unnamed>'} ({mime}, {len(content)} bytes)")

    return ImageAttachment(
        filename=filename,
        content_type=mime,
        size=len(content),
        data_uri=to_data_uri(content, mime),
    )
