"""Image attachments for chat messages.

Validates the MIME type and size of a selected file and encodes it as a data
URI for preview and for the message that carries it.
"""

from aiko.attachments.images import ImageAttachment, ImageAttachmentError, load_image

__all__ = ["ImageAttachment", "ImageAttachmentError", "load_image"]
