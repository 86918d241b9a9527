# src/quizsnap/utils/file_utils.py
import mimetypes
from io import BytesIO
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from src.quizsnap import config
from src.quizsnap.errors import InvalidInputError


def is_image_content_type(content_type: Optional[str]) -> bool:
    """True when the declared MIME type is an image type ("image/...")."""
    return bool(content_type) and content_type.lower().startswith("image/")


def is_allowed_file(filename: str) -> bool:
    """
    Check whether the file extension is one of the configured image extensions.
    """
    if not filename or "." not in filename:
        return False

    extension = Path(filename).suffix.lower()
    return extension in config.ALLOWED_IMAGE_EXTENSIONS


def resolve_mime_type(filename: Optional[str], content_type: Optional[str]) -> str:
    """
    MIME type to announce to the vision model. Uploads without an image content type
    (e.g. application/octet-stream) are typed from their extension, else the default.
    """
    if is_image_content_type(content_type):
        return content_type
    if is_allowed_file(filename):
        guessed, _ = mimetypes.guess_type(filename)
        if is_image_content_type(guessed):
            return guessed
    return config.DEFAULT_MIME_TYPE


def is_decodable_type(mime_type: Optional[str]) -> bool:
    """True when Pillow has a decoder for the MIME type (JPEG, PNG, WebP, ...)."""
    if not mime_type:
        return False
    Image.init()
    return mime_type.lower() in {mime.lower() for mime in Image.MIME.values()}


def inspect_image(image_bytes: bytes) -> Tuple[int, int]:
    """
    Check that the payload decodes as an image and return its (width, height).
    """
    try:
        with Image.open(BytesIO(image_bytes)) as image:
            image.verify()
            return image.size
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise InvalidInputError("Uploaded file is not a readable image") from e
