"""Image processing utilities.

This module provides utility functions for image processing operations,
including base64 decoding and resizing images onto the comparison canvas.
"""

import cv2
import numpy as np
import base64
import binascii
from typing import Tuple

class ImageProcessingError(Exception):
    """Base exception for image processing errors."""
    pass

class ImageDecodingError(ImageProcessingError):
    """Exception raised when image decoding fails."""
    pass

class ImageFormatError(ImageProcessingError):
    """Exception raised when image format is invalid."""
    pass

def decode_base64_image(base64_string: str) -> np.ndarray:
    """Decode base64 string to OpenCV image.

    Args:
        base64_string: Base64 encoded image string, optionally with data URL prefix.
            Example formats:
            - "data:image/jpeg;base64,/9j/4AAQSkZ..."
            - "/9j/4AAQSkZ..." (without prefix)

    Returns:
        Decoded image as numpy array in BGR format.

    Raises:
        ImageDecodingError: If base64 decoding fails.
        ImageFormatError: If decoded data cannot be read as an image.
    """
    # Remove data URL prefix if present
    if ';base64,' in base64_string:
        base64_string = base64_string.split(';base64,', 1)[1]
    elif ',' in base64_string:
        base64_string = base64_string.split(',', 1)[1]

    try:
        image_bytes = base64.b64decode(base64_string, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodingError(f"Failed to decode base64 string: {str(e)}")

    if not image_bytes:
        raise ImageFormatError("Image data is empty")

    nparr = np.frombuffer(image_bytes, np.uint8)
    image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)
    if image is None:
        raise ImageFormatError("Failed to decode image data")

    return image

def resize_to_canvas(image: np.ndarray, canvas_pixels: Tuple[int, int]) -> np.ndarray:
    """Resize image to the comparison canvas.

    Args:
        image: Input image.
        canvas_pixels: Target (width, height) in pixels.

    Returns:
        Resized image. Aspect ratio is not preserved, so both compared
        images share the same frame.
    """
    if image is None or image.size == 0:
        raise ImageFormatError("Cannot resize an empty image")

    width, height = canvas_pixels
    if image.shape[1] == width and image.shape[0] == height:
        return image

    # Area interpolation when shrinking, bilinear when enlarging
    shrinking = image.shape[1] > width or image.shape[0] > height
    interpolation = cv2.INTER_AREA if shrinking else cv2.INTER_LINEAR
    return cv2.resize(image, (width, height), interpolation=interpolation)
