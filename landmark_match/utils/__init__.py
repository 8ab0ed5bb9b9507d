"""Utility functions for image processing"""
from .image import (
    decode_base64_image,
    resize_to_canvas
)

__all__ = [
    'decode_base64_image',
    'resize_to_canvas'
]
