"""
Enums used across the application.
"""

from enum import Enum


class Category(str, Enum):
    """
    Topic of a pin or a board.

    Shared by Pin and Board. Defaults to OTHER when not supplied.
    """

    ART = "Art"
    PHOTOGRAPHY = "Photography"
    DIY = "DIY"
    FOOD = "Food"
    FASHION = "Fashion"
    TRAVEL = "Travel"
    OTHER = "Other"


class MediaType(str, Enum):
    """MIME type of the media file attached to a pin."""

    IMAGE_JPEG = "image/jpeg"
    IMAGE_PNG = "image/png"
    IMAGE_GIF = "image/gif"
    VIDEO_MP4 = "video/mp4"
    AUDIO_MPEG = "audio/mpeg"
