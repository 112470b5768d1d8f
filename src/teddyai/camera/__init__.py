"""Camera access for teddyai."""

from .base import Camera, CameraStream, acquire_camera

__all__ = ["Camera", "CameraStream", "acquire_camera"]
