"""Camera collaborator interface.

Hides how a video stream is acquired. Failure to acquire is never fatal:
the conversation continues without video.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

from ..exceptions import CameraUnavailableError

logger = logging.getLogger(__name__)


class CameraStream(ABC):
    """An acquired video stream, owned by whoever acquired it."""

    @abstractmethod
    def read_frame(self) -> Any | None:
        """Grab the latest frame, or None if no frame is available."""
        pass

    @abstractmethod
    def release(self) -> None:
        """Release the device. Safe to call more than once."""
        pass

    def __enter__(self) -> "CameraStream":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.release()


class Camera(ABC):
    """Source of camera streams."""

    @abstractmethod
    def acquire(self, facing: str = "user") -> CameraStream:
        """Open a stream.

        Args:
            facing: Requested camera orientation ("user" or "environment")

        Raises:
            CameraUnavailableError: If no stream can be opened
        """
        pass


async def acquire_camera(camera: Camera | None, facing: str = "user") -> CameraStream | None:
    """Acquire a stream without blocking the event loop.

    Failures are logged and reported as None.
    """
    if camera is None:
        return None
    try:
        return await asyncio.to_thread(camera.acquire, facing)
    except CameraUnavailableError as e:
        logger.error("Error accessing camera: %s", e)
        return None
