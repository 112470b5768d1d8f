"""OpenCV-backed camera."""

from typing import Any

from ..exceptions import CameraUnavailableError
from .base import Camera, CameraStream


class OpenCVStream(CameraStream):
    """Wraps a cv2.VideoCapture."""

    def __init__(self, capture: Any) -> None:
        self._capture = capture
        self._released = False

    @property
    def is_open(self) -> bool:
        return not self._released and self._capture.isOpened()

    def read_frame(self) -> Any | None:
        if self._released:
            return None
        ok, frame = self._capture.read()
        return frame if ok else None

    def release(self) -> None:
        if not self._released:
            self._capture.release()
            self._released = True


class OpenCVCamera(Camera):
    """Camera opened through cv2.VideoCapture by device index.

    OpenCV has no notion of facing; the device index selects the camera.
    """

    def __init__(self, index: int = 0) -> None:
        # Import here so the dependency stays optional
        import cv2

        self._cv2 = cv2
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def acquire(self, facing: str = "user") -> OpenCVStream:
        try:
            capture = self._cv2.VideoCapture(self._index)
            opened = capture.isOpened()
        except self._cv2.error as e:
            raise CameraUnavailableError(str(e), index=self._index) from e
        if not opened:
            capture.release()
            raise CameraUnavailableError("device could not be opened", index=self._index)
        return OpenCVStream(capture)
