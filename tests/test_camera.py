"""Unit tests for the camera module."""
import logging
import sys
from types import SimpleNamespace

import pytest

from teddyai.camera import Camera, CameraStream, acquire_camera
from teddyai.exceptions import CameraUnavailableError


class FakeStream(CameraStream):
    def __init__(self):
        self.released = 0

    def read_frame(self):
        return b"frame"

    def release(self):
        self.released += 1


class FakeCamera(Camera):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.requested = []

    def acquire(self, facing="user"):
        self.requested.append(facing)
        if self.fail:
            raise CameraUnavailableError("permission denied", index=0)
        return FakeStream()


class TestAcquireCamera:
    """Tests for non-fatal camera acquisition."""

    def test_camera_is_abstract(self):
        with pytest.raises(TypeError):
            Camera()  # type: ignore

    @pytest.mark.asyncio
    async def test_acquire_success(self):
        camera = FakeCamera()
        stream = await acquire_camera(camera)
        assert isinstance(stream, FakeStream)
        assert camera.requested == ["user"]

    @pytest.mark.asyncio
    async def test_acquire_failure_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            stream = await acquire_camera(FakeCamera(fail=True))

        assert stream is None
        assert "Error accessing camera" in caplog.text
        assert "permission denied" in caplog.text

    @pytest.mark.asyncio
    async def test_no_camera(self):
        assert await acquire_camera(None) is None

    def test_stream_context_manager_releases(self):
        stream = FakeStream()
        with stream as s:
            assert s.read_frame() == b"frame"
        assert stream.released == 1


class TestOpenCVCamera:
    """Tests for the OpenCV adapter (requires the vision extra)."""

    def test_missing_device_raises(self):
        pytest.importorskip("cv2")
        from teddyai.camera.opencv import OpenCVCamera

        camera = OpenCVCamera(index=99)
        with pytest.raises(CameraUnavailableError, match="index: 99"):
            camera.acquire()

    def test_opencv_error_becomes_unavailable(self, monkeypatch):
        class Cv2Error(Exception):
            pass

        def video_capture(index):
            raise Cv2Error("backend crashed")

        monkeypatch.setitem(sys.modules, "cv2", SimpleNamespace(error=Cv2Error, VideoCapture=video_capture))
        from teddyai.camera.opencv import OpenCVCamera

        camera = OpenCVCamera(index=2)
        with pytest.raises(CameraUnavailableError, match="backend crashed"):
            camera.acquire()

    @pytest.mark.asyncio
    async def test_opencv_error_is_not_fatal(self, monkeypatch, caplog):
        class Cv2Error(Exception):
            pass

        class BrokenCapture:
            def isOpened(self):
                raise Cv2Error("driver fault")

        monkeypatch.setitem(
            sys.modules, "cv2", SimpleNamespace(error=Cv2Error, VideoCapture=lambda index: BrokenCapture())
        )
        from teddyai.camera.opencv import OpenCVCamera

        with caplog.at_level(logging.ERROR):
            stream = await acquire_camera(OpenCVCamera(index=0))

        assert stream is None
        assert "driver fault" in caplog.text
