# camera/camera.py
import logging
import math
from dataclasses import dataclass

from core.point import Point
from core.ray import Ray
from core.utils import ieee_tan
from core.vector import Vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenericCamera:
    """
    The frame shared by every camera model: the eye position, the principal
    viewing direction, the up hint and the two image-plane span vectors.
    """
    origin: Point
    direction: Vector
    up: Vector
    x_span: Vector
    y_span: Vector


def _log_spans(kind: str, cam: GenericCamera):
    logger.debug("%s camera spans: x=%r y=%r", kind, cam.x_span, cam.y_span)
    if not all(math.isfinite(c) for c in (*cam.x_span, *cam.y_span)):
        # direction and up are parallel, so the image plane is undefined
        logger.debug("%s camera has a degenerate image plane (direction=%r, up=%r)",
                     kind, cam.direction, cam.up)


class Camera:
    """
    Abstract class for cameras that generate primary rays.
    """
    def get_primary_ray(self, x: float, y: float) -> Ray:
        """
        Returns the ray through the image-plane sample (x, y), where both
        coordinates are normalized, typically to [-1, 1].
        """
        raise NotImplementedError("get_primary_ray() must be implemented by subclasses.")


class OrthographicCamera(Camera):
    """
    A camera whose primary rays are all parallel to the viewing direction.
    Samples are offset across the image plane by the scaled span vectors.
    """
    def __init__(self, origin: Point, direction: Vector, up: Vector,
                 scale_x: float, scale_y: float):
        # x_span is not normalized
        x_span = direction.cross(up) * scale_x * 0.5
        y_span = x_span.cross(direction) * scale_y * 0.5
        self.camera = GenericCamera(origin, direction, up, x_span, y_span)
        _log_spans("Orthographic", self.camera)

    def get_primary_ray(self, x: float, y: float) -> Ray:
        cam = self.camera
        offset = x * cam.x_span + y * cam.y_span
        return Ray(cam.origin + offset, cam.direction)


class PerspectiveCamera(Camera):
    """
    A pinhole camera. Every primary ray starts at the eye and passes through
    the image plane at the tip of the viewing direction. h and v are the
    full horizontal and vertical fields of view in radians.
    """
    def __init__(self, origin: Point, direction: Vector, up: Vector,
                 h: float, v: float):
        x_span = direction.cross(up).normalize() * ieee_tan(h / 2.0)
        y_span = x_span.cross(direction).normalize() * ieee_tan(v / 2.0)
        self.camera = GenericCamera(origin, direction, up, x_span, y_span)
        _log_spans("Perspective", self.camera)

    def get_primary_ray(self, x: float, y: float) -> Ray:
        cam = self.camera
        offset = x * cam.x_span + y * cam.y_span
        return Ray(cam.origin, (cam.direction + offset).normalize())
