class RenderError(Exception):
    """Base class for failures while building or rendering a scene."""


class ResourceError(RenderError, OSError):
    """The output image could not be created or written."""


class DegenerateGeometryError(RenderError, ValueError):
    """Geometry that makes a direction undefined, such as coincident points."""
