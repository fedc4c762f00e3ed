MAX_RESOLUTION = 0xFFFF


class SceneSettings:
    """Render-wide parameters.

    ``resolution`` is the side of the square image in pixels. Each bounce after
    the first is weighted by a further ``reflection_factor``; ``max_recursions``
    bounds the number of bounces. ``single_root`` selects the one-root
    intersection test (entry root from outside, exit root from inside).
    """

    def __init__(self, resolution=512, max_recursions=10, reflection_factor=0.6,
                 ambient_intensity=0.1, single_root=False):
        self.resolution = int(resolution)
        self.max_recursions = int(max_recursions)
        self.reflection_factor = float(reflection_factor)
        self.ambient_intensity = float(ambient_intensity)
        self.single_root = bool(single_root)

        if not 1 <= self.resolution <= MAX_RESOLUTION:
            raise ValueError("Resolution must be between 1 and {}: {}".format(MAX_RESOLUTION, resolution))
        if self.max_recursions < 1:
            raise ValueError("max_recursions must be at least 1: {}".format(max_recursions))
        if not 0.0 <= self.reflection_factor < 1.0:
            raise ValueError("reflection_factor must be in [0, 1): {}".format(reflection_factor))
        if self.ambient_intensity < 0.0:
            raise ValueError("ambient_intensity must not be negative: {}".format(ambient_intensity))
