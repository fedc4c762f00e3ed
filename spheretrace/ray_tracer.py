import argparse
import sys

import numpy as np

from camera import Camera
from color import add_color
from errors import RenderError
from framebuffer import compose_framebuffer, save_image
from intersections import find_closest_intersection
from lighting import ambient, light_contribution
from scene import PRESETS, parse_scene_file
from utils import reflect

DEFAULT_OUTPUT = "output.tga"


def trace_ray(ray_origin, ray_direction, scene):
    """Trace single ray through scene, following mirror bounces.

    Returns the accumulated color, or None when the first ray misses
    everything and the pixel should show the background.
    """
    settings = scene.settings
    color = None
    reflection_factor = 1.0

    for depth in range(settings.max_recursions):
        hit = find_closest_intersection(ray_origin, ray_direction, scene.spheres, settings.single_root)
        if hit is None:
            break

        if depth == 0:
            color = add_color(color, ambient(hit["object"], settings.ambient_intensity))
        for light in scene.lights:
            contribution = light_contribution(hit, scene, light, ray_origin)
            color = add_color(color, contribution * reflection_factor)

        reflection_factor *= settings.reflection_factor
        ray_direction = reflect(ray_direction, hit["normal"])
        ray_origin = hit["point"]

    return color


def render_scene(scene):
    """Render the scene to a float image and a mask of pixels that hit something."""
    resolution = scene.settings.resolution
    camera = Camera(resolution)
    image_array = np.zeros((resolution, resolution, 3), dtype=float)
    defined = np.zeros((resolution, resolution), dtype=bool)

    print(f"Rendering {resolution}x{resolution}...")
    for y in range(resolution):
        if y % 50 == 0:
            print(f"Row {y}/{resolution}")
        for x in range(resolution):
            origin, direction = camera.get_ray_through_pixel(y, x)
            color = trace_ray(origin, direction, scene)
            if color is not None:
                image_array[y, x] = color
                defined[y, x] = True

    return image_array, defined


def render_to_file(scene, output_path):
    image_array, defined = render_scene(scene)
    save_image(compose_framebuffer(image_array, defined), output_path)
    print(f"Saved {output_path}")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Sphere ray tracer writing TGA images')
    parser.add_argument('output_image', type=str, nargs='?', default=DEFAULT_OUTPUT,
                        help='Name of the output image file')
    parser.add_argument('--scene', type=str, default=None, help='Path to a scene file')
    parser.add_argument('--preset', choices=sorted(PRESETS), default='rich',
                        help='Built-in scene used when no scene file is given')
    args = parser.parse_args(argv)

    try:
        scene = parse_scene_file(args.scene) if args.scene else PRESETS[args.preset]()
        render_to_file(scene, args.output_image)
    except (RenderError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
