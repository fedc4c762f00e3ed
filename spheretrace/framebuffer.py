from PIL import Image
import numpy as np

from color import to_bytes
from errors import ResourceError


def background_gradient(resolution):
    """Diagnostic raster: blue ramps down the rows, green across the columns."""
    step = int(255.0 / resolution)
    ramp = (np.arange(resolution) * step) & 0xFF
    framebuffer = np.zeros((resolution, resolution, 3), dtype=np.uint8)
    framebuffer[:, :, 1] = ramp[np.newaxis, :]
    framebuffer[:, :, 2] = ramp[:, np.newaxis]
    return framebuffer


def compose_framebuffer(image_array, defined):
    """Write traced colors over the background; undefined pixels keep the gradient."""
    framebuffer = background_gradient(image_array.shape[0])
    framebuffer[defined] = to_bytes(image_array[defined])
    return framebuffer


def save_image(framebuffer, output_path):
    """Save an RGB framebuffer as uncompressed 24-bit TGA.

    Row 0 is written as the first scanline. The TGA descriptor has no
    top-left flag, so readers place that scanline at the bottom, which is
    where world y = -1 sits. Pillow appends the 26-byte TGA 2.0 footer
    (`TRUEVISION-XFILE.`) after the pixel rows, so the file is longer than
    header plus pixels.
    """
    # Pillow writes bottom-up TGA starting from the last image row
    image = Image.fromarray(np.ascontiguousarray(np.flipud(framebuffer)))
    try:
        image.save(output_path, format="TGA")
    except OSError as e:
        raise ResourceError("Cannot write image to {}: {}".format(output_path, e)) from e
