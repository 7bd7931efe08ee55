from PIL import Image, ImageDraw

from .packer import unpack


def pixels_from_buffer(buffer, count):
    """A pixel is on iff its 4-byte little-endian group is nonzero."""
    return [int.from_bytes(buffer[4 * i:4 * i + 4], byteorder='little') != 0 for i in range(count)]


def to_rgba(im):
    # Without an alpha band the fourth byte is left at zero, so only
    # the colour channels decide whether a pixel is on.
    if 'A' in im.getbands() or 'transparency' in im.info:
        return im.convert('RGBA')
    rgb = im.convert('RGB')
    return Image.merge('RGBA', (*rgb.split(), Image.new('L', rgb.size, 0)))


def load_pixels(path):
    with Image.open(path) as im:
        rgba = to_rgba(im)
    width, height = rgba.size
    return width, height, pixels_from_buffer(rgba.tobytes(), width * height)


def render_preview(image, path, scale=10):
    """Save an enlarged rendering of a packed image, on pixels drawn black."""
    img = Image.new('RGB', (max(image.width, 1) * scale, max(image.height, 1) * scale), 'white')
    draw = ImageDraw.Draw(img)

    for idx, on in enumerate(unpack(image)):
        if not on:
            continue
        x0 = (idx % image.width) * scale
        y0 = (idx // image.width) * scale
        draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill='black')

    img.save(path)
