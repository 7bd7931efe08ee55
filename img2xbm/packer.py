from collections import namedtuple


PackedImage = namedtuple("PackedImage", ["width", "height", "data"])


class DimensionMismatch(ValueError):
    pass


class UnalignedPixelCount(DimensionMismatch):
    pass


def pack(pixels, width, height):
    """Pack row-major on/off pixels into bytes, lowest bit = leftmost pixel."""
    if (width * height) % 8 != 0:
        raise UnalignedPixelCount(
            f"{width}x{height} image has {width * height} pixels, not a multiple of 8")

    data = bytearray()
    byte = 0
    bit = 0
    for pixel in pixels:
        # . . . . . . . .
        # 0 1 2 3 4 5 6 7
        if pixel:
            byte |= (1 << bit)
        if bit == 7:
            data.append(byte)
            byte = 0
            bit = 0
        else:
            bit += 1

    expected = width * height // 8
    if len(data) != expected:
        raise DimensionMismatch(f"Expected {expected} bytes, got {len(data)} bytes")

    return PackedImage(width, height, bytes(data))


def unpack(image):
    pixels = []
    for byte in image.data:
        for bit in range(8):
            pixels.append(bool((byte >> bit) & 1))
    return pixels
