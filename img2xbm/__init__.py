from .packer import PackedImage, DimensionMismatch, UnalignedPixelCount, pack, unpack
from .emitter import PROGRAM_NAME, Dialect, EmissionConfig, DIALECTS, get_dialect, format_byte, format_rows, emit
