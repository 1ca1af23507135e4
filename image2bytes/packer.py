"""
Monochrome pixel packer
Thresholds image luminance and packs 1 bit per pixel, MSB first.
Each row starts on a fresh byte; a partial trailing byte is padded
with zero bits on the low end. 1 = ink (dark), 0 = background (light).
"""

from typing import Iterable, Iterator, List, Optional, Sequence

from PIL import Image

from .settings import LUMINANCE_GRAYSCALE, LUMINANCE_PERCEPTUAL, PackSettings

# 16-bit grayscale PNGs decode to one of these modes depending on the Pillow version
GRAY16_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N")


def packed_size(width: int, height: int) -> int:
    """Number of bytes produced for a width x height image"""
    return height * ((width + 7) // 8)


def rgb_to_luma16(r: int, g: int, b: int) -> int:
    """Convert 8-bit RGB to 16-bit perceptual luminance (BT.601 weights)"""
    # Widen to 16 bits per channel (0xFF -> 0xFFFF)
    r16, g16, b16 = r * 257, g * 257, b * 257
    return (299 * r16 + 587 * g16 + 114 * b16) // 1000


def gray16_rows(image: Image.Image) -> Iterator[List[int]]:
    """Yield the raw samples of a 16-bit grayscale image, clamped to 0..0xFFFF"""
    width, height = image.size
    pixels = image.load()
    for y in range(height):
        yield [min(max(pixels[x, y], 0), 0xFFFF) for x in range(width)]


def luminance_rows(image: Image.Image, mode: str = LUMINANCE_GRAYSCALE) -> Iterator[List[int]]:
    """Yield the luminance values of each image row"""
    width, height = image.size

    if mode not in (LUMINANCE_GRAYSCALE, LUMINANCE_PERCEPTUAL):
        raise ValueError(f"Unknown luminance mode: {mode!r}")

    # Pillow clips 16-bit samples when converting to L/RGB, so read them directly
    if image.mode in GRAY16_MODES:
        shift = 8 if mode == LUMINANCE_GRAYSCALE else 0
        for row in gray16_rows(image):
            yield [v >> shift for v in row]
        return

    if mode == LUMINANCE_GRAYSCALE:
        pixels = image.convert('L').load()
        for y in range(height):
            yield [pixels[x, y] for x in range(width)]
    else:
        pixels = image.convert('RGB').load()
        for y in range(height):
            yield [rgb_to_luma16(*pixels[x, y]) for x in range(width)]


def ink_rows(image: Image.Image, settings: Optional[PackSettings] = None) -> Iterator[List[bool]]:
    """Yield per-row ink flags: True where the pixel is darker than the threshold"""
    settings = settings or PackSettings()
    threshold = settings.threshold

    for row in luminance_rows(image, settings.luminance):
        yield [luma < threshold for luma in row]


def pack_rows(rows: Iterable[Sequence[bool]]) -> bytes:
    """Pack rows of ink flags into bytes, MSB first, padding each row to a byte boundary"""
    data = bytearray()

    for row in rows:
        acc = 0
        bit_count = 0

        for ink in row:
            # Shift the accumulator and add the new bit
            acc = ((acc << 1) | (1 if ink else 0)) & 0xFF
            bit_count += 1

            if bit_count == 8:
                data.append(acc)
                acc = 0
                bit_count = 0

        # Left-align the remaining bits of a partial byte
        if bit_count > 0:
            acc <<= 8 - bit_count
            data.append(acc)

    return bytes(data)


def pack_image(image: Image.Image, settings: Optional[PackSettings] = None) -> bytes:
    """Convert an image to packed 1bpp bytes"""
    width, height = image.size
    if width == 0 or height == 0:
        return b""

    return pack_rows(ink_rows(image, settings))
