"""
Image loader
Decodes the source image with Pillow and prepares it for packing
"""

from typing import Optional

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError
from .settings import LoadSettings

RESAMPLE = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "lanczos": Image.Resampling.LANCZOS,
}


def has_alpha(image: Image.Image) -> bool:
    """Check if the image carries transparency"""
    return image.mode in ("RGBA", "LA", "PA") or (image.mode == "P" and "transparency" in image.info)


def flatten_alpha(image: Image.Image) -> Image.Image:
    """Composite the image over opaque black

    Transparent pixels count as black (premultiplied alpha), so they pack as ink.
    """
    rgba = image.convert('RGBA')
    background = Image.new('RGBA', rgba.size, (0, 0, 0, 255))
    return Image.alpha_composite(background, rgba).convert('RGB')


def resize_image(image: Image.Image, size, resample: str = "bilinear") -> Image.Image:
    """Resize to the target panel size (fills the panel, aspect ratio is not preserved)"""
    return image.resize(size, RESAMPLE[resample])


def decode_image(input_path: str) -> Image.Image:
    """Open and decode the first frame of a PNG file

    Raises OSError if the file cannot be read and DecodeError if it is not
    a decodable PNG image.
    """
    try:
        with Image.open(input_path, formats=["PNG"]) as img:
            img.load()
            image = img.copy()
    except UnidentifiedImageError as e:
        raise DecodeError(f"Cannot decode image {input_path}: {e}") from e
    except (FileNotFoundError, PermissionError, IsADirectoryError):
        raise
    except (OSError, SyntaxError) as e:
        # Pillow reports truncated or corrupt data as OSError/SyntaxError
        raise DecodeError(f"Cannot decode image {input_path}: {e}") from e

    return image


def prepare_image(image: Image.Image, settings: Optional[LoadSettings] = None) -> Image.Image:
    """Flatten transparency and apply the configured resize"""
    settings = settings or LoadSettings()

    if has_alpha(image):
        image = flatten_alpha(image)

    # Widen 16-bit grayscale to "I" so every resample filter accepts it
    if image.mode.startswith("I;16"):
        image = image.convert('I')

    if settings.size is not None and image.size != settings.size:
        image = resize_image(image, settings.size, settings.resample)

    return image


def load_image(input_path: str, settings: Optional[LoadSettings] = None) -> Image.Image:
    """Decode an image file and prepare it for packing"""
    return prepare_image(decode_image(input_path), settings)
