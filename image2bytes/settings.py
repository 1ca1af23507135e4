"""
Conversion settings for image2bytes
Thresholds, formatting constants and resize options passed into the
loader, packer and emitter
"""

from typing import Optional, Tuple

# Luminance modes and the value range each one produces
LUMINANCE_GRAYSCALE = "grayscale"    # Pillow "L" conversion, 0..255
LUMINANCE_PERCEPTUAL = "perceptual"  # 16-bit weighted sum, 0..65535
LUMINANCE_RANGES = {
    LUMINANCE_GRAYSCALE: 0xFF,
    LUMINANCE_PERCEPTUAL: 0xFFFF,
}

DEFAULT_LUMINANCE = LUMINANCE_GRAYSCALE
DEFAULT_PACKAGE = "main"
DEFAULT_BYTES_PER_LINE = 12
DEFAULT_RESAMPLE = "bilinear"
RESAMPLE_FILTERS = ("nearest", "bilinear", "lanczos")

# Badger 2040W e-paper panel
BADGER_2040W_SIZE = (296, 128)


class PackSettings:
    """Luminance conversion and threshold used by the packer"""

    def __init__(self, luminance: str = DEFAULT_LUMINANCE, threshold: Optional[int] = None):
        if luminance not in LUMINANCE_RANGES:
            raise ValueError(f"Unknown luminance mode: {luminance!r}")
        max_value = LUMINANCE_RANGES[luminance]
        if threshold is not None and not 0 <= threshold <= max_value + 1:
            raise ValueError(f"Threshold {threshold} out of range for {luminance} (0..{max_value + 1})")

        self.luminance = luminance
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        """Explicit threshold, or the midpoint of the luminance range"""
        if self._threshold is not None:
            return self._threshold
        return (LUMINANCE_RANGES[self.luminance] + 1) // 2


class EmitSettings:
    """Formatting of the generated Go source"""

    def __init__(self, package_name: str = DEFAULT_PACKAGE,
                 bytes_per_line: int = DEFAULT_BYTES_PER_LINE,
                 emit_dimension_constants: bool = True):
        if bytes_per_line <= 0:
            raise ValueError(f"bytes_per_line must be positive, got {bytes_per_line}")

        self.package_name = package_name
        self.bytes_per_line = bytes_per_line
        self.emit_dimension_constants = emit_dimension_constants


class LoadSettings:
    """Optional resize applied after decoding"""

    def __init__(self, size: Optional[Tuple[int, int]] = None, resample: str = DEFAULT_RESAMPLE):
        if size is not None:
            width, height = size
            if width <= 0 or height <= 0:
                raise ValueError(f"Resize dimensions must be positive, got {width}x{height}")
        if resample not in RESAMPLE_FILTERS:
            raise ValueError(f"Unknown resample filter: {resample!r}")

        self.size = size
        self.resample = resample


class ConversionSettings:
    """All settings for one conversion run"""

    def __init__(self, load: Optional[LoadSettings] = None,
                 pack: Optional[PackSettings] = None,
                 emit: Optional[EmitSettings] = None):
        self.load = load or LoadSettings()
        self.pack = pack or PackSettings()
        self.emit = emit or EmitSettings()


def parse_size(value: str) -> Tuple[int, int]:
    """Parse a "WxH" string such as "296x128" """
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Expected WIDTHxHEIGHT, got {value!r}")

    width, height = int(parts[0]), int(parts[1])
    if width <= 0 or height <= 0:
        raise ValueError(f"Dimensions must be positive, got {value!r}")
    return width, height
