"""
Image to Go byte array converter
Runs one conversion: decode -> (resize) -> pack -> emit
"""

from typing import Optional, Tuple

from PIL import Image

from .emitter import generate_go_file
from .loader import decode_image, has_alpha, prepare_image
from .naming import is_go_identifier, variable_name_for
from .packer import pack_image
from .settings import ConversionSettings


class ImageToBytesConverter:
    """Convert PNG images to packed monochrome Go byte arrays"""

    def __init__(self, settings: Optional[ConversionSettings] = None, verbose: bool = False):
        self.settings = settings or ConversionSettings()
        self.verbose = verbose

    def log(self, message: str, level: str = "INFO"):
        """Log message with level"""
        if self.verbose or level in ["ERROR", "WARNING"]:
            print(f"[{level}] {message}")

    def load(self, input_path: str) -> Image.Image:
        """Decode the input image and apply the configured resize"""
        self.log(f"Loading image: {input_path}")

        image = decode_image(input_path)
        source_size = image.size
        self.log(f"Source image: {source_size[0]}x{source_size[1]}, mode {image.mode}")

        if has_alpha(image):
            self.log("Transparent pixels are treated as black", "WARNING")

        target = self.settings.load.size
        if target is not None and target != source_size:
            self.log(f"Resizing to {target[0]}x{target[1]} ({self.settings.load.resample})")
            if source_size[0] * target[1] != source_size[1] * target[0]:
                self.log(f"Resize from {source_size[0]}x{source_size[1]} to "
                         f"{target[0]}x{target[1]} changes the aspect ratio", "WARNING")

        return prepare_image(image, self.settings.load)

    def pack(self, image: Image.Image) -> bytes:
        """Pack the image into 1bpp bytes"""
        pack_settings = self.settings.pack
        self.log(f"Packing with {pack_settings.luminance} luminance, threshold {pack_settings.threshold}")

        data = pack_image(image, pack_settings)

        width, height = image.size
        self.log(f"Packed {len(data)} bytes ({(width + 7) // 8} bytes per row)")
        return data

    def convert(self, input_path: str, output_path: str, name: Optional[str] = None) -> Tuple[int, int]:
        """Convert input_path to a Go source file at output_path

        Returns the (width, height) of the packed bitmap.
        """
        image = self.load(input_path)
        width, height = image.size
        print(f"Image dimensions: {width}x{height}")

        data = self.pack(image)

        var_name = name or variable_name_for(output_path)
        if not is_go_identifier(var_name):
            raise ValueError(f"Not a valid Go identifier: {var_name!r}")

        self.log(f"Writing {var_name} to {output_path}")
        generate_go_file(output_path, var_name, data, width, height, self.settings.emit)

        return width, height
