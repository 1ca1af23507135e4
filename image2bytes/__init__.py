"""
image2bytes - convert PNG images to packed monochrome Go byte arrays
"""

from .converter import ImageToBytesConverter
from .emitter import generate_go_file, render_go_source, write_go_source
from .errors import DecodeError, Image2BytesError
from .loader import load_image
from .naming import is_go_file, is_png_file, title_case, variable_name_for
from .packer import pack_image, pack_rows, packed_size
from .settings import ConversionSettings, EmitSettings, LoadSettings, PackSettings

__version__ = "1.0.0"
