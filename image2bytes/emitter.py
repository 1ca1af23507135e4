"""
Go source emitter
Writes packed bitmap data as a Go []byte variable with width/height constants
"""

import io
from typing import Optional, TextIO

from .settings import EmitSettings


def write_go_source(sink: TextIO, name: str, data: bytes, width: int, height: int,
                    settings: Optional[EmitSettings] = None):
    """Write the Go declaration of the byte array to an open text sink"""
    settings = settings or EmitSettings()

    # Package declaration
    sink.write(f"package {settings.package_name}\n\n")

    # Constants for the image dimensions
    if settings.emit_dimension_constants:
        sink.write(f"// {name}Width and {name}Height define image dimensions\n")
        sink.write(f"const {name}Width = {width}\n")
        sink.write(f"const {name}Height = {height}\n\n")

    # Byte array, a new line every bytes_per_line entries
    sink.write(f"var {name} = []byte{{\n")
    for i, b in enumerate(data):
        if i % settings.bytes_per_line == 0:
            sink.write("\n\t")
        sink.write(f"0x{b:02X}, ")
    sink.write("\n}\n")


def render_go_source(name: str, data: bytes, width: int, height: int,
                     settings: Optional[EmitSettings] = None) -> str:
    """Return the generated Go source as a string"""
    buffer = io.StringIO()
    write_go_source(buffer, name, data, width, height, settings)
    return buffer.getvalue()


def generate_go_file(output_path: str, name: str, data: bytes, width: int, height: int,
                     settings: Optional[EmitSettings] = None):
    """Create (or overwrite) the Go file at output_path"""
    # newline='' keeps "\n" line endings on every platform
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        write_go_source(f, name, data, width, height, settings)
