import pytest
from PIL import Image

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def checkerboard(width, height):
    """Checkerboard with a black pixel at (0, 0)"""
    img = Image.new('RGB', (width, height), WHITE)
    for y in range(height):
        for x in range(width):
            if (x + y) % 2 == 0:
                img.putpixel((x, y), BLACK)
    return img


@pytest.fixture
def make_png(tmp_path):
    """Save an image to a PNG file inside tmp_path and return its path"""
    def _make(image, name="input.png"):
        path = tmp_path / name
        image.save(path, format='PNG')
        return str(path)
    return _make


def column_stripes(width, height):
    """Alternating black/white columns, black at column 0 on every row"""
    img = Image.new('RGB', (width, height), WHITE)
    for y in range(height):
        for x in range(0, width, 2):
            img.putpixel((x, y), BLACK)
    return img
