import pytest
from PIL import Image

from image2bytes.cli import main
from image2bytes.errors import DecodeError

from conftest import BLACK, WHITE


def test_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Usage: image2bytes input.png output.go\n"


def test_missing_output_argument(capsys):
    assert main(["input.png"]) == 0
    assert capsys.readouterr().out == "Usage: image2bytes input.png output.go\n"


def test_invalid_input_extension(capsys, tmp_path):
    output_path = tmp_path / "output.go"

    assert main(["input.txt", str(output_path)]) == 0
    assert capsys.readouterr().out == "Error: Input file must be a PNG file (with .png extension)\n"
    assert not output_path.exists()


def test_invalid_output_extension(capsys, tmp_path):
    output_path = tmp_path / "output.txt"

    assert main(["input.png", str(output_path)]) == 0
    assert capsys.readouterr().out == "Error: Output file must be a Go file (with .go extension)\n"
    assert not output_path.exists()


def test_single_black_pixel(capsys, make_png, tmp_path):
    input_path = make_png(Image.new('RGB', (1, 1), BLACK), "pixel.PNG")
    output_path = str(tmp_path / "test_output.GO")

    assert main([input_path, output_path]) == 0

    assert capsys.readouterr().out == (
        "Image dimensions: 1x1\n"
        f"Done. Bytes written to {output_path}\n"
    )
    with open(output_path) as f:
        assert f.read() == (
            "package main\n"
            "\n"
            "// TestOutputWidth and TestOutputHeight define image dimensions\n"
            "const TestOutputWidth = 1\n"
            "const TestOutputHeight = 1\n"
            "\n"
            "var TestOutput = []byte{\n"
            "\n"
            "\t0x80, \n"
            "}\n"
        )


def test_options(capsys, make_png, tmp_path):
    img = Image.new('RGB', (8, 8), WHITE)
    img.paste(BLACK, (0, 0, 4, 8))
    input_path = make_png(img)
    output_path = tmp_path / "splash.go"

    assert main([input_path, str(output_path), "--size", "4x2", "--resample", "nearest",
                 "--name", "Splash", "--package", "epaper", "--no-dimensions"]) == 0

    assert "Image dimensions: 4x2\n" in capsys.readouterr().out
    assert output_path.read_text() == "package epaper\n\nvar Splash = []byte{\n\n\t0xC0, 0xC0, \n}\n"


def test_verbose_logging(capsys, make_png, tmp_path):
    input_path = make_png(Image.new('RGB', (10, 5), WHITE))

    assert main([input_path, str(tmp_path / "logo.go"), "--size", "20x5", "-v"]) == 0

    out = capsys.readouterr().out
    assert "[INFO] Loading image:" in out
    assert "[INFO] Packing with grayscale luminance, threshold 128" in out
    assert "[WARNING] Resize from 10x5 to 20x5 changes the aspect ratio" in out


def test_threshold_option(make_png, tmp_path):
    img = Image.new('L', (2, 1))
    img.putpixel((0, 0), 50)
    img.putpixel((1, 0), 100)
    input_path = make_png(img)
    output_path = tmp_path / "gray.go"

    assert main([input_path, str(output_path), "--threshold", "101"]) == 0
    assert "\t0xC0, \n" in output_path.read_text()


def test_invalid_threshold_is_usage_error(make_png, tmp_path):
    input_path = make_png(Image.new('RGB', (1, 1)))

    with pytest.raises(SystemExit) as excinfo:
        main([input_path, str(tmp_path / "out.go"), "--threshold", "1000"])
    assert excinfo.value.code == 2


def test_invalid_size_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["in.png", str(tmp_path / "out.go"), "--size", "big"])
    assert excinfo.value.code == 2


def test_missing_input_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.png"), str(tmp_path / "out.go")])


def test_corrupt_input_propagates(tmp_path):
    input_path = tmp_path / "corrupt.png"
    input_path.write_bytes(b"\x89PNG garbage")

    with pytest.raises(DecodeError):
        main([str(input_path), str(tmp_path / "out.go")])


def test_unwritable_output_propagates(make_png, tmp_path):
    input_path = make_png(Image.new('RGB', (1, 1)))

    with pytest.raises(OSError):
        main([input_path, str(tmp_path / "nonexistent" / "out.go")])


def test_invalid_name_is_usage_error(make_png, tmp_path):
    input_path = make_png(Image.new('RGB', (1, 1)))
    output_path = tmp_path / "out.go"

    with pytest.raises(SystemExit) as excinfo:
        main([input_path, str(output_path), "--name", "my-logo"])
    assert excinfo.value.code == 2
    assert not output_path.exists()


def test_16bit_png_end_to_end(make_png, tmp_path):
    img = Image.new('I', (2, 1))
    img.putpixel((0, 0), 0x4000)
    img.putpixel((1, 0), 0xC000)
    input_path = make_png(img)
    output_path = tmp_path / "gray16.go"

    assert main([input_path, str(output_path)]) == 0
    assert "var Gray16 = []byte{\n\n\t0x80, \n}\n" in output_path.read_text()
