from PIL import Image

from ppmkit import Color, Encoding, PixelBuffer, codec
from ppmkit.imaging import from_image, open_any, save_image, to_image

from .helper import BLUE, GREEN, RED

WHITE = Color(255, 255, 255)


def test_to_image_pixels():
    buffer = PixelBuffer.from_rows([[RED, GREEN], [BLUE, WHITE]])
    img = to_image(buffer)
    assert img.mode == "RGB"
    assert img.size == (2, 2)
    assert img.getpixel((1, 0)) == (0, 255, 0)
    assert img.getpixel((0, 1)) == (0, 0, 255)


def test_to_image_stretches_low_max_intensity():
    buffer = PixelBuffer.from_rows([[Color(1, 0, 1)]], max_intensity=1)
    assert to_image(buffer).getpixel((0, 0)) == (255, 0, 255)


def test_from_image_converts_mode():
    img = Image.new("L", (3, 2), 100)
    buffer = from_image(img)
    assert buffer.size == (3, 2)
    assert all(pixel == Color(100, 100, 100) for row in buffer.rows() for pixel in row)


def test_from_image_rescales():
    img = Image.new("RGB", (1, 1), (255, 128, 0))
    buffer = from_image(img, max_intensity=15, encoding=Encoding.TEXT)
    assert buffer.max_intensity == 15
    assert buffer.encoding is Encoding.TEXT
    assert buffer.get(0, 0) == Color(15, 7, 0)


def test_png_round_trip(tmp_path):
    buffer = PixelBuffer.from_rows([[RED, GREEN, BLUE], [WHITE, RED, GREEN]])
    path = tmp_path / "out.png"
    save_image(buffer, path)
    assert open_any(path) == buffer


def test_pillow_reads_our_ppm(tmp_path):
    buffer = PixelBuffer.from_rows([[RED, GREEN], [BLUE, WHITE]])
    path = tmp_path / "out.ppm"
    codec.write_file(path, buffer)
    with Image.open(path) as img:
        assert img.convert("RGB").getpixel((1, 1)) == (255, 255, 255)
