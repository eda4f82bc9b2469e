from PIL import ImageColor

from icon_gen import ICON_BG, create_icon_image


def test_icon_is_64px_rgba():
    img = create_icon_image(19)
    assert img.size == (64, 64)
    assert img.mode == "RGBA"


def test_icon_draws_day_number_on_background():
    img = create_icon_image(1)
    bg = ImageColor.getrgb(ICON_BG) + (255,)
    pixels = [img.getpixel((x, y)) for x in range(64) for y in range(64)]
    background = sum(1 for p in pixels if p == bg)
    assert background > len(pixels) // 2
    assert background < len(pixels)
