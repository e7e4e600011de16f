from chromavalue import Color


def test_to_hex_options():
    color = Color("#ff804080")
    assert color.to_hex() == "#ff804080"
    assert color.to_hex(include_alpha=False) == "#ff8040"
    assert color.to_hex(include_hash=False) == "ff804080"
    assert color.to_hex(upper_case=True) == "#FF804080"
    assert color.to_hex(False, False, True) == "FF8040"


def test_str_and_repr():
    color = Color("RED")
    assert str(color) == "#ff0000ff"
    assert repr(color) == "Color('#ff0000ff')"


def test_to_rgb_string():
    assert Color("#ff8040").to_rgb_string() == "rgb(255 128 64 / 1)"
    assert Color("transparent").to_rgb_string() == "rgb(0 0 0 / 0)"
    assert Color("#ff804080").to_rgb_string() == f"rgb(255 128 64 / {128 / 255!r})"


def test_to_hsl_string():
    assert Color("lime").to_hsl_string() == "hsl(120deg 100% 50% / 1)"
    assert Color("black").to_hsl_string() == "hsl(0deg 0% 0% / 1)"
    color = Color("#ff8040")
    text = color.to_hsl_string()
    assert text.startswith(f"hsl({color.hue!r}deg ")
    assert text.endswith(f" {color.lightness * 100!r}% / 1)")


def test_arrays():
    color = Color("#ff000080")
    assert color.to_rgba_array() == (255, 0, 0, 128)
    assert color.to_hsl_array() == (0.0, 1.0, 0.5)
    assert color.to_array() == (255, 0, 0, 128, 0.0, 1.0, 0.5)


def test_to_name():
    assert Color("#ff0000").to_name() == "red"
    assert Color("cyan").to_name() == "aqua"
    assert Color("#ff000080").to_name() is None
    assert Color("#123456").to_name() is None
