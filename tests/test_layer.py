import pytest

from spritesmith.layer import Layer

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 128)


def test_new_layer_is_transparent():
    layer = Layer(3, 2)
    assert layer.width == 3
    assert layer.height == 2
    assert all(layer.pixel(x, y)[3] == 0 for x in range(3) for y in range(2))


def test_draw_pixel_sets_colour():
    layer = Layer(4, 4)
    layer.draw_pixel(RED, 1, 2)
    assert layer.pixel(1, 2) == RED
    assert layer.pixel(2, 1) == Layer(4, 4).pixel(2, 1)


def test_draw_pixel_rgb_gets_full_alpha():
    layer = Layer(2, 2)
    layer.draw_pixel((10, 20, 30), 0, 0)
    assert layer.pixel(0, 0) == (10, 20, 30, 255)


def test_draw_pixel_outside_is_ignored():
    layer = Layer(2, 2)
    layer.draw_pixel(RED, 5, 0)
    layer.draw_pixel(RED, -1, 1)
    assert layer == Layer(2, 2)


def test_draw_pixel_rejects_bad_colour():
    layer = Layer(2, 2)
    with pytest.raises(ValueError):
        layer.draw_pixel((300, 0, 0, 255), 0, 0)
    with pytest.raises(ValueError):
        layer.draw_pixel((1, 2), 0, 0)


def test_pixel_out_of_range_raises():
    with pytest.raises(IndexError):
        Layer(2, 2).pixel(2, 0)


def test_json_round_trip():
    layer = Layer(3, 2)
    layer.draw_pixel(RED, 0, 0)
    layer.draw_pixel(BLUE, 2, 1)
    restored = Layer.from_json(layer.to_json())
    assert restored == layer
    assert restored.pixel(2, 1) == BLUE


def test_to_json_layout_is_row_major():
    layer = Layer(2, 2)
    layer.draw_pixel(RED, 1, 0)
    data = layer.to_json()
    assert data["width"] == 2
    assert data["height"] == 2
    assert data["active"] is False
    assert len(data["pixels"]) == 4
    assert data["pixels"][1] == {"r": 255, "g": 0, "b": 0, "a": 255}


def test_from_json_with_missing_pixels_is_transparent():
    data = {"width": 2, "height": 2, "pixels": [{"r": 255, "g": 0, "b": 0, "a": 255}]}
    layer = Layer.from_json(data)
    assert layer.pixel(0, 0) == RED
    assert layer.pixel(1, 1) == Layer(1, 1).pixel(0, 0)


def test_copy_is_independent():
    layer = Layer(2, 2)
    clone = layer.copy()
    clone.draw_pixel(RED, 0, 0)
    assert layer != clone
    assert layer.pixel(0, 0) != RED


def test_mirror_reverses_rows():
    layer = Layer(3, 1)
    layer.draw_pixel(RED, 0, 0)
    layer.mirror()
    assert layer.pixel(2, 0) == RED
    layer.mirror()
    assert layer.pixel(0, 0) == RED


def test_rotate_clockwise():
    layer = Layer(3, 3)
    layer.draw_pixel(RED, 0, 0)
    layer.rotate()
    assert layer.pixel(2, 0) == RED


def test_rotate_four_times_is_identity():
    layer = Layer(3, 2)
    layer.draw_pixel(RED, 1, 0)
    layer.draw_pixel(BLUE, 2, 1)
    original = layer.copy()
    layer.rotate()
    assert (layer.width, layer.height) == (2, 3)
    for _ in range(3):
        layer.rotate()
    assert layer == original


def test_set_from_json_keeps_active_flag():
    layer = Layer(2, 2)
    layer.active = True
    source = Layer(2, 2)
    source.draw_pixel(BLUE, 1, 1)
    layer.set_from_json(source.to_json())
    assert layer == source
    assert layer.active is True


def test_equality_ignores_active_flag():
    a = Layer(2, 2)
    b = Layer(2, 2)
    b.active = True
    assert a == b
    assert Layer(2, 2) != Layer(2, 3)