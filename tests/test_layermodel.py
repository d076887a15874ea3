import pytest

from spritesmith.layer import Layer
from spritesmith.layermodel import LayerModel

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)


def test_new_model_has_one_blank_layer():
    model = LayerModel(4, 3)
    assert len(model) == 1
    assert model.width == 4
    assert model.height == 3
    assert model.top_layer() == Layer(4, 3)


def test_add_and_remove_layers():
    model = LayerModel(2, 2)
    model.add_layer()
    model.add_layer()
    assert len(model) == 3
    model.remove_layer(1)
    assert len(model) == 2
    model.remove_layer(7)
    model.remove_layer(-1)
    assert len(model) == 2


def test_duplicate_layer_copies():
    model = LayerModel(2, 2)
    source = Layer(2, 2)
    source.draw_pixel(RED, 0, 0)
    model.duplicate_layer(source)
    source.draw_pixel(GREEN, 0, 0)
    assert model.top_layer().pixel(0, 0) == RED


def test_get_layer_out_of_range():
    model = LayerModel(2, 2)
    with pytest.raises(IndexError):
        model.get_layer(1)
    with pytest.raises(IndexError):
        model.get_layer(-1)


def test_top_layer_of_empty_model_raises():
    model = LayerModel(2, 2)
    model.remove_layer(0)
    with pytest.raises(IndexError):
        model.top_layer()


def test_draw_pixel_targets_active_layer():
    model = LayerModel(3, 3)
    model.add_layer()
    model.draw_pixel(RED, 1, 1)
    assert model.get_layer(0).pixel(1, 1) == RED
    assert model.get_layer(1) == Layer(3, 3)


def test_set_active_layer_flags_layer():
    model = LayerModel(2, 2)
    model.add_layer()
    model.set_active_layer(1)
    model.set_active_layer(9)
    assert [layer.active for layer in model] == [False, True]


def test_json_round_trip():
    model = LayerModel(2, 2)
    model.draw_pixel(RED, 0, 1)
    model.add_layer()
    restored = LayerModel.from_json(model.to_json())
    assert len(restored) == 2
    assert (restored.width, restored.height) == (2, 2)
    assert list(restored) == list(model)


def test_from_json_active_layer_is_last():
    model = LayerModel(2, 2)
    model.add_layer()
    restored = LayerModel.from_json(model.to_json())
    restored.draw_pixel(GREEN, 1, 1)
    assert restored.top_layer().pixel(1, 1) == GREEN
    assert restored.get_layer(0).pixel(1, 1) != GREEN


def test_from_json_without_layers_cannot_draw():
    restored = LayerModel.from_json({"width": 2, "height": 2})
    assert len(restored) == 0
    with pytest.raises(LookupError):
        restored.draw_pixel(RED, 0, 0)


def test_copy_is_deep_and_activates_bottom():
    model = LayerModel(2, 2)
    model.add_layer()
    clone = model.copy()
    clone.draw_pixel(RED, 0, 0)
    assert clone.get_layer(0).pixel(0, 0) == RED
    assert model.get_layer(0).pixel(0, 0) != RED


def test_mirror_and_rotate_notify_listeners():
    model = LayerModel(3, 3)
    events = []
    model.on_layer_changed(lambda: events.append("changed"))
    model.draw_pixel(RED, 0, 0)
    model.mirror_layer()
    assert model.get_layer(0).pixel(2, 0) == RED
    model.rotate_layer()
    assert model.get_layer(0).pixel(2, 2) == RED
    assert len(events) == 2


def test_iteration_yields_layers_in_order():
    model = LayerModel(2, 2)
    model.add_layer()
    assert list(model) == model.layers
    assert model.get_layer(1) is model.top_layer()