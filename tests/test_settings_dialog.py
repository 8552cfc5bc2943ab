import pytest

from winsysoverlay.settings import FONT_SIZE_RANGE, Metric, Settings
from winsysoverlay.settings_dialog import DialogValues, load_values, save_values


@pytest.fixture
def settings(tmp_path):
    return Settings(tmp_path / "settings.json")


def test_load_values_defaults(settings):
    values = load_values(settings)
    assert values.layout_orientation == "Vertical"
    assert values.font_size == 11
    assert values.background_opacity == 120
    assert values.update_interval == 1000


def test_load_values_display_defaults(settings):
    values = load_values(settings)
    assert values.display == {m: m.default_visible for m in Metric}


def test_save_then_load_round_trip(settings, tmp_path):
    display = {m: not m.default_visible for m in Metric}
    values = DialogValues("Horizontal", 14, 200, 2500, display)
    save_values(settings, values)
    reloaded = load_values(Settings(tmp_path / "settings.json"))
    assert reloaded == values


def test_save_writes_file(settings, tmp_path):
    save_values(settings, DialogValues(font_size=15, update_interval=3000))
    path = tmp_path / "settings.json"
    assert path.exists()
    from_disk = Settings(path)
    assert from_disk.get("appearance/fontSize") == 15
    assert from_disk.get("behavior/updateInterval") == 3000


def test_save_clamps_font_size(settings):
    save_values(settings, DialogValues(font_size=99))
    assert load_values(settings).font_size == FONT_SIZE_RANGE[1]


def test_partial_display_keeps_other_metrics(settings):
    save_values(settings, DialogValues(display={Metric.FPS: True}))
    values = load_values(settings)
    assert values.display[Metric.FPS] is True
    assert values.display[Metric.CPU] is Metric.CPU.default_visible


def test_invalid_orientation_rejected():
    with pytest.raises(ValueError):
        DialogValues(layout_orientation="Diagonal")


def test_save_preserves_colours(settings):
    settings.set("appearance/fontColor", "#123456")
    save_values(settings, DialogValues())
    assert settings.get("appearance/fontColor") == "#123456"