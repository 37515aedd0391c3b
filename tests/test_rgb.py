import dataclasses

import pytest

from meshui.display.config import RgbBusConfig
from meshui.display.rgb import (
    elecrow_70,
    guition_4848s040,
    makerfabs_480x480,
    sensecap_indicator,
)


def test_rgb_bus_has_sixteen_distinct_pins():
    for profile in (
        guition_4848s040(),
        elecrow_70(),
        sensecap_indicator(),
        makerfabs_480x480(),
    ):
        assert isinstance(profile.bus, RgbBusConfig)
        assert len(set(profile.bus.pin_data)) == 16


def test_panel_matches_screen():
    for profile in (
        guition_4848s040(),
        elecrow_70(),
        sensecap_indicator(),
        makerfabs_480x480(),
    ):
        assert profile.panel.panel_width == profile.screen_width
        assert profile.panel.panel_height == profile.screen_height
        assert profile.panel.memory_width >= profile.panel.panel_width
        assert profile.panel.memory_height >= profile.panel.panel_height


def test_touch_range_within_screen():
    for profile in (
        guition_4848s040(),
        elecrow_70(),
        sensecap_indicator(),
        makerfabs_480x480(),
    ):
        touch = profile.touch
        assert touch.interface == "i2c"
        assert 0 == touch.x_min < touch.x_max <= profile.screen_width
        assert 0 == touch.y_min < touch.y_max <= profile.screen_height


@pytest.mark.parametrize(
    "factory, freq",
    [
        (guition_4848s040, 12000000),
        (elecrow_70, 13000000),
        (sensecap_indicator, 6000000),
        (makerfabs_480x480, 14000000),
    ],
)
def test_pixel_clock(factory, freq):
    assert factory().bus.freq_write == freq


@pytest.mark.parametrize(
    "factory, model",
    [
        (guition_4848s040, "GT911"),
        (elecrow_70, "GT911"),
        (sensecap_indicator, "FT5x06"),
        (makerfabs_480x480, "GT911"),
    ],
)
def test_touch_model(factory, model):
    profile = factory()
    assert profile.touch.model == model
    assert profile.touch.freq == 400000


def test_elecrow_is_landscape_without_backlight():
    profile = elecrow_70()
    assert profile.screen_width == 800
    assert profile.screen_width > profile.screen_height
    assert profile.light is None
    assert profile.has_button is True


def test_square_boards():
    for factory in (guition_4848s040, sensecap_indicator, makerfabs_480x480):
        profile = factory()
        assert profile.screen_width == profile.screen_height
        assert profile.light is not None and profile.light.pin_bl >= 0


def test_guition_backlight_frequency():
    assert guition_4848s040().light.freq == 80


def test_button_flags():
    assert guition_4848s040().has_button is True
    assert sensecap_indicator().has_button is True
    assert makerfabs_480x480().has_button is False


def test_indicator_default_uses_builtin_touch():
    profile = sensecap_indicator()
    assert profile.custom_touch is False
    assert profile.touch.i2c_addr == 0x48


def test_indicator_custom_touch_leaves_touch_out():
    profile = sensecap_indicator(custom_touch=True)
    assert profile.custom_touch is True
    assert profile.touch is None
    assert profile.bus == sensecap_indicator().bus


@pytest.mark.parametrize("expander", [0x20, 0x40, 0x80])
def test_indicator_select_line_on_expander(expander):
    cs = sensecap_indicator(io_expander=expander).panel.detail_pin_cs
    assert cs & expander == expander
    assert cs & ~expander == sensecap_indicator(io_expander=0).panel.detail_pin_cs


def test_profiles_are_frozen():
    profile = makerfabs_480x480()
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.screen_width = 1
    assert profile.screen_width == 480


def test_profiles_are_fresh_but_equal():
    first = guition_4848s040()
    second = guition_4848s040()
    assert first == second
    assert (first.screen_width, first.screen_height) == (480, 480)
    elecrow = elecrow_70()
    assert elecrow == elecrow_70()
    assert (elecrow.screen_width, elecrow.screen_height) == (800, 480)