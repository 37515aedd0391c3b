import dataclasses

import pytest

from meshui.display.config import ParallelBusConfig, SpiBusConfig
from meshui.display.cyd import (
    esp2432s022,
    esp2432s028_rv1,
    esp2432s028_rv2,
    esp_ili9341_xpt2046,
)


@pytest.mark.parametrize(
    "factory, default",
    [
        (esp2432s022, 25_000_000),
        (esp2432s028_rv1, 40_000_000),
        (esp2432s028_rv2, 40_000_000),
        (esp_ili9341_xpt2046, 80_000_000),
    ],
)
def test_default_write_frequency(factory, default):
    assert factory().bus.freq_write == default


def test_spi_frequency_is_passed_to_bus():
    for profile in (
        esp2432s022(spi_frequency=10_000_000),
        esp2432s028_rv1(spi_frequency=10_000_000),
        esp2432s028_rv2(spi_frequency=10_000_000),
        esp_ili9341_xpt2046(spi_frequency=10_000_000),
    ):
        assert profile.bus.freq_write == 10_000_000


def test_panel_dimensions_match_screen():
    for profile in (
        esp2432s022(),
        esp2432s028_rv1(),
        esp2432s028_rv2(),
        esp_ili9341_xpt2046(),
    ):
        panel = profile.panel
        if panel.offset_rotation % 2:
            assert (panel.panel_width, panel.panel_height) == (
                profile.screen_height,
                profile.screen_width,
            )
        else:
            assert (panel.panel_width, panel.panel_height) == (
                profile.screen_width,
                profile.screen_height,
            )


def test_backlight_pwm():
    for profile in (
        esp2432s022(),
        esp2432s028_rv1(),
        esp2432s028_rv2(),
        esp_ili9341_xpt2046(),
    ):
        assert profile.light.freq == 44100
        assert profile.light.invert is False


def test_profiles_are_immutable():
    for profile in (
        esp2432s022(),
        esp2432s028_rv1(),
        esp2432s028_rv2(),
        esp_ili9341_xpt2046(),
    ):
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.screen_width = 1
        assert profile.screen_width == 320


def test_s022_uses_parallel_bus_with_cst820():
    profile = esp2432s022()
    assert isinstance(profile.bus, ParallelBusConfig)
    assert len(set(profile.bus.pin_data)) == len(profile.bus.pin_data)
    assert profile.panel.model == "ST7789"
    assert profile.touch.model == "CST820"
    assert profile.touch.freq == 100_000


def test_rv1_and_rv2_buses_differ_only_in_locking():
    rv1 = esp2432s028_rv1().bus
    rv2 = esp2432s028_rv2().bus
    assert isinstance(rv1, SpiBusConfig)
    assert rv1.use_lock is False
    assert dataclasses.replace(rv1, use_lock=True) == rv2


def test_rv1_and_rv2_share_touch_wiring():
    t1 = esp2432s028_rv1().touch
    t2 = esp2432s028_rv2().touch
    assert t1.model == t2.model == "XPT2046"
    wiring = ("spi_host", "pin_sclk", "pin_miso", "pin_mosi", "pin_cs", "pin_int")
    assert [getattr(t1, n) for n in wiring] == [getattr(t2, n) for n in wiring]
    assert t1.interface == "spi"


def test_rv2_touch_calibration_narrower_than_rv1():
    t1 = esp2432s028_rv1().touch
    t2 = esp2432s028_rv2().touch
    assert t1.x_max == t1.y_max == 4095
    assert (t2.x_min, t2.x_max, t2.y_min, t2.y_max) == (300, 3900, 200, 3700)
    assert t1.x_min < t2.x_min < t2.x_max < t1.x_max


def test_cyd_touch_has_its_own_spi_bus():
    profile = esp2432s028_rv1()
    assert profile.touch.spi_host != profile.bus.spi_host
    assert profile.touch.pin_sclk != profile.bus.pin_sclk


def test_ili9341_touch_shares_display_bus():
    profile = esp_ili9341_xpt2046()
    assert profile.touch.spi_host == profile.bus.spi_host
    assert profile.touch.pin_sclk == profile.bus.pin_sclk
    assert profile.touch.pin_mosi == profile.bus.pin_mosi
    assert profile.touch.pin_miso == profile.bus.pin_miso
    assert profile.touch.pin_cs != profile.panel.pin_cs
    assert profile.touch.bus_shared is True
    assert profile.touch.freq == 2_500_000


def test_ili9341_panel_matches_rv2_geometry():
    a = esp_ili9341_xpt2046().panel
    b = esp2432s028_rv2().panel
    assert a.model == b.model == "ILI9341"
    assert (a.offset_y, a.offset_rotation, a.rgb_order) == (
        b.offset_y,
        b.offset_rotation,
        b.rgb_order,
    )


def test_spi_read_frequency():
    for profile in (esp2432s028_rv1(), esp2432s028_rv2(), esp_ili9341_xpt2046()):
        assert profile.bus.freq_read == 16_000_000