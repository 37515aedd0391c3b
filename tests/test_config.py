import pytest

from meshui.display.config import (
    DisplayDriverConfig,
    LightConfig,
    PanelConfig,
    ParallelBusConfig,
    RgbBusConfig,
    SpiBusConfig,
    UnsupportedPanelError,
    UnsupportedTouchError,
    panel_model,
    profile_from_config,
    touch_model,
)


def make_config(panel_type="ST7789", width=320, height=240):
    cfg = DisplayDriverConfig(width=width, height=height)
    cfg.panel.type = panel_type
    return cfg


@pytest.mark.parametrize("name", ["st7789", "ST7789", "St7789"])
def test_panel_model_case_insensitive(name):
    assert panel_model(name) == "ST7789"


def test_panel_model_unknown():
    with pytest.raises(UnsupportedPanelError):
        panel_model("ILI9341_2")


@pytest.mark.parametrize("name", ["ft5x06", "FT5206", "ft6336", "FT6436"])
def test_touch_model_ft_family(name):
    assert touch_model(name) == "FT5x06"


@pytest.mark.parametrize("name", [None, "", "NOTOUCH", "notouch"])
def test_touch_model_none(name):
    assert touch_model(name) is None


def test_touch_model_unknown():
    with pytest.raises(UnsupportedTouchError):
        touch_model("CST820")


def test_profile_without_rotation():
    profile = profile_from_config(make_config(width=320, height=240))
    assert (profile.screen_width, profile.screen_height) == (320, 240)
    assert profile.panel.model == "ST7789"
    assert profile.has_button is False


def test_profile_rotation_swaps_size():
    cfg = make_config(width=320, height=240)
    cfg.panel.rotation = 1
    profile = profile_from_config(cfg)
    assert (profile.screen_width, profile.screen_height) == (240, 320)
    assert profile.panel.panel_width == profile.screen_width


def test_unknown_panel_raises():
    with pytest.raises(UnsupportedPanelError):
        profile_from_config(make_config(panel_type="SSD1306"))


def test_spi_bus_by_default():
    cfg = make_config()
    cfg.bus.spi.pin_dc = 5
    cfg.bus.spi.spi_host = 2
    profile = profile_from_config(cfg)
    assert isinstance(profile.bus, SpiBusConfig)
    assert profile.bus.pin_dc == 5
    assert profile.bus.spi_host == 2


def test_parallel_bus_when_data_pins_set():
    cfg = make_config()
    cfg.bus.parallel.pin_data = (15, 13, 12, 14, 27, 25, 33, 32)
    cfg.bus.parallel.pin_wr = 4
    cfg.bus.parallel.pin_rs = 16
    profile = profile_from_config(cfg)
    assert isinstance(profile.bus, ParallelBusConfig)
    assert profile.bus.pin_data == (15, 13, 12, 14, 27, 25, 33, 32)


def test_no_touch_and_no_light_by_default():
    profile = profile_from_config(make_config())
    assert profile.touch is None
    assert profile.light is None


def test_touch_i2c_branch():
    cfg = make_config()
    cfg.touch.type = "GT911"
    cfg.touch.i2c.i2c_addr = 0x5D
    cfg.touch.i2c.pin_sda = 18
    cfg.touch.x_max = 319
    profile = profile_from_config(cfg)
    assert profile.touch.interface == "i2c"
    assert profile.touch.i2c_addr == 0x5D
    assert profile.touch.pin_sda == 18
    assert profile.touch.spi_host is None
    assert profile.touch.x_max == 319
    assert profile.touch.x_min is None


def test_touch_spi_branch_when_cs_set():
    cfg = make_config()
    cfg.touch.type = "xpt2046"
    cfg.touch.pin_cs = 33
    cfg.touch.i2c.i2c_addr = 0x5D
    cfg.touch.spi.pin_miso = 39
    profile = profile_from_config(cfg)
    assert profile.touch.model == "XPT2046"
    assert profile.touch.interface == "spi"
    assert profile.touch.pin_miso == 39
    assert profile.touch.i2c_addr is None


def test_unknown_touch_raises():
    cfg = make_config()
    cfg.touch.type = "CST816"
    with pytest.raises(UnsupportedTouchError):
        profile_from_config(cfg)


def test_light_settings():
    cfg = make_config()
    cfg.light.pin_bl = 21
    cfg.light.invert = True
    profile = profile_from_config(cfg)
    assert profile.light == LightConfig(pin_bl=21, invert=True, freq=cfg.light.freq, pwm_channel=None)


def test_light_pwm_channel_kept():
    cfg = make_config()
    cfg.light.pin_bl = 21
    cfg.light.pwm_channel = 7
    assert profile_from_config(cfg).light.pwm_channel == 7


def test_panel_rejects_bad_rotation():
    with pytest.raises(ValueError):
        PanelConfig(model="ST7789", panel_width=240, panel_height=320, offset_rotation=8)


def test_panel_rejects_bad_size():
    with pytest.raises(ValueError):
        PanelConfig(model="ST7789", panel_width=0, panel_height=320)


def test_parallel_bus_needs_eight_pins():
    with pytest.raises(ValueError):
        ParallelBusConfig(pin_data=(1, 2, 3), pin_wr=4, pin_rs=5, freq_write=1)


def test_rgb_bus_needs_sixteen_pins():
    with pytest.raises(ValueError):
        RgbBusConfig(
            pin_data=tuple(range(8)),
            pin_henable=1,
            pin_vsync=2,
            pin_hsync=3,
            pin_pclk=4,
            freq_write=1,
        )