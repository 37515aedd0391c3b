import pytest

from meshui.display.config import DMA_AUTO, SpiBusConfig
from meshui.display.generic import SPI3_HOST, generic_profile


def test_panel_is_required():
    with pytest.raises(ValueError):
        generic_profile({})


def test_defaults():
    profile = generic_profile({"LGFX_PANEL": "ST7789"})
    assert profile.panel.model == "ST7789"
    assert (profile.screen_width, profile.screen_height) == (320, 240)
    assert profile.has_button is False
    assert profile.panel.dummy_read_pixel == 9
    assert profile.panel.invert is True
    assert profile.panel.bus_shared is True
    assert isinstance(profile.bus, SpiBusConfig)
    assert profile.bus.freq_write == 20000000
    assert profile.bus.freq_read == 16000000
    assert profile.bus.spi_host == SPI3_HOST
    assert profile.bus.dma_channel == DMA_AUTO
    assert profile.light is None
    assert profile.touch is None


def test_string_flags_are_parsed():
    profile = generic_profile(
        {
            "LGFX_PANEL": "ST7789",
            "LGFX_INVERT_COLOR": "false",
            "LGFX_PIN_SCK": "12",
            "LGFX_PIN_MOSI": "15",
            "LGFX_PIN_DC": "47",
            "LGFX_PIN_RST": "-1",
        }
    )
    assert profile.panel.invert is False
    assert profile.bus.pin_sclk == 12
    assert profile.bus.pin_mosi == 15
    assert profile.bus.pin_dc == 47
    assert profile.panel.pin_rst == -1


def test_backlight_when_pin_given():
    profile = generic_profile({"LGFX_PANEL": "ST7789", "LGFX_PIN_BL": 35})
    assert profile.light.pin_bl == 35
    assert profile.light.freq == 44000
    assert profile.light.pwm_channel == 7
    assert profile.light.invert is False


def test_spi_touch():
    profile = generic_profile(
        {
            "LGFX_PANEL": "ST7789",
            "LGFX_TOUCH": "XPT2046",
            "LGFX_TOUCH_INT": 38,
            "LGFX_TOUCH_CS": 39,
            "LGFX_TOUCH_CLK": 12,
            "LGFX_TOUCH_DO": 15,
            "LGFX_TOUCH_DIN": 16,
        }
    )
    touch = profile.touch
    assert touch.model == "XPT2046"
    assert touch.interface == "spi"
    assert touch.pin_cs == 39
    assert touch.pin_sclk == 12
    assert touch.pin_miso == 15
    assert touch.pin_mosi == 16
    assert touch.pin_int == 38
    assert touch.freq == 1000000
    assert touch.spi_host == 3
    assert touch.x_max == profile.screen_width - 1
    assert touch.y_max == profile.screen_height - 1


def test_spi_touch_needs_clock_pin():
    with pytest.raises(ValueError):
        generic_profile(
            {"LGFX_PANEL": "ST7789", "LGFX_TOUCH": "XPT2046", "LGFX_TOUCH_CS": 39}
        )


def test_i2c_touch():
    profile = generic_profile(
        {
            "LGFX_PANEL": "ST7796",
            "LGFX_TOUCH": "GT911",
            "LGFX_TOUCH_I2C_ADDR": "0x5D",
            "LGFX_TOUCH_I2C_SDA": 18,
            "LGFX_TOUCH_I2C_SCL": 8,
        }
    )
    touch = profile.touch
    assert touch.interface == "i2c"
    assert touch.i2c_addr == 0x5D
    assert touch.pin_sda == 18
    assert touch.pin_scl == 8
    assert touch.bus_shared is True
    assert touch.freq == 400000
    assert touch.pin_cs == -1


def test_explicit_touch_range_and_size():
    profile = generic_profile(
        {
            "LGFX_PANEL": "ST7789",
            "LGFX_SCREEN_WIDTH": 240,
            "LGFX_SCREEN_HEIGHT": 240,
            "LGFX_TOUCH": "FT5x06",
            "LGFX_TOUCH_X_MAX": 4095,
            "LGFX_TOUCH_I2C_ADDR": 0x38,
            "LGFX_TOUCH_I2C_SDA": 6,
            "LGFX_TOUCH_I2C_SCL": 5,
        }
    )
    assert profile.panel.panel_width == 240
    assert profile.touch.x_max == 4095
    assert profile.touch.y_max == profile.screen_height - 1