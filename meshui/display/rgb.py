"""Profiles of boards driving a parallel RGB panel."""

from __future__ import annotations

from meshui.display.config import (
    DisplayProfile,
    LightConfig,
    PanelConfig,
    RgbBusConfig,
    TouchConfig,
)

# pin not connected
NC = -1

_TOUCH_I2C_FREQ = 400_000


def guition_4848s040() -> DisplayProfile:
    """4 inch 480x480 ST7701 board with GT911 touch."""
    width = height = 480
    panel = PanelConfig(
        model="ST7701_guition_esp32_4848S040",
        panel_width=width,
        panel_height=height,
        memory_width=480,
        memory_height=480,
        offset_x=0,
        offset_y=0,
        offset_rotation=0,
        detail_pin_cs=39,
        detail_pin_sclk=48,
        detail_pin_mosi=47,
        use_psram=1,
    )
    bus = RgbBusConfig(
        # B: d0..d4, G: d5..d10, R: d11..d15
        pin_data=(4, 5, 6, 7, 15, 8, 20, 3, 46, 9, 10, 11, 12, 13, 14, 0),
        pin_henable=18,
        pin_vsync=17,
        pin_hsync=16,
        pin_pclk=21,
        freq_write=12_000_000,
        hsync_polarity=1,
        hsync_front_porch=10,
        hsync_pulse_width=8,
        hsync_back_porch=50,
        vsync_polarity=1,
        vsync_front_porch=10,
        vsync_pulse_width=8,
        vsync_back_porch=20,
        pclk_active_neg=1,
        de_idle_high=0,
        pclk_idle_high=0,
    )
    # a higher frequency decreases brightness
    light = LightConfig(pin_bl=38, freq=80)
    touch = TouchConfig(
        model="GT911",
        pin_cs=NC,
        x_min=0,
        x_max=479,
        y_min=0,
        y_max=479,
        pin_int=NC,
        pin_rst=NC,
        bus_shared=False,
        offset_rotation=0,
        i2c_port=0,
        i2c_addr=0x5D,
        pin_sda=19,
        pin_scl=45,
        freq=_TOUCH_I2C_FREQ,
    )
    return DisplayProfile(
        name="4848S040",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )


def elecrow_70() -> DisplayProfile:
    """7 inch 800x480 RGB board with GT911 touch and no PWM backlight.

    The board powers its panel and resets the touch controller through an
    I/O expander before the display is brought up.
    """
    width, height = 800, 480
    panel = PanelConfig(
        model="RGB",
        panel_width=width,
        panel_height=height,
        memory_width=width,
        memory_height=height,
        offset_x=0,
        offset_y=0,
        offset_rotation=0,
        use_psram=0,
    )
    bus = RgbBusConfig(
        pin_data=(21, 47, 48, 45, 38, 9, 10, 11, 12, 13, 14, 7, 17, 18, 3, 46),
        pin_henable=42,
        pin_vsync=41,
        pin_hsync=40,
        pin_pclk=39,
        freq_write=13_000_000,
        hsync_polarity=0,
        hsync_front_porch=8,
        hsync_pulse_width=4,
        hsync_back_porch=8,
        vsync_polarity=0,
        vsync_front_porch=8,
        vsync_pulse_width=4,
        vsync_back_porch=8,
        pclk_idle_high=1,
    )
    touch = TouchConfig(
        model="GT911",
        x_min=0,
        x_max=800,
        y_min=0,
        y_max=480,
        pin_int=-1,
        pin_rst=-1,
        bus_shared=True,
        offset_rotation=0,
        i2c_port=0,
        i2c_addr=0x5D,
        pin_sda=15,
        pin_scl=16,
        freq=_TOUCH_I2C_FREQ,
    )
    return DisplayProfile(
        name="ELECROW70",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        touch=touch,
    )


def sensecap_indicator(
    custom_touch: bool = False, io_expander: int = 0x40
) -> DisplayProfile:
    """480x480 ST7701 indicator whose panel select line sits on an I/O expander.

    With ``custom_touch`` the touch controller is left to a separate driver
    and no touch configuration is attached to the panel.
    """
    width = height = 480
    panel = PanelConfig(
        model="ST7701",
        panel_width=width,
        panel_height=height,
        memory_width=480,
        memory_height=480,
        offset_x=0,
        offset_y=0,
        offset_rotation=2,
        detail_pin_cs=4 | io_expander,
        detail_pin_sclk=41,
        detail_pin_mosi=48,
        use_psram=1,
    )
    bus = RgbBusConfig(
        pin_data=(15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
        pin_henable=18,
        pin_vsync=17,
        pin_hsync=16,
        pin_pclk=21,
        freq_write=6_000_000,
        hsync_polarity=0,
        hsync_front_porch=10,
        hsync_pulse_width=8,
        hsync_back_porch=50,
        vsync_polarity=0,
        vsync_front_porch=10,
        vsync_pulse_width=8,
        vsync_back_porch=20,
        pclk_active_neg=0,
        de_idle_high=1,
        pclk_idle_high=0,
    )
    light = LightConfig(pin_bl=45)
    touch = None
    if not custom_touch:
        # interrupt and reset are deliberately not routed through the expander
        touch = TouchConfig(
            model="FT5x06",
            pin_cs=NC,
            x_min=0,
            x_max=479,
            y_min=0,
            y_max=479,
            pin_int=NC,
            pin_rst=NC,
            bus_shared=False,
            offset_rotation=0,
            i2c_port=0,
            i2c_addr=0x48,
            pin_sda=39,
            pin_scl=40,
            freq=_TOUCH_I2C_FREQ,
        )
    return DisplayProfile(
        name="INDICATOR",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
        custom_touch=custom_touch,
    )


def makerfabs_480x480() -> DisplayProfile:
    """480x480 ST7701 board with GT911 touch on the second I2C port."""
    width = height = 480
    panel = PanelConfig(
        model="ST7701",
        panel_width=width,
        panel_height=height,
        memory_width=480,
        memory_height=480,
        offset_x=0,
        offset_y=0,
        offset_rotation=0,
        detail_pin_cs=1,
        detail_pin_sclk=12,
        detail_pin_mosi=11,
        use_psram=1,
    )
    bus = RgbBusConfig(
        pin_data=(6, 7, 15, 16, 8, 0, 9, 14, 47, 48, 3, 39, 40, 41, 42, 2),
        pin_henable=45,
        pin_vsync=4,
        pin_hsync=5,
        pin_pclk=21,
        freq_write=14_000_000,
        hsync_polarity=0,
        hsync_front_porch=10,
        hsync_pulse_width=8,
        hsync_back_porch=50,
        vsync_polarity=0,
        vsync_front_porch=10,
        vsync_pulse_width=8,
        vsync_back_porch=20,
        pclk_active_neg=0,
        pclk_idle_high=0,
        de_idle_high=1,
    )
    light = LightConfig(pin_bl=44)
    touch = TouchConfig(
        model="GT911",
        pin_cs=NC,
        x_min=0,
        x_max=479,
        y_min=0,
        y_max=479,
        bus_shared=False,
        offset_rotation=0,
        i2c_port=1,
        i2c_addr=0x5D,
        pin_int=NC,
        pin_sda=17,
        pin_scl=18,
        pin_rst=38,
        freq=_TOUCH_I2C_FREQ,
    )
    return DisplayProfile(
        name="MAKERFABS480X480",
        screen_width=width,
        screen_height=height,
        has_button=False,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )