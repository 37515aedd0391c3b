"""Profiles of ready-made display kits: handhelds, watches and panel modules."""

from __future__ import annotations

from meshui.display.config import (
    DMA_AUTO,
    DisplayProfile,
    LightConfig,
    PanelConfig,
    ParallelBusConfig,
    SpiBusConfig,
    TouchConfig,
)
from meshui.display.generic import SPI3_HOST

SPI2_HOST = 1

# gamma set command of the panel controller
CMD_GAMMASET = 0x26

# first init command list of the T-Deck panel: gamma curve 1, then end marker
T_DECK_INIT_COMMANDS = bytes((CMD_GAMMASET, 1, 0x01, 0xFF, 0xFF))

_SPI_READ_FREQ = 16_000_000
_TOUCH_I2C_FREQ = 400_000
_LIGHT_FREQ = 44100
_LIGHT_CHANNEL = 7


def t_deck(custom_touch: bool = False, spi_frequency: int = 80_000_000) -> DisplayProfile:
    """320x240 ST7789 keyboard handheld with GT911 touch.

    With ``custom_touch`` the touch controller is read by a separate driver
    and no touch configuration is attached to the panel.
    """
    width, height = 320, 240
    bus = SpiBusConfig(
        spi_host=SPI2_HOST,
        spi_mode=0,
        freq_write=spi_frequency,
        freq_read=_SPI_READ_FREQ,
        spi_3wire=False,
        use_lock=True,
        dma_channel=DMA_AUTO,
        pin_sclk=40,
        pin_mosi=41,
        pin_miso=38,
        pin_dc=11,
    )
    panel = PanelConfig(
        model="ST7789",
        pin_cs=12,
        pin_rst=-1,
        pin_busy=-1,
        panel_width=height,
        panel_height=width,
        offset_x=0,
        offset_y=0,
        offset_rotation=1,
        dummy_read_pixel=8,
        dummy_read_bits=1,
        readable=True,
        invert=True,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=True,
        init_commands=T_DECK_INIT_COMMANDS,
    )
    light = LightConfig(
        pin_bl=42, invert=False, freq=_LIGHT_FREQ, pwm_channel=_LIGHT_CHANNEL
    )
    touch = None
    if not custom_touch:
        touch = TouchConfig(
            model="GT911",
            pin_cs=-1,
            x_min=0,
            x_max=width - 1,
            y_min=0,
            y_max=height - 1,
            pin_int=16,
            offset_rotation=0,
            i2c_port=0,
            i2c_addr=0x5D,
            pin_sda=18,
            pin_scl=8,
            bus_shared=True,
            freq=_TOUCH_I2C_FREQ,
        )
    return DisplayProfile(
        name="T_DECK",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
        custom_touch=custom_touch,
    )


def t_hmi() -> DisplayProfile:
    """320x240 ST7789 on an 8-bit parallel bus with XPT2046 touch."""
    width, height = 320, 240
    bus = ParallelBusConfig(
        freq_write=20_000_000,
        freq_read=_SPI_READ_FREQ,
        pin_rd=-1,
        pin_wr=8,
        pin_rs=7,
        pin_data=(48, 47, 39, 40, 41, 42, 45, 46),
    )
    panel = PanelConfig(
        model="ST7789",
        pin_cs=6,
        pin_rst=-1,
        pin_busy=-1,
        panel_width=height,
        panel_height=width,
        offset_x=0,
        offset_y=0,
        offset_rotation=1,
        dummy_read_pixel=8,
        dummy_read_bits=1,
        readable=True,
        invert=False,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=False,
    )
    light = LightConfig(
        pin_bl=38, invert=False, freq=_LIGHT_FREQ, pwm_channel=_LIGHT_CHANNEL
    )
    touch = TouchConfig(
        model="XPT2046",
        x_min=300,
        x_max=3900,
        y_min=400,
        y_max=3900,
        pin_int=9,
        pin_cs=2,
        pin_sclk=1,
        pin_miso=4,
        pin_mosi=3,
        spi_host=SPI3_HOST,
        bus_shared=False,
        offset_rotation=0,
        freq=2_500_000,
    )
    return DisplayProfile(
        name="T_HMI",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )


def t_watch_s3(spi_frequency: int = 80_000_000) -> DisplayProfile:
    """240x240 ST7789 watch display with FT5x06 touch."""
    width = height = 240
    bus = SpiBusConfig(
        spi_host=SPI3_HOST,
        spi_mode=0,
        freq_write=spi_frequency,
        freq_read=_SPI_READ_FREQ,
        spi_3wire=False,
        use_lock=True,
        dma_channel=DMA_AUTO,
        pin_sclk=18,
        pin_mosi=13,
        pin_miso=-1,
        pin_dc=38,
    )
    panel = PanelConfig(
        model="ST7789",
        pin_cs=12,
        pin_rst=-1,
        pin_busy=-1,
        panel_width=width,
        panel_height=height,
        offset_x=0,
        offset_y=0,
        offset_rotation=2,
        dummy_read_pixel=9,
        dummy_read_bits=1,
        readable=False,
        invert=True,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=True,
    )
    light = LightConfig(pin_bl=45, invert=False, freq=1000, pwm_channel=3)
    touch = TouchConfig(
        model="FT5x06",
        pin_cs=-1,
        x_min=0,
        x_max=width - 1,
        y_min=0,
        y_max=height - 1,
        pin_int=16,
        bus_shared=True,
        offset_rotation=2,
        i2c_port=1,
        i2c_addr=0x38,
        pin_sda=39,
        pin_scl=40,
        freq=_TOUCH_I2C_FREQ,
    )
    return DisplayProfile(
        name="TWATCH_S3",
        screen_width=width,
        screen_height=height,
        has_button=False,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )


def unphone_v9(spi_frequency: int = 40_000_000) -> DisplayProfile:
    """320x480 HX8357D phone display with XPT2046 touch on the same SPI bus.

    The backlight is not PWM driven: the board controller only switches it
    on (any brightness above zero) or off, so no light configuration is set.
    """
    width, height = 320, 480
    bus = SpiBusConfig(
        spi_host=SPI2_HOST,
        spi_mode=0,
        freq_write=spi_frequency,
        freq_read=_SPI_READ_FREQ,
        spi_3wire=False,
        use_lock=True,
        dma_channel=DMA_AUTO,
        pin_sclk=39,
        pin_mosi=40,
        pin_miso=41,
        pin_dc=47,
    )
    panel = PanelConfig(
        model="HX8357D",
        pin_cs=48,
        pin_rst=46,
        pin_busy=-1,
        panel_width=width,
        panel_height=height,
        offset_x=0,
        offset_y=0,
        offset_rotation=6,
        dummy_read_pixel=8,
        dummy_read_bits=1,
        readable=True,
        invert=False,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=True,
    )
    touch = TouchConfig(
        model="XPT2046",
        freq=1_000_000,
        x_min=300,
        x_max=3800,
        y_min=500,
        y_max=3750,
        pin_int=-1,
        bus_shared=True,
        offset_rotation=6,
        spi_host=SPI2_HOST,
        pin_sclk=39,
        pin_mosi=40,
        pin_miso=41,
        pin_cs=38,
    )
    return DisplayProfile(
        name="UNPHONE_V9",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        touch=touch,
    )


def wt_sc01_plus(landscape: bool = False, spi_frequency: int = 25_000_000) -> DisplayProfile:
    """3.5 inch ST7796 on an 8-bit parallel bus with FT5x06 touch."""
    if landscape:
        width, height, rotation = 480, 320, 1
        panel_width, panel_height = height, width
    else:
        width, height, rotation = 320, 480, 0
        panel_width, panel_height = width, height
    bus = ParallelBusConfig(
        freq_write=spi_frequency,
        freq_read=_SPI_READ_FREQ,
        pin_wr=47,
        pin_rd=-1,
        pin_rs=0,
        pin_data=(9, 46, 3, 8, 18, 17, 16, 15),
    )
    panel = PanelConfig(
        model="ST7796",
        pin_cs=-1,
        pin_rst=4,
        pin_busy=-1,
        panel_width=panel_width,
        panel_height=panel_height,
        offset_x=0,
        offset_y=0,
        offset_rotation=rotation,
        dummy_read_pixel=8,
        dummy_read_bits=1,
        readable=True,
        invert=True,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=True,
    )
    light = LightConfig(
        pin_bl=45, invert=False, freq=_LIGHT_FREQ, pwm_channel=_LIGHT_CHANNEL
    )
    touch = TouchConfig(
        model="FT5x06",
        x_min=0,
        x_max=width - 1,
        y_min=0,
        y_max=height - 1,
        pin_int=7,
        bus_shared=True,
        offset_rotation=0,
        i2c_port=1,
        i2c_addr=0x38,
        pin_sda=6,
        pin_scl=5,
        freq=_TOUCH_I2C_FREQ,
    )
    return DisplayProfile(
        name="WT_SC01_PLUS",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )