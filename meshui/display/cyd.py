"""Profiles of ESP32 boards with small SPI or 8-bit parallel TFT panels."""

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

HSPI_HOST = 0
VSPI_HOST = 1

_SPI_READ_FREQ = 16_000_000
_LIGHT_FREQ = 44100
_LIGHT_CHANNEL = 7


def esp2432s022(spi_frequency: int = 25_000_000) -> DisplayProfile:
    """2.2 inch 320x240 ST7789 on an 8-bit parallel bus with CST820 touch."""
    width, height = 320, 240
    bus = ParallelBusConfig(
        freq_write=spi_frequency,
        pin_rd=2,
        pin_wr=4,
        pin_rs=16,
        pin_data=(15, 13, 12, 14, 27, 25, 33, 32),
    )
    panel = PanelConfig(
        model="ST7789",
        pin_cs=17,
        pin_rst=-1,
        pin_busy=-1,
        # the panel is mounted in portrait orientation
        panel_width=height,
        panel_height=width,
        offset_x=0,
        offset_y=0,
        offset_rotation=1,
        readable=False,
        invert=False,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=False,
    )
    light = LightConfig(
        pin_bl=0, invert=False, freq=_LIGHT_FREQ, pwm_channel=_LIGHT_CHANNEL
    )
    # I2C wired; the controller's own default address is kept
    touch = TouchConfig(
        model="CST820",
        pin_cs=-1,
        x_min=0,
        y_min=0,
        pin_int=-1,
        bus_shared=False,
        offset_rotation=0,
        i2c_port=0,
        pin_sda=21,
        pin_scl=22,
        freq=100_000,
    )
    return DisplayProfile(
        name="ESP2432S022",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )


def _cyd_bus(spi_frequency: int, use_lock: bool) -> SpiBusConfig:
    return SpiBusConfig(
        spi_host=HSPI_HOST,
        spi_mode=0,
        freq_write=spi_frequency,
        freq_read=_SPI_READ_FREQ,
        spi_3wire=False,
        use_lock=use_lock,
        dma_channel=DMA_AUTO,
        pin_sclk=14,
        pin_mosi=13,
        pin_miso=12,
        pin_dc=2,
    )


def _cyd_light() -> LightConfig:
    return LightConfig(
        pin_bl=21, invert=False, freq=_LIGHT_FREQ, pwm_channel=_LIGHT_CHANNEL
    )


def esp2432s028_rv1(spi_frequency: int = 40_000_000) -> DisplayProfile:
    """2.8 inch 320x240 ILI9341 board, first revision, with XPT2046 touch."""
    width, height = 320, 240
    panel = PanelConfig(
        model="ILI9341",
        pin_cs=15,
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
        bus_shared=True,
    )
    touch = TouchConfig(
        model="XPT2046",
        freq=1_000_000,
        x_min=0,
        x_max=4095,
        y_min=0,
        y_max=4095,
        pin_int=36,
        pin_rst=-1,
        offset_rotation=0,
        bus_shared=False,
        spi_host=VSPI_HOST,
        pin_sclk=25,
        pin_miso=39,
        pin_mosi=32,
        pin_cs=33,
    )
    return DisplayProfile(
        name="ESP2432S028RV1",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=_cyd_bus(spi_frequency, use_lock=False),
        light=_cyd_light(),
        touch=touch,
    )


def esp2432s028_rv2(spi_frequency: int = 40_000_000) -> DisplayProfile:
    """2.8 inch 320x240 ILI9341 board, second revision, with XPT2046 touch."""
    width, height = 320, 240
    panel = PanelConfig(
        model="ILI9341",
        pin_cs=15,
        pin_rst=-1,
        pin_busy=-1,
        panel_width=width,
        panel_height=height,
        offset_x=0,
        offset_y=80,
        offset_rotation=4,
        dummy_read_pixel=8,
        dummy_read_bits=1,
        readable=True,
        invert=False,
        rgb_order=True,
        dlen_16bit=False,
        bus_shared=False,
    )
    touch = TouchConfig(
        model="XPT2046",
        freq=1_000_000,
        x_min=300,
        x_max=3900,
        y_min=200,
        y_max=3700,
        pin_int=36,
        pin_rst=-1,
        offset_rotation=1,
        bus_shared=False,
        spi_host=VSPI_HOST,
        pin_sclk=25,
        pin_miso=39,
        pin_mosi=32,
        pin_cs=33,
    )
    return DisplayProfile(
        name="ESP2432S028RV2",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=_cyd_bus(spi_frequency, use_lock=True),
        light=_cyd_light(),
        touch=touch,
    )


def esp_ili9341_xpt2046(spi_frequency: int = 80_000_000) -> DisplayProfile:
    """ILI9341 module with XPT2046 touch sharing the display's SPI bus."""
    width, height = 320, 240
    bus = SpiBusConfig(
        spi_host=VSPI_HOST,
        spi_mode=0,
        freq_write=spi_frequency,
        freq_read=_SPI_READ_FREQ,
        spi_3wire=False,
        use_lock=True,
        dma_channel=DMA_AUTO,
        pin_sclk=18,
        pin_mosi=23,
        pin_miso=19,
        pin_dc=2,
    )
    panel = PanelConfig(
        model="ILI9341",
        pin_cs=15,
        pin_rst=5,
        pin_busy=-1,
        panel_width=width,
        panel_height=height,
        offset_x=0,
        offset_y=80,
        offset_rotation=4,
        dummy_read_pixel=8,
        dummy_read_bits=1,
        readable=True,
        invert=False,
        rgb_order=True,
        dlen_16bit=False,
        bus_shared=True,
    )
    light = LightConfig(
        pin_bl=25, invert=False, freq=_LIGHT_FREQ, pwm_channel=_LIGHT_CHANNEL
    )
    touch = TouchConfig(
        model="XPT2046",
        freq=2_500_000,
        x_min=0,
        x_max=4095,
        y_min=0,
        y_max=4095,
        pin_int=27,
        pin_rst=-1,
        offset_rotation=0,
        bus_shared=True,
        spi_host=VSPI_HOST,
        pin_sclk=18,
        pin_miso=19,
        pin_mosi=23,
        pin_cs=26,
    )
    return DisplayProfile(
        name="ESPILI9341XPT2046",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )