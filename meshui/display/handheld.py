"""Profiles of small handheld devices with SPI panels."""

from __future__ import annotations

from meshui.display.config import (
    DMA_AUTO,
    DisplayProfile,
    LightConfig,
    PanelConfig,
    SpiBusConfig,
)
from meshui.display.cyd import VSPI_HOST
from meshui.display.generic import SPI3_HOST

_SPI_READ_FREQ = 16_000_000


def heltec_tracker(v05: bool = False) -> DisplayProfile:
    """160x80 ST7735S tracker display; ``v05`` selects the v1.1 backlight pin."""
    width, height = 160, 80
    bus = SpiBusConfig(
        spi_host=SPI3_HOST,
        spi_mode=0,
        freq_write=40_000_000,
        freq_read=_SPI_READ_FREQ,
        spi_3wire=False,
        use_lock=True,
        dma_channel=DMA_AUTO,
        pin_sclk=41,
        pin_mosi=42,
        pin_miso=-1,
        pin_dc=40,
    )
    panel = PanelConfig(
        model="ST7735S",
        pin_cs=38,
        pin_rst=39,
        pin_busy=-1,
        panel_width=height,
        panel_height=width,
        offset_x=27,
        offset_y=1,
        offset_rotation=3,
        dummy_read_pixel=8,
        dummy_read_bits=1,
        readable=True,
        invert=True,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=True,
        memory_width=132,
        memory_height=162,
    )
    light = LightConfig(
        pin_bl=21 if v05 else 45, invert=True, freq=44100, pwm_channel=7
    )
    return DisplayProfile(
        name="HELTEC_TRACKER",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
    )


def picomputer_s3(spi_frequency: int = 40_000_000) -> DisplayProfile:
    """320x240 ST7789 display of the key-matrix handheld."""
    width, height = 320, 240
    bus = SpiBusConfig(
        spi_host=SPI3_HOST,
        spi_mode=0,
        freq_write=spi_frequency,
        freq_read=_SPI_READ_FREQ,
        spi_3wire=False,
        use_lock=True,
        dma_channel=DMA_AUTO,
        pin_sclk=3,
        pin_mosi=4,
        pin_miso=-1,
        pin_dc=1,
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
        dummy_read_pixel=9,
        dummy_read_bits=1,
        readable=True,
        invert=True,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=True,
    )
    light = LightConfig(pin_bl=5, invert=False)
    return DisplayProfile(
        name="PICOMPUTER_S3",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
    )


def pico_tft_240x135(spi_frequency: int = 80_000_000) -> DisplayProfile:
    """240x135 ST7789 display module for a Pico board."""
    width, height = 240, 135
    bus = SpiBusConfig(
        spi_host=VSPI_HOST,
        spi_mode=0,
        freq_write=spi_frequency,
        freq_read=_SPI_READ_FREQ,
        pin_sclk=10,
        pin_mosi=11,
        pin_miso=-1,
        pin_dc=8,
    )
    panel = PanelConfig(
        model="ST7789",
        pin_cs=9,
        pin_rst=12,
        pin_busy=-1,
        panel_width=height,
        panel_height=width,
        offset_x=52,
        offset_y=40,
        offset_rotation=1,
        invert=True,
        rgb_order=False,
        dlen_16bit=False,
        bus_shared=True,
    )
    light = LightConfig(pin_bl=13, invert=True, freq=44100, pwm_channel=1)
    return DisplayProfile(
        name="PICO_TFT_240x135",
        screen_width=width,
        screen_height=height,
        has_button=True,
        panel=panel,
        bus=bus,
        light=light,
    )