"""Display profile assembled from build-time style flags."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from meshui.display.config import (
    DMA_AUTO,
    DisplayProfile,
    LightConfig,
    PanelConfig,
    SpiBusConfig,
    TouchConfig,
)

SPI3_HOST = 2

_DEFAULTS: Dict[str, Any] = {
    "SPI_FREQUENCY": 20_000_000,
    "LGFX_CFG_HOST": SPI3_HOST,
    "LGFX_SPI_3WIRE": False,
    "LGFX_PIN_SCK": -1,
    "LGFX_PIN_MOSI": -1,
    "LGFX_PIN_MISO": -1,
    "LGFX_PIN_DC": -1,
    "LGFX_PIN_CS": -1,
    "LGFX_PIN_RST": -1,
    "LGFX_PIN_BUSY": -1,
    "LGFX_SCREEN_WIDTH": 320,
    "LGFX_SCREEN_HEIGHT": 240,
    "LGFX_OFFSET_X": 0,
    "LGFX_OFFSET_Y": 0,
    "LGFX_ROTATION": 0,
    "LGFX_READ_PIXEL": 9,
    "LGFX_READ_BITS": 1,
    "LGFX_READABLE": True,
    "LGFX_INVERT_COLOR": True,
    "LGFX_RGB_ORDER": False,
    "LGFX_DLEN_16BITS": False,
    "LGFX_INVERT_LIGHT": False,
    "LGFX_PWM_FREQ": 44000,
    "LGFX_PWM_CHANNEL": 7,
    "LGFX_TOUCH_SPI_HOST": 3,
    "LGFX_TOUCH_SPI_FREQ": 1_000_000,
    "LGFX_TOUCH_CS": -1,
    "LGFX_TOUCH_X_MIN": 0,
    "LGFX_TOUCH_Y_MIN": 0,
    "LGFX_TOUCH_INT": -1,
    "LGFX_TOUCH_RST": -1,
    "LGFX_TOUCH_ROTATION": 0,
    "LGFX_TOUCH_I2C_PORT": 0,
    "LGFX_TOUCH_I2C_FREQ": 400_000,
}


def _parse(value: Any) -> Any:
    """Turn flag text such as ``"true"``, ``"-1"`` or ``"0x5D"`` into a value."""
    if not isinstance(value, str):
        return value
    text = value.strip()
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(text, 0)
    except ValueError:
        return text


def _require(settings: Mapping[str, Any], name: str) -> Any:
    try:
        return settings[name]
    except KeyError:
        raise ValueError(f"{name} must be defined") from None


def generic_profile(flags: Optional[Mapping[str, Any]] = None) -> DisplayProfile:
    """Build an SPI display profile from ``LGFX_*`` flags.

    ``LGFX_PANEL`` is required. A backlight is configured only when
    ``LGFX_PIN_BL`` is given and touch only when ``LGFX_TOUCH`` is given.
    Raises ValueError when a required flag is missing.
    """
    given = {name: _parse(value) for name, value in (flags or {}).items()}
    settings = {**_DEFAULTS, **given}

    panel_name = settings.get("LGFX_PANEL")
    if not panel_name:
        raise ValueError("LGFX_PANEL must be defined!")

    width = settings["LGFX_SCREEN_WIDTH"]
    height = settings["LGFX_SCREEN_HEIGHT"]

    bus = SpiBusConfig(
        spi_host=settings["LGFX_CFG_HOST"],
        spi_mode=0,
        freq_write=settings["SPI_FREQUENCY"],
        freq_read=16_000_000,
        spi_3wire=settings["LGFX_SPI_3WIRE"],
        use_lock=True,
        dma_channel=DMA_AUTO,
        pin_sclk=settings["LGFX_PIN_SCK"],
        pin_mosi=settings["LGFX_PIN_MOSI"],
        pin_miso=settings["LGFX_PIN_MISO"],
        pin_dc=settings["LGFX_PIN_DC"],
    )
    panel = PanelConfig(
        model=str(panel_name),
        pin_cs=settings["LGFX_PIN_CS"],
        pin_rst=settings["LGFX_PIN_RST"],
        pin_busy=settings["LGFX_PIN_BUSY"],
        panel_width=width,
        panel_height=height,
        offset_x=settings["LGFX_OFFSET_X"],
        offset_y=settings["LGFX_OFFSET_Y"],
        offset_rotation=settings["LGFX_ROTATION"],
        dummy_read_pixel=settings["LGFX_READ_PIXEL"],
        dummy_read_bits=settings["LGFX_READ_BITS"],
        readable=settings["LGFX_READABLE"],
        invert=settings["LGFX_INVERT_COLOR"],
        rgb_order=settings["LGFX_RGB_ORDER"],
        dlen_16bit=settings["LGFX_DLEN_16BITS"],
        bus_shared=True,
    )

    light = None
    if "LGFX_PIN_BL" in settings:
        light = LightConfig(
            pin_bl=settings["LGFX_PIN_BL"],
            invert=settings["LGFX_INVERT_LIGHT"],
            freq=settings["LGFX_PWM_FREQ"],
            pwm_channel=settings["LGFX_PWM_CHANNEL"],
        )

    touch = None
    touch_name = settings.get("LGFX_TOUCH")
    if touch_name:
        options: Dict[str, Any] = {"model": str(touch_name)}
        touch_cs = settings["LGFX_TOUCH_CS"]
        if touch_cs > 0:
            options.update(
                spi_host=settings["LGFX_TOUCH_SPI_HOST"],
                freq=settings["LGFX_TOUCH_SPI_FREQ"],
                pin_cs=touch_cs,
                pin_sclk=_require(settings, "LGFX_TOUCH_CLK"),
                pin_mosi=_require(settings, "LGFX_TOUCH_DIN"),
                pin_miso=_require(settings, "LGFX_TOUCH_DO"),
            )
        else:
            options["pin_cs"] = touch_cs
        options.update(
            x_min=settings["LGFX_TOUCH_X_MIN"],
            x_max=settings.get("LGFX_TOUCH_X_MAX", width - 1),
            y_min=settings["LGFX_TOUCH_Y_MIN"],
            y_max=settings.get("LGFX_TOUCH_Y_MAX", height - 1),
            pin_int=settings["LGFX_TOUCH_INT"],
            pin_rst=settings["LGFX_TOUCH_RST"],
            offset_rotation=settings["LGFX_TOUCH_ROTATION"],
        )
        if "LGFX_TOUCH_I2C_ADDR" in settings:
            options.update(
                i2c_port=settings["LGFX_TOUCH_I2C_PORT"],
                i2c_addr=settings["LGFX_TOUCH_I2C_ADDR"],
                pin_sda=_require(settings, "LGFX_TOUCH_I2C_SDA"),
                pin_scl=_require(settings, "LGFX_TOUCH_I2C_SCL"),
                bus_shared=True,
                freq=settings["LGFX_TOUCH_I2C_FREQ"],
            )
        touch = TouchConfig(**options)

    return DisplayProfile(
        name="GENERIC",
        screen_width=width,
        screen_height=height,
        has_button=False,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )