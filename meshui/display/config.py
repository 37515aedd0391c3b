"""Display profiles: panel, bus, backlight and touch settings of a screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

DMA_AUTO = "auto"

PANEL_MODELS = (
    "ST7789",
    "ST7796",
    "ST7735",
    "ST7735S",
    "ILI9341",
    "ILI9486",
    "ILI9488",
    "HX8357D",
    "HX8357B",
)
_PANELS = {model.upper(): model for model in PANEL_MODELS}

_TOUCHES = {
    "XPT2046": "XPT2046",
    "GT911": "GT911",
    "STMPE610": "STMPE610",
    **{
        alias: "FT5x06"
        for alias in (
            "FT5X06",
            "FT5206",
            "FT5306",
            "FT5406",
            "FT6206",
            "FT6236",
            "FT6336",
            "FT6436",
        )
    },
}
_NO_TOUCH = "NOTOUCH"


class UnsupportedPanelError(ValueError):
    """The panel controller is not supported."""


class UnsupportedTouchError(ValueError):
    """The touch controller is not supported."""


@dataclass(frozen=True)
class PanelConfig:
    model: str
    panel_width: int
    panel_height: int
    memory_width: Optional[int] = None
    memory_height: Optional[int] = None
    offset_x: int = 0
    offset_y: int = 0
    offset_rotation: int = 0
    pin_cs: int = -1
    pin_rst: int = -1
    pin_busy: int = -1
    dummy_read_pixel: Optional[int] = None
    dummy_read_bits: Optional[int] = None
    readable: Optional[bool] = None
    invert: bool = False
    rgb_order: bool = False
    dlen_16bit: bool = False
    bus_shared: Optional[bool] = None
    # controller detail settings of RGB panels
    detail_pin_cs: Optional[int] = None
    detail_pin_sclk: Optional[int] = None
    detail_pin_mosi: Optional[int] = None
    use_psram: Optional[int] = None
    # replacement init command list (command, arg count, args..., 0xFF, 0xFF)
    init_commands: Optional[bytes] = None

    def __post_init__(self) -> None:
        if self.panel_width <= 0 or self.panel_height <= 0:
            raise ValueError("panel size must be positive")
        if not 0 <= self.offset_rotation <= 7:
            raise ValueError("offset_rotation must be within 0..7")


@dataclass(frozen=True)
class SpiBusConfig:
    spi_host: int
    freq_write: int
    freq_read: Optional[int] = None
    spi_mode: int = 0
    spi_3wire: Optional[bool] = None
    use_lock: Optional[bool] = None
    dma_channel: Union[int, str, None] = None
    pin_sclk: int = -1
    pin_mosi: int = -1
    pin_miso: int = -1
    pin_dc: int = -1


@dataclass(frozen=True)
class ParallelBusConfig:
    pin_data: Tuple[int, ...]
    pin_wr: int
    pin_rs: int
    freq_write: int
    pin_rd: int = -1
    freq_read: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.pin_data) != 8:
            raise ValueError("an 8-bit parallel bus needs 8 data pins")


@dataclass(frozen=True)
class RgbBusConfig:
    pin_data: Tuple[int, ...]
    pin_henable: int
    pin_vsync: int
    pin_hsync: int
    pin_pclk: int
    freq_write: int
    hsync_polarity: int = 0
    hsync_front_porch: int = 0
    hsync_pulse_width: int = 0
    hsync_back_porch: int = 0
    vsync_polarity: int = 0
    vsync_front_porch: int = 0
    vsync_pulse_width: int = 0
    vsync_back_porch: int = 0
    pclk_active_neg: Optional[int] = None
    de_idle_high: Optional[int] = None
    pclk_idle_high: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.pin_data) != 16:
            raise ValueError("an RGB bus needs 16 data pins")


@dataclass(frozen=True)
class LightConfig:
    pin_bl: int
    invert: bool = False
    freq: Optional[int] = None
    pwm_channel: Optional[int] = None


@dataclass(frozen=True)
class TouchConfig:
    model: str
    freq: Optional[int] = None
    x_min: Optional[int] = None
    x_max: Optional[int] = None
    y_min: Optional[int] = None
    y_max: Optional[int] = None
    pin_int: int = -1
    pin_rst: int = -1
    bus_shared: Optional[bool] = None
    offset_rotation: int = 0
    pin_cs: int = -1
    i2c_port: Optional[int] = None
    i2c_addr: Optional[int] = None
    pin_sda: Optional[int] = None
    pin_scl: Optional[int] = None
    spi_host: Optional[int] = None
    pin_sclk: Optional[int] = None
    pin_mosi: Optional[int] = None
    pin_miso: Optional[int] = None

    @property
    def interface(self) -> str:
        """``"i2c"`` or ``"spi"``, depending on how the controller is wired."""
        return "i2c" if self.i2c_addr is not None else "spi"


Bus = Union[SpiBusConfig, ParallelBusConfig, RgbBusConfig]


@dataclass(frozen=True)
class DisplayProfile:
    """Everything needed to drive one screen."""

    name: str
    screen_width: int
    screen_height: int
    has_button: bool
    panel: PanelConfig
    bus: Bus
    light: Optional[LightConfig] = None
    touch: Optional[TouchConfig] = None
    custom_touch: bool = False


@dataclass
class DisplayDriverConfig:
    """Runtime description of a display, as read from a configuration."""

    @dataclass
    class Panel:
        type: str = ""
        rotation: int = 0
        pin_cs: int = -1
        pin_rst: int = -1
        pin_busy: int = -1
        offset_x: int = 0
        offset_y: int = 0
        offset_rotation: int = 0
        invert: bool = False
        dummy_read_pixel: int = 8
        dummy_read_bits: int = 1
        readable: bool = False
        rgb_order: bool = False
        dlen_16bit: bool = False
        bus_shared: bool = False

    @dataclass
    class Parallel:
        pin_data: Tuple[int, ...] = (-1,) * 8
        pin_rd: int = -1
        pin_wr: int = -1
        pin_rs: int = -1

        @property
        def pin_d0(self) -> int:
            return self.pin_data[0]

    @dataclass
    class Spi:
        pin_sclk: int = -1
        pin_miso: int = -1
        pin_mosi: int = -1
        pin_dc: int = -1
        spi_mode: int = 0
        spi_host: int = 0

    @dataclass
    class Bus:
        freq_write: int = 40_000_000
        freq_read: int = 16_000_000
        parallel: "DisplayDriverConfig.Parallel" = field(
            default_factory=lambda: DisplayDriverConfig.Parallel()
        )
        spi: "DisplayDriverConfig.Spi" = field(
            default_factory=lambda: DisplayDriverConfig.Spi()
        )

    @dataclass
    class TouchI2c:
        i2c_port: int = 0
        pin_scl: int = -1
        pin_sda: int = -1
        i2c_addr: int = 0

    @dataclass
    class TouchSpi:
        spi_host: int = 0
        pin_sclk: int = -1
        pin_mosi: int = -1
        pin_miso: int = -1

    @dataclass
    class Touch:
        type: Optional[str] = None
        freq: int = 1_000_000
        x_min: int = -1
        x_max: int = -1
        y_min: int = -1
        y_max: int = -1
        pin_int: int = -1
        pin_rst: int = -1
        bus_shared: bool = False
        offset_rotation: int = 0
        pin_cs: int = -1
        i2c: "DisplayDriverConfig.TouchI2c" = field(
            default_factory=lambda: DisplayDriverConfig.TouchI2c()
        )
        spi: "DisplayDriverConfig.TouchSpi" = field(
            default_factory=lambda: DisplayDriverConfig.TouchSpi()
        )

    @dataclass
    class Light:
        pin_bl: int = -1
        freq: int = 44100
        pwm_channel: int = -1
        invert: bool = False

    width: int = 320
    height: int = 240
    panel: Panel = field(default_factory=Panel)
    bus: Bus = field(default_factory=Bus)
    touch: Touch = field(default_factory=Touch)
    light: Light = field(default_factory=Light)


def panel_model(name: str) -> str:
    """Return the canonical panel controller name, matched case-insensitively."""
    try:
        return _PANELS[(name or "").upper()]
    except KeyError:
        raise UnsupportedPanelError(
            f"Device panel support not yet implemented for '{name}'"
        ) from None


def touch_model(name: Optional[str]) -> Optional[str]:
    """Return the canonical touch controller name, or None for no touch."""
    if not name or name.upper() == _NO_TOUCH:
        return None
    try:
        return _TOUCHES[name.upper()]
    except KeyError:
        raise UnsupportedTouchError(
            f"Touch panel '{name}' support not implemented"
        ) from None


def _non_negative(value: int) -> Optional[int]:
    return value if value >= 0 else None


def _bus_from_config(bus: DisplayDriverConfig.Bus) -> Bus:
    if bus.parallel.pin_d0 > 0:
        return ParallelBusConfig(
            pin_data=tuple(bus.parallel.pin_data),
            pin_wr=bus.parallel.pin_wr,
            pin_rs=bus.parallel.pin_rs,
            pin_rd=bus.parallel.pin_rd,
            freq_write=bus.freq_write,
            freq_read=bus.freq_read,
        )
    return SpiBusConfig(
        spi_host=bus.spi.spi_host,
        spi_mode=bus.spi.spi_mode,
        freq_write=bus.freq_write,
        freq_read=bus.freq_read,
        pin_sclk=bus.spi.pin_sclk,
        pin_miso=bus.spi.pin_miso,
        pin_mosi=bus.spi.pin_mosi,
        pin_dc=bus.spi.pin_dc,
    )


def _touch_from_config(touch: DisplayDriverConfig.Touch) -> Optional[TouchConfig]:
    model = touch_model(touch.type)
    if model is None:
        return None
    common = dict(
        model=model,
        freq=touch.freq,
        x_min=_non_negative(touch.x_min),
        x_max=_non_negative(touch.x_max),
        y_min=_non_negative(touch.y_min),
        y_max=_non_negative(touch.y_max),
        pin_int=touch.pin_int,
        pin_rst=touch.pin_rst,
        bus_shared=touch.bus_shared,
        offset_rotation=touch.offset_rotation,
        pin_cs=touch.pin_cs,
    )
    if touch.i2c.i2c_addr > 0 and touch.pin_cs == -1:
        return TouchConfig(
            **common,
            i2c_port=touch.i2c.i2c_port,
            pin_scl=touch.i2c.pin_scl,
            pin_sda=touch.i2c.pin_sda,
            i2c_addr=touch.i2c.i2c_addr,
        )
    return TouchConfig(
        **common,
        spi_host=touch.spi.spi_host,
        pin_sclk=touch.spi.pin_sclk,
        pin_mosi=touch.spi.pin_mosi,
        pin_miso=touch.spi.pin_miso,
    )


def _light_from_config(light: DisplayDriverConfig.Light) -> Optional[LightConfig]:
    if light.pin_bl == -1:
        return None
    return LightConfig(
        pin_bl=light.pin_bl,
        freq=light.freq,
        pwm_channel=_non_negative(light.pwm_channel),
        invert=light.invert,
    )


def profile_from_config(config: DisplayDriverConfig) -> DisplayProfile:
    """Build a display profile from a runtime configuration.

    Raises UnsupportedPanelError or UnsupportedTouchError for unknown controllers.
    """
    p = config.panel
    model = panel_model(p.type)
    if p.rotation:
        width, height = config.height, config.width
    else:
        width, height = config.width, config.height

    panel = PanelConfig(
        model=model,
        panel_width=width,
        panel_height=height,
        pin_cs=p.pin_cs,
        pin_rst=p.pin_rst,
        pin_busy=p.pin_busy,
        offset_x=p.offset_x,
        offset_y=p.offset_y,
        offset_rotation=p.offset_rotation,
        invert=p.invert,
        dummy_read_pixel=p.dummy_read_pixel,
        dummy_read_bits=p.dummy_read_bits,
        readable=p.readable,
        rgb_order=p.rgb_order,
        dlen_16bit=p.dlen_16bit,
        bus_shared=p.bus_shared,
    )
    logger.debug(
        "Panel_Device(%s): %dx%d, cs=%d, rst=%d, busy=%d",
        model,
        width,
        height,
        p.pin_cs,
        p.pin_rst,
        p.pin_busy,
    )
    bus = _bus_from_config(config.bus)
    touch = _touch_from_config(config.touch)
    light = _light_from_config(config.light)
    return DisplayProfile(
        name="custom",
        screen_width=width,
        screen_height=height,
        has_button=False,
        panel=panel,
        bus=bus,
        light=light,
        touch=touch,
    )