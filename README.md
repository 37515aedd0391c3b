# meshui

Building blocks for the user interface of a mesh radio device: input drivers,
descriptions of display hardware, and a few small utilities. The package has
no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input drivers (`meshui.input`)

Every driver turns raw readings into `InputData` records from
`meshui.input.base`. A record has a `state` (`IndevState.PRESSED` or
`IndevState.RELEASED`), a `key` code (the navigation codes are in the `Key`
enum), an `enc_diff` step for encoders and a `btn_id` for buttons. Hardware
access is passed in as plain callables, so the drivers behave the same with
real pins or with test doubles. Each driver's `read()` returns one sample.

- `button.ButtonInputDriver(read_pin)`: one active-low push button, reported
  as button id 0. `pressed_id()` returns 0 while it is pressed and -1
  otherwise.
- `encoder.EncoderInputDriver(encoder_type, clock, read_button, read_left, read_right)`:
  type 1 polls the left, right and button lines directly. Type 3 is a
  trackball or joystick whose moves are given with `up()`, `down()`,
  `left()`, `right()` and `press()`. Repeats are limited to one every 250 ms;
  the button is exempt so that long presses can be detected.
- `i2ckeyboard.I2CKeyboardInputDriver(read_byte)`: a keyboard that returns
  one key code per request, or None when nothing is available. A carriage
  return is reported as `Key.ENTER`.
- `keymatrix.KeyMatrixInputDriver(scan, clock)`: a 6x6 scanned key matrix
  with three layers. `scan(row)` returns one flag per column. Key `0x1A`
  cycles through the layers instead of producing input. `lookup(row, col)`
  gives the code in the active layer. Repeats are limited to one every
  200 ms, except for Enter.
- `linux.LinuxInputDriver(keyboard_device, pointer_device, device_factory)`:
  keyboard and pointer event devices, given as `eventX` (looked up under
  `/dev/input`) or as a full path. `device_factory(kind, path)` creates the
  device or returns None. The default accepts any readable path. The driver
  also has `use_keyboard_device()`, `use_pointer_device()`, the matching
  `release_*` methods, and `close()`.
  `keyboard_devices()` and `pointer_devices()` list the event names linked
  from `/dev/input/by-id`.

```python
from meshui.input.button import ButtonInputDriver

driver = ButtonInputDriver(read_pin=lambda: 0)  # active low: pressed
data = driver.read()
print(data.state, data.btn_id)
```

## Display profiles (`meshui.display`)

`meshui.display.config` describes a screen as frozen dataclasses:
`PanelConfig`, a bus (`SpiBusConfig`, `ParallelBusConfig` or `RgbBusConfig`),
`LightConfig` and `TouchConfig`. They are bundled in a `DisplayProfile`.

- `profile_from_config(config)` builds a profile from a runtime
  `DisplayDriverConfig`. Unknown controllers raise `UnsupportedPanelError` or
  `UnsupportedTouchError`.
- `panel_model(name)` and `touch_model(name)` match controller names without
  regard to case. `touch_model` returns None for no touch or `"NOTOUCH"`.

Ready-made profiles for known boards:

- `meshui.display.rgb`: `guition_4848s040()`, `elecrow_70()`,
  `sensecap_indicator()`, `makerfabs_480x480()`
- `meshui.display.cyd`: `esp2432s022()`, `esp2432s028_rv1()`,
  `esp2432s028_rv2()`, `esp_ili9341_xpt2046()`
- `meshui.display.handheld`: `heltec_tracker()`, `picomputer_s3()`,
  `pico_tft_240x135()`
- `meshui.display.kits`: `t_deck()`, `t_hmi()`, `t_watch_s3()`,
  `unphone_v9()`, `wt_sc01_plus()`

`meshui.display.generic.generic_profile(flags)` builds an SPI profile from
`LGFX_*` flags. Values may be given as text such as `"true"` or `"0x5D"`.
`LGFX_PANEL` is required. A backlight is added only when `LGFX_PIN_BL` is
given, and touch only when `LGFX_TOUCH` is given. A missing required flag
raises `ValueError`.

## Utilities (`meshui.util`)

- `sharedqueue.SharedQueue`: a pair of FIFO packet queues between a server
  and a client task. The receive methods return None when their queue is
  empty.
- `logrotate.LogRotate(log_dir, max_len, max_size, max_files, max_file_size)`:
  stores `LogEntry` records in `log_NNNNNN.log` files. Each record holds a
  length-prefixed payload.
  - Call `init()` first: it creates the directory or picks up the logs
    already there.
  - `write()` starts a new file, and removes the oldest ones, when the limits
    on file size, total size or file count are reached.
  - `read_next(entry)` fills entries back in order and returns False when
    none are left.
  - `clear()` removes all files and returns how many went. It raises
    `OSError` if one could not be removed.
  - `size()` gives the total bytes, `count()` the number of files and
    `current()` the file being read.
- `meminfo`: `available_mem()`, `free_mem()` and `total_mem()` read
  `/proc/meminfo` (or another path), in kB. `read_meminfo_entry()` reads any
  entry. Each returns 0 when the entry or file is missing.

## What this package does not do

It draws nothing and talks to no hardware. The display profiles only
describe settings, and the input drivers only interpret the readings you pass
in. It has no radio client, no message handling, no screens and no
command-line program.