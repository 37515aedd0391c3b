"""Display panel, bus, backlight and touch profiles for supported boards."""