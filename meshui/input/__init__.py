"""Input drivers for buttons, encoders, keyboards, key matrices and Linux event devices."""