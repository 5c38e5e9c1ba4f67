"""
Configuration constants for photostats.
"""

# --- File Type Definitions ---
# Compared against the lower-cased suffix, so IMG.JPG matches '.jpg'.
IMAGE_EXTS = {'.png', '.jpg', '.jpeg', '.webp', '.gif', '.tif', '.tiff', '.bmp'}

# --- Scanning ---
DEFAULT_ROOT = "."
HIDDEN_PREFIX = "."

# --- Reporting ---
# Reference resolutions used for the "how many displays" ratios
DISPLAY_RESOLUTIONS = {
    'Pro XDR': 20358144,   # 6016 x 3384
    '4K UHD': 8294400,     # 3840 x 2160
    'Full HD': 2073600,    # 1920 x 1080
}

SEPARATOR_LINE = " ".join(["====="] * 11)

CSV_HEADERS = ["Path", "Width", "Height", "Pixels", "Status"]

BANNER = r"""
         _           _            _        _
        | |         | |          | |      | |
   _ __ | |__   ___ | |_ ___  ___| |_ __ _| |_ ___
  | '_ \| '_ \ / _ \| __/ _ \/ __| __/ _` | __/ __|
  | |_) | | | | (_) | || (_) \__ \ || (_| | |_\__ \
  | .__/|_| |_|\___/ \__\___/|___/\__\__,_|\__|___/
  | |
  |_|
"""
