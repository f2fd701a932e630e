"""Billiard Saloon - Table reservations and billing for a billiard saloon."""

__version__ = "0.1.0"

# Directory and file constants
SALOON_DIR = ".billiard-saloon"
CONFIG_FILE = "config.json"
