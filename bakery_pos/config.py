"""Runtime configuration defaults for persistence, logging and printing."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("BAKERY_POS_DB_PATH", "data/bakery_pos.db")
LOG_PATH = os.environ.get("BAKERY_POS_LOG_PATH", "/tmp/bakery-pos-debug.log")
LOG_LEVEL = os.environ.get("BAKERY_POS_LOG_LEVEL", "INFO")

# Order arithmetic.
TAX_RATE = 0.10
PIN_LENGTH = 4
PAYMENT_TOLERANCE = 0.01

# Screen timings (seconds).
LOGIN_SUCCESS_DELAY = 0.3
LOGIN_FAILURE_CLEAR_DELAY = 0.5

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 24
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 8
PRINTER_TAIL_SPACER_PX = 70
