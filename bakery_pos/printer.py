"""ESC/POS thermal printing for receipts and shift reports."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from bakery_pos.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)

logger = logging.getLogger(__name__)

_SEPARATOR_HEIGHT_PX = 12
_SEPARATOR_THICKNESS_PX = 2
# Extra vertical headroom so descenders are not clipped on thermal output.
_LINE_EXTRA_PX = 8
_FONT_OVERRIDE_ENV = "BAKERY_POS_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/liberation/LiberationMono-Regular.ttf",
)


class PrinterError(RuntimeError):
    """Raised when a document could not be sent to the printer."""


def resolve_printer_font_path() -> str:
    """
    Resolve a printer font path.

    Resolution order:
    1. BAKERY_POS_PRINTER_FONT_PATH (if set)
    2. PRINTER_FONT_PATH
    3. Known Linux fallbacks
    """
    env_override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    candidates: list[str] = []
    if env_override:
        candidates.append(env_override)
    candidates.append(PRINTER_FONT_PATH)
    candidates.extend(_LINUX_FONT_FALLBACKS)

    seen: set[str] = set()
    for candidate in candidates:
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if Path(candidate).is_file():
            return candidate

    raise PrinterError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a valid .ttf/.otf file. "
        f"Tried: {', '.join(seen)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies and a font are available."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    canvas_height = PRINTER_FONT_SIZE + _LINE_EXTRA_PX
    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)

    bbox = draw.textbbox((0, 0), text or " ", font=font)
    text_height = bbox[3] - bbox[1]
    # Offset by bbox top so descenders (g, y, p, etc.) are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_separator() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _SEPARATOR_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = (_SEPARATOR_HEIGHT_PX - _SEPARATOR_THICKNESS_PX) // 2
    draw.rectangle((0, top, PRINTER_WIDTH_PX - 1, top + _SEPARATOR_THICKNESS_PX - 1), fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def _is_separator(line: str) -> bool:
    return bool(line) and set(line) == {"-"}


class ReceiptPrinter:
    """Sends text documents to a USB ESC/POS printer, one image per line."""

    def __init__(self, vendor_id: int = PRINTER_USB_VENDOR_ID, product_id: int = PRINTER_USB_PRODUCT_ID) -> None:
        self.vendor_id = vendor_id
        self.product_id = product_id

    def _open(self) -> object:
        from escpos.printer import Usb

        return Usb(self.vendor_id, self.product_id)

    def print_lines(self, lines: list[str]) -> None:
        """Print all lines in order and cut the paper at the end."""
        if not lines:
            return
        try:
            from PIL import ImageFont
        except Exception as exc:
            raise PrinterError(f"Printer dependencies unavailable: {exc}") from exc

        try:
            font = ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
            printer = self._open()
            for line in lines:
                printer.image(_render_separator() if _is_separator(line) else _render_line(line, font))
            printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
            printer.cut()
        except PrinterError:
            raise
        except Exception as exc:
            logger.exception("print failed vendor=%#x product=%#x", self.vendor_id, self.product_id)
            raise PrinterError(str(exc)) from exc
        logger.info("printed %s lines", len(lines))
