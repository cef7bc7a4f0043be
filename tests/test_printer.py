import pytest
from PIL import ImageFont

import bakery_pos.printer as printer_module
from bakery_pos.printer import PrinterError, ReceiptPrinter, resolve_printer_font_path


class FakeUsb:
    def __init__(self):
        self.images = []
        self.cut_count = 0

    def image(self, img):
        self.images.append(img)

    def cut(self):
        self.cut_count += 1


@pytest.fixture()
def default_font(monkeypatch):
    monkeypatch.setattr(printer_module, "resolve_printer_font_path", lambda: "unused.ttf")
    font = ImageFont.load_default()
    monkeypatch.setattr(ImageFont, "truetype", lambda *args, **kwargs: font)


def test_font_override_from_environment(tmp_path, monkeypatch):
    font = tmp_path / "receipt.ttf"
    font.write_bytes(b"")
    monkeypatch.setenv("BAKERY_POS_PRINTER_FONT_PATH", str(font))

    assert resolve_printer_font_path() == str(font)


def test_print_lines_sends_one_image_per_line_and_cuts(default_font, monkeypatch):
    usb = FakeUsb()
    printer = ReceiptPrinter()
    monkeypatch.setattr(printer, "_open", lambda: usb)

    printer.print_lines(["Toko Kue", "-" * 32, "TOTAL  Rp 16.500"])

    assert len(usb.images) == 4
    assert usb.images[1].size[1] < usb.images[0].size[1]
    assert usb.cut_count == 1


def test_device_errors_become_printer_errors(default_font, monkeypatch):
    printer = ReceiptPrinter()

    def fail():
        raise OSError("USB device not found")

    monkeypatch.setattr(printer, "_open", fail)

    with pytest.raises(PrinterError, match="USB device not found"):
        printer.print_lines(["Toko Kue"])


def test_empty_document_is_not_printed(monkeypatch):
    printer = ReceiptPrinter()
    monkeypatch.setattr(printer, "_open", lambda: pytest.fail("printer opened"))

    printer.print_lines([])
