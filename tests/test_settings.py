import pytest

from bakery_pos.backoffice_settings import setting_rows
from bakery_pos.settings import AppSettings, PaymentSettings, coerce_setting


def test_from_dict_fills_missing_sections_and_ignores_unknown_keys():
    settings = AppSettings.from_dict(
        {
            "business": {"store_name": "Toko Roti Sari", "logo": "ignored.png"},
            "printer": "not a dict",
        }
    )

    assert settings.business.store_name == "Toko Roti Sari"
    assert settings.business.tax_rate == 10.0
    assert settings.printer.printer_enabled is False
    assert settings.payments == PaymentSettings()


def test_from_dict_of_garbage_is_default():
    assert AppSettings.from_dict(None) == AppSettings()
    assert AppSettings.from_dict([1, 2]) == AppSettings()


def test_enabled_methods_keep_display_order():
    payments = PaymentSettings(card_enabled=False, voucher_enabled=False)

    assert payments.enabled_methods() == ["cash", "qris"]


@pytest.mark.parametrize(
    ("current", "raw", "expected"),
    [
        (True, "tidak", False),
        (False, "ya", True),
        (30, " 45 ", 45),
        (10.0, "11.5", 11.5),
        ("Toko", "Toko Baru", "Toko Baru"),
    ],
)
def test_coerce_setting(current, raw, expected):
    assert coerce_setting(current, raw) == expected


@pytest.mark.parametrize(("current", "raw"), [(True, "maybe"), (30, "abc"), (1.5, "")])
def test_coerce_setting_rejects_bad_text(current, raw):
    with pytest.raises(ValueError):
        coerce_setting(current, raw)


def test_setting_rows_cover_every_section():
    rows = setting_rows(AppSettings())

    assert {section for section, _, _ in rows} == {"business", "notifications", "payments", "printer", "network"}
    assert ("printer", "auto_print_receipts", False) in rows
