from bakery_pos.backoffice_inventory import stock_number


def test_whole_stock_levels_become_ints():
    assert stock_number(3.0) == 3
    assert isinstance(stock_number(3.0), int)
    assert isinstance(stock_number(-5.0), int)


def test_fractional_stock_levels_stay_floats():
    assert stock_number(2.5) == 2.5
    assert isinstance(stock_number(2.5), float)
