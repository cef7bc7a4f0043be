from pathlib import Path

import pytest

from bakery_pos.models import MenuItem
from bakery_pos.storage import StorageGateway


@pytest.fixture()
def storage(tmp_path: Path) -> StorageGateway:
    gateway = StorageGateway(tmp_path / "pos.db")
    gateway.initialize_default_data()
    return gateway


@pytest.fixture()
def kue_lapis() -> MenuItem:
    return MenuItem(id="1", name="Kue Lapis", price=15000, code="KL")


@pytest.fixture()
def bakwan() -> MenuItem:
    return MenuItem(id="8", name="Bakwan", price=2000, code="BK", category="Gorengan")
