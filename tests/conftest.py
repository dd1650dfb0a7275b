from __future__ import annotations

import pytest

from maxweight.business_objects.items import FoodItem


@pytest.fixture
def snack_catalog() -> list[FoodItem]:
    return [
        FoodItem("apple", 95, 4.0),
        FoodItem("cookie", 50, 1.5),
        FoodItem("bar", 150, 6.0),
    ]


@pytest.fixture
def write_database(tmp_path):
    """Write `lines` (header included) to a database file and return its path."""

    def _write(lines: list[str], name: str = "food.txt") -> str:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _write
