"""Tests for the category table."""

import pytest

from demoshop_e2e.navigation import SUBCATEGORY_PARENTS, CategoryTable


class TestCategoryTable:
    def test_default_parents(self):
        table = CategoryTable()

        assert table.parent_of("Notebooks") == "Computers"
        assert table.parent_of("Cell phones") == "Electronics"
        assert table.parent_of("Books") is None

    def test_membership(self):
        table = CategoryTable()

        assert "Desktops" in table
        assert table.is_subcategory("Camera, photo")
        assert not table.is_subcategory("Computers")
        assert len(table) == len(SUBCATEGORY_PARENTS)

    def test_subcategories_of(self):
        assert CategoryTable().subcategories_of("Computers") == ["Notebooks", "Desktops", "Accessories"]
        assert CategoryTable().subcategories_of("Books") == []

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SUBCATEGORY_PARENTS["Jewelry"] = "Apparel & Shoes"

    def test_custom_table_is_a_copy(self):
        parents = {"Jewelry": "Apparel & Shoes"}
        table = CategoryTable(parents)
        parents["Shoes"] = "Apparel & Shoes"

        assert "Shoes" not in table
        assert "Notebooks" not in table
