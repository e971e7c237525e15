"""Unit tests for Product entity."""

import pytest
from domain.entities import Product


class TestProductIdentity:
    """Test Product id assignment."""

    def test_new_product_is_not_persisted(self, unsaved_product):
        """Test that a product without id is not persisted."""
        assert unsaved_product.id is None
        assert unsaved_product.is_persisted is False

    def test_assign_id(self, unsaved_product):
        """Test that assigning an id marks the product persisted."""
        unsaved_product.assign_id(7)
        assert unsaved_product.id == 7
        assert unsaved_product.is_persisted is True

    def test_reassigning_same_id_is_allowed(self):
        """Test that assigning the current id again is a no-op."""
        product = Product(category="books", name="Dune", id=3)
        product.assign_id(3)
        assert product.id == 3

    def test_reassigning_different_id_raises_error(self):
        """Test that the id cannot change once assigned."""
        product = Product(category="books", name="Dune", id=3)
        with pytest.raises(ValueError, match="cannot be changed"):
            product.assign_id(4)
        assert product.id == 3


class TestProductUpdateDetails:
    """Test Product.update_details() overwrite semantics."""

    def test_replaces_both_fields(self, unsaved_product):
        """Test that category and name are both replaced."""
        unsaved_product.update_details(category="sci-fi", name="Dune Messiah")
        assert unsaved_product.category == "sci-fi"
        assert unsaved_product.name == "Dune Messiah"

    def test_empty_name_overwrites(self, unsaved_product):
        """Test that an empty name is stored, not ignored."""
        unsaved_product.update_details(category="books", name="")
        assert unsaved_product.name == ""

    def test_missing_values_overwrite_with_none(self, unsaved_product):
        """Test that absent values clear the fields (full replacement)."""
        unsaved_product.update_details(category=None, name=None)
        assert unsaved_product.category is None
        assert unsaved_product.name is None

    def test_id_is_untouched(self):
        """Test that updating details keeps the identifier."""
        product = Product(category="books", name="Dune", id=1)
        product.update_details(category="music", name="Blue Train")
        assert product.id == 1


def test_str_contains_fields():
    """Test __str__ output."""
    product = Product(category="books", name="Dune", id=1)
    assert str(product) == "Product(id=1, category=books, name=Dune)"
