"""Tests for ProductService over the SQLAlchemy repository."""

from unittest.mock import AsyncMock

import pytest
from domain.entities import Product
from domain.exceptions import DomainError, ProductNotFoundError


class TestCreateAndLookup:
    """Test create and get_by_id."""

    async def test_create_then_get_returns_equal_product(self, product_service):
        """Test that a created product can be read back by its id."""
        created = await product_service.create(category="books", name="Dune")
        
        assert created.id is not None
        assert created.category == "books"
        assert created.name == "Dune"
        assert await product_service.get_by_id(created.id) == created

    async def test_get_missing_raises_not_found(self, product_service):
        """Test that an unknown id raises ProductNotFoundError."""
        with pytest.raises(ProductNotFoundError, match="product not found") as exc_info:
            await product_service.get_by_id(12345)
        assert exc_info.value.product_id == 12345
        assert isinstance(exc_info.value, DomainError)


class TestUpdate:
    """Test full-overwrite update."""

    async def test_update_overwrites_both_fields(self, product_service):
        """Test that update replaces category and name."""
        created = await product_service.create(category="books", name="Dune")
        updated = await product_service.update(created.id, category="classics", name="Dune Messiah")
        
        assert updated == Product(category="classics", name="Dune Messiah", id=created.id)
        assert await product_service.get_by_id(created.id) == updated

    async def test_update_with_empty_name_is_not_a_patch(self, product_service):
        """Test that an empty name replaces the old one."""
        created = await product_service.create(category="books", name="Dune")
        await product_service.update(created.id, category="books", name="")
        
        assert (await product_service.get_by_id(created.id)).name == ""

    async def test_update_with_absent_values_clears_fields(self, product_service):
        """Test that absent values overwrite with None."""
        created = await product_service.create(category="books", name="Dune")
        updated = await product_service.update(created.id, category=None, name=None)
        
        assert updated.category is None
        assert updated.name is None

    async def test_update_missing_raises_not_found(self, product_service):
        """Test that updating an unknown id raises ProductNotFoundError."""
        with pytest.raises(ProductNotFoundError):
            await product_service.update(999, category="books", name="Dune")


class TestDelete:
    """Test delete."""

    async def test_deleted_product_is_gone(self, product_service):
        """Test that get_by_id fails after delete."""
        created = await product_service.create(category="books", name="Dune")
        await product_service.delete(created.id)
        
        with pytest.raises(ProductNotFoundError):
            await product_service.get_by_id(created.id)

    async def test_delete_twice_raises_not_found(self, product_service):
        """Test that deleting an already-deleted id raises ProductNotFoundError."""
        created = await product_service.create(category="books", name="Dune")
        await product_service.delete(created.id)
        
        with pytest.raises(ProductNotFoundError):
            await product_service.delete(created.id)

    async def test_delete_never_issued_id_raises_not_found(self, product_service):
        """Test deleting an id that was never created."""
        with pytest.raises(ProductNotFoundError):
            await product_service.delete(1)

    async def test_delete_lost_to_concurrent_delete_raises_not_found(
        self, product_service, product_repository, monkeypatch
    ):
        """Test that a row removed between lookup and delete is reported missing."""
        created = await product_service.create(category="books", name="Dune")
        monkeypatch.setattr(product_repository, "delete", AsyncMock(return_value=False))
        
        with pytest.raises(ProductNotFoundError):
            await product_service.delete(created.id)


class TestListing:
    """Test category listing and distinct categories."""

    async def test_books_scenario(self, product_service):
        """Test two books listed in insertion order on a single page."""
        dune = await product_service.create(category="books", name="Dune")
        foundation = await product_service.create(category="books", name="Foundation")
        
        page = await product_service.list_by_category("books", page=0, size=10)
        
        assert (dune.id, foundation.id) == (1, 2)
        assert [p.id for p in page.items] == [1, 2]
        assert page.total_elements == 2
        assert page.total_pages == 1
        assert page.current_page == 0

    async def test_page_never_exceeds_size(self, product_service):
        """Test that a page holds at most size items of the category."""
        for i in range(7):
            await product_service.create(category="books", name=f"Book {i}")
        await product_service.create(category="music", name="Kind of Blue")
        
        page = await product_service.list_by_category("books", page=1, size=3)
        
        assert len(page.items) == 3
        assert all(p.category == "books" for p in page.items)
        assert page.total_elements == 7
        assert page.total_pages == 3

    async def test_invalid_paging_raises_value_error(self, product_service):
        """Test that negative pages and empty sizes are rejected."""
        with pytest.raises(ValueError):
            await product_service.list_by_category("books", page=-1, size=10)
        with pytest.raises(ValueError):
            await product_service.list_by_category("books", page=0, size=0)

    async def test_unique_categories(self, product_service):
        """Test that each stored category is listed exactly once."""
        for category, name in [("books", "Dune"), ("music", "Blue Train"), ("books", "Emma")]:
            await product_service.create(category=category, name=name)
        
        categories = await product_service.list_unique_categories()
        
        assert sorted(categories) == ["books", "music"]
