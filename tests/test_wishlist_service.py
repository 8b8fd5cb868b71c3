"""Use-case tests for WishlistService.

Uses the in-memory fake repository; no file or network I/O.
"""

import pytest

from tests.fakes import InMemoryWishlistRepository
from wishlist.exceptions import (
    CustomerNotFoundError,
    InvalidCustomerIdError,
    InvalidProductIdError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
    WishlistLimitExceededError,
)
from wishlist.models.wishlist import Wishlist
from wishlist.services.wishlist_service import WishlistService


def _setup(*wishlists):
    repo = InMemoryWishlistRepository(list(wishlists))
    return WishlistService(repo), repo


def _wishlist_with(customer_id, *product_ids):
    w = Wishlist.new(customer_id)
    for pid in product_ids:
        w.add_product(pid)
    return w


class TestGetWishlist:

    def test_unknown_customer_gets_empty_wishlist_without_persisting(self):
        service, repo = _setup()
        resp = service.get_wishlist("cust-001")
        assert resp.customer_id == "cust-001"
        assert resp.products == []
        assert resp.total_items == 0
        assert resp.max_items == 20
        assert "save" not in repo.calls
        assert not repo.exists_by_customer_id("cust-001")

    def test_products_come_back_in_insertion_order(self):
        stored = _wishlist_with("cust-001", "c", "a", "b")
        service, _ = _setup(stored)
        resp = service.get_wishlist("cust-001")
        assert [p.product_id for p in resp.products] == ["c", "a", "b"]
        assert resp.total_items == 3
        assert resp.products[0].added_at == stored.products[0].added_at


class TestAddProduct:

    def test_first_add_creates_and_persists_wishlist(self):
        service, repo = _setup()
        resp = service.add_product("cust-001", "prod-001")
        assert resp.customer_id == "cust-001"
        assert resp.product_id == "prod-001"
        assert "successfully" in resp.message
        saved = repo.find_by_customer_id("cust-001")
        assert saved is not None and saved.id is not None
        assert [p.product_id for p in saved.products] == ["prod-001"]
        # the response carries the timestamp that was stored
        assert resp.added_at == saved.products[0].added_at

    def test_save_keeps_id_on_later_writes(self):
        service, repo = _setup()
        service.add_product("cust-001", "prod-001")
        first_id = repo.find_by_customer_id("cust-001").id
        service.add_product("cust-001", "prod-002")
        assert repo.find_by_customer_id("cust-001").id == first_id

    def test_duplicate_is_rejected(self):
        service, _ = _setup(_wishlist_with("cust-001", "prod-001"))
        with pytest.raises(ProductAlreadyExistsError):
            service.add_product("cust-001", "prod-001")

    def test_cap_is_checked_before_duplicate(self):
        full = _wishlist_with("cust-001", *[f"prod-{i:03d}" for i in range(1, 21)])
        service, repo = _setup(full)
        with pytest.raises(WishlistLimitExceededError):
            service.add_product("cust-001", "prod-021")
        with pytest.raises(WishlistLimitExceededError):
            service.add_product("cust-001", "prod-005")
        assert "save" not in repo.calls


class TestRemoveProduct:

    def test_removes_and_persists(self):
        service, repo = _setup(_wishlist_with("cust-001", "a", "b", "c"))
        service.remove_product("cust-001", "b")
        assert [p.product_id for p in repo.find_by_customer_id("cust-001").products] == ["a", "c"]

    def test_unknown_customer(self):
        service, _ = _setup()
        with pytest.raises(CustomerNotFoundError):
            service.remove_product("cust-001", "prod-001")

    def test_unknown_product(self):
        service, repo = _setup(_wishlist_with("cust-001", "a"))
        with pytest.raises(ProductNotFoundError):
            service.remove_product("cust-001", "zzz")
        assert "save" not in repo.calls

    def test_removing_last_product_keeps_the_document(self):
        service, repo = _setup(_wishlist_with("cust-001", "a"))
        service.remove_product("cust-001", "a")
        assert repo.exists_by_customer_id("cust-001")
        assert service.get_wishlist("cust-001").total_items == 0


class TestCheckProductExists:

    def test_returns_stored_added_at(self):
        stored = _wishlist_with("cust-001", "prod-001")
        service, _ = _setup(stored)
        resp = service.check_product_exists("cust-001", "prod-001")
        assert resp.exists is True
        assert resp.added_at == stored.products[0].added_at

    def test_missing_product_raises_instead_of_exists_false(self):
        service, _ = _setup(_wishlist_with("cust-001", "prod-001"))
        with pytest.raises(ProductNotFoundError):
            service.check_product_exists("cust-001", "prod-999")

    def test_unknown_customer_is_treated_as_empty(self):
        service, _ = _setup()
        with pytest.raises(ProductNotFoundError):
            service.check_product_exists("nobody", "prod-001")


class TestClearWishlist:

    def test_clears_existing(self):
        service, repo = _setup(_wishlist_with("cust-001", "a", "b"))
        service.clear_wishlist("cust-001")
        assert not repo.exists_by_customer_id("cust-001")
        assert service.get_wishlist("cust-001").total_items == 0

    def test_unknown_customer(self):
        service, repo = _setup()
        with pytest.raises(CustomerNotFoundError):
            service.clear_wishlist("cust-001")
        assert "delete_by_customer_id" not in repo.calls


class TestIdentifierValidation:

    @pytest.mark.parametrize("bad", [None, "", "   ", "\t"])
    def test_blank_customer_id_fails_before_io(self, bad):
        service, repo = _setup()
        for call in (
            lambda: service.get_wishlist(bad),
            lambda: service.add_product(bad, "prod-001"),
            lambda: service.remove_product(bad, "prod-001"),
            lambda: service.check_product_exists(bad, "prod-001"),
            lambda: service.clear_wishlist(bad),
        ):
            with pytest.raises(InvalidCustomerIdError):
                call()
        assert repo.calls == []

    @pytest.mark.parametrize("bad", [None, "", "   "])
    def test_blank_product_id_fails_before_io(self, bad):
        service, repo = _setup()
        for call in (
            lambda: service.add_product("cust-001", bad),
            lambda: service.remove_product("cust-001", bad),
            lambda: service.check_product_exists("cust-001", bad),
        ):
            with pytest.raises(InvalidProductIdError):
                call()
        assert repo.calls == []
