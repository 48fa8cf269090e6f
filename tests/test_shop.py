"""
Tests for the Shop facade: intents, projections and ordering
"""
import asyncio
from decimal import Decimal

import pytest

from storefront.catalog import Catalog, Product
from storefront.errors import ERROR_CART_EMPTY, ERROR_PRODUCT_NOT_FOUND, EmptyCartError, ProductNotFound
from storefront.gateway import OperationState
from storefront.shop import Shop, get_shop


def _cart_state(shop):
    return [(line.product_id, line.quantity) for line in shop.current_cart]


class TestInitialState:
    """Tests for a freshly built Shop."""

    def test_empty(self, shop):
        assert shop.current_cart == []
        assert shop.current_pricing.grand_total == Decimal("0")
        assert shop.operation_state == OperationState(busy=False, last_error=None)
        assert shop.current_receipt is None
        assert shop.products == []

    @pytest.mark.asyncio
    async def test_fetch_products(self, shop):
        products = await shop.fetch_products()

        assert len(products) == 8
        assert shop.products == products


class TestCartIntents:
    """Tests for add/remove/set quantity."""

    @pytest.mark.asyncio
    async def test_adds_accumulate(self, shop):
        for _ in range(4):
            await shop.add_to_cart("prod2")

        assert _cart_state(shop) == [("prod2", 4)]
        assert shop.current_pricing.grand_total == Decimal("799.96")

    @pytest.mark.asyncio
    async def test_unknown_product(self, shop):
        await shop.add_to_cart("prod1")

        with pytest.raises(ProductNotFound):
            await shop.add_to_cart("prod99")

        assert _cart_state(shop) == [("prod1", 1)]
        assert shop.operation_state == OperationState(busy=False, last_error=ERROR_PRODUCT_NOT_FOUND)

    @pytest.mark.asyncio
    async def test_error_cleared_and_retry(self, shop):
        with pytest.raises(ProductNotFound):
            await shop.add_to_cart("prod99")

        shop.clear_error()
        assert shop.operation_state.last_error is None

        with pytest.raises(ProductNotFound):
            await shop.add_to_cart("prod99")
        await shop.add_to_cart("prod1")

        assert shop.operation_state.last_error is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -5])
    async def test_set_non_positive_quantity_removes(self, shop, quantity):
        await shop.add_to_cart("prod1")

        await shop.set_quantity("prod1", quantity)

        assert shop.current_cart == []
        assert shop.current_pricing.lines == ()

    @pytest.mark.asyncio
    async def test_remove_absent_is_not_an_error(self, shop):
        assert await shop.remove_from_cart("prod4") is False

        assert shop.operation_state.last_error is None

    @pytest.mark.asyncio
    async def test_add_then_remove_restores_total(self, shop):
        await shop.add_to_cart("prod1")
        await shop.add_to_cart("prod6")
        before = shop.current_pricing.grand_total

        await shop.add_to_cart("prod7")
        await shop.remove_from_cart("prod7")

        assert shop.current_pricing.grand_total == before == Decimal("114.98")

    @pytest.mark.asyncio
    async def test_fetch_cart(self, shop):
        await shop.add_to_cart("prod8")

        lines, pricing = await shop.fetch_cart()

        assert [(line.product_id, line.quantity) for line in lines] == [("prod8", 1)]
        assert pricing == shop.current_pricing


class TestCheckout:
    """Tests for the checkout intent."""

    @pytest.mark.asyncio
    async def test_empty_cart(self, shop):
        with pytest.raises(EmptyCartError):
            await shop.checkout("Ada", "ada@example.com")

        assert shop.operation_state == OperationState(busy=False, last_error=ERROR_CART_EMPTY)
        assert shop.current_cart == []
        assert shop.current_receipt is None

    @pytest.mark.asyncio
    async def test_success_then_second_attempt_fails(self, shop):
        await shop.add_to_cart("prod1")
        await shop.add_to_cart("prod4")
        items_before = _cart_state(shop)
        total_before = shop.current_pricing.grand_total

        receipt = await shop.checkout("Ada", "ada@example.com")

        assert [(i.product_id, i.quantity) for i in receipt.items] == items_before
        assert receipt.total == total_before
        assert shop.current_cart == []
        assert shop.current_pricing.grand_total == Decimal("0")
        assert shop.current_receipt == receipt
        assert shop.checkout_form.name == ""

        with pytest.raises(EmptyCartError):
            await shop.checkout()

        # a failed attempt leaves the displayed receipt alone
        assert shop.current_receipt == receipt

    @pytest.mark.asyncio
    async def test_dismiss_receipt(self, shop):
        await shop.add_to_cart("prod1")
        receipt = await shop.checkout()

        shop.dismiss_receipt()

        assert shop.current_receipt is None
        assert shop.last_receipt == receipt
        assert shop.receipts == (receipt,)

    @pytest.mark.asyncio
    async def test_form_kept_when_checkout_fails(self, shop):
        with pytest.raises(EmptyCartError):
            await shop.checkout(name="Ada", email="ada@example.com")

        assert shop.checkout_form.name == "Ada"

    @pytest.mark.asyncio
    async def test_can_checkout(self, shop):
        assert shop.can_checkout is False

        await shop.add_to_cart("prod1")
        assert shop.can_checkout is False

        shop.update_checkout_form(name="Ada", email="ada@example.com")
        assert shop.can_checkout is True


@pytest.mark.asyncio
async def test_reference_scenario():
    shop = Shop(catalog=Catalog([Product(id="prod1", name="Wireless Earbuds", unit_price="79.99")]), latency=0)

    await shop.add_to_cart("prod1")
    await shop.add_to_cart("prod1")

    assert _cart_state(shop) == [("prod1", 2)]
    pricing = shop.current_pricing
    assert [(p.product_id, p.line_subtotal) for p in pricing.lines] == [("prod1", Decimal("159.98"))]
    assert pricing.grand_total == Decimal("159.98")

    await shop.set_quantity("prod1", 1)
    assert shop.current_pricing.grand_total == Decimal("79.99")

    receipt = await shop.checkout()
    assert receipt.total == Decimal("79.99")
    assert [(i.product_id, i.quantity) for i in receipt.items] == [("prod1", 1)]
    assert shop.current_cart == []


class TestConcurrency:
    """Intents issued while busy are queued, never interleaved or lost."""

    @pytest.mark.asyncio
    async def test_rapid_adds_both_apply(self, slow_shop):
        first = asyncio.create_task(slow_shop.add_to_cart("prod1"))
        await asyncio.sleep(0)
        assert slow_shop.operation_state.busy is True

        second = asyncio.create_task(slow_shop.add_to_cart("prod1"))
        await asyncio.sleep(0)
        assert slow_shop.current_cart == []

        await first
        assert _cart_state(slow_shop) == [("prod1", 1)]
        assert slow_shop.operation_state.busy is True

        await second
        assert _cart_state(slow_shop) == [("prod1", 2)]
        assert slow_shop.operation_state.busy is False

    @pytest.mark.asyncio
    async def test_submission_order(self, slow_shop):
        await asyncio.gather(
            slow_shop.add_to_cart("prod2"),
            slow_shop.add_to_cart("prod1"),
            slow_shop.set_quantity("prod2", 5),
            slow_shop.remove_from_cart("prod1"),
            slow_shop.add_to_cart("prod3"),
        )

        assert _cart_state(slow_shop) == [("prod2", 5), ("prod3", 1)]
        assert slow_shop.current_pricing.grand_total == Decimal("1049.94")

    @pytest.mark.asyncio
    async def test_pricing_tracks_each_mutation(self, slow_shop):
        seen = []

        async def _add_and_record(product_id):
            await slow_shop.add_to_cart(product_id)
            seen.append(slow_shop.current_pricing.grand_total)

        await asyncio.gather(_add_and_record("prod1"), _add_and_record("prod1"))

        assert seen == [Decimal("79.99"), Decimal("159.98")]

    @pytest.mark.asyncio
    async def test_checkout_queued_behind_add(self, slow_shop):
        add = asyncio.create_task(slow_shop.add_to_cart("prod5"))
        await asyncio.sleep(0)

        receipt = await slow_shop.checkout()
        await add

        assert [(i.product_id, i.quantity) for i in receipt.items] == [("prod5", 1)]
        assert slow_shop.current_cart == []

    @pytest.mark.asyncio
    async def test_back_to_back_checkouts(self, slow_shop):
        await slow_shop.add_to_cart("prod5")

        results = await asyncio.gather(slow_shop.checkout(), slow_shop.checkout(), return_exceptions=True)

        assert results[0].total == Decimal("29.99")
        assert isinstance(results[1], EmptyCartError)
        assert slow_shop.operation_state == OperationState(busy=False, last_error=ERROR_CART_EMPTY)


def test_get_shop_is_singleton():
    assert get_shop() is get_shop()


@pytest.mark.asyncio
async def test_receipt_ids_unique_across_shops(monkeypatch):
    monkeypatch.setattr("storefront.checkout.service.time.time", lambda: 1700000000.0)
    first_shop = Shop(latency=0)
    second_shop = Shop(latency=0)
    await first_shop.add_to_cart("prod1")
    await second_shop.add_to_cart("prod1")

    first = await first_shop.checkout()
    second = await second_shop.checkout()

    assert first.id != second.id
