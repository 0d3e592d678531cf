import asyncio

import httpx
import pytest

from app.core.errors import FetchError, StoreError


@pytest.mark.asyncio
async def test_second_call_within_ttl_uses_cache(catalog, fake_store, make_row):
    fake_store.rows = [make_row(id=1, name="Avena"), make_row(id=2, name="Milk")]

    first = await catalog.get_all_products()
    second = await catalog.get_all_products()

    assert fake_store.calls == 1
    assert second is first
    assert [p.name for p in second] == ["Avena", "Milk"]


@pytest.mark.asyncio
async def test_refetches_once_after_ttl(catalog, fake_store, clock, make_row):
    fake_store.rows = [make_row()]
    await catalog.get_all_products()

    clock.advance(599)
    await catalog.get_all_products()
    assert fake_store.calls == 1

    clock.advance(1)
    assert catalog.is_valid() is False
    await catalog.get_all_products()
    await catalog.get_all_products()
    assert fake_store.calls == 2


@pytest.mark.asyncio
async def test_invalidate_forces_refetch(catalog, fake_store, make_row):
    fake_store.rows = [make_row(price=30)]
    await catalog.get_all_products()
    assert catalog.is_valid()

    catalog.invalidate()
    assert catalog.is_valid() is False

    fake_store.rows = [make_row(price=35)]
    products = await catalog.get_all_products()
    assert fake_store.calls == 2
    assert products[0].price == 35


@pytest.mark.asyncio
async def test_fetch_sends_projection_filter_and_order(catalog, fake_store):
    await catalog.get_all_products()

    request = fake_store.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/products"
    assert request.url.params["select"] == (
        "id,name,brand,flavor,category,size,price,stock,fragile,description,imageurl,imagealt,active"
    )
    assert request.url.params["active"] == "eq.true"
    assert request.url.params["order"] == "name.asc"


@pytest.mark.asyncio
async def test_fetch_builds_display_names(catalog, fake_store, make_row):
    fake_store.rows = [
        make_row(id=1, name="Milk", flavor="Chocolate"),
        make_row(id=2, name="Milk", flavor=None),
        make_row(id=3, name="Milk", flavor=""),
    ]

    products = await catalog.get_all_products()

    assert [p.display_name for p in products] == ["Milk Chocolate", "Milk", "Milk"]


@pytest.mark.asyncio
async def test_empty_result_is_not_an_error(catalog, fake_store):
    fake_store.rows = []

    assert await catalog.get_all_products() == []
    assert catalog.is_valid()


@pytest.mark.asyncio
async def test_store_error_raises_fetch_error_and_keeps_cache_empty(catalog, fake_store):
    fake_store.status_code = 500

    with pytest.raises(FetchError) as excinfo:
        await catalog.get_all_products()

    assert isinstance(excinfo.value.__cause__, StoreError)
    assert excinfo.value.__cause__.status_code == 500
    assert catalog.is_valid() is False


@pytest.mark.asyncio
async def test_unreachable_store_raises_fetch_error(catalog, fake_store):
    fake_store.error = httpx.ConnectError("connection refused")

    with pytest.raises(FetchError):
        await catalog.get_all_products()


@pytest.mark.asyncio
async def test_malformed_rows_raise_fetch_error(catalog, fake_store, make_row):
    fake_store.rows = [make_row(price="not a number")]

    with pytest.raises(FetchError):
        await catalog.get_all_products()


@pytest.mark.asyncio
async def test_failed_refresh_does_not_touch_expired_cache(catalog, fake_store, clock, make_row):
    fake_store.rows = [make_row()]
    await catalog.get_all_products()
    clock.advance(601)

    fake_store.status_code = 503
    with pytest.raises(FetchError):
        await catalog.get_all_products()
    assert catalog.is_valid() is False

    fake_store.status_code = 200
    fake_store.rows = [make_row(name="Yogurt")]
    products = await catalog.get_all_products()
    assert products[0].name == "Yogurt"
    assert fake_store.calls == 3


@pytest.mark.asyncio
async def test_concurrent_misses_share_one_fetch(catalog, fake_store, make_row):
    fake_store.rows = [make_row()]

    results = await asyncio.gather(*(catalog.get_all_products() for _ in range(5)))

    assert fake_store.calls == 1
    assert all(r is results[0] for r in results)


@pytest.mark.asyncio
async def test_concurrent_misses_all_see_the_failure(catalog, fake_store):
    fake_store.status_code = 500

    results = await asyncio.gather(
        *(catalog.get_all_products() for _ in range(3)),
        return_exceptions=True,
    )

    assert fake_store.calls == 1
    assert all(isinstance(r, FetchError) for r in results)


@pytest.mark.asyncio
async def test_product_filters_are_trimmed_unique_and_sorted(catalog, fake_store, make_row):
    fake_store.rows = [
        make_row(id=1, category="Proteina ", brand="Ghost"),
        make_row(id=2, category="Creatina", brand=" Evogen"),
        make_row(id=3, category=" Proteina", brand="Evogen"),
        make_row(id=4, category="proteina", brand="   "),
        make_row(id=5, category="", brand="Dymatize"),
    ]

    filters = await catalog.get_product_filters()

    assert filters.categories == ["Creatina", "Proteina", "proteina"]
    assert filters.brands == ["Dymatize", "Evogen", "Ghost"]
    assert fake_store.calls == 1


@pytest.mark.asyncio
async def test_product_filters_reuse_cached_list(catalog, fake_store, make_row):
    fake_store.rows = [make_row(category=" Lacteos ")]
    products = await catalog.get_all_products()

    await catalog.get_product_filters()

    assert fake_store.calls == 1
    assert products[0].category == " Lacteos "


@pytest.mark.asyncio
async def test_invalidate_during_fetch_starts_a_new_fetch(catalog, fake_store, make_row):
    fake_store.rows = [make_row(price=30)]
    pending = asyncio.ensure_future(catalog.get_all_products())
    await asyncio.sleep(0)

    catalog.invalidate()
    fake_store.rows = [make_row(price=35)]
    products = await catalog.get_all_products()
    await pending

    assert fake_store.calls == 2
    assert products[0].price == 35
    assert (await catalog.get_all_products())[0].price == 35
    assert fake_store.calls == 2


@pytest.mark.asyncio
async def test_fetch_started_before_invalidate_is_not_cached(catalog, fake_store, make_row):
    fake_store.rows = [make_row()]
    pending = asyncio.ensure_future(catalog.get_all_products())
    await asyncio.sleep(0)

    catalog.invalidate()
    await pending

    assert catalog.is_valid() is False


@pytest.mark.asyncio
async def test_cancelled_caller_does_not_cancel_shared_fetch(catalog, fake_store, make_row):
    fake_store.rows = [make_row()]
    first = asyncio.ensure_future(catalog.get_all_products())
    second = asyncio.ensure_future(catalog.get_all_products())
    await asyncio.sleep(0)

    first.cancel()
    products = await second

    with pytest.raises(asyncio.CancelledError):
        await first
    assert [p.name for p in products] == ["Milk"]
    assert fake_store.calls == 1
    assert catalog.is_valid()
