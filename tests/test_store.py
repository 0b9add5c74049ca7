"""Tests for the content store: bootstrap, seeding and upserts."""
import pytest

from content.commands import Insert, Update
from content.seed import DEFAULT_HOLIDAYS, DEFAULT_QUOTES, DEFAULT_SETTINGS
from content.store import ContentStore


@pytest.mark.asyncio
async def test_fresh_store_has_defaults(store):
    holidays = await store.list_holidays()
    assert [h["date"] for h in holidays] == [h["date"] for h in DEFAULT_HOLIDAYS]
    settings = await store.list_settings()
    assert settings == DEFAULT_SETTINGS
    quotes = await store.list_quotes()
    assert len(quotes) == len(DEFAULT_QUOTES)


@pytest.mark.asyncio
async def test_init_is_idempotent(store):
    """Re-running bootstrap neither fails nor duplicates default rows."""
    await store.init()
    await store.init()
    assert len(await store.list_holidays()) == len(DEFAULT_HOLIDAYS)
    assert len(await store.list_quotes()) == len(DEFAULT_QUOTES)
    assert len(await store.list_settings()) == len(DEFAULT_SETTINGS)


@pytest.mark.asyncio
async def test_init_keeps_edited_settings(store):
    await store.set_setting("popup_enabled", "false")
    await store.init()
    assert (await store.list_settings())["popup_enabled"] == "false"


@pytest.mark.asyncio
async def test_reopen_existing_file(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'site.db'}"
    first = ContentStore(url)
    await first.init()
    await first.add_quote("Hello", "World")
    await first.close()

    second = ContentStore(url)
    await second.init()
    quotes = await second.list_quotes()
    await second.close()
    assert len(quotes) == len(DEFAULT_QUOTES) + 1


@pytest.mark.asyncio
async def test_upsert_holiday_replaces_name(store):
    first = await store.upsert_holiday("2025-09-02", "Quốc khánh")
    second = await store.upsert_holiday("2025-09-02", "Ngày Quốc khánh")
    assert first == second
    rows = [h for h in await store.list_holidays() if h["date"] == "2025-09-02"]
    assert rows == [{"id": first, "date": "2025-09-02", "name": "Ngày Quốc khánh"}]


@pytest.mark.asyncio
async def test_save_product_insert_then_update(store):
    new_id = await store.save_product(Insert(fields={"title": "Mug", "image": None, "link": None, "position": 0}))
    assert isinstance(new_id, int)
    result = await store.save_product(Update(id=new_id, fields={"title": "Cup", "image": None, "link": None, "position": 5}))
    assert result is None
    products = await store.list_products()
    assert products == [{"id": new_id, "title": "Cup", "image": None, "link": None, "position": 5}]


@pytest.mark.asyncio
async def test_update_missing_id_is_noop(store):
    await store.save_footer_link(Update(id=424242, fields={"text": "x", "url": "y", "position": 1}))
    assert await store.list_footer_links() == []


@pytest.mark.asyncio
async def test_ids_are_not_reused(store):
    first = await store.add_quote("a", "b")
    await store.delete_quote(first)
    second = await store.add_quote("a", "b")
    assert second > first


@pytest.mark.asyncio
async def test_close_twice_does_not_raise(tmp_path):
    s = ContentStore(f"sqlite+aiosqlite:///{tmp_path / 'close.db'}")
    await s.init()
    await s.close()
    await s.close()
