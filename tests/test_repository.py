"""
Unit tests for AssetStore: numbering, lookup, update and removal.
"""
from decimal import Decimal

from asset_tracker.models import Asset
from asset_tracker.repository import AssetStore


def _add(store, name="Laptop"):
    return store.add(name, "X1", 3, Decimal("999.99"), "SWE")


def test_numbers_start_at_one_and_increase():
    store = AssetStore()
    numbers = [_add(store, f"Item {i}").article_number for i in range(3)]
    assert numbers == ["ATS0001", "ATS0002", "ATS0003"]
    assert store.count() == 3
    assert _add(store).article_number == "ATS0004"


def test_add_total_price_is_exact():
    asset = _add(AssetStore())
    assert asset.total_price == asset.quantity * asset.unit_price == Decimal("2999.97")


def test_counter_resumes_after_last_loaded_record():
    existing = Asset("ATS0037", "Desk", "D1", 1, Decimal("100"), "SWE")
    store = AssetStore([existing])
    assert _add(store).article_number == "ATS0038"


def test_replace_discards_contents_and_recomputes_counter():
    store = AssetStore()
    _add(store)
    _add(store)
    store.replace([Asset("ATS0010", "Desk", "D1", 1, Decimal("1"), "SWE")])
    assert store.count() == 1
    assert _add(store).article_number == "ATS0011"
    store.replace([])
    assert _add(store).article_number == "ATS0001"


def test_find_is_case_insensitive():
    store = AssetStore()
    _add(store)
    second = _add(store, "Phone")
    assert store.find("ats0002") is second
    assert store.find(" ATS0002 ") is second
    assert store.find("ATS0099") is None


def test_update_keeps_article_number():
    store = AssetStore()
    asset = _add(store)
    store.update(asset, "Monitor", "U27", 5, Decimal("250.00"), "FIN")
    assert asset.article_number == "ATS0001"
    assert store.find("ATS0001").article_name == "Monitor"
    assert asset.total_price == Decimal("1250.00")


def test_remove_deletes_one_and_keeps_order():
    store = AssetStore()
    first, second, third = _add(store, "A"), _add(store, "B"), _add(store, "C")
    assert store.remove(second) is True
    assert store.snapshot() == [first, third]
    assert store.remove(second) is False
    assert store.count() == 2


def test_snapshot_is_a_copy():
    store = AssetStore()
    _add(store)
    snapshot = store.snapshot()
    snapshot.clear()
    assert len(store) == 1
    assert [a.article_number for a in store] == ["ATS0001"]
