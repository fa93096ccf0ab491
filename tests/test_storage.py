"""
Unit tests for JSON persistence: round trip, missing and malformed files, save failures.
"""
import json
from decimal import Decimal

import pytest

from asset_tracker.models import Asset
from asset_tracker.repository import AssetStore
from asset_tracker.storage import (
    default_assets_path,
    ensure_assets_dir,
    get_assets_dir,
    load_assets,
    next_article_number,
    save_assets,
)


def _record(number="ATS0001", **overrides):
    record = {
        "articleNumber": number, "articleName": "Laptop", "model": "X1",
        "quantity": 3, "unitPrice": 999.99, "country": "SWE",
    }
    record.update(overrides)
    return record


def test_round_trip_preserves_records(assets_dir, laptop):
    path = default_assets_path(assets_dir)
    phone = Asset("ATS0002", "Phone", "P9", 0, Decimal("0"), "USA")
    assert save_assets([laptop, phone], path) is True

    loaded = load_assets(path)
    assert loaded == [laptop, phone]
    assert loaded[0].total_price == Decimal("2999.97")


def test_saved_file_is_indented_json_array(assets_dir, laptop):
    path = assets_dir / "assets.json"
    save_assets([laptop], path)
    text = path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    data = json.loads(text)
    assert data[0]["articleNumber"] == "ATS0001"
    assert data[0]["totalPrice"] == 2999.97


def test_load_without_total_price(assets_dir):
    path = assets_dir / "plain.json"
    path.write_text(json.dumps([_record()]), encoding="utf-8")
    [asset] = load_assets(path)
    assert asset.unit_price == Decimal("999.99")
    assert asset.total_price == Decimal("2999.97")


def test_stored_total_price_is_not_trusted(assets_dir):
    path = assets_dir / "drift.json"
    path.write_text(json.dumps([_record(totalPrice=1.0)]), encoding="utf-8")
    assert load_assets(path)[0].total_price == Decimal("2999.97")


def test_missing_file_is_empty_without_error(assets_dir):
    errors = []
    assert load_assets(assets_dir / "nope.json", errors.append) == []
    assert errors == []


def test_malformed_json_reports_and_returns_empty(assets_dir):
    path = assets_dir / "broken.json"
    path.write_text("[{not json", encoding="utf-8")
    errors = []
    assert load_assets(path, errors.append) == []
    assert len(errors) == 1
    assert errors[0].startswith("Error loading assets:")


def test_non_list_document_reports_and_returns_empty(assets_dir):
    path = assets_dir / "object.json"
    path.write_text('{"articleNumber": "ATS0001"}', encoding="utf-8")
    errors = []
    assert load_assets(path, errors.append) == []
    assert errors


def test_invalid_records_are_skipped_and_reported(assets_dir):
    path = assets_dir / "mixed.json"
    path.write_text(json.dumps([
        _record("ATS0001"),
        _record("ATS0002", quantity=-4),
        {"articleNumber": "ATS0003"},
        "junk",
        _record("ATS0004"),
    ]), encoding="utf-8")
    errors = []
    loaded = load_assets(path, errors.append)
    assert [a.article_number for a in loaded] == ["ATS0001", "ATS0004"]
    assert len(errors) == 3


def test_next_article_number():
    assert next_article_number([]) == 1
    last = Asset("ATS0037", "Desk", "D1", 1, Decimal("1"), "SWE")
    assert next_article_number([last]) == 38


def test_store_from_file_resumes_numbering(assets_dir):
    path = assets_dir / "assets.json"
    path.write_text(json.dumps([_record("ATS0001"), _record("ATS0037")]), encoding="utf-8")
    store = AssetStore.from_file(path)
    assert store.add("Desk", "D1", 1, Decimal("10"), "SWE").article_number == "ATS0038"


def test_save_creates_missing_directory(tmp_path, laptop):
    path = tmp_path / "nested" / "Assets" / "assets.json"
    assert save_assets([laptop], path) is True
    assert path.exists()


def test_save_failure_is_reported(tmp_path, laptop):
    blocker = tmp_path / "Assets"
    blocker.write_text("not a directory", encoding="utf-8")
    errors = []
    assert save_assets([laptop], blocker / "assets.json", errors.append) is False
    assert errors[0].startswith("Error saving assets:")


def test_ensure_assets_dir(tmp_path):
    directory = get_assets_dir(tmp_path)
    assert directory.name == "Assets"
    assert ensure_assets_dir(directory).is_dir()
    assert ensure_assets_dir(directory) == directory


@pytest.mark.parametrize("price", [Decimal("12345678901234567.89"), Decimal("0.12345678901234567891")])
def test_round_trip_keeps_prices_a_float_cannot_hold(assets_dir, price):
    path = assets_dir / "precise.json"
    plant = Asset("ATS0001", "Plant", "P1", 3, price, "SWE")
    assert save_assets([plant], path) is True

    [loaded] = load_assets(path)
    assert loaded.unit_price == price
    assert loaded.total_price == 3 * price
    assert str(price) in path.read_text(encoding="utf-8")


def test_deeply_nested_document_reports_and_returns_empty(assets_dir):
    path = assets_dir / "nested.json"
    path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    errors = []
    assert load_assets(path, errors.append) == []
    assert errors[0].startswith("Error loading assets:")
