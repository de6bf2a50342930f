"""Pytest configuration and shared fixtures for product viewer tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from product_viewer.data_formats import Product, product_from_dict

REPO_ROOT = Path(__file__).parent.parent


def _make_product_dict(idx: int, **overrides: Any) -> dict[str, Any]:
    """Create a valid product object as it appears in the JSON catalog."""
    record = {
        "_id": f"id-{idx:03d}",
        "actual_price": f"{1000 + idx}",
        "average_rating": "4.1",
        "brand": f"Brand {idx}",
        "category": "Clothing and Accessories",
        "crawled_at": "02/10/2021, 20:11:51",
        "description": f"Description {idx}",
        "discount": f"{idx}% off",
        "images": [f"https://example.com/{idx}/a.jpeg", f"https://example.com/{idx}/b.jpeg"],
        "out_of_stock": idx % 2 == 1,
        "pid": f"PID{idx:05d}",
        "product_details": [{"Style Code": f"SC{idx}"}, {"Closure": "Elastic"}],
        "seller": "Shyam Enterprises",
        "selling_price": f"{500 + idx}",
        "sub_category": "Bottomwear",
        "title": f"Product {idx}",
        "url": f"https://example.com/p/{idx}",
    }
    record.update(overrides)
    return record


@pytest.fixture
def product_dict() -> Callable[..., dict[str, Any]]:
    """Return a factory for valid product objects: product_dict(idx, **overrides)."""
    return _make_product_dict


@pytest.fixture
def make_products() -> Callable[[int], tuple[Product, ...]]:
    """Return a factory that builds count validated products."""

    def _make(count: int) -> tuple[Product, ...]:
        return tuple(product_from_dict(_make_product_dict(i), i) for i in range(count))

    return _make


@pytest.fixture
def repo_root() -> Path:
    """Return the repository root."""
    return REPO_ROOT


@pytest.fixture
def write_catalog(tmp_path) -> Callable[[Any], Path]:
    """Return a helper that writes a value as JSON to a temporary catalog file."""

    def _write(data: Any, name: str = "product.json") -> Path:
        filepath = tmp_path / name
        filepath.write_text(json.dumps(data), encoding="utf-8")
        return filepath

    return _write


@pytest.fixture
def three_products(make_products) -> tuple[Product, ...]:
    """Return three validated products."""
    return make_products(3)


@pytest.fixture
def sample_catalog_path() -> Path:
    """Return the path of the catalog shipped in data/."""
    return REPO_ROOT / "data" / "product.json"
