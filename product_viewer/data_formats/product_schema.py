"""
Product record schema and validation.

Each element of the catalog array must be an object carrying every field
below with exactly the listed JSON type. Extra keys are ignored. Validation is
strict: numbers are not accepted where strings are expected and ``0``/``1``
are not accepted as booleans.

Record Structure:
    - _id, actual_price, average_rating, brand, category, crawled_at,
      description, discount, pid, seller, selling_price, sub_category,
      title, url: strings
    - out_of_stock: boolean
    - images: list of strings
    - product_details: list of string-to-string objects
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from product_viewer.errors import RecordDecodeError

# Attribute name -> JSON key, for fields whose names differ
JSON_KEY_OVERRIDES: dict[str, str] = {"id": "_id"}

STRING_FIELDS = (
    "id",
    "actual_price",
    "average_rating",
    "brand",
    "category",
    "crawled_at",
    "description",
    "discount",
    "pid",
    "seller",
    "selling_price",
    "sub_category",
    "title",
    "url",
)


@dataclass(frozen=True)
class Product:
    """One catalog entry decoded from the data file.

    Attributes mirror the JSON keys, except ``id`` which is read from ``_id``.
    ``images`` and ``product_details`` are stored as tuples so the record
    stays immutable after load.
    """

    id: str
    actual_price: str
    average_rating: str
    brand: str
    category: str
    crawled_at: str
    description: str
    discount: str
    images: tuple[str, ...]
    out_of_stock: bool
    pid: str
    product_details: tuple[dict[str, str], ...]
    seller: str
    selling_price: str
    sub_category: str
    title: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        """Return the record in its JSON shape (with the ``_id`` key)."""
        data: dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if name == "images":
                value = list(value)
            elif name == "product_details":
                value = [dict(detail) for detail in value]
            data[json_key(name)] = value
        return data


def json_key(attribute: str) -> str:
    """Map a Product attribute name to its JSON key."""
    return JSON_KEY_OVERRIDES.get(attribute, attribute)


def _require(record: dict[str, Any], attribute: str, index: int) -> Any:
    key = json_key(attribute)
    if key not in record:
        raise RecordDecodeError(f"Record {index}: missing field '{key}'")
    return record[key]


def _type_error(index: int, key: str, expected: str, value: Any) -> RecordDecodeError:
    return RecordDecodeError(
        f"Record {index}: field '{key}' must be {expected} (got {type(value).__name__})"
    )


def product_from_dict(record: Any, index: int = 0) -> Product:
    """Validate one decoded JSON element and build a Product from it.

    Args:
        record: The decoded JSON value for one array element.
        index: Position of the element in the array, used in error messages.

    Returns:
        The validated Product.

    Raises:
        RecordDecodeError: If the element is not an object, a field is
            missing, or a field has the wrong type.
    """
    if not isinstance(record, dict):
        raise RecordDecodeError(
            f"Record {index}: expected an object (got {type(record).__name__})"
        )

    values: dict[str, Any] = {}
    for attribute in STRING_FIELDS:
        value = _require(record, attribute, index)
        if not isinstance(value, str):
            raise _type_error(index, json_key(attribute), "a string", value)
        values[attribute] = value

    out_of_stock = _require(record, "out_of_stock", index)
    if not isinstance(out_of_stock, bool):
        raise _type_error(index, "out_of_stock", "a boolean", out_of_stock)
    values["out_of_stock"] = out_of_stock

    images = _require(record, "images", index)
    if not isinstance(images, list):
        raise _type_error(index, "images", "a list", images)
    for i, image in enumerate(images):
        if not isinstance(image, str):
            raise _type_error(index, f"images[{i}]", "a string", image)
    values["images"] = tuple(images)

    details = _require(record, "product_details", index)
    if not isinstance(details, list):
        raise _type_error(index, "product_details", "a list", details)
    for i, detail in enumerate(details):
        if not isinstance(detail, dict):
            raise _type_error(index, f"product_details[{i}]", "an object", detail)
        for key, value in detail.items():
            if not isinstance(value, str):
                raise _type_error(index, f"product_details[{i}].{key}", "a string", value)
    values["product_details"] = tuple(dict(detail) for detail in details)

    return Product(**values)
