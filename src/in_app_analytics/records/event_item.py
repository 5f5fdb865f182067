"""Structured commerce item attached to event payloads.

:class:`EventItem` is a pure data-shaping helper: it never travels on its own,
it is flattened into ``props``/``extra`` by the payload normalizer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class EventItem:
    """Item attributes understood by commerce-style analytics backends.

    Attributes:
        affiliation: Supplying company or store location, e.g. ``Google Store``.
        currency: 3-letter ISO 4217 code; overrides the event-level currency.
        coupon: Coupon name or code associated with the item.
        creative_name: Name of the promotional creative.
        creative_slot: Promotional creative slot associated with the item.
        discount: Monetary discount applied to the item.
        index: Position of the item in a list.
        item_brand: Brand of the item.
        item_category: First level of the category hierarchy.
        item_category2: Second level of the category hierarchy.
        item_category3: Third level of the category hierarchy.
        item_category4: Fourth level of the category hierarchy.
        item_category5: Fifth level of the category hierarchy.
        item_id: Item identifier. One of ``item_id``/``item_name`` is expected.
        item_list_id: Identifier of the list the item was shown in.
        item_list_name: Name of the list the item was shown in.
        item_name: Item name. One of ``item_id``/``item_name`` is expected.
        item_variant: Variant code or description, e.g. ``green``.
        location_id: Place identifier associated with the item.
        price: Unit price in ``currency``.
        promotion_id: Identifier of the associated promotion.
        promotion_name: Name of the associated promotion.
        quantity: Item quantity.
        parameters: Free-form extra parameters; structured fields win on
            key collision.
    """

    affiliation: Optional[str] = None
    currency: Optional[str] = None
    coupon: Optional[str] = None
    creative_name: Optional[str] = None
    creative_slot: Optional[str] = None
    discount: Optional[Number] = None
    index: Optional[int] = None
    item_brand: Optional[str] = None
    item_category: Optional[str] = None
    item_category2: Optional[str] = None
    item_category3: Optional[str] = None
    item_category4: Optional[str] = None
    item_category5: Optional[str] = None
    item_id: Optional[str] = None
    item_list_id: Optional[str] = None
    item_list_name: Optional[str] = None
    item_name: Optional[str] = None
    item_variant: Optional[str] = None
    location_id: Optional[str] = None
    price: Optional[Number] = None
    promotion_id: Optional[str] = None
    promotion_name: Optional[str] = None
    quantity: Optional[int] = None
    parameters: Optional[Mapping[str, Any]] = None

    _STRUCTURED_FIELDS = (
        "affiliation",
        "currency",
        "coupon",
        "creative_name",
        "creative_slot",
        "discount",
        "index",
        "item_brand",
        "item_category",
        "item_category2",
        "item_category3",
        "item_category4",
        "item_category5",
        "item_id",
        "item_list_id",
        "item_list_name",
        "item_name",
        "item_variant",
        "location_id",
        "price",
        "promotion_id",
        "promotion_name",
        "quantity",
    )

    def as_map(self) -> dict[str, Any]:
        """Return a flat mapping with snake_case keys, omitting unset fields."""

        flattened: dict[str, Any] = {}
        if self.parameters:
            flattened.update({str(key): value for key, value in self.parameters.items()})
        for field_name in self._STRUCTURED_FIELDS:
            value = getattr(self, field_name)
            if value is not None:
                flattened[field_name] = value
        return flattened

    def __str__(self) -> str:
        return f"EventItem({self.as_map()})"


__all__ = ["EventItem"]
