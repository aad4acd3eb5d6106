from __future__ import annotations

import logging
from collections.abc import Callable

from campaign_brief_client.exceptions import SubmissionInProgressError
from campaign_brief_client.models.brief import (
    CampaignBrief,
    ProductEntry,
    resolve_brief_field,
    resolve_product_field,
)

logger = logging.getLogger(__name__)

BriefListener = Callable[[int, CampaignBrief], None]


class BriefEditor:
    """Owns the brief being composed and applies edits copy-on-write.

    Every effective edit swaps in a new frozen ``CampaignBrief`` and bumps
    ``version``; a brief obtained earlier from ``brief`` stays unchanged.
    Listeners registered with ``subscribe`` get ``(version, brief)`` after
    each edit.
    """

    def __init__(self, brief: CampaignBrief | None = None) -> None:
        self._brief = brief or CampaignBrief()
        self._version = 0
        self._listeners: list[BriefListener] = []
        self._locked = False

    @property
    def brief(self) -> CampaignBrief:
        return self._brief

    @property
    def version(self) -> int:
        return self._version

    @property
    def locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def subscribe(self, listener: BriefListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_product(self) -> CampaignBrief:
        return self.insert_product_at(len(self._brief.products))

    def insert_product_at(self, index: int) -> CampaignBrief:
        self._ensure_editable()
        products = list(self._brief.products)
        index = max(0, min(index, len(products)))
        products.insert(index, ProductEntry())
        return self._commit(self._brief.model_copy(update={"products": tuple(products)}))

    def remove_product(self, index: int) -> bool:
        """Remove the product at *index*; the last remaining product is never removed."""
        self._ensure_editable()
        products = self._brief.products
        if len(products) <= 1:
            logger.debug("Ignoring removal of the only product")
            return False
        if not 0 <= index < len(products):
            logger.debug("Ignoring removal of product at out-of-range index %s", index)
            return False

        remaining = products[:index] + products[index + 1 :]
        self._commit(self._brief.model_copy(update={"products": remaining}))
        return True

    def update_product_field(self, index: int, field: str, value: str) -> CampaignBrief:
        self._ensure_editable()
        attribute = resolve_product_field(field)
        products = list(self._brief.products)
        if not 0 <= index < len(products):
            raise IndexError(f"Product index out of range: {index}")

        products[index] = products[index].model_copy(update={attribute: value})
        return self._commit(self._brief.model_copy(update={"products": tuple(products)}))

    def update_brief_field(self, field: str, value: str) -> CampaignBrief:
        self._ensure_editable()
        attribute = resolve_brief_field(field)
        return self._commit(self._brief.model_copy(update={attribute: value}))

    def reset(self) -> CampaignBrief:
        self._ensure_editable()
        return self._commit(CampaignBrief())

    def _ensure_editable(self) -> None:
        if self._locked:
            raise SubmissionInProgressError("generate")

    def _commit(self, brief: CampaignBrief) -> CampaignBrief:
        self._brief = brief
        self._version += 1
        for listener in list(self._listeners):
            listener(self._version, brief)
        return brief
