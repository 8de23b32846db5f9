"""Pydantic models for the Stripe charge-list envelope.

Only the fields the engine reads are declared; everything else in the
payload is ignored. Strict int/bool typing keeps "500" or "false" strings
from slipping through as valid amounts or flags.
"""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr

from src.rv_common.datetime_utils import from_epoch_seconds
from src.rv_revenue.domain.models import Page, Transaction


class ChargeOut(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictStr
    amount: StrictInt
    currency: StrictStr
    status: StrictStr
    refunded: StrictBool
    created: StrictInt

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            amount_minor=self.amount,
            currency=self.currency,
            status=self.status,
            refunded=self.refunded,
            created_at=from_epoch_seconds(self.created),
        )


class ChargeListEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[ChargeOut]
    has_more: StrictBool

    def to_page(self) -> Page:
        items = tuple(c.to_domain() for c in self.data)
        # Empty page is terminal regardless of the server's flag
        return Page(items=items, has_more=self.has_more and bool(items))
