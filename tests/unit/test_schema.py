from __future__ import annotations

from dataclasses import dataclass

import pytest

from gocardless_pro.core.errors import GoCardlessProtocolError
from gocardless_pro.core.schema import Field, ResourceSchema, as_bool, as_int, as_nested
from gocardless_pro.resources.payouts import PAYOUT_SCHEMA, PayoutLinks, PayoutStatus


@dataclass(slots=True, frozen=True)
class _Item:
    id: str | None = None
    count: int | None = None


def test_schema_must_cover_every_model_field():
    with pytest.raises(TypeError, match="missing=\\['count'\\]"):
        ResourceSchema(_Item, (Field("id"),))


def test_schema_rejects_unknown_fields():
    with pytest.raises(TypeError, match="unknown=\\['extra'\\]"):
        ResourceSchema(_Item, (Field("id"), Field("count"), Field("extra")))


def test_schema_rejects_duplicate_fields():
    with pytest.raises(TypeError, match="twice"):
        ResourceSchema(_Item, (Field("id"), Field("count"), Field("id")))


def test_schema_honours_wire_key():
    schema = ResourceSchema(_Item, (Field("id"), Field("count", as_int, wire_key="total")))
    assert schema.decode({"id": "X", "total": 3, "count": 99}) == _Item(id="X", count=3)


def test_missing_fields_default_to_none():
    assert PAYOUT_SCHEMA.decode({}).id is None


def test_payout_schema_decodes_nested_links_and_enums():
    payout = PAYOUT_SCHEMA.decode(
        {
            "id": "PO1",
            "amount": 1000,
            "currency": "GBP",
            "status": "paid",
            "links": {"creditor": "CR1", "creditor_bank_account": "BA1"},
        }
    )
    assert payout.amount == 1000
    assert payout.status is PayoutStatus.PAID
    assert payout.links == PayoutLinks(creditor="CR1", creditor_bank_account="BA1")


@pytest.mark.parametrize(
    ("decoder", "value"),
    [(as_int, "10"), (as_int, True), (as_bool, "false"), (as_nested(PAYOUT_SCHEMA), "PO1")],
)
def test_decoders_reject_wrong_types(decoder, value):
    with pytest.raises(GoCardlessProtocolError):
        decoder(value)
