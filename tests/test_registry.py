import pytest

from apps.event_contracts.services.contracts.errors import UnknownEventType
from apps.event_contracts.services.contracts.field_types import FieldType, RuntimeKind, runtime_kind
from apps.event_contracts.services.contracts.registry import (
    Contract,
    ContractRegistry,
    EventType,
    build_registry,
    default_registry,
)


def test_default_registry_holds_the_three_loyalty_contracts():
    registry = default_registry()

    assert registry.event_types() == ("earn", "redeem", "tier_update")
    assert len(registry) == 3
    assert EventType.REDEEM in registry


def test_earn_contract_fields_in_declared_order():
    contract = default_registry().get_contract("earn")

    assert contract.field_names == ("user_id", "amount_spent", "currency", "partner_id", "tier", "timestamp")
    assert contract.expected_type("amount_spent") is FieldType.NUMBER
    assert contract.expected_type("nope") is None


def test_redeem_and_tier_update_contracts():
    registry = default_registry()

    assert registry.get_contract("redeem").to_dict()["fields"] == {
        "user_id": "string",
        "points_used": "number",
        "reward_id": "string",
        "partner_id": "string",
        "timestamp": "string",
    }
    tier_update = registry.get_contract(EventType.TIER_UPDATE)
    assert all(kind is FieldType.STRING for _, kind in tier_update.fields)


@pytest.mark.parametrize("event_type", ["", "EARN", "points", None])
def test_unknown_event_type(event_type):
    with pytest.raises(UnknownEventType):
        default_registry().get_contract(event_type)


def test_contract_rejects_empty_field_name():
    with pytest.raises(ValueError):
        Contract.from_dict("earn", {"": "string"})


def test_contract_rejects_duplicate_field_name():
    with pytest.raises(ValueError):
        Contract(event_type="earn", fields=(("user_id", "string"), ("user_id", "number")))


def test_contract_rejects_unknown_field_type():
    with pytest.raises(ValueError):
        Contract.from_dict("earn", {"user_id": "uuid"})


def test_contract_rejects_empty_field_list():
    with pytest.raises(ValueError):
        Contract.from_dict("earn", {})


def test_registry_rejects_duplicate_event_types():
    c = Contract.from_dict("earn", {"user_id": "string"})
    with pytest.raises(ValueError):
        ContractRegistry([c, c])


def test_registry_accepts_additional_event_types():
    registry = build_registry({"referral": {"user_id": "string", "referred_user_id": "string"}})
    assert registry.get_contract("referral").field_names == ("user_id", "referred_user_id")


def test_contract_is_immutable():
    contract = default_registry().get_contract("earn")
    with pytest.raises(Exception):
        contract.event_type = "redeem"


@pytest.mark.parametrize(
    "value, kind",
    [
        ("x", RuntimeKind.STRING),
        ("", RuntimeKind.STRING),
        (0, RuntimeKind.NUMBER),
        (1.5, RuntimeKind.NUMBER),
        (False, RuntimeKind.BOOLEAN),
        (None, RuntimeKind.NULL),
        ({}, RuntimeKind.OBJECT),
        ([], RuntimeKind.ARRAY),
    ],
)
def test_runtime_kind(value, kind):
    assert runtime_kind(value) is kind


def test_runtime_kind_rejects_non_structured_values():
    with pytest.raises(TypeError):
        runtime_kind(object())


def test_wide_contract_lookups():
    names = [f"field_{i}" for i in range(2000)]
    registry = build_registry({"wide": {name: "string" for name in names}})
    contract = registry.get_contract("wide")

    assert all(contract.declares(name) for name in names)
    assert contract.expected_type("field_1999") is FieldType.STRING
    assert contract.declares("field_2000") is False
    assert contract.expected_type("Field_0") is None


def test_wide_payload_unexpected_fields_in_payload_order():
    from apps.event_contracts.services.contracts.validator import ContractValidator

    contract_fields = {f"f{i}": "number" for i in range(1000)}
    payload = {f"f{i}": i for i in range(1000)}
    payload.update({f"x{i}": i for i in range(1000)})

    result = ContractValidator(build_registry({"wide": contract_fields})).validate("wide", payload)

    assert result.missing_fields == ()
    assert result.type_mismatches == ()
    assert result.unexpected_fields == tuple(f"x{i}" for i in range(1000))
