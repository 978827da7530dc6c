from __future__ import annotations

import pytest
from pydantic import BaseModel

from adapters.pydantic_decoder import PydanticDecoder
from core.domain.decoding import (
    GenericDecodeFailure,
    MissingField,
    StructuredDecodeError,
    TypeMismatch,
    ValueAbsent,
)
from core.domain.errors import DecodingError
from core.services.payload_decoder import PayloadDecoder


class Address(BaseModel):
    street: str
    zip: int


class Customer(BaseModel):
    id: int
    name: str
    address: Address
    tags: list[str] = []


def _failure(data: bytes, shape=Customer):
    with pytest.raises(StructuredDecodeError) as excinfo:
        PydanticDecoder().decode(data, shape)
    return excinfo.value.failure


def test_round_trip_against_model_encoder():
    reference = Customer(id=7, name="a", address=Address(street="Main", zip=1000), tags=["x", "y"])

    decoded = PydanticDecoder().decode(reference.model_dump_json().encode(), Customer)

    assert decoded == reference


def test_decodes_collections():
    decoded = PydanticDecoder().decode(b'[{"street": "A", "zip": 1}]', list[Address])

    assert decoded == [Address(street="A", zip=1)]


def test_missing_top_level_key_has_root_path():
    failure = _failure(b'{"name": "a", "address": {"street": "A", "zip": 1}}')

    assert failure == MissingField(key="id", path=())


def test_missing_nested_key_points_at_container():
    failure = _failure(b'{"id": 1, "name": "a", "address": {"street": "A"}}')

    assert failure == MissingField(key="zip", path=("address",))


def test_wrong_type_is_type_mismatch():
    failure = _failure(b'{"id": 1, "name": "a", "address": {"street": "A", "zip": "north"}}')

    assert failure == TypeMismatch(expected="int", path=("address", "zip"))


def test_wrong_type_in_list_item():
    failure = _failure(b'{"id": 1, "name": "a", "address": {"street": "A", "zip": 1}, "tags": ["x", 3]}')

    assert failure == TypeMismatch(expected="str", path=("tags", 1))


def test_null_where_required_is_value_absent():
    failure = _failure(b'{"id": null, "name": "a", "address": {"street": "A", "zip": 1}}')

    assert failure == ValueAbsent(expected="int", path=("id",))


def test_null_nested_model_reports_class_name():
    failure = _failure(b'{"id": 1, "name": "a", "address": null}')

    assert failure == ValueAbsent(expected="Address", path=("address",))


def test_invalid_json_is_generic_with_verbatim_message():
    failure = _failure(b'{"id": 1,')

    assert isinstance(failure, GenericDecodeFailure)
    assert failure.message.startswith("Invalid JSON")


def test_adapters_are_cached_per_shape():
    decoder = PydanticDecoder()
    decoder.decode(b'{"street": "A", "zip": 1}', Address)
    decoder.decode(b'{"street": "B", "zip": 2}', Address)

    assert list(decoder._adapters) == [Address]


class Token(BaseModel):
    id: int | str
    name: str


def test_union_member_tags_stay_out_of_the_path():
    failure = _failure(b'{"id": [1], "name": "a"}', Token)

    assert failure == TypeMismatch(expected="int", path=("id",))


def test_null_in_union_field_is_value_absent_at_field():
    failure = _failure(b'{"id": null, "name": "a"}', Token)

    assert failure == ValueAbsent(expected="int", path=("id",))


def test_union_tags_dropped_inside_lists():
    with pytest.raises(DecodingError) as excinfo:
        PayloadDecoder(PydanticDecoder()).decode(b'[{"id": 1, "name": "a"}, {"id": {}, "name": "b"}]', list[Token])

    assert excinfo.value.description == "Type mismatch for type int in list[Token] at path: 1.id"
