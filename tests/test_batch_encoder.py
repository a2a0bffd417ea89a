import json
import math

import pytest

from opensearch_ingest.dtos import ArticleDTO, DocumentDTO, TagDTO
from opensearch_ingest.errors import EncodingError
from opensearch_ingest.services.batch_encoder import BatchEncoder


def make_document(age: int = 30) -> DocumentDTO:
    return DocumentDTO(
        email="jane@example.com",
        password="secret",
        name="Jane Doe",
        age=age,
        height=165,
        phone_number="555-0100",
        latitude=31.5,
        longitude=35.1,
        tags=[TagDTO(name="alpha")],
        articles=[
            ArticleDTO(
                id="7c9e6679-7425-40de-944b-e07fc1f90ae7",
                title="A title.",
                body="A body.",
                created_at="2001-02-03 04:05:06",
                tags=[TagDTO(name="beta")],
            )
        ],
    )


def test_payload_alternates_headers_and_documents():
    payload = BatchEncoder("people").encode([{"Age": 7}, {"Age": 8}])

    assert payload == (
        '{"create":{"_index":"people"}}\n'
        '{"Age":7}\n'
        '{"create":{"_index":"people"}}\n'
        '{"Age":8}\n'
    )


def test_payload_ends_with_exactly_one_newline():
    payload = BatchEncoder("people").encode([{"Age": n} for n in range(5)])

    assert payload.endswith("\n")
    assert not payload.endswith("\n\n")


@pytest.mark.parametrize("count", [1, 2, 17])
def test_header_and_document_lines_match_input(count):
    encoder = BatchEncoder("people")
    lines = encoder.encode([{"n": n} for n in range(count)]).splitlines()

    headers = lines[0::2]
    documents = lines[1::2]
    assert len(headers) == len(documents) == count
    assert all(line == encoder.action_line for line in headers)
    assert [json.loads(line)["n"] for line in documents] == list(range(count))


def test_dto_is_written_with_wire_field_names():
    payload = BatchEncoder("people").encode([make_document(age=12)])
    document = json.loads(payload.splitlines()[1])

    assert document["Age"] == 12
    assert document["PhoneNumber"] == "555-0100"
    assert document["Tags"] == [{"Name": "alpha"}]
    assert document["Article"][0]["CreatedAt"] == "2001-02-03 04:05:06"
    assert document["Article"][0]["Tags"] == [{"Name": "beta"}]


def test_non_ascii_text_is_kept_verbatim():
    payload = BatchEncoder("people").encode([{"Name": "نابلس"}])

    assert '"Name":"نابلس"' in payload


def test_empty_batch_encodes_to_empty_payload():
    assert BatchEncoder("people").encode([]) == ""


def test_nan_value_raises_encoding_error():
    with pytest.raises(EncodingError):
        BatchEncoder("people").encode([{"Latitude": math.nan}])


def test_unserializable_value_raises_encoding_error():
    with pytest.raises(EncodingError):
        BatchEncoder("people").encode([{"when": object()}])


def test_non_mapping_document_raises_encoding_error():
    with pytest.raises(EncodingError):
        BatchEncoder("people").encode(["not a document"])
