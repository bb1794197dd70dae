"""Unit tests for the routes feed cursor codec.

Tests cover:
- Token format (unpadded URL-safe base64 of compact JSON)
- Decoding both segments
- Lenient field coercion
- Garbage, oversized and non-object tokens decode to None
"""

import base64
import json

import pytest

from src.application.services.cursor_codec import decode_cursor, encode_cursor
from src.core.constants import MAX_CURSOR_LENGTH
from src.domain.value_objects import EntitiesCursor, ViewsCursor


def _token(payload: object) -> str:
    raw = json.dumps(payload).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


@pytest.mark.unit
class TestEncodeCursor:
    """Test encode_cursor token format."""

    def test_views_cursor_payload(self):
        token = encode_cursor(ViewsCursor(index=3))
        padded = token + "=" * (-len(token) % 4)

        assert json.loads(base64.urlsafe_b64decode(padded)) == {
            "segment": "views",
            "index": 3,
        }

    def test_entities_cursor_payload(self):
        token = encode_cursor(EntitiesCursor(bundle_index=2, last_id="42"))
        padded = token + "=" * (-len(token) % 4)

        assert json.loads(base64.urlsafe_b64decode(padded)) == {
            "segment": "entities",
            "bundle_index": 2,
            "last_id": "42",
        }

    def test_token_is_url_safe_and_unpadded(self):
        token = encode_cursor(EntitiesCursor(bundle_index=7, last_id="a/b+c?d"))

        assert "=" not in token
        assert "+" not in token
        assert "/" not in token


@pytest.mark.unit
class TestDecodeCursor:
    """Test decode_cursor."""

    @pytest.mark.parametrize(
        "state",
        [
            ViewsCursor(index=0),
            ViewsCursor(index=12),
            EntitiesCursor(bundle_index=0, last_id=None),
            EntitiesCursor(bundle_index=4, last_id="1337"),
            EntitiesCursor(bundle_index=1, last_id="uuid-like-id"),
        ],
    )
    def test_decodes_encoded_state(self, state):
        assert decode_cursor(encode_cursor(state)) == state

    def test_missing_segment_means_views(self):
        assert decode_cursor(_token({"index": 5})) == ViewsCursor(index=5)

    def test_unknown_segment_means_entities(self):
        assert decode_cursor(
            _token({"segment": "other", "bundle_index": 1})
        ) == EntitiesCursor(bundle_index=1, last_id=None)

    def test_coerces_numeric_fields(self):
        state = decode_cursor(
            _token({"segment": "entities", "bundle_index": "3", "last_id": 99})
        )

        assert state == EntitiesCursor(bundle_index=3, last_id="99")

    def test_invalid_fields_fall_back_to_defaults(self):
        state = decode_cursor(
            _token({"segment": "entities", "bundle_index": -4, "last_id": True})
        )

        assert state == EntitiesCursor(bundle_index=0, last_id=None)

    def test_boolean_index_is_zero(self):
        assert decode_cursor(_token({"segment": "views", "index": True})) == ViewsCursor(
            index=0
        )

    @pytest.mark.parametrize(
        "token",
        [
            None,
            "",
            "not base64 !!",
            "%%%%",
            "abc",
            _token([1, 2, 3]),
            _token("views"),
            _token(None),
            base64.urlsafe_b64encode(b"\xff\xfe\x00garbage").decode("ascii"),
            base64.urlsafe_b64encode(b"{not json").decode("ascii"),
        ],
    )
    def test_garbage_decodes_to_none(self, token):
        assert decode_cursor(token) is None

    def test_oversized_token_is_rejected(self):
        token = _token({"segment": "views", "index": 1, "pad": "x" * MAX_CURSOR_LENGTH})

        assert len(token) > MAX_CURSOR_LENGTH
        assert decode_cursor(token) is None
