"""Tests for last-value-wins collapsing of encoded strings."""

from urllib.parse import urlencode

import pytest

from hppshield.collapse import ParameterDecodeError, collapse, iter_pairs, repeated_keys

UNSAFE_QUERY = (
    "param0=PhD&param1=John&param1=Alice&param2=40"
    "&param3=John%2CAlice&param4=%5B'John'%2C%20'Alice'%5D&param5="
)


def test_repeated_key_keeps_last_value() -> None:
    assert collapse("param0=PhD&param1=John&param1=Alice&param2=40") == {
        "param0": "PhD",
        "param1": "Alice",
        "param2": "40",
    }


def test_all_risks_query() -> None:
    assert collapse(UNSAFE_QUERY) == {
        "param0": "PhD",
        "param1": "Alice",
        "param2": "40",
        "param3": "John,Alice",
        "param4": "['John', 'Alice']",
        "param5": "",
    }


def test_plus_and_percent_decoding() -> None:
    assert collapse("foo=bar%20baz&foo=qux+quux") == {"foo": "qux quux"}


def test_plus_in_key_decodes_to_space() -> None:
    assert collapse("first+name=Ada") == {"first name": "Ada"}


def test_encoded_plus_stays_literal() -> None:
    assert collapse("expr=1%2B1") == {"expr": "1+1"}


def test_missing_equals_and_empty_value() -> None:
    assert collapse("param6&param7=") == {"param6": "", "param7": ""}


def test_empty_tokens_dropped_and_empty_key_kept() -> None:
    assert collapse("&&&=value&foo=bar&=baz") == {"foo": "bar", "": "baz"}


def test_reinjection_attempt() -> None:
    assert collapse("username=admin&role=admin&username=guest") == {
        "role": "admin",
        "username": "guest",
    }


def test_value_split_on_first_equals_only() -> None:
    assert collapse("token=a=b=c") == {"token": "a=b=c"}


def test_leading_question_mark_is_ignored() -> None:
    assert collapse("?a=1&a=2") == {"a": "2"}


@pytest.mark.parametrize("raw", ["", None, "&", "&&&", "?"])
def test_empty_inputs_give_empty_mapping(raw) -> None:
    assert collapse(raw) == {}


def test_utf8_escapes_decode() -> None:
    assert collapse("name=Jos%C3%A9") == {"name": "José"}


def test_malformed_percent_sequence_kept_literally() -> None:
    assert collapse("a=100%&b=%zz") == {"a": "100%", "b": "%zz"}


def test_invalid_utf8_replaced_by_default() -> None:
    assert collapse("a=%FF") == {"a": "�"}


def test_invalid_utf8_raises_in_strict_mode() -> None:
    with pytest.raises(ParameterDecodeError) as excinfo:
        collapse("a=%FF", errors="strict")
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.token == "%FF"


def test_last_occurrence_invariant() -> None:
    raw = "a=1&b=2&a=3&c=&b=4&a=5"
    pairs = list(iter_pairs(raw))
    result = collapse(raw)
    for key in {key for key, _ in pairs}:
        last = [value for k, value in pairs if k == key][-1]
        assert result[key] == last


def test_iter_pairs_preserves_duplicates_and_order() -> None:
    assert list(iter_pairs("a=1&&b&a=2")) == [("a", "1"), ("b", ""), ("a", "2")]


def test_collapse_is_idempotent_after_reserialisation() -> None:
    first = collapse(UNSAFE_QUERY)
    assert collapse(urlencode(first)) == first


def test_repeated_keys() -> None:
    assert repeated_keys("a=1&b=2&a=3&=x&=y") == {"a", ""}
    assert repeated_keys("a=1&b=2") == set()
