"""Tests for the static resources."""

import json

import pytest

from core.resources import (
    API_INFO_URI,
    CURRENCIES_URI,
    RESOURCES,
    currency_description,
    read_resource,
)
from core.validators import SUPPORTED_CURRENCIES


def test_currencies_catalog():
    doc = read_resource(CURRENCIES_URI)
    catalog = json.loads(doc.text)

    assert doc.uri == "bot://currencies"
    assert doc.mime_type == "application/json"
    assert len(catalog) == 20
    assert [entry["code"] for entry in catalog] == list(SUPPORTED_CURRENCIES)
    assert all(entry["description"] for entry in catalog)
    assert catalog[0] == {"code": "USD", "description": "United States Dollar"}


def test_description_falls_back_to_code():
    assert currency_description("XAU") == "XAU"
    assert currency_description("AED") == "UAE Dirham"


def test_api_info():
    doc = read_resource(API_INFO_URI)

    assert doc.uri == "bot://api-info"
    assert doc.mime_type == "text/plain"
    assert doc.text.startswith("Bank of Thailand Exchange Rate APIs")
    for fmt in ("YYYY-MM-DD", "YYYY-MM", "YYYY-QN", "YYYY"):
        assert fmt in doc.text


def test_documents_are_rebuilt_on_each_read():
    assert read_resource(CURRENCIES_URI) is not read_resource(CURRENCIES_URI)
    assert read_resource(CURRENCIES_URI) == read_resource(CURRENCIES_URI)


def test_registry_and_unknown_uri():
    assert list(RESOURCES) == [CURRENCIES_URI, API_INFO_URI]
    with pytest.raises(KeyError):
        read_resource("bot://nothing")
