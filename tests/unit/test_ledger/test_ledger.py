#!/usr/bin/env python3
"""Tests for ledger models and loader."""

import json

import pytest

from ledgersync.core.errors import ParseError
from ledgersync.ledger import LedgerRecord, load_ledger


@pytest.mark.unit
class TestLedgerRecord:
    """Test LedgerRecord.from_dict."""

    def test_from_dict_unwraps_date_object(self, sample_ledger_record):
        record = LedgerRecord.from_dict(sample_ledger_record)

        assert record.id == "a1"
        assert record.date == "2018-03-01"
        assert record.amount == "50.00"
        assert record.title == "Grocery Store"

    def test_extra_fields_pass_through(self, sample_ledger_record):
        record = LedgerRecord.from_dict(sample_ledger_record)
        assert record.extra == {"iban": "DE00000000000000000000"}

    def test_plain_string_date(self):
        record = LedgerRecord.from_dict({"id": "x", "date": "2018-01-02", "amount": "1.00"})
        assert record.date == "2018-01-02"
        assert record.title == ""

    def test_numeric_id_is_stringified(self):
        record = LedgerRecord.from_dict({"id": 42, "date": "2018-01-02", "amount": "1.00"})
        assert record.id == "42"

    @pytest.mark.parametrize("missing", ["id", "date", "amount"])
    def test_missing_required_field_raises(self, sample_ledger_record, missing):
        del sample_ledger_record[missing]
        with pytest.raises(ParseError, match=missing):
            LedgerRecord.from_dict(sample_ledger_record)

    def test_date_object_without_date_raises(self):
        with pytest.raises(ParseError):
            LedgerRecord.from_dict({"id": "x", "date": {"timezone": "UTC"}, "amount": "1.00"})

    def test_non_object_record_raises(self):
        with pytest.raises(ParseError):
            LedgerRecord.from_dict(["x", "2018-01-02", "1.00"])  # type: ignore[arg-type]


@pytest.mark.unit
class TestLoadLedger:
    """Test loading ledger exports from disk."""

    def test_load_array(self, temp_dir, sample_ledger_record):
        path = temp_dir / "export.json"
        path.write_text(json.dumps([sample_ledger_record, {**sample_ledger_record, "id": "a2"}]))

        records = load_ledger(path)

        assert [r.id for r in records] == ["a1", "a2"]

    def test_load_wrapped_object(self, temp_dir, sample_ledger_record):
        path = temp_dir / "export.json"
        path.write_text(json.dumps({"transactions": [sample_ledger_record]}))

        assert len(load_ledger(path)) == 1

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_ledger(temp_dir / "nope.json")

    def test_invalid_json_raises_parse_error(self, temp_dir):
        path = temp_dir / "export.json"
        path.write_text("{not json")

        with pytest.raises(ParseError):
            load_ledger(path)

    def test_scalar_document_raises_parse_error(self, temp_dir):
        path = temp_dir / "export.json"
        path.write_text("42")

        with pytest.raises(ParseError):
            load_ledger(path)

    def test_object_without_transactions_key_raises_parse_error(self, temp_dir, sample_ledger_record):
        path = temp_dir / "export.json"
        path.write_text(json.dumps({"records": [sample_ledger_record]}))

        with pytest.raises(ParseError, match="records"):
            load_ledger(path)

    def test_transactions_not_a_list_raises_parse_error(self, temp_dir, sample_ledger_record):
        path = temp_dir / "export.json"
        path.write_text(json.dumps({"transactions": sample_ledger_record}))

        with pytest.raises(ParseError):
            load_ledger(path)
