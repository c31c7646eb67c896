"""Tests for capture record parsing and the capture stream reader."""

import math

import pytest
from pydantic import ValidationError

from secretgrab.kernel.capture import CaptureRecord, CaptureSession, read_captures


class Holder:
    def __init__(self, version):
        self.version = version


class TestCaptureRecord:
    """Tests for permissive parsing of untyped captures."""

    def test_full_record(self):
        record = CaptureRecord.from_raw({"secret": "abc", "version": 3, "obj": {"version": 4}})
        assert record == CaptureRecord(secret="abc", version=3, nested_version=4)

    def test_wrong_types_become_absent(self):
        record = CaptureRecord.from_raw({"secret": 5, "version": "x", "obj": "str"})
        assert record == CaptureRecord()

    def test_bool_and_non_finite_versions_become_absent(self):
        assert CaptureRecord.from_raw({"version": True}).version is None
        assert CaptureRecord.from_raw({"version": math.inf}).version is None
        assert CaptureRecord.from_raw({"version": math.nan}).version is None

    def test_non_mapping_capture_is_empty(self):
        assert CaptureRecord.from_raw(None) == CaptureRecord()
        assert CaptureRecord.from_raw(["secret", 1]) == CaptureRecord()

    def test_nested_version_from_live_object_is_read_at_parse_time(self):
        holder = Holder(version=1)
        raw = {"secret": "abc", "obj": holder}
        holder.version = 6
        assert CaptureRecord.from_raw(raw).nested_version == 6

    def test_throwing_nested_object_is_tolerated(self):
        class Boom:
            @property
            def version(self):
                raise RuntimeError("boom")

        assert CaptureRecord.from_raw({"secret": "abc", "obj": Boom()}).nested_version is None

    def test_record_passes_through(self):
        record = CaptureRecord(secret="abc", version=1)
        assert CaptureRecord.from_raw(record) is record

    def test_records_are_frozen(self):
        record = CaptureRecord(secret="abc", version=1)
        with pytest.raises(ValidationError):
            record.secret = "other"

    def test_lone_surrogates_are_replaced(self):
        assert CaptureRecord.from_raw({"secret": "a\ud800b"}).secret == "a\ufffdb"
        assert CaptureRecord(secret="\udc00").secret == "\ufffd"

    def test_split_surrogate_pair_is_joined(self):
        assert CaptureRecord(secret="\ud83d\ude00").secret == "\U0001f600"

    def test_to_raw_keeps_page_shape(self):
        record = CaptureRecord(secret="abc", version=2, nested_version=3)
        assert record.to_raw() == {"secret": "abc", "version": 2, "obj": {"version": 3}}
        assert CaptureRecord().to_raw() == {}
        assert CaptureRecord.from_raw(record.to_raw()) == record


class TestReadCaptures:
    """Tests for point-in-time snapshot reads."""

    def test_absent_list_reads_as_empty(self):
        assert read_captures(None) == ()
        assert read_captures(CaptureSession()) == ()
        assert read_captures([]) == ()

    def test_preserves_write_order(self):
        raw = [{"secret": "b", "version": 2}, {"secret": "a", "version": 1}]
        assert [r.secret for r in read_captures(raw)] == ["b", "a"]

    def test_read_does_not_mutate_session(self):
        session = CaptureSession()
        session.append({"secret": "abc", "version": 1})
        first = read_captures(session)
        second = read_captures(session)
        assert first == second
        assert len(session) == 1

    def test_later_captures_are_invisible_to_earlier_snapshot(self):
        session = CaptureSession()
        session.append({"secret": "abc", "version": 1})
        snapshot = session.snapshot()
        session.append({"secret": "def", "version": 2})
        assert len(snapshot) == 1
        assert len(session.snapshot()) == 2

    def test_snapshot_is_a_copy(self):
        session = CaptureSession()
        session.append({"secret": "abc", "version": 1})
        snapshot = session.snapshot()
        snapshot[0]["secret"] = "tampered"
        assert session.snapshot()[0]["secret"] == "abc"
