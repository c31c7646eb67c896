"""Tests for artifact serialization and persistence."""

import json

import pytest

from secretgrab._internal.canonical_json import compact_dumps, pretty_dumps
from secretgrab._internal.io.artifact_sink import (
    ARTIFACT_FILENAMES,
    render_artifacts,
    write_artifacts,
)
from secretgrab.api import summarise
from secretgrab.kernel.encoder import encode_secret
from secretgrab.kernel.formatter import format_secrets
from secretgrab.kernel.models import SecretArtifacts


def test_compact_dumps_keeps_insertion_order():
    assert compact_dumps({"version": 2, "secret": "x"}) == '{"version":2,"secret":"x"}'
    assert compact_dumps({"10": [1], "9": [2]}) == '{"10":[1],"9":[2]}'


def test_dumps_are_utf8():
    assert compact_dumps(["é"]) == '["é"]'
    assert pretty_dumps(["é"]) == '[\n  "é"\n]'


def test_render_covers_every_artifact():
    rendered = render_artifacts(summarise([{"secret": "abc", "version": 1}]))
    assert tuple(rendered) == ARTIFACT_FILENAMES
    for content in rendered.values():
        json.loads(content)
        assert not content.endswith("\n")


def test_dict_artifact_is_in_ascending_version_order():
    rendered = render_artifacts(summarise([
        {"secret": "b", "version": 10},
        {"secret": "a", "version": 9},
    ]))
    assert rendered["secretDict.json"] == '{"9":[97],"10":[98]}'


def test_write_creates_nested_directory(tmp_path):
    out = tmp_path / "deep" / "secrets"
    written = write_artifacts(summarise([{"secret": "abc", "version": 1}]), out)
    assert sorted(p.name for p in out.iterdir()) == sorted(ARTIFACT_FILENAMES)
    for path in written.values():
        assert path.read_text(encoding="utf-8").endswith("\n")


def test_write_overwrites_previous_run(tmp_path):
    write_artifacts(summarise([{"secret": "old", "version": 1}]), tmp_path)
    write_artifacts(summarise([{"secret": "new", "version": 1}]), tmp_path)
    assert json.loads((tmp_path / "secrets.json").read_text(encoding="utf-8")) == [
        {"version": 1, "secret": "new"}
    ]


def test_unencodable_artifact_leaves_no_files(tmp_path):
    # Built past CaptureRecord, so the lone surrogate is never replaced
    formatted = format_secrets({1: "a\ud800b"})
    artifacts = SecretArtifacts(formatted=formatted, encoded=[encode_secret(formatted.latest)])
    out = tmp_path / "secrets"
    with pytest.raises(UnicodeEncodeError):
        write_artifacts(artifacts, out)
    assert not out.exists()
