"""
Tests for spice_config/config/document.py
"""

import pytest

from spice_config.config.document import (
    ROOT_SECTION,
    ConfigDocument,
    preprocess,
)
from spice_config.core.exceptions import ConfigParseError, MissingSectionError


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(ConfigParseError):
        ConfigDocument.read(tmp_path / "nope.ini")


def test_read_malformed_file_raises(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[Setting]\nnot a key value line\n", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        ConfigDocument.read(path)


def test_keys_keep_case_and_percent_signs(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[AdditionalOptions]\nfastUser_switching = 1\nextensions = 100%.js\n", encoding="utf-8")

    doc = ConfigDocument.read(path)

    assert doc.get("AdditionalOptions", "fastUser_switching") == "1"
    assert doc.get("AdditionalOptions", "fastuser_switching") is None
    assert doc.get("AdditionalOptions", "extensions") == "100%.js"


def test_default_section_is_ordinary(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[DEFAULT]\ninject_css = 0\n[Setting]\n", encoding="utf-8")

    doc = ConfigDocument.read(path)

    assert doc.sections() == ["DEFAULT", "Setting"]
    assert not doc.has_key("Setting", "inject_css")


def test_get_section_missing_is_fatal(tmp_path):
    doc = ConfigDocument(tmp_path / "config.ini")
    with pytest.raises(MissingSectionError) as info:
        doc.get_section("Setting")
    assert info.value.section == "Setting"


def test_section_proxy_mutation_is_visible(tmp_path):
    doc = ConfigDocument(tmp_path / "config.ini")
    doc.add_section("Setting")
    doc.get_section("Setting")["current_theme"] = "Dribbblish"
    assert doc.get("Setting", "current_theme") == "Dribbblish"


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.ini"
    doc = ConfigDocument(path)
    doc.add_section("Setting")
    doc.set("Setting", "spotify_path", r"C:\Users\me\AppData\Roaming\Spotify")
    doc.set("Setting", "prefs_path", "")
    doc.add_section("Backup", comment="DO NOT CHANGE!")
    doc.set("Backup", "version", "")
    doc.add_section("Mine")
    doc.set("Mine", "notes", "spaced  value")

    doc.write()
    loaded = ConfigDocument.read(path)

    assert loaded.as_dict() == doc.as_dict()
    assert loaded.comment("Backup") == "DO NOT CHANGE!"
    assert loaded.get_path() == path


def test_render_places_comment_above_header(tmp_path):
    doc = ConfigDocument(tmp_path / "config.ini")
    doc.add_section("Backup", comment="DO NOT CHANGE!")
    doc.set("Backup", "version", "")

    assert doc.render() == "; DO NOT CHANGE!\n[Backup]\nversion =\n\n"


def test_section_comments_skip_blank_lines():
    text = "# top\n\n; first\n# second\n[Backup]\nversion =\n[Setting]\n"
    assert preprocess(text)[1] == {"Backup": "top\nfirst\nsecond"}


def test_membership_and_iteration(tmp_path):
    doc = ConfigDocument(tmp_path / "config.ini")
    doc.add_section("Setting")
    doc.add_section("Mine")

    assert "Setting" in doc
    assert "Other" not in doc
    assert list(doc) == ["Setting", "Mine"]


def test_key_comments_round_trip(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[Custom]\n; explain foo\n# more\nfoo = bar\nbaz = 1\n", encoding="utf-8")

    doc = ConfigDocument.read(path)

    assert doc.key_comment("Custom", "foo") == "explain foo\nmore"
    assert doc.key_comment("Custom", "baz") is None
    assert doc.render() == "[Custom]\n; explain foo\n; more\nfoo = bar\nbaz = 1\n\n"


def test_blank_line_keeps_pending_comment():
    text = "; about setting\n\n[Setting] ; trailing\n; about theme\n\ncurrent_theme = x\n"
    _, sections, keys = preprocess(text)

    assert sections == {"Setting": "about setting"}
    assert keys == {("Setting", "current_theme"): "about theme"}


def test_header_with_inline_comment(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[Setting] ; main\ncurrent_theme = x\n", encoding="utf-8")

    assert ConfigDocument.read(path).get("Setting", "current_theme") == "x"


def test_indented_keys_are_not_continuations(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[Setting]\nspotify_path = /opt/spotify\n  current_theme = Dribbblish\n\t[Mine]\n\tk = v\n",
        encoding="utf-8",
    )

    doc = ConfigDocument.read(path)

    assert doc.get("Setting", "spotify_path") == "/opt/spotify"
    assert doc.get("Setting", "current_theme") == "Dribbblish"
    assert doc.get("Mine", "k") == "v"


def test_keys_before_first_section_are_kept(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("; lead\ntop = 1\n[Setting]\ncurrent_theme = Dribbblish\n", encoding="utf-8")

    doc = ConfigDocument.read(path)

    assert doc.root_items() == {"top": "1"}
    assert doc.sections() == ["Setting"]
    assert ROOT_SECTION not in doc
    assert doc.get("Setting", "current_theme") == "Dribbblish"
    assert doc.render() == "; lead\ntop = 1\n\n[Setting]\ncurrent_theme = Dribbblish\n\n"


def test_line_breaks_in_values_are_folded(tmp_path):
    doc = ConfigDocument(tmp_path / "config.ini")
    doc.add_section("Mine")
    doc.set("Mine", "notes", "line one\nline two")

    assert "notes = line one line two\n" in doc.render()
