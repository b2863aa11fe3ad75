"""Tests for the Tag taxonomy and error values."""

import pytest

from linky.api.link.FragmentError import FragmentError
from linky.api.link.LinkError import LinkError
from linky.api.link.Record import Record
from linky.api.link.Tag import Tag
from linky.api.link.Targets import Targets


def test_tag_display_is_mute_token():
    assert str(Tag.EMPTY_FRAGMENT) == "fragment-empty"
    assert f"{Tag.NO_FRAGMENT}" == "fragment-not-found"
    assert Tag("redirect-not-followed") is Tag.REDIRECT


def test_tag_minimum_membership():
    tokens = {tag.value for tag in Tag}
    assert {"fetch-failure", "redirect-not-followed", "fragment-empty", "fragment-not-found", "parse-error"} <= tokens


def test_tags_work_as_set_members():
    silence = {Tag.EMPTY_FRAGMENT, Tag.EMPTY_FRAGMENT, Tag.REDIRECT}
    assert len(silence) == 2
    assert Tag("fragment-empty") in silence


def test_link_error_chain():
    root = FileNotFoundError("gone.md")
    error = LinkError("docs/gone.md", "reading file", root)

    assert str(error) == "reading file: docs/gone.md"
    assert error.base == "docs/gone.md"
    assert error.cause is root
    assert error.__cause__ is root


def test_link_error_without_cause():
    assert LinkError("a.md", "resolving fragment").cause is None


def test_nested_link_errors():
    inner = LinkError("b.md", "resolving fragment", FragmentError("x"))
    outer = LinkError("a.md", "checking", inner)

    chain = []
    current = outer
    while current is not None:
        chain.append(str(current))
        current = current.__cause__

    assert chain == ["checking: a.md", "resolving fragment: b.md", "fragment not found: #x"]


def test_targets_failure_requires_tag_and_error():
    with pytest.raises(ValueError):
        Targets(tag=Tag.NO_DOCUMENT)
    assert Targets.found(["a", "a", "b"]).ids == frozenset({"a", "b"})


def test_record_report_line():
    assert Record("docs/a.md", 3, "b.md").report_line() == "docs/a.md:3:  b.md"
    assert Record("docs/a.md", 3, "b.md#", Tag.EMPTY_FRAGMENT).report_line() == "docs/a.md:3: fragment-empty b.md#"
