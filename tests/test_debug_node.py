import dataclasses

import pytest

from schematize import ROOT, DiagnosticNode


def test_root_defaults():
    assert ROOT.path is None
    assert ROOT.is_valid is True
    assert ROOT.reason is None
    assert ROOT.is_root


def test_child_appends_segments():
    node = ROOT.child("person").child("age")
    assert node.path == "person.age"
    assert node.segments() == ("person", "age")
    assert not node.is_root


def test_child_keeps_current_verdict():
    rejected = DiagnosticNode(path="person").invalidate("bad")
    child = rejected.child("name")
    assert child.path == "person.name"
    assert child.is_valid is False
    assert child.reason == "bad"


def test_validate_and_invalidate_keep_path():
    node = ROOT.child("person")
    accepted = node.validate("looks fine")
    rejected = node.invalidate("age must be positive")

    assert accepted.path == rejected.path == "person"
    assert accepted.is_valid and accepted.reason == "looks fine"
    assert not rejected.is_valid and rejected.reason == "age must be positive"
    # the original node is untouched
    assert node.reason is None and node.is_valid


def test_nodes_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ROOT.path = "x"


def test_empty_path_is_root():
    assert DiagnosticNode(path="").is_root
    assert DiagnosticNode(path="").child("a").path == "a"


def test_str_rendering():
    assert str(ROOT.child("person").invalidate("missing")) == "person: missing"
    assert str(ROOT.invalidate("not an object")) == "<root>: not an object"


def test_value_equality():
    assert ROOT.child("a").validate("ok") == DiagnosticNode(path="a", is_valid=True, reason="ok")
