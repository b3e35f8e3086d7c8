"""Tests for target wrapping and hook detection."""

import pytest

from ablegate.contracts import Scope
from ablegate.target import Target, default_stub


class Document:
    def viewable_by(self, user):
        return True

    def updatable_by(self, user, context):
        return True

    def publishable_by(self, user, ctx):
        return True

    def releasable_by(self, user, strict=False):
        return not strict

    def creatable_by(self, user, *, context):
        return True

    @default_stub
    def destroyable_by(self, user):
        return False

    @classmethod
    def indexable_by(cls, user):
        return True

    @staticmethod
    def policy_check(user, predicate):
        return False

    listable_by = "not callable"

    def broken_by(self):
        return True


def test_wrap_infers_scope() -> None:
    doc = Document()
    assert Target.wrap(doc).scope is Scope.INSTANCE
    assert Target.wrap(Document).scope is Scope.TYPE
    wrapped = Target.instance(doc)
    assert Target.wrap(wrapped) is wrapped
    assert Target.unwrap(wrapped) is doc
    assert Target.unwrap(doc) is doc


def test_of_type_requires_a_class() -> None:
    with pytest.raises(TypeError):
        Target.of_type(Document())


def test_instance_hook_context_modes() -> None:
    target = Target.instance(Document())
    assert target.hook("viewable_by", arity=1).context_mode == "none"
    assert target.hook("updatable_by", arity=1).context_mode == "keyword"
    assert target.hook("publishable_by", arity=1).context_mode == "positional"
    assert target.hook("creatable_by", arity=1).context_mode == "keyword"


def test_missing_stub_and_malformed_hooks_are_absent() -> None:
    target = Target.instance(Document())
    assert target.hook("archivable_by", arity=1) is None
    assert target.hook("destroyable_by", arity=1) is None
    assert target.hook("listable_by", arity=1) is None
    assert target.hook("broken_by", arity=1) is None


def test_type_scope_ignores_instance_methods() -> None:
    target = Target.of_type(Document)
    assert target.hook("viewable_by", arity=1) is None
    assert target.hook("indexable_by", arity=1) is not None
    assert target.hook("policy_check", arity=2) is not None


def test_hook_call_delivers_context() -> None:
    seen = {}

    class Probe:
        def viewable_by(self, user, context):
            seen["args"] = (user, dict(context))
            return True

    hook = Target.instance(Probe()).hook("viewable_by", arity=1)
    assert hook("alice", context={"k": "v"}) is True
    assert seen["args"] == ("alice", {"k": "v"})


def test_optional_parameter_does_not_receive_context() -> None:
    hook = Target.instance(Document()).hook("releasable_by", arity=1)
    assert hook.context_mode == "none"
    assert hook("alice", context={"strict": True}) is True


def test_failing_attribute_lookup_is_absent() -> None:
    class Lazy:
        @property
        def viewable_by(self):
            raise RuntimeError("lazy load failed")

    assert Target.instance(Lazy()).hook("viewable_by", arity=1) is None
