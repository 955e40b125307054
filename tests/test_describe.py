"""Tests for introspection: descriptions propagate only when every part has one."""

from __future__ import annotations

import pytest

from mockpred import (
    AndMatcher,
    ExactMatcher,
    NotMatcher,
    OrMatcher,
    SinglePredicate,
    XorMatcher,
    and_,
    describe,
    not_,
    or_,
)
from mockpred.http import header_exists, query_param, query_param_is_missing
from mockpred.testing import Const, DictInput, Opaque

BINARY = [AndMatcher, OrMatcher, XorMatcher]


class TestBinaryCombinators:
    @pytest.mark.parametrize("combinator", BINARY)
    def test_both_describable(self, combinator: type) -> None:
        text = describe(combinator(Const(True, "a"), Const(False, "b")))
        assert text
        assert "a" in text and "b" in text

    @pytest.mark.parametrize("combinator", BINARY)
    def test_only_left_describable(self, combinator: type) -> None:
        assert describe(combinator(Const(True), Opaque(False))) is None

    @pytest.mark.parametrize("combinator", BINARY)
    def test_only_right_describable(self, combinator: type) -> None:
        assert describe(combinator(Opaque(True), Const(False))) is None

    @pytest.mark.parametrize("combinator", BINARY)
    def test_neither_describable(self, combinator: type) -> None:
        assert describe(combinator(Opaque(True), Opaque(False))) is None


class TestNotCombinator:
    def test_with_description(self) -> None:
        assert describe(NotMatcher(Const(True, "a"))) == "not(a)"

    def test_without_description(self) -> None:
        assert describe(NotMatcher(Opaque(True))) is None


class TestDescribe:
    def test_format(self) -> None:
        m = or_(and_(Const(True, "a"), Const(True, "b")), not_(Const(False, "c")))
        assert describe(m) == "or(and(a, b), not(c))"

    def test_opaque_leaf_hides_whole_tree(self) -> None:
        m = or_(and_(Const(True, "a"), Opaque(True)), Const(False, "c"))
        assert describe(m) is None

    def test_objects_without_describe(self) -> None:
        assert describe(object()) is None

    def test_empty_description_counts_as_missing(self) -> None:
        class Blank:
            def evaluate(self, request: object, /) -> bool:
                return True

            def describe(self) -> str:
                return ""

        assert describe(Blank()) is None
        assert describe(and_(Blank(), Const(True))) is None

    def test_single_predicate(self) -> None:
        p = SinglePredicate(DictInput("name"), ExactMatcher("alice"))
        assert describe(p) == "dict['name'] == 'alice'"

    def test_http_primitives(self) -> None:
        m = and_(header_exists("x-for-testing-purposes"), query_param("page", "1"))
        assert describe(m) == (
            "and(header['x-for-testing-purposes'] exists, query['page'] == '1')"
        )
        assert describe(query_param_is_missing("page")) == "not(query['page'] exists)"

    def test_description_does_not_affect_matching(self) -> None:
        assert and_(Opaque(True), Const(True)).evaluate({}) is True
        assert and_(Const(True, "a"), Const(True, "b")).evaluate({}) is True
