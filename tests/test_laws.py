"""Tests for laws as data and law-set combination."""

import pytest

from lawful import ArityError, Equal, Law, LawCheckConfig, LawReport, LawResult, Laws, LawViolation
from lawful.instances import INT_SUM, LAWS_CONCAT
from lawful.laws import (
    ASSOCIATIVE_LAWS,
    IDENTITY_LAWS,
    associativity_law,
    law,
    left_identity_law,
    right_identity_law,
)
from fakes import INT_SUBTRACT, broken


@law("is_positive", 1)
def is_positive(eq, instance, a):
    return a > 0


ALWAYS = Law("always", 0, lambda eq, instance: True)
NEVER = Law("never", 0, lambda eq, instance: (False, "never holds"))


class TestLaw:
    def test_decorator_builds_law(self) -> None:
        assert isinstance(is_positive, Law)
        assert is_positive.name == "is_positive"
        assert is_positive.arity == 1

    def test_check_success(self) -> None:
        result = left_identity_law.check(INT_SUM, 5)
        assert result == LawResult.success("left_identity_law", (5,))

    def test_check_failure_explains(self) -> None:
        result = left_identity_law.check(INT_SUBTRACT, 5)
        assert not result.passed
        assert result.samples == (5,)
        assert result.message == "-5 is not equal to 5"

    def test_check_failure_without_explanation(self) -> None:
        result = is_positive.check(None, -1)
        assert not result.passed
        assert "(-1,)" in result.message

    def test_wrong_sample_count(self) -> None:
        with pytest.raises(ArityError) as info:
            associativity_law.check(INT_SUM, 1, 2)
        assert info.value.expected == 3
        assert info.value.actual == 2

    def test_raising_predicate_is_a_failure(self) -> None:
        result = Law("broken", 1, broken).check(INT_SUM, 1)
        assert not result.passed
        assert result.message == "raised RuntimeError: boom"

    def test_custom_equality(self) -> None:
        modulo = Equal.make(lambda l, r: l % 10 == r % 10)
        assert not left_identity_law.check(INT_SUBTRACT, 5).passed
        assert left_identity_law.check(INT_SUBTRACT, 5, equal=modulo).passed

    def test_negative_arity_rejected(self) -> None:
        with pytest.raises(ValueError):
            law("bad", -1)

    def test_direct_construction_rejects_negative_arity(self) -> None:
        with pytest.raises(ValueError):
            Law("bad", -1, lambda eq, instance: True)

    def test_arity_shorthands(self) -> None:
        @Law.law1("unary")
        def unary(eq, instance, a):
            return True

        @Law.law2("binary")
        def binary(eq, instance, a, b):
            return True

        @Law.law3("ternary")
        def ternary(eq, instance, a, b, c):
            return True

        assert [unary.arity, binary.arity, ternary.arity] == [1, 2, 3]
        assert ternary.name == "ternary"
        assert ternary.check(INT_SUM, 1, 2, 3).passed


class TestLaws:
    def test_law_plus_law(self) -> None:
        combined = left_identity_law + right_identity_law
        assert isinstance(combined, Laws)
        assert combined.names == ["left_identity_law", "right_identity_law"]
        assert combined == IDENTITY_LAWS

    def test_combination_is_associative(self) -> None:
        a, b, c = Laws.of(ALWAYS), Laws.of(NEVER), ASSOCIATIVE_LAWS
        assert (a + b) + c == a + (b + c)

    def test_empty_is_identity(self) -> None:
        assert Laws.empty() + IDENTITY_LAWS == IDENTITY_LAWS
        assert IDENTITY_LAWS + Laws.empty() == IDENTITY_LAWS
        assert len(Laws.empty()) == 0

    def test_laws_form_an_identity(self) -> None:
        samples = [Laws.empty(), Laws.of(ALWAYS), IDENTITY_LAWS]
        (IDENTITY_LAWS + ASSOCIATIVE_LAWS).check(LAWS_CONCAT, samples).raise_for_failures()

    def test_empty_passes_vacuously(self) -> None:
        report = Laws.empty().check(INT_SUM, [1, 2])
        assert report.passed
        assert report.checked == 0

    def test_no_samples_passes_vacuously(self) -> None:
        assert IDENTITY_LAWS.check(INT_SUBTRACT, []).passed

    def test_check_runs_every_combination(self) -> None:
        report = (IDENTITY_LAWS + ASSOCIATIVE_LAWS).check(INT_SUM, [1, 2])
        assert len(report.for_law("left_identity_law")) == 2
        assert len(report.for_law("associativity_law")) == 8
        assert report.checked == 12

    def test_passes_iff_all_laws_pass(self) -> None:
        assert not (Laws.of(ALWAYS) + NEVER).check(None, []).passed
        assert (Laws.of(ALWAYS) + ALWAYS).check(None, []).passed

    def test_iteration(self) -> None:
        assert list(IDENTITY_LAWS) == [left_identity_law, right_identity_law]

    def test_fail_fast(self) -> None:
        laws = IDENTITY_LAWS + ASSOCIATIVE_LAWS
        report = laws.check(INT_SUBTRACT, [1, 2], config=LawCheckConfig(fail_fast=True))
        assert report.checked == 1
        assert not report.passed

    def test_max_examples(self) -> None:
        report = ASSOCIATIVE_LAWS.check(INT_SUM, [1, 2, 3], config=LawCheckConfig(max_examples=5))
        assert report.checked == 5

    def test_invalid_max_examples(self) -> None:
        with pytest.raises(ValueError):
            LawCheckConfig(max_examples=0)


class TestLawReport:
    def test_raise_for_failures(self) -> None:
        report = IDENTITY_LAWS.check(INT_SUBTRACT, [1, 2])
        with pytest.raises(LawViolation) as info:
            report.raise_for_failures()
        assert len(info.value.failures) == 2
        assert "left_identity_law" in str(info.value)

    def test_passing_report_does_not_raise(self) -> None:
        IDENTITY_LAWS.check(INT_SUM, [1, 2]).raise_for_failures()

    def test_reports_add(self) -> None:
        left = IDENTITY_LAWS.check(INT_SUM, [1])
        right = ASSOCIATIVE_LAWS.check(INT_SUBTRACT, [1])
        combined = left + right
        assert combined.checked == 3
        assert not combined.passed

    def test_serializes(self) -> None:
        report = LawReport(results=[LawResult.failure("never", "never holds", (1, "a"))])
        data = report.model_dump()
        assert data["results"][0]["law"] == "never"
        assert data["results"][0]["samples"] == (1, "a")
