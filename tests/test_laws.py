from dataclasses import dataclass

import pytest
from kungfu import Error, Ok

from semigroups import LawViolation, Log, Max, Point2D, Sum, laws


@dataclass(frozen=True)
class Diff:
    """Subtraction: has a right identity but is not a monoid."""

    value: int

    @classmethod
    def identity(cls):
        return cls(0)

    def combine(self, other):
        return Diff(self.value - other.value)


def expect_ok(result):
    match result:
        case Ok(_):
            return
        case Error(err):
            pytest.fail(f"unexpected violation: {err}")


def expect_violation(result, law):
    match result:
        case Ok(_):
            pytest.fail(f"expected {law} violation")
        case Error(err):
            assert isinstance(err, LawViolation)
            assert err.law == law
            return err


def test_lawful_monoids_pass():
    expect_ok(laws.check_monoid(Point2D, [Point2D(1, 2), Point2D(-3, 0), Point2D(0, 7)]))
    expect_ok(laws.check_monoid(Sum, [Sum(1), Sum(-5), Sum(9)]))
    expect_ok(laws.check_monoid(Log, [Log.of("a"), Log(), Log.of("b", "c")]))


def test_lawful_semigroup_passes():
    expect_ok(laws.check_semigroup([Max(1), Max(5), Max(3)]))


def test_associativity_violation_reports_operands():
    err = expect_violation(laws.check_associativity(Diff(1), Diff(2), Diff(3)), laws.ASSOCIATIVITY)
    assert err.operands == (Diff(1), Diff(2), Diff(3))
    assert "associativity" in str(err)


def test_left_identity_violation():
    expect_violation(laws.check_left_identity(Diff, Diff(5)), laws.LEFT_IDENTITY)


def test_right_identity_holds_for_subtraction():
    expect_ok(laws.check_right_identity(Diff, Diff(5)))


def test_check_monoid_stops_at_first_violation():
    expect_violation(laws.check_monoid(Diff, [Diff(5), Diff(2)]), laws.LEFT_IDENTITY)


def test_check_semigroup_finds_counterexample():
    expect_violation(laws.check_semigroup([Diff(1), Diff(2)]), laws.ASSOCIATIVITY)


def test_empty_samples_trivially_pass():
    expect_ok(laws.check_semigroup([]))
    expect_ok(laws.check_monoid(Point2D, []))
