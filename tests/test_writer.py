import pytest
from kungfu import Error, Ok

from semigroups import EmptyInputError, Log, Min, Point2D, Sum, WriterResult, reduce_all_w


def test_monoid_logs_identity_and_each_step():
    wr = reduce_all_w([Sum(1), Sum(2)], of=Sum)
    assert wr.unwrap() == Sum(3)
    assert list(wr.log) == [
        "identity() = Sum(value=0)",
        "Sum(value=0) <> Sum(value=1) = Sum(value=1)",
        "Sum(value=1) <> Sum(value=2) = Sum(value=3)",
    ]


def test_semigroup_logs_one_entry_per_combine():
    wr = reduce_all_w([Min(3), Min(1), Min(2)])
    assert wr.is_ok
    assert wr.unwrap() == Min(1)
    assert len(wr.log) == 2


def test_right_fold_logs_from_the_right():
    wr = reduce_all_w([Point2D(1, 0), Point2D(0, 1)], direction="right")
    assert wr.unwrap() == Point2D(1, 1)
    assert wr.log == ["Point2D(x=1, y=0) <> Point2D(x=0, y=1) = Point2D(x=1, y=1)"]


def test_empty_monoid_logs_only_the_identity():
    wr = reduce_all_w([], of=Point2D)
    assert wr.unwrap() == Point2D(0, 0)
    assert wr.log == ["identity() = Point2D(x=0, y=0)"]


def test_empty_without_identity_is_an_error_with_empty_log():
    wr = reduce_all_w([], of=Min)
    assert not wr.is_ok
    assert wr.log == Log()
    match wr.result:
        case Ok(value):
            pytest.fail(f"expected an error, got {value!r}")
        case Error(err):
            assert isinstance(err, EmptyInputError)
    with pytest.raises(EmptyInputError):
        wr.unwrap()


def test_writer_result_repr_and_fields():
    wr = WriterResult(Ok(1), Log.of("x"))
    assert wr.log == ["x"]
    assert wr.unwrap() == 1
    assert repr(wr).startswith("WriterResult(")


def test_writer_result_with_non_exception_error():
    wr = WriterResult(Error("boom"), Log())
    with pytest.raises(ValueError, match="boom"):
        wr.unwrap()
