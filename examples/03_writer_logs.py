from __future__ import annotations

from _infra import banner, sample_orders

from kungfu import Error, Ok

from semigroups import Sum, reduce_all_w


def main() -> None:
    banner("03_writer_logs: traced reduction (value + log)")

    totals = [Sum(o.quantity * o.price) for o in sample_orders()]
    wr = reduce_all_w(totals, of=Sum)
    match wr.result:
        case Ok(total):
            print(f"total: {total.value}")
        case Error(err):
            print(f"error: {err!r}")
    for line in wr.log:
        print(f"  {line}")


if __name__ == "__main__":
    main()
