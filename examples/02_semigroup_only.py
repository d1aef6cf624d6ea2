from __future__ import annotations

from _infra import banner, sample_orders

from kungfu import Error, Ok

from semigroups import Max, Min, fold_map, try_reduce_all


def main() -> None:
    banner("02_semigroup_only: Min/Max have no identity")

    orders = sample_orders()
    cheapest = fold_map(orders, lambda o: Min(o.price))
    biggest = fold_map(orders, lambda o: Max(o.quantity))
    print(f"cheapest: {cheapest.value}, biggest: {biggest.value}")

    match try_reduce_all([], of=Min):
        case Ok(value):
            print(f"unexpected: {value!r}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    main()
