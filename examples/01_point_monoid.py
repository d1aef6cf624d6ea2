from __future__ import annotations

from _infra import banner

from semigroups import Point2D, combine, reduce_all


def main() -> None:
    banner("01_point_monoid: combine + identity + reduce_all")

    a = Point2D(1, 2)
    b = Point2D(2, 3)

    print(combine(a, b))                              # Point2D(x=3, y=5)
    print(combine(Point2D(5, -1), Point2D.identity()))  # Point2D(x=5, y=-1)
    print(reduce_all([a, b], of=Point2D))             # Point2D(x=3, y=5)
    print(reduce_all([], of=Point2D))                 # Point2D(x=0, y=0)


if __name__ == "__main__":
    main()
