from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Order:
    sku: str
    quantity: int
    price: int


def sample_orders() -> list[Order]:
    return [
        Order(sku="apple", quantity=3, price=2),
        Order(sku="pear", quantity=1, price=5),
        Order(sku="plum", quantity=6, price=1),
    ]


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
