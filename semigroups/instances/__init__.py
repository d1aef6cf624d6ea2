from .numeric import Product, Sum
from .point import Point2D
from .selection import First, Last, Max, Min

__all__ = (
    # Monoids
    "Point2D",
    "Product",
    "Sum",
    # Semigroups
    "First",
    "Last",
    "Max",
    "Min",
)
