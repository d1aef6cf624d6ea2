from .fold_map import fold_map
from .reduce import combine, reduce_all, reduce_all_w, reduceM, try_reduce_all
from .times import combine_n

__all__ = (
    # Semigroup / Monoid
    "combine",
    "combine_n",
    "fold_map",
    "reduce_all",
    "try_reduce_all",
    # Writer
    "reduce_all_w",
    # Generic
    "reduceM",
)
