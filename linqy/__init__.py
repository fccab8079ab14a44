r"""
'    .__  .__
'    |  | |__| ____   ______ ___.__.
'    |  | |  |/    \ / ____/<   |  |
'    |  |_|  |   |  < <_|  | \___  |
'    |____/__|___|  /\__   | / ____|
'                 \/    |__| \/
"""
import logging

# expose the stateless operators
from .extensions.terminal import any_, all_, first_or_default, find_index, count
from .extensions.core import (
    where,
    select,
    select_many,
    distinct,
    take,
    skip,
    order_by,
    order_by_descending
)
from .extensions.stats import sum_, min_, max_, average
from .extensions.grouping import group_by
from .extensions.join import join, group_join
from .coercion import safe_to_double, NumericFormat, DEFAULT_FORMAT

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    linqy,
    P
)

from .types import MISSING

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "any_",
    "all_",
    "first_or_default",
    "find_index",
    "count",
    "where",
    "select",
    "select_many",
    "distinct",
    "take",
    "skip",
    "order_by",
    "order_by_descending",
    "sum_",
    "min_",
    "max_",
    "average",
    "group_by",
    "join",
    "group_join",
    "safe_to_double",
    "NumericFormat",
    "DEFAULT_FORMAT",
    "Enumerable",
    "OrderedEnumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "linqy",
    "P",
    "MISSING"
]
