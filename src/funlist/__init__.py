"""funlist: immutable singly-linked lists with functional combinators."""

from __future__ import annotations

from funlist.ops import (
    concat,
    cons,
    cons_list,
    contains,
    drop,
    filter_list,
    flat_map,
    fold_left,
    fold_right,
    fold_right_recursive,
    from_sequence,
    get,
    head,
    length,
    map_list,
    reverse,
    tail,
    take,
    to_list,
    zip_with,
)
from funlist.option import (
    ABSENT,
    Absent,
    Option,
    Some,
    flat_map_option,
    get_or_else,
    is_present,
    map_option,
)
from funlist.types import EMPTY, ConsList, Empty, Node, is_cons_list

__all__ = [
    "ABSENT",
    "EMPTY",
    "Absent",
    "ConsList",
    "Empty",
    "Node",
    "Option",
    "Some",
    "concat",
    "cons",
    "cons_list",
    "contains",
    "drop",
    "filter_list",
    "flat_map",
    "flat_map_option",
    "fold_left",
    "fold_right",
    "fold_right_recursive",
    "from_sequence",
    "get",
    "get_or_else",
    "head",
    "is_cons_list",
    "is_present",
    "length",
    "map_list",
    "map_option",
    "reverse",
    "tail",
    "take",
    "to_list",
    "zip_with",
]
