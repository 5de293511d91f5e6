"""Default item-kind equivalence."""

from __future__ import annotations

from invscroll.api.host import ItemStack


def are_items_of_same_kind(first: ItemStack, second: ItemStack) -> bool:
    """Return whether two stacks hold the same kind of item.

    Empty stacks only match other empty stacks.
    """
    if first.is_empty or second.is_empty:
        return first.is_empty and second.is_empty
    return first.kind == second.kind
