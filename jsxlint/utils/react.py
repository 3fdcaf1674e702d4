"""Helpers for reading React component markup."""

from __future__ import annotations

from typing import Optional

from jsxlint.syntax.nodes import AttributeItem, AttributeValue, JSXAttribute


def get_prop_value(item: AttributeItem) -> Optional[AttributeValue]:
    """Return the value of a JSX attribute.

    Spread attributes (``{...props}``) and value-less attributes (``disabled``)
    both yield ``None``.
    """

    if isinstance(item, JSXAttribute):
        return item.value
    return None
