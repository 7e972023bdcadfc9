"""Module reference extraction.

A single-pass textual heuristic, not a parser: find the first top-level
module declaration in a file, take the first segment of its name as the
namespace root, then collect every reference to a module under that same
root. That is enough to pick out files conventionally grouped under one
directory tree.
"""

from __future__ import annotations

import re

_DEFAULT_DECLARATION = "defmodule"
_DEFAULT_REFERENCE = "alias"


def extract_declared_namespace(
    content: str, keyword: str = _DEFAULT_DECLARATION
) -> str | None:
    """Return the first declared module name, e.g. ``Foo.Bar``, or None."""
    match = re.search(rf"\b{re.escape(keyword)}\s+([A-Z][\w.]*)", content)
    if match is None:
        return None
    return match.group(1)


def namespace_root(namespace: str) -> str:
    """Return the first dot-segment of a module name (``Foo.Bar`` → ``Foo``)."""
    return namespace.split(".", 1)[0]


def extract_same_namespace_references(
    content: str, root: str, keyword: str = _DEFAULT_REFERENCE
) -> list[str]:
    """Collect references to modules under ``root``, in first-seen order.

    ``root`` must match a whole word, so ``FooBar`` is not a reference
    under ``Foo``.
    """
    pattern = re.compile(
        rf"\b{re.escape(keyword)}\s+({re.escape(root)}(?:\.[\w.]+)?)\b"
    )

    seen: dict[str, None] = {}
    for line in content.splitlines():
        for name in pattern.findall(line):
            seen.setdefault(name, None)
    return list(seen)


def extract_references(
    content: str,
    declaration_keyword: str = _DEFAULT_DECLARATION,
    reference_keyword: str = _DEFAULT_REFERENCE,
) -> list[str]:
    """Return same-namespace references for a file, or [] if it declares no module."""
    declared = extract_declared_namespace(content, declaration_keyword)
    if declared is None:
        return []
    return extract_same_namespace_references(
        content, namespace_root(declared), reference_keyword
    )
