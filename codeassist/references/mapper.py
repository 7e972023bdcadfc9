"""Namespace-to-path mapping.

Converts a dotted module name into the project-relative path where the
naming convention says it lives: ``Foo.BarBaz`` → ``lib/foo/bar_baz.ex``.
"""

from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(segment: str) -> str:
    """Convert a CamelCase segment to snake_case.

    Runs of capitals stay together, so ``HTTPClient`` becomes
    ``http_client`` and ``HelperA`` becomes ``helper_a``.
    """
    segment = _ACRONYM_BOUNDARY.sub(r"\1_\2", segment)
    segment = _WORD_BOUNDARY.sub(r"\1_\2", segment)
    return segment.lower()


def namespace_to_path(
    reference: str, source_dir: str = "lib", extension: str = ".ex"
) -> str:
    """Map a dotted module name to its candidate source file path.

    Examples:
        >>> namespace_to_path("Foo")
        'lib/foo.ex'
        >>> namespace_to_path("Foo.Bar.Baz")
        'lib/foo/bar/baz.ex'
    """
    parts = [underscore(part) for part in reference.split(".") if part]
    *directories, filename = parts
    return "/".join([source_dir, *directories, f"{filename}{extension}"])
