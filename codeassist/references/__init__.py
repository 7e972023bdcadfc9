"""Module reference extraction and namespace-to-path mapping.

The textual scan is isolated behind a narrow interface so callers never
depend on how references are found.
"""

from codeassist.references.extractor import (
    extract_declared_namespace,
    extract_references,
    extract_same_namespace_references,
    namespace_root,
)
from codeassist.references.mapper import namespace_to_path, underscore

__all__ = [
    "extract_declared_namespace",
    "extract_references",
    "extract_same_namespace_references",
    "namespace_root",
    "namespace_to_path",
    "underscore",
]
