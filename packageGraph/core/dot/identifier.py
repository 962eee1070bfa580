"""
DOT identifier validation.
"""

import re

from packageGraph.core.errors import InvalidIdentifierError


# Letters, digits and underscores, not starting with a digit; any non-ASCII
# character counts as a letter, as it does for Graphviz.
_IDENTIFIER_RE = re.compile(r"[A-Za-z_\u0080-\U0010ffff][A-Za-z0-9_\u0080-\U0010ffff]*")

KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})


def is_valid_identifier(name: str) -> bool:
    """Return True if ``name`` can be written as a bare DOT identifier."""
    if not isinstance(name, str) or not _IDENTIFIER_RE.fullmatch(name):
        return False
    return name.lower() not in KEYWORDS


def validate_identifier(name: str) -> str:
    """
    Return ``name`` unchanged if it is a valid DOT identifier.

    Raises:
        InvalidIdentifierError: If ``name`` would need quoting
    """
    if not is_valid_identifier(name):
        raise InvalidIdentifierError(name)
    return name
