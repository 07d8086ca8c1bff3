"""
Case-insensitive substring predicates for SQL LIKE.

Callers pass qualified column names and a raw query string; the helpers here
escape LIKE metacharacters and produce a disjunctive predicate with bound
parameters. Columns are folded through the ``casefold`` SQL function that
``open_database`` registers on the connection.
"""

import re

# Pre-compiled regex for escaping LIKE pattern metacharacters.
_LIKE_ESCAPE_RE = re.compile(r"([\\%_])")


def escape_like(value: str) -> str:
    r"""
    Escape SQL LIKE metacharacters so *value* is treated as a literal substring.

    Uses ``\`` as the SQL LIKE escape character.
    """
    return _LIKE_ESCAPE_RE.sub(r"\\\1", value)


def contains_pattern(value: str) -> str:
    """Build a folded ``%value%`` pattern for a substring match."""
    return f"%{escape_like(value.casefold())}%"


def contains_any(fields: list[str], value: str) -> tuple[str, list[str]]:
    """
    Build ``(casefold(f1) LIKE ? OR casefold(f2) LIKE ? ...)`` for *fields*.

    Returns the SQL fragment and its positional parameters, one per field.
    A NULL column never matches.
    """
    if not fields:
        raise ValueError("contains_any requires at least one field")

    pattern = contains_pattern(value)
    clauses = [f"casefold({field}) LIKE ? ESCAPE '\\'" for field in fields]
    return "(" + " OR ".join(clauses) + ")", [pattern] * len(fields)
