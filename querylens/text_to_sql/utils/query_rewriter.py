"""
Chart-augmentation rewriter for generated SQL.

When a query ranks rows by an aggregate that it never selects (for example
``SELECT name FROM customers ... ORDER BY SUM(amount) DESC``) the result has
nothing to plot. This module appends the ordering aggregate to the projection
under a ``<function>_value`` alias so the chart stage has a value column:

    SELECT name FROM customers GROUP BY name ORDER BY SUM(amount) DESC
    -> SELECT name, SUM(amount) AS sum_value FROM customers GROUP BY name ORDER BY SUM(amount) DESC

This is a single-pass textual heuristic, not a SQL parser. Known limitations:
- only the first ORDER BY clause and the first SELECT ... FROM are considered,
  so subqueries can be matched instead of the outer statement
- patterns inside string literals or comments are matched like any other text
- only the first aggregate of a multi-column ORDER BY is exposed
- the "already selected" check compares call text literally (ignoring case),
  so ``SUM( amount )`` and ``SUM(amount)`` are different calls

Callers depend on ``augment_for_charting`` (or any ``SqlRewriter``) only, so a
parser-backed rewrite can replace it without touching them.
"""
import logging
import re
from typing import Callable, Optional

from ...common.constants import AGGREGATE_FUNCTIONS, AGGREGATE_ALIAS_SUFFIX

logger = logging.getLogger(__name__)

SqlRewriter = Callable[[str], str]

ORDER_BY_PATTERN = re.compile(
    r"order\s+by\s+(.*?)(?:\b(?:asc|desc)\b|$)",
    re.IGNORECASE | re.DOTALL,
)
AGGREGATE_PATTERN = re.compile(
    r"\b(" + "|".join(AGGREGATE_FUNCTIONS) + r")\s*\(",
    re.IGNORECASE,
)
SELECT_PATTERN = re.compile(r"select\s+(.*?)\s+from\b", re.IGNORECASE | re.DOTALL)


def _extract_call(text: str, start: int, open_paren: int) -> Optional[str]:
    """Return text[start:] up to the parenthesis closing the one at open_paren."""
    depth = 0
    for index in range(open_paren, len(text)):
        char = text[index]
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                return text[start:index + 1]
    return None


def augment_for_charting(sql: str) -> str:
    """
    Expose an ORDER BY aggregate in the SELECT list when it is missing.

    Returns the statement unchanged when there is no ORDER BY, the ordering
    expression has no aggregate call, or the call is already projected.
    Applying it twice gives the same result as applying it once.
    """
    order_match = ORDER_BY_PATTERN.search(sql)
    if not order_match:
        return sql

    order_clause = order_match.group(1).strip()
    aggregate_match = AGGREGATE_PATTERN.search(order_clause)
    if not aggregate_match:
        return sql

    aggregate_call = _extract_call(order_clause, aggregate_match.start(), aggregate_match.end() - 1)
    if aggregate_call is None:
        logger.debug(f"Unbalanced aggregate call in ORDER BY, leaving SQL as-is: {order_clause[:80]}")
        return sql

    select_match = SELECT_PATTERN.search(sql)
    if not select_match:
        return sql

    select_list = select_match.group(1)
    if aggregate_call.lower() in select_list.lower():
        return sql

    alias = f"{aggregate_match.group(1).lower()}{AGGREGATE_ALIAS_SUFFIX}"
    augmented_select = f"{select_list}, {aggregate_call} AS {alias}"
    logger.info(f"Added {aggregate_call} AS {alias} to SELECT list for charting")

    return sql[:select_match.start(1)] + augmented_select + sql[select_match.end(1):]
