"""
Simple SQL utilities for cleaning model output.
"""
import re

CODE_FENCE_PATTERN = re.compile(r"```(?:sql)?", re.IGNORECASE)


def extract_sql_from_response(response_text: str) -> str:
    """
    Strip markdown code fences from an LLM response and trim whitespace.

    The remainder is treated as a literal SQL statement; nothing else is
    validated or escaped.
    """
    return CODE_FENCE_PATTERN.sub('', response_text).strip()
