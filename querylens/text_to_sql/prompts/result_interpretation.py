"""
Result interpretation prompt templates.
"""
import json
from typing import Any, Dict, List

from ._shared import SUMMARY_STYLE_RULES


def build_summary_prompt(question: str, sql: str, result: List[Dict[str, Any]]) -> str:
    """
    Create a prompt for summarizing query results in plain prose.

    Args:
        question: User's natural language question
        sql: SQL statement that produced the result
        result: Normalized result rows

    Returns:
        Formatted prompt for LLM summarization
    """
    result_json = json.dumps(result, indent=2, default=str)
    return f"""
You are an assistant that receives SQL query results as JSON. Your task is to produce a clear, natural language summary for the end user based on their question.

User question: "{question}"

SQL query: `{sql}`

SQL result (in JSON format):
```json
{result_json}
```

{SUMMARY_STYLE_RULES}
"""
