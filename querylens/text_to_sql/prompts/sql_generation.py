"""
SQL generation prompt templates.
"""
from typing import Optional

from ._shared import ENTITY_VALUE_RULE
from ...common.config import config


def build_translation_prompt(
    question: str,
    schema_text: str,
    database_name: Optional[str] = None,
    sql_dialect: Optional[str] = None
) -> str:
    """
    Create the natural-language-to-SQL prompt.

    Args:
        question: User's natural language question
        schema_text: Schema rendered by format_schema_text
        database_name: Database name shown to the model (defaults to config)
        sql_dialect: Target SQL dialect (defaults to config)

    Returns:
        Prompt asking for a bare SQL statement
    """
    database_name = database_name or config.database.database_name
    sql_dialect = sql_dialect or config.database.sql_dialect

    return f"""Given the following database schema for the '{database_name}' database:
{schema_text}

Translate the following natural language query into a SQL query for {sql_dialect}. Only return the SQL query and nothing else.

{ENTITY_VALUE_RULE}

Natural language query: "{question}"

SQL query:"""
