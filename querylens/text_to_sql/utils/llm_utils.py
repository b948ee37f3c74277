"""
Shared LLM utilities to avoid multiple model initializations.
"""
from typing import Any

from ...api.app_context import AppContext


def get_llm():
    """Get the shared LLM instance from AppContext."""
    return AppContext.get_instance().get_llm()


def response_text(response: Any) -> str:
    """
    Extract the text of a chat-model response.

    Handles plain string content as well as the list-of-parts content some
    Gemini models return. Raises ValueError when no text is present.
    """
    content = response.content if hasattr(response, 'content') else response
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        if parts:
            return "".join(parts)
    raise ValueError(f"LLM response has no text content: {type(content).__name__}")
