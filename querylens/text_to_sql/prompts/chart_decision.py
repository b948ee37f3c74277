"""
Chart decision prompt template.
"""
from ._shared import CHART_EXAMPLES


def build_chart_decision_prompt(question: str) -> str:
    """Create the constrained YES/NO prompt asking whether a chart fits the question."""
    examples = ", ".join(f'"{example}"' for example in CHART_EXAMPLES)
    return (
        f'Given the user query: "{question}", determine if a chart visualization would be '
        f'appropriate for the result. Consider queries that ask for comparisons, trends, '
        f'distributions, or rankings as appropriate for charts. Examples of chart-appropriate '
        f'queries: {examples}. Respond with "YES" if a chart is appropriate, and "NO" otherwise. '
        f'Only respond with "YES" or "NO".'
    )
