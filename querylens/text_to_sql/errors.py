"""
Error taxonomy for the query pipeline.

Fatal errors abort the request and are reported to the caller as a 500.
Non-fatal errors only ever affect the optional chart and are absorbed by the
stage that raised them.
"""


class QueryPipelineError(Exception):
    """Base class for every failure raised by a pipeline stage."""

    stage = "pipeline"
    fatal = True

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SchemaFetchError(QueryPipelineError):
    """The catalog query used for schema introspection failed."""
    stage = "schema"


class GenerationError(QueryPipelineError):
    """The language-model call that translates the question to SQL failed."""
    stage = "sql_generation"


class ExecutionError(QueryPipelineError):
    """The generated (or rewritten) SQL failed against the database."""
    stage = "execution"


class SummarizationError(QueryPipelineError):
    """The language-model call that writes the prose summary failed."""
    stage = "summarization"


class ChartDecisionError(QueryPipelineError):
    """The yes/no chart check failed; recovered as 'no chart'."""
    stage = "chart_decision"
    fatal = False


class ChartTransformError(QueryPipelineError):
    """Column classification or series construction failed; recovered as no chart."""
    stage = "chart_transform"
    fatal = False
