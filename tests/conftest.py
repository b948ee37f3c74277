"""
Shared fixtures: an in-memory SQLite database, a scripted chat model and an
AppContext wired to both.
"""
import pytest
from langchain_core.messages import AIMessage
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from querylens.api.app_context import AppContext, initialize_app_context

# Markers that identify each prompt template
TRANSLATION_PROMPT = "Translate the following natural language query"
SUMMARY_PROMPT = "SQL result (in JSON format)"
CHART_PROMPT = 'Only respond with "YES" or "NO"'


class FakeLLM:
    """Chat model stand-in that answers by prompt marker and records every prompt."""

    def __init__(self):
        self.replies = {}
        self.prompts = []

    def reply(self, marker, response):
        """Answer prompts containing marker with response (an Exception is raised instead)."""
        self.replies[marker] = response
        return self

    def prompts_for(self, marker):
        return [prompt for prompt in self.prompts if marker in prompt]

    async def ainvoke(self, prompt):
        self.prompts.append(prompt)
        for marker, response in self.replies.items():
            if marker in prompt:
                if isinstance(response, Exception):
                    raise response
                return AIMessage(content=response)
        raise AssertionError(f"Unexpected prompt: {prompt[:120]}")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE customers ("
            "customerNumber INTEGER PRIMARY KEY, "
            "customerName VARCHAR(50) NOT NULL, "
            "country VARCHAR(50))"
        ))
        conn.execute(text(
            "CREATE TABLE payments ("
            "checkNumber VARCHAR(50) PRIMARY KEY, "
            "customerName VARCHAR(50) NOT NULL, "
            "amount INTEGER NOT NULL)"
        ))
        conn.execute(text(
            "INSERT INTO customers (customerNumber, customerName, country) VALUES "
            "(103, 'Alice', 'France'), (112, 'Bob', 'USA')"
        ))
        conn.execute(text(
            "INSERT INTO payments (checkNumber, customerName, amount) VALUES "
            "('HQ336336', 'Alice', 200), ('JM555205', 'Alice', 300), ('OM314933', 'Bob', 300)"
        ))
    yield engine
    engine.dispose()


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def app_context(engine, fake_llm):
    AppContext.reset()
    initialize_app_context(db_engine=engine, llm=fake_llm)
    yield AppContext.get_instance()
    AppContext.reset()
