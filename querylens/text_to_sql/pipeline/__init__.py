"""LangGraph orchestration of the query pipeline."""
