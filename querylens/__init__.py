"""
Querylens: ask a relational database questions in natural language.
"""

__version__ = "1.0.0"
