"""Database-facing tools: catalog introspection and SQL execution."""
