"""
Configuration for the Querylens service.
"""
import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field


class DatabaseConfig(BaseModel):
    """Database configuration."""
    database_url: str = Field(
        default_factory=lambda: os.getenv(
            "DATABASE_URL", "mysql+pymysql://root@localhost:3306/classicmodels"
        ),
        description="SQLAlchemy connection URL"
    )
    database_name: str = Field(
        default_factory=lambda: os.getenv("DATABASE_NAME", "classicmodels"),
        description="Database name shown to the model in the translation prompt"
    )
    sql_dialect: str = Field(
        default_factory=lambda: os.getenv("SQL_DIALECT", "MySQL"),
        description="SQL dialect the model is asked to write"
    )

    def __init__(self, **data):
        super().__init__(**data)
        # Convert relative SQLite paths to absolute for reliability
        if self.database_url.startswith('sqlite:///') and not self.database_url.startswith('sqlite:////'):
            rel_path = self.database_url[10:]
            if rel_path and rel_path != ':memory:':
                project_root = Path(__file__).parent.parent.parent
                abs_path = project_root / rel_path
                self.database_url = f"sqlite:///{abs_path.resolve()}"


class LLMConfig(BaseModel):
    """LLM configuration."""
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gemini-2.0-flash"),
        description="Model name"
    )
    temperature: float = Field(default=0.1, description="Temperature for generation")
    max_tokens: int = Field(default=4096, description="Maximum tokens")
    max_retries: int = Field(
        default=1,
        description="Attempts per model call; 1 means a single attempt with no retry"
    )

    @property
    def effective_api_key(self) -> str:
        """Get the effective API key."""
        api_key = os.getenv("GEMINI_API_KEY", "")
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable not set")
        return api_key


class ServerConfig(BaseModel):
    """HTTP server configuration."""
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173").split(",")
            if origin.strip()
        ],
        description="Origins allowed to call the API from a browser"
    )


class QuerylensConfig(BaseModel):
    """Main configuration."""
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


# Global configuration instance
config = QuerylensConfig()
