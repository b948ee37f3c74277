"""
Application context with singleton pattern for shared resources.

Holds the two process-wide collaborators of the query pipeline: the database
engine and the LLM client. Both are created once at service start and
released on shutdown.
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class AppContext:
    """
    Singleton application context managing shared resources.

    Eagerly initializes on creation:
    - Database engine
    - LLM client

    Either resource can be supplied by the caller (tests, alternative
    deployments); missing ones are built from configuration.
    """

    _instance: Optional['AppContext'] = None

    def __init__(self, db_engine=None, llm=None):
        """Private constructor. Use get_instance() or initialize_app_context() instead."""
        if AppContext._instance is not None:
            raise RuntimeError("AppContext is a singleton. Use AppContext.get_instance()")

        self._initialize_resources(db_engine, llm)

    def _initialize_resources(self, db_engine=None, llm=None):
        """Initialize all resources immediately."""
        # Import modules here to avoid circular dependencies
        from querylens.common.config import config

        # The shared engine lives in the engine module; injected ones are ours to dispose
        self._uses_shared_engine = db_engine is None
        if db_engine is None:
            from querylens.common.database.engine import get_engine
            db_engine = get_engine()
        self._db_engine = db_engine
        logger.info("  Database engine initialized")

        if llm is None:
            from langchain_google_genai import ChatGoogleGenerativeAI
            llm = ChatGoogleGenerativeAI(
                model=config.llm.model_name,
                temperature=config.llm.temperature,
                max_tokens=config.llm.max_tokens,
                max_retries=config.llm.max_retries,
                google_api_key=config.llm.effective_api_key
            )
            logger.info(f"  LLM client initialized ({config.llm.model_name})")
        self._llm = llm

    @classmethod
    def get_instance(cls) -> 'AppContext':
        """Get the singleton instance of AppContext."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def initialize(cls, db_engine=None, llm=None) -> 'AppContext':
        """Create the singleton with the given resources unless it already exists."""
        if cls._instance is None:
            cls._instance = cls(db_engine=db_engine, llm=llm)
        return cls._instance

    @classmethod
    def reset(cls):
        """Release resources and drop the singleton instance."""
        if cls._instance:
            cls._instance.cleanup()
            cls._instance = None
            logger.info("Reset AppContext singleton")

    def get_db_engine(self):
        """Get the database engine instance (already initialized)."""
        return self._db_engine

    def get_llm(self):
        """Get the LLM client instance (already initialized)."""
        return self._llm

    def cleanup(self):
        """
        Cleanup resources (close connections, etc.).

        Call this on application shutdown.
        """
        logger.info("Shutting down resources...")

        if self._db_engine is not None:
            try:
                if self._uses_shared_engine:
                    from querylens.common.database.engine import cleanup_database_connections
                    cleanup_database_connections()
                else:
                    self._db_engine.dispose()
            except Exception as e:
                logger.error(f"Error disposing database engine: {e}")

        logger.info("Resources cleaned up")

        self._db_engine = None
        self._llm = None


# Convenience functions for direct access

def initialize_app_context(db_engine=None, llm=None):
    """
    Initialize the AppContext singleton.

    Call this in the FastAPI lifespan startup. A context that already exists
    is left as-is.
    """
    AppContext.initialize(db_engine=db_engine, llm=llm)


def cleanup_app_context():
    """Release all application resources."""
    AppContext.reset()
