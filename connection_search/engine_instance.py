"""Global search engine instance to avoid circular imports."""

from .core.engine import SearchEngine

# Global search engine instance
search_engine = SearchEngine()
