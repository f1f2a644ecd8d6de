"""SQL keywords, dialect identifier rules, literal values and query AST nodes that render to SQL."""

__version__ = "0.1.0"
__all__ = ["dialect", "keywords", "query", "value"]