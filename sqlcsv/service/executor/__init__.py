from .query_executor import QueryExecutor

__all__ = ["QueryExecutor"]
