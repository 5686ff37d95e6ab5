class MissingDependencyError(Exception):
    """Raised when the sqlite3 query engine is not available."""


class StoreNotFoundError(Exception):
    """Raised when the Things database is missing or unreadable."""


class UnknownViewError(Exception):
    """Raised when a view or command name is not in the catalog."""


class QueryError(Exception):
    """Raised when the store rejects or fails a query."""
