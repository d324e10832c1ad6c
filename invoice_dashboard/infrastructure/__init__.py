"""Infrastructure adapters: SQLite storage and the page cache."""
