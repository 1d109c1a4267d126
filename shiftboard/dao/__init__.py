"""Record store backed by SQLite."""
