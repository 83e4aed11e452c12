"""Data quality models, SQL query builders, audit summaries, result messages and SQLite stores."""

__version__ = "0.1.0"