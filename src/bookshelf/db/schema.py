# ABOUTME: SQL DDL statements for the Bookshelf catalog database schema.
# ABOUTME: Defines the entries table and the schema version marker.

SCHEMA_V1 = """
-- Catalog entries. Columns are left nullable: the service stores what it is given.
-- AUTOINCREMENT keeps ids from being reused after a delete.
CREATE TABLE entries (
    id                 INTEGER PRIMARY KEY AUTOINCREMENT,
    title              TEXT,
    author             TEXT,
    first_publish_year INTEGER,
    edition_count      INTEGER,
    created_at         TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""
