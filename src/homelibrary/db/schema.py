# ABOUTME: SQL DDL statements for the Home Library database schema.
# ABOUTME: Defines the books, locations, tags, and settings tables plus indexes.

SCHEMA_VERSION = 1

SCHEMA_V1 = """
-- Core book catalog table. Authors and tags are JSON arrays; location is a
-- JSON object {type, predefined_id, custom_text}.
CREATE TABLE books (
    id            TEXT PRIMARY KEY,
    title         TEXT NOT NULL,
    authors       TEXT NOT NULL DEFAULT '[]',
    genre         TEXT,
    isbn          TEXT,
    cover_url     TEXT,
    cover_data    BLOB,
    location      TEXT,
    tags          TEXT NOT NULL DEFAULT '[]',
    notes         TEXT,
    is_favorite   INTEGER NOT NULL DEFAULT 0,
    date_added    TEXT NOT NULL,
    last_modified TEXT NOT NULL,
    added_by      TEXT,
    sync_status   TEXT NOT NULL DEFAULT 'synced'
);

CREATE INDEX idx_books_isbn ON books(isbn) WHERE isbn IS NOT NULL;
CREATE INDEX idx_books_date_added ON books(date_added);

-- Saved, reusable places. Books reference them by id inside books.location.
CREATE TABLE locations (
    id          TEXT PRIMARY KEY,
    name        TEXT NOT NULL,
    created_at  TEXT NOT NULL,
    sync_status TEXT NOT NULL DEFAULT 'synced'
);

-- User tags. Books reference them by name inside books.tags, not by id.
CREATE TABLE tags (
    id          TEXT PRIMARY KEY,
    name        TEXT NOT NULL,
    color_hex   TEXT NOT NULL,
    created_at  TEXT NOT NULL,
    sync_status TEXT NOT NULL DEFAULT 'synced'
);

-- Single-row preferences table, keyed by a fixed id.
CREATE TABLE settings (
    id              TEXT PRIMARY KEY,
    view_mode       TEXT NOT NULL,
    sort_by         TEXT NOT NULL,
    sort_order      TEXT NOT NULL,
    storage_mode    TEXT NOT NULL,
    appearance_mode TEXT NOT NULL
);

-- Schema versioning for future migrations
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""
