# ABOUTME: SQL DDL statements for the Folio library database schema.
# ABOUTME: Defines base tables plus the ordered list of additive column migrations.

TABLES = """
-- Book catalog and reading state; title is the external key
CREATE TABLE IF NOT EXISTS books (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    title           TEXT    NOT NULL UNIQUE,
    filename        TEXT    NOT NULL,
    last_cfi        TEXT    NOT NULL DEFAULT '',
    cover           TEXT,
    locations_data  TEXT,
    last_percentage REAL    NOT NULL DEFAULT 0.0,
    created_at      TEXT    NOT NULL DEFAULT (datetime('now'))
);

-- book_title is matched by value, not a foreign key
CREATE TABLE IF NOT EXISTS highlights (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    book_title  TEXT    NOT NULL,
    cfi         TEXT    NOT NULL,
    text        TEXT    NOT NULL,
    color       TEXT    NOT NULL DEFAULT '#facc15',
    notes       TEXT    NOT NULL DEFAULT '',
    created_at  TEXT    NOT NULL DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS bookmarks (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    book_title  TEXT    NOT NULL,
    cfi         TEXT    NOT NULL,
    label       TEXT    NOT NULL,
    created_at  TEXT    NOT NULL DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS collections (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT    NOT NULL UNIQUE,
    emoji       TEXT    NOT NULL DEFAULT '📌',
    created_at  TEXT    NOT NULL DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS highlight_collections (
    highlight_id  INTEGER NOT NULL REFERENCES highlights(id) ON DELETE CASCADE,
    collection_id INTEGER NOT NULL REFERENCES collections(id) ON DELETE CASCADE,
    PRIMARY KEY (highlight_id, collection_id)
);
"""

# Applied in order on every startup. Each one either adds its column or fails
# with "duplicate column name", which means it was applied earlier.
# ALTER TABLE ... ADD COLUMN only accepts constant defaults.
ADDITIVE_MIGRATIONS: list[str] = [
    "ALTER TABLE highlights ADD COLUMN color TEXT NOT NULL DEFAULT '#facc15'",
    "ALTER TABLE highlights ADD COLUMN created_at TEXT NOT NULL DEFAULT '1970-01-01 00:00:00'",
    "ALTER TABLE highlights ADD COLUMN notes TEXT NOT NULL DEFAULT ''",
    "ALTER TABLE books ADD COLUMN locations_data TEXT",
    "ALTER TABLE books ADD COLUMN last_percentage REAL NOT NULL DEFAULT 0.0",
]
