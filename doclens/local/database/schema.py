"""
Additive schema for the local store.

Every statement is a conditional create, so the whole script is applied on
each launch. Columns added after the first release are listed in
`COLUMN_MIGRATIONS` and added to older stores by the column migration.
"""

SCHEMA = """
-- Projects (named groupings of documents)
CREATE TABLE IF NOT EXISTS projects (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

-- Document library. project_id is deprecated in favour of project_documents.
CREATE TABLE IF NOT EXISTS documents (
    id TEXT PRIMARY KEY,
    project_id TEXT REFERENCES projects(id) ON DELETE SET NULL,
    filename TEXT NOT NULL,
    file_path TEXT NOT NULL,
    file_hash TEXT NOT NULL,
    file_size INTEGER,
    content_type TEXT,
    -- User-entered/auto-detected metadata
    report_year INTEGER,
    company_name TEXT,
    industry TEXT,
    country TEXT,
    report_type TEXT,
    custom_tags TEXT,                -- JSON array
    custom_metadata TEXT,            -- JSON object
    -- Extracted content cached from the sidecar
    extracted_text TEXT,
    extracted_pages TEXT,            -- JSON: [{page_number, text}]
    pdf_metadata TEXT,               -- JSON
    inferred_metadata TEXT,          -- JSON
    -- Analysis status: pending, analyzing, completed, failed
    analysis_status TEXT DEFAULT 'pending',
    analyzed_at DATETIME,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

-- Many-to-many project membership
CREATE TABLE IF NOT EXISTS project_documents (
    project_id TEXT NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    document_id TEXT NOT NULL REFERENCES documents(id) ON DELETE CASCADE,
    added_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (project_id, document_id)
);

-- Named subsets of a project's documents
CREATE TABLE IF NOT EXISTS collections (
    id TEXT PRIMARY KEY,
    project_id TEXT NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    name TEXT NOT NULL,
    description TEXT,
    filter_criteria TEXT,            -- JSON, NULL for manual curation
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS collection_documents (
    collection_id TEXT NOT NULL REFERENCES collections(id) ON DELETE CASCADE,
    document_id TEXT NOT NULL REFERENCES documents(id) ON DELETE CASCADE,
    added_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (collection_id, document_id)
);

-- Cached analysis results, opaque JSON per document and analysis kind
CREATE TABLE IF NOT EXISTS analysis_results (
    id TEXT PRIMARY KEY,
    document_id TEXT NOT NULL REFERENCES documents(id) ON DELETE CASCADE,
    analysis_type TEXT NOT NULL,
    results TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

-- Per-project analysis profiles
CREATE TABLE IF NOT EXISTS analysis_profiles (
    id TEXT PRIMARY KEY,
    project_id TEXT NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    name TEXT NOT NULL,
    description TEXT,
    config TEXT NOT NULL,            -- JSON
    is_active BOOLEAN DEFAULT FALSE,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

-- Keyword lists (builtin frameworks and user-defined)
CREATE TABLE IF NOT EXISTS keyword_lists (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    framework TEXT,                  -- stable catalog key for builtins: tcfd, sdgs, gri, sasb
    list_type TEXT NOT NULL,         -- simple, grouped, weighted
    keywords TEXT NOT NULL,          -- JSON
    is_builtin BOOLEAN DEFAULT FALSE,
    category TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

-- Cached keyword search results
CREATE TABLE IF NOT EXISTS keyword_results (
    id TEXT PRIMARY KEY,
    project_id TEXT NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    keyword_list_id TEXT NOT NULL REFERENCES keyword_lists(id),
    selected_keywords TEXT,
    results TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

-- Cached n-gram results
CREATE TABLE IF NOT EXISTS ngram_results (
    id TEXT PRIMARY KEY,
    project_id TEXT NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    ngram_type INTEGER NOT NULL,     -- 2 for bigrams, 3 for trigrams
    filter_terms TEXT,
    results TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS countries (
    code TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    is_default BOOLEAN DEFAULT TRUE
);

CREATE TABLE IF NOT EXISTS industries (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    category TEXT,
    is_default BOOLEAN DEFAULT TRUE
);

CREATE INDEX IF NOT EXISTS idx_documents_project ON documents(project_id);
CREATE INDEX IF NOT EXISTS idx_documents_year ON documents(report_year);
CREATE INDEX IF NOT EXISTS idx_documents_company ON documents(company_name);
CREATE INDEX IF NOT EXISTS idx_documents_hash ON documents(file_hash);
CREATE INDEX IF NOT EXISTS idx_project_documents_document ON project_documents(document_id);
CREATE INDEX IF NOT EXISTS idx_collections_project ON collections(project_id);
CREATE INDEX IF NOT EXISTS idx_collection_documents_document ON collection_documents(document_id);
CREATE INDEX IF NOT EXISTS idx_analysis_document ON analysis_results(document_id);
CREATE INDEX IF NOT EXISTS idx_keyword_results_project ON keyword_results(project_id);
"""

# (table, column, definition). Applied in order, only when the column is missing.
COLUMN_MIGRATIONS = [
    ("documents", "inferred_metadata", "TEXT"),
    ("keyword_lists", "category", "TEXT"),
    ("project_documents", "added_at", "DATETIME"),
]

# Created after the column migration, since older stores may predate the columns.
MIGRATION_INDEXES = [
    "CREATE UNIQUE INDEX IF NOT EXISTS idx_keyword_lists_builtin_framework "
    "ON keyword_lists(framework) WHERE is_builtin = 1",
    "CREATE INDEX IF NOT EXISTS idx_keyword_lists_category ON keyword_lists(category)",
]
