"""
Table definitions, applied on startup.

`blog_ids` keeps the owner's ordered back-references; ids of deleted blogs
may linger there and are skipped when users are listed.
"""

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id uuid PRIMARY KEY DEFAULT gen_random_uuid(),
    username text NOT NULL,
    name text,
    password_hash text NOT NULL,
    blog_ids uuid[] NOT NULL DEFAULT '{}',
    created_at timestamptz NOT NULL DEFAULT now()
);

CREATE UNIQUE INDEX IF NOT EXISTS users_username_key ON users (username);

CREATE TABLE IF NOT EXISTS blogs (
    id uuid PRIMARY KEY DEFAULT gen_random_uuid(),
    title text NOT NULL,
    author text,
    url text NOT NULL,
    likes bigint NOT NULL DEFAULT 0,
    user_id uuid REFERENCES users (id) ON DELETE SET NULL,
    comments text[] NOT NULL DEFAULT '{}',
    created_at timestamptz NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS blogs_user_id_idx ON blogs (user_id);

-- Tables created before likes became 64-bit.
ALTER TABLE blogs ALTER COLUMN likes TYPE bigint;
"""
