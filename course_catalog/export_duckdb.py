import logging
import os

import duckdb

from course_catalog.errors import CatalogNotLoaded

logger = logging.getLogger(__name__)

TABLES = ["courses", "prerequisites"]


def export_catalog(catalog, db_path):
    """Write a loaded catalog to a fresh DuckDB file. Returns the course row count."""
    if not catalog.loaded:
        raise CatalogNotLoaded()

    # Recreate DB
    if os.path.exists(db_path):
        os.remove(db_path)
    parent = os.path.dirname(db_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    con = duckdb.connect(db_path)
    try:
        con.execute("""
        CREATE TABLE courses (
          course_id TEXT PRIMARY KEY,
          title TEXT,
          position INT      -- rank in ascending course_id order
        )
        """)
        con.execute("""
        CREATE TABLE prerequisites (
          course_id TEXT,
          prereq_id TEXT,
          seq INT,          -- order within the source row
          resolved BOOLEAN  -- prereq_id exists in the catalog
        )
        """)

        count = 0
        for position, course in enumerate(catalog.courses.in_order()):
            con.execute("INSERT INTO courses VALUES (?, ?, ?)", (course.code, course.title, position))
            for seq, prereq in enumerate(course.prerequisites):
                con.execute(
                    "INSERT INTO prerequisites VALUES (?, ?, ?, ?)",
                    (course.code, prereq, seq, catalog.index.title_for(prereq) is not None),
                )
            count += 1
    finally:
        con.close()

    logger.info("exported %d course(s) to %s", count, db_path)
    return count


def print_tables(db_path, limit=1000, out=print):
    if not os.path.exists(db_path):
        raise FileNotFoundError(f"{db_path} not found. Export a catalog first (option 4).")

    con = duckdb.connect(db_path, read_only=True)
    try:
        for table in TABLES:
            out(f"\n=== {table.upper()} ===")
            results = con.execute(f"SELECT * FROM {table} ORDER BY 1, 3 LIMIT {int(limit)}").fetchall()
            for row in results:
                out(row)
    finally:
        con.close()
