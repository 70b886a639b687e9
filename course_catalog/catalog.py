import logging
from collections import namedtuple
from enum import Enum

from course_catalog.course import Course
from course_catalog.errors import CatalogError, SourceUnavailable
from course_catalog.parser import normalize_code, parse_row
from course_catalog.prerequisites import PrerequisiteIndex
from course_catalog.tree import CourseTree

logger = logging.getLogger(__name__)


class Status(Enum):
    OK = "ok"
    NOT_LOADED = "not_loaded"
    NOT_FOUND = "not_found"
    EMPTY_KEY = "empty_key"


LoadResult = namedtuple("LoadResult", ["ok", "count", "path", "error"])
ListResult = namedtuple("ListResult", ["status", "courses"])
# prerequisites: [(code, title_or_None), ...]
ShowResult = namedtuple("ShowResult", ["status", "key", "course", "prerequisites"])


def read_rows(path):
    """Parse every non-blank line of a source file into Course records.

    Nothing is returned until the whole file has parsed, so a bad line
    anywhere rejects the file as a whole.
    """
    rows = []
    try:
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, 1):
                if not line.strip():
                    continue
                rows.append(parse_row(line, line_number))
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(str(path), e) from e
    return rows


class CourseCatalog:
    def __init__(self):
        self.courses = CourseTree()
        self.index = PrerequisiteIndex()
        self.loaded = False
        self.source = None

    def load(self, path):
        """Replace the catalog with the contents of ``path``.

        All-or-nothing: on failure the previous contents stay untouched and
        the returned LoadResult carries the error.
        """
        try:
            rows = read_rows(path)
        except CatalogError as e:
            logger.warning("load of %s failed: %s", path, e)
            return LoadResult(False, 0, str(path), e)

        seen = set()
        for course in rows:
            if course.code in seen:
                logger.warning("duplicate course %s in %s, keeping the last row", course.code, path)
            seen.add(course.code)

        self.courses.clear()
        self.index.clear()
        for course in rows:
            self.courses.insert_or_update(course)
        self.index.rebuild(self.courses)

        self.loaded = True
        self.source = str(path)
        logger.info("loaded %d row(s), %d course(s) from %s", len(rows), len(self.courses), path)
        return LoadResult(True, len(rows), str(path), None)

    def insert_or_update(self, course):
        """Add or replace a single course and refresh the prerequisite index."""
        course = Course(
            normalize_code(course.code),
            course.title.strip(),
            [normalize_code(p) for p in course.prerequisites],
        )
        self.courses.insert_or_update(course)
        self.index.rebuild(self.courses)

    def list_courses(self):
        if not self.loaded:
            return ListResult(Status.NOT_LOADED, [])
        return ListResult(Status.OK, list(self.courses.in_order()))

    def find(self, raw):
        return self.courses.find(normalize_code(raw))

    def show_course(self, raw):
        if not self.loaded:
            return ShowResult(Status.NOT_LOADED, None, None, [])

        key = normalize_code(raw or "")
        if not key:
            return ShowResult(Status.EMPTY_KEY, key, None, [])

        course = self.courses.find(key)
        if course is None:
            return ShowResult(Status.NOT_FOUND, key, None, [])
        return ShowResult(Status.OK, key, course, self.index.resolve(course))

    def __len__(self):
        return len(self.courses)
