from course_catalog.catalog import CourseCatalog, LoadResult, ListResult, ShowResult, Status
from course_catalog.course import Course
from course_catalog.errors import CatalogError, CatalogNotLoaded, MalformedRow, SourceUnavailable

__all__ = [
    "CourseCatalog",
    "LoadResult",
    "ListResult",
    "ShowResult",
    "Status",
    "Course",
    "CatalogError",
    "CatalogNotLoaded",
    "MalformedRow",
    "SourceUnavailable",
]
