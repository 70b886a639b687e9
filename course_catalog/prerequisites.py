import logging

logger = logging.getLogger(__name__)


class PrerequisiteIndex:
    """code -> Course lookup for resolving prerequisite titles.

    Rebuilt wholesale from a tree traversal after every load, never patched
    incrementally.
    """

    def __init__(self):
        self.courses = {}  # code -> Course

    def rebuild(self, tree):
        self.courses = {course.code: course for course in tree.in_order()}
        logger.debug("prerequisite index rebuilt with %d entries", len(self.courses))

    def clear(self):
        self.courses = {}

    def title_for(self, code):
        course = self.courses.get(code)
        return course.title if course else None

    def resolve(self, course):
        """Return [(prereq_code, title_or_None), ...] in source order."""
        return [(code, self.title_for(code)) for code in course.prerequisites]

    def __len__(self):
        return len(self.courses)
