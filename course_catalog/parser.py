from course_catalog.course import Course
from course_catalog.errors import MalformedRow

DELIMITER = ","


def normalize_code(code: str) -> str:
    """Trim and upper-case a course identifier (e.g. ' cs101 ' -> 'CS101')."""
    return code.strip().upper()


def split_fields(line: str):
    # no quoting: a comma inside a title splits it
    fields = [field.strip() for field in line.strip().split(DELIMITER)]
    # a line ending in the delimiter has no trailing empty field
    if len(fields) > 1 and not fields[-1]:
        fields.pop()
    return fields


def parse_row(line: str, line_number: int = 0) -> Course:
    """Turn one non-blank line into a Course.

    Field 0 is the identifier, field 1 the title, anything after that a
    prerequisite identifier. Empty prerequisite fields are dropped. Raises
    MalformedRow when the identifier or title field is missing; a trailing
    delimiter does not count as an empty title ('CS101,' is malformed,
    'CS101,,CS100' is not).
    """
    parts = split_fields(line)
    if len(parts) < 2 or not parts[0]:
        raise MalformedRow(line_number, line)

    code = normalize_code(parts[0])
    title = parts[1]
    prereqs = [normalize_code(p) for p in parts[2:] if p]
    return Course(code, title, prereqs)
