from course_catalog.catalog import Status

NOT_LOADED_MESSAGE = "load data first (option 1)"


def format_load(result):
    if result.ok:
        return [f"loaded {result.count} course(s) from {result.path}"]
    return [str(result.error)]


def format_listing(result):
    if result.status is Status.NOT_LOADED:
        return [NOT_LOADED_MESSAGE]
    lines = ["course list (a→z):"]
    lines.extend(f"{course.code}, {course.title}" for course in result.courses)
    return lines


def format_prerequisite(code, title):
    return f"{code} ({title})" if title is not None else code


def format_detail(result):
    if result.status is Status.NOT_LOADED:
        return [NOT_LOADED_MESSAGE]
    if result.status is Status.EMPTY_KEY:
        return ["no course entered"]
    if result.status is Status.NOT_FOUND:
        return [f"not found: {result.key}"]

    course = result.course
    lines = [f"{course.code}, {course.title}"]
    if not result.prerequisites:
        lines.append("prerequisites: none")
    else:
        lines.append("prerequisites: " + ", ".join(format_prerequisite(c, t) for c, t in result.prerequisites))
    return lines
