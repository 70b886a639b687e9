class Course:
    def __init__(self, code, title, prerequisites=None):
        self.code = code
        self.title = title
        self.prerequisites = list(prerequisites or [])  # list of str, source order

    def update(self, other):
        """Take title and prerequisites from another record with the same code."""
        self.title = other.title
        self.prerequisites = list(other.prerequisites)

    def __eq__(self, other):
        if not isinstance(other, Course):
            return NotImplemented
        return (self.code, self.title, self.prerequisites) == (other.code, other.title, other.prerequisites)

    def __repr__(self):
        return f"Course({self.code!r}, {self.title!r}, {self.prerequisites!r})"
