class CatalogError(Exception):
    """Base class for expected catalog failures."""


class SourceUnavailable(CatalogError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        super().__init__(f"couldn't open file: {path}")


class MalformedRow(CatalogError):
    def __init__(self, line_number, line=""):
        self.line_number = line_number  # 1-based
        self.line = line
        super().__init__(f"bad line {line_number}")


class CatalogNotLoaded(CatalogError):
    def __init__(self):
        super().__init__("load data first (option 1)")
