class CacheMeError(Exception):
    """Base class for input errors raised while building a calculation."""


class MalformedEventLine(CacheMeError):
    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: expected '<timestamp> <path>', got {line!r}")


class MalformedTemplate(CacheMeError):
    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"route template {template!r}: {reason}")


class InvalidTTL(CacheMeError, ValueError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"cache time must be a whole number of minutes, got {value!r}")
