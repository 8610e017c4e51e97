from __future__ import annotations


class IconGenerationError(RuntimeError):
    """A generation run failed; nothing was written."""


class InvalidIconNameError(IconGenerationError):
    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Invalid icon file name '{filename}': {reason}")


class IconNameCollisionError(IconGenerationError):
    def __init__(self, identifier: str, first: str, second: str) -> None:
        self.identifier = identifier
        self.filenames = (first, second)
        super().__init__(f"Icon files '{first}' and '{second}' both normalize to identifier '{identifier}'")
