class JSStyleError(Exception):
    """Base class for jsstyle errors"""


class ConfigError(JSStyleError):
    """Invalid rule configuration; fatal, raised before any file is checked"""


class MalformedInputError(JSStyleError):
    """Source (or part of it) cannot be analysed"""

    def __init__(self, message: str, offset: int = 0):
        super().__init__(message)
        self.offset = offset
