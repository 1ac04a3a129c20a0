from typing import Optional


class HeaderCheckerError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(HeaderCheckerError):
    # errors related to configuration.
    pass

class WorkingDirectoryError(HeaderCheckerError):
    # the current working directory could not be determined.
    pass

class CollectionError(HeaderCheckerError):
    # errors while walking header directories. always fatal for the run.
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
