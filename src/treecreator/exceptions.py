from typing import Optional


class InvalidRootPathError(ValueError):
    """
    Exception raised when the root path handed to a generator is missing or blank.

    This is a configuration error: it is raised synchronously from
    ``TreeGenerator.generate`` before any traversal begins.

    Attributes:
        message (str): Human-readable description of the problem.

    Example:
        >>> error = InvalidRootPathError()
        >>> str(error)
        'Root path cannot be empty.'
    """

    def __init__(self, message: str = "Root path cannot be empty.") -> None:
        self.message = message
        super().__init__(self.message)


class DirectoryNotFoundError(FileNotFoundError):
    """
    Exception raised when the root path does not refer to an existing directory.

    Subclasses FileNotFoundError so callers that already handle missing paths
    keep working.

    Attributes:
        path (str): The path that was requested.

    Example:
        >>> error = DirectoryNotFoundError("/no/such/dir")
        >>> str(error)
        "Directory '/no/such/dir' does not exist."
    """

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path (str): The path that was requested as a root.
            message (str, optional): Overrides the default message.
        """
        self.path = path
        self.message = message or f"Directory '{path}' does not exist."
        super().__init__(self.message)
