class SourceFileNotFound(FileNotFoundError):
    """The file being validated does not exist."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path
