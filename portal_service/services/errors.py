"""Domain errors raised by the stores."""


class InvalidDocumentId(ValueError):
    """Raised when a path identifier is not a valid ObjectId."""

    def __init__(self, value: str):
        super().__init__(f"Invalid document id: {value!r}")
        self.value = value
