class NotFoundError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StoreError(Exception):
    """Validation or persistence failure coming from the document store."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def validation_message(title: str, errors: list[dict]) -> str:
    """Flatten pydantic error dicts into one line, mongoose style.

    "Hotel validation failed: price: Input should be greater than or equal to 0"
    """
    details = []
    for err in errors:
        field = ".".join(str(part) for part in err["loc"] if part != "body") or "body"
        details.append(f"{field}: {err['msg']}")
    return f"{title} validation failed: {', '.join(details)}"
