"""A fixed greeting."""


def hello() -> str:
    """Return the greeting text."""
    return "Hello, future!"