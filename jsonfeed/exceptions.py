class ParseError(Exception):
    """Raised when a document can not be read as a JSON Feed."""
