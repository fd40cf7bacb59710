class DuplicateRecordError(Exception):
    """Raised by a repository when a write violates a uniqueness constraint"""
