"""Exception types shared across the study guide core."""


class StudyGuideError(Exception):
    """Base class for every error raised by this package."""


class StorageError(StudyGuideError):
    """The backing medium of a key-value store could not be read or written."""


class DocumentLoadError(StudyGuideError):
    """The raw study guide document could not be acquired."""
