"""
Exceptions raised while loading documents

Extraction itself never raises for malformed rows or headings; those
are skipped. These cover the file level, where a failure aborts the batch.
"""


class DocumentError(Exception):
    """Raised when a document's front matter cannot be parsed"""
    pass


class LocaleError(ValueError):
    """Raised for a locale outside the supported zones"""
    pass
