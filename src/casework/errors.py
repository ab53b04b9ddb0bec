"""
Casework Coach - Exceptions.
"""


class CaseworkError(Exception):
    """Base class for all casework errors."""


class ConfigurationError(CaseworkError):
    """A required setting (API key, URL) is missing or invalid."""


class PlaybookConfigError(CaseworkError):
    """The playbook table could not be loaded or failed validation."""


class DocumentNotFoundError(CaseworkError):
    """No registered document has the requested id."""

    def __init__(self, doc_id: str):
        super().__init__(f"Document not found: {doc_id}")
        self.doc_id = doc_id
