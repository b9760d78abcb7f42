"""Exception types for word lookups and local persistence."""


class WordLookupError(Exception):
    """Base class for failures while fetching word details.

    ``str(error)`` is the message shown to the user.
    """

    def __init__(self, message: str, word: str | None = None) -> None:
        super().__init__(message)
        self.word = word


class TransportFailure(WordLookupError):
    """The completion service could not be reached or returned an API error."""


class ResponseParseError(WordLookupError):
    """The completion service returned text that is not valid JSON."""


class ModelReportedError(WordLookupError):
    """The model flagged the requested word as invalid via an ``error`` field."""


class IncompleteResponseError(WordLookupError):
    """Required top-level fields are missing from the model response."""


class PersistenceReadFailure(Exception):
    """Stored saved-word data could not be read or parsed."""
