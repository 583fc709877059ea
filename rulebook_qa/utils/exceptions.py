"""Exception hierarchy for Rulebook QA."""


class RulebookQAException(Exception):
    """Base exception for all Rulebook QA errors."""

    pass


class ConfigurationError(RulebookQAException):
    """Exception raised due to configuration issues."""

    pass


class InvalidQuestionError(RulebookQAException):
    """Exception raised when a question is empty or not a string."""

    pass


class EmbeddingError(RulebookQAException):
    """Exception raised when the embedding service fails."""

    pass


class RetrievalError(RulebookQAException):
    """Exception raised when the vector store query fails."""

    pass


class CompletionError(RulebookQAException):
    """Exception raised when the completion service fails."""

    pass
