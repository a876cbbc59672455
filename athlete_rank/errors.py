"""Exceptions raised by the ranking engine and its collaborators."""


class AthleteRankError(Exception):
    """Base class for all athlete-rank errors."""


class InvalidInputError(AthleteRankError, ValueError):
    """A record value could not be coerced into the expected type."""


class DataSourceError(AthleteRankError):
    """
    The storage collaborator failed to answer a query.

    Raised once retries are exhausted; the HTTP layer turns it into a 502.
    """
