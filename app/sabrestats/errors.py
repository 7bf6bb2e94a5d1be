"""Exceptions raised by the fetch, store and notify steps."""


class SabreStatsError(Exception):
    """Base class for every pipeline failure."""


class FetchError(SabreStatsError):
    """Player data could not be fetched or decoded."""


class StoreError(SabreStatsError):
    """The local store could not be opened, read or written."""


class NotifyError(SabreStatsError):
    """The webhook notification could not be delivered."""
