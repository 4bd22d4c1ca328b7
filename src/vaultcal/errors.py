"""Exception types raised while turning note text into events."""


class VaultCalError(Exception):
    """Base class for all vaultcal errors."""


class EventSynthesisError(VaultCalError):
    """A parsed entry could not be converted into an event.

    Raised for one entry at a time; the line grouper reports it and moves on
    to the next entry in the file.
    """
