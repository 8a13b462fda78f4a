"""DealerTrack: parts, accounts and repair orders for an automotive shop."""

__version__ = "1.0.0"
