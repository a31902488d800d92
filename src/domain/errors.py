"""
Domain exceptions shared across layers.
"""


class MarketDataNotFoundError(ValueError):
    """The market-data provider answered, but had nothing for the symbol."""


class CapabilityArgumentError(ValueError):
    """Invocation arguments do not satisfy the capability's declared schema."""
