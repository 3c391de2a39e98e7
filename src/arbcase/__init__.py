"""Season stats and arbitration comparables for pitcher valuation."""

__version__ = "0.1.0"
