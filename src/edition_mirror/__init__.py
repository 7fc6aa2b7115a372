"""Edition mirror — a bounded, periodically refreshed cache of dated PDF editions."""

__version__ = "0.1.0"
