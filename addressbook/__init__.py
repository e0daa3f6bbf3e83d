"""Address book entries and their binary/text codecs."""

__version__ = "0.4.0"
