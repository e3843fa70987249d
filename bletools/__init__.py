"""Helpers for Bluetooth Low Energy UUIDs, values, service maps, codecs and name tables."""

__version__ = "0.1.0"