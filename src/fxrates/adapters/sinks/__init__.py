"""
Sink Adapters - Row Destinations

Row sinks receive normalized rates one row at a time.
"""

from fxrates.adapters.sinks.memory import ListRowSink

__all__ = ["ListRowSink"]
