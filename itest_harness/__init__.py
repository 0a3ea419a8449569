"""Integration-test harness: runner options and database availability probes."""

__version__ = "0.1.0"
