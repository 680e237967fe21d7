"""Test suites for the reroute realignment service."""
