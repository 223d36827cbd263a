"""
Test suite for News Sleuth.

Unit tests for extraction, fetching, configuration and the CLI.
All HTTP traffic is served by mock transports.
"""
