"""
Integration tests for npmbuild.

These tests run real copies against temporary directories and spawn a
fake npm shell script, so they need a POSIX shell.
"""
