"""Packaged JSON contracts for inputs, configuration, and command output."""
