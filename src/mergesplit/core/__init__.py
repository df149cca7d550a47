"""Core constants and exceptions for MergeSplit."""
