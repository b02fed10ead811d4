"""Testing utilities for LazyTreeLib consumers."""

from .fixtures import RecordingRule, CountingIterator

__all__ = ['RecordingRule', 'CountingIterator']
