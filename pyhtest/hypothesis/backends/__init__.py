"""Backends for hypothesis tests."""

from pyhtest.hypothesis.backends.cpu import CPUHypothesisBackend

__all__ = ["CPUHypothesisBackend"]
