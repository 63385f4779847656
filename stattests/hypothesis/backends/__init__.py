"""Computational backends for hypothesis tests."""

from stattests.hypothesis.backends.cpu import CPUHypothesisBackend

__all__ = ["CPUHypothesisBackend"]
