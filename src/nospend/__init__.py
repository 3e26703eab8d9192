"""Nospend: a February essentials-only spending challenge tracker."""

__version__ = "0.1.0"
