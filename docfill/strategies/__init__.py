"""Concrete strategy implementations.

Subpackages: ``blank_space`` (detect, extract, fill, insert),
``template_engine`` (named variables), ``converters``, ``exporters`` and
``stores``.
"""
