"""Integrations subpackage for jxon.

Contains the pytest plugin, auto-discovered via the pytest11 entry point.
"""
