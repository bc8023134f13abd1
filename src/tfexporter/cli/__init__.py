"""
CLI commands for tfexporter.
"""

from tfexporter.cli.collect import collect_command

__all__ = ["collect_command"]
