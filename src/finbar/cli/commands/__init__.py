"""Commands __init__ - exports all commands."""

from finbar.cli.commands.chart import chart_command, performance_command

__all__ = ["chart_command", "performance_command"]
