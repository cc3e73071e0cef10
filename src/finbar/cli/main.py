"""FINBAR CLI main entry point."""

import click

from finbar import __version__
from finbar.cli.commands import chart_command, performance_command


@click.group()
@click.version_option(version=__version__)
def main():
    """FINBAR - Personal Investment Portfolio Tracker"""
    pass


# Register commands
main.add_command(chart_command)
main.add_command(performance_command)


if __name__ == "__main__":
    main()
