"""Display formatting for performance figures.

Plain-text helpers (currency, percentage) plus Rich console tables for the
CLI: a performance card and a valuation series listing.
"""

from decimal import ROUND_HALF_UP, Decimal

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from finbar.libraries.performance.models import PerformanceSummary, ValuationPoint
from finbar.services.dashboard.models import ChartSnapshot

CURRENCY_SYMBOLS = {
    "ILS": "₪",
    "USD": "$",
}


def format_currency(value: Decimal | float | int, currency: str = "ILS") -> str:
    """
    Format a money amount: grouped thousands, no decimals, currency symbol.

    Example:
        >>> format_currency(Decimal("51234.56"))
        '₪51,235'
        >>> format_currency(-1500, "USD")
        '-$1,500'
    """
    amount = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,}"


def format_signed_currency(value: Decimal | float | int, currency: str = "ILS") -> str:
    """Currency with an explicit '+' for gains (performance card PnL)."""
    formatted = format_currency(value, currency)
    return formatted if formatted.startswith("-") else f"+{formatted}"


def format_percentage(value: Decimal | float | int) -> str:
    """
    Format a percentage with sign and 2 decimals.

    Example:
        >>> format_percentage(Decimal("12.345"))
        '+12.35%'
        >>> format_percentage(-3.1)
        '-3.10%'
    """
    pct = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if pct == 0:
        pct = abs(pct)  # no "-0.00"
    sign = "+" if pct >= 0 else ""
    return f"{sign}{pct}%"


def _get_color(summary: PerformanceSummary) -> str:
    return "green" if summary.is_positive else "red"


def create_performance_table(summary: PerformanceSummary, currency: str = "ILS") -> Table:
    """Create the performance card table."""
    table = Table(title="📊 Performance", show_header=False, box=None, padding=(0, 2))

    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    color = _get_color(summary)
    pct = format_percentage(summary.pnl_percent) if summary.percent_defined else "[dim]n/a[/dim]"

    table.add_row("P&L", f"[{color}]{format_signed_currency(summary.pnl, currency)}[/{color}]")
    table.add_row("P&L %", f"[{color}]{pct}[/{color}]")
    table.add_row("Initial Value", format_currency(summary.initial_value, currency))
    table.add_row("Current Value", format_currency(summary.current_value, currency))

    return table


def create_series_table(points: list[ValuationPoint], currency: str = "ILS") -> Table:
    """Create a table listing each valuation point with its daily change."""
    table = Table(title="📈 Portfolio Value")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right")
    table.add_column("Change", justify="right")

    previous: Decimal | None = None
    for point in points:
        if previous is None or previous == 0:
            change = "[dim]-[/dim]"
        else:
            pct = (point.value - previous) / previous * Decimal("100")
            color = "green" if pct >= 0 else "red"
            change = f"[{color}]{format_percentage(pct)}[/{color}]"
        table.add_row(point.date.isoformat(), format_currency(point.value, currency), change)
        previous = point.value

    return table


def display_performance(snapshot: ChartSnapshot, console: Console | None = None, currency: str = "ILS") -> None:
    """
    Print a performance card for a chart snapshot.

    Args:
        snapshot: Dashboard snapshot to display
        console: Rich console (default: new Console)
        currency: Currency code for amounts
    """
    console = console or Console()

    header = (
        f"[bold]{snapshot.window.value}[/bold]  "
        f"{snapshot.start_date.isoformat()} → {snapshot.end_date.isoformat()}  "
        f"[dim]({len(snapshot.points)} days)[/dim]"
    )
    console.print(Panel(header, title="FINBAR", border_style="blue"))
    console.print(create_performance_table(snapshot.summary, currency))


def display_series(snapshot: ChartSnapshot, console: Console | None = None, currency: str = "ILS") -> None:
    """Print the valuation series of a chart snapshot."""
    console = console or Console()
    console.print(create_series_table(snapshot.points, currency))
