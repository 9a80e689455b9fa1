"""
Result Rendering.

Decodes /query response bodies and prints one table per series.
"""

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tsshell.cli.schemas import QueryResult, Scalar, Series
from tsshell.core.exceptions import DecodeError
from tsshell.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def format_scalar(value: Scalar) -> str:
    """Default textual form of a cell. Null renders as an empty cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def sorted_tags(tags: dict[str, str]) -> list[str]:
    """Return 'key=value' pairs in alphabetical order."""
    return sorted(f"{key}={value}" for key, value in tags.items())


def fit_row(row: list[Scalar], width: int) -> list[Scalar]:
    """Truncate or pad a row with nulls to exactly `width` cells."""
    if len(row) >= width:
        return row[:width]
    return row + [None] * (width - len(row))


def decode_result(body: bytes) -> QueryResult:
    """
    Decode a response body.

    Raises:
        DecodeError: If the body is not JSON or not a query result.
    """
    try:
        return QueryResult.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"could not decode response: {e.errors()[0]['msg']}") from e


class ResultRenderer:
    """
    Prints decoded query results to a Rich console.

    Usage:
        renderer = ResultRenderer(Console())
        renderer.render(body)
    """

    def __init__(self, console: Console) -> None:
        self.console = console

    def render(self, body: bytes) -> None:
        """
        Decode `body` and print every series in input order.

        Nothing is printed when decoding fails.

        Raises:
            DecodeError: If the body cannot be decoded.
        """
        result = decode_result(body)

        if result.error:
            self._print_error(result.error)

        series_count = 0
        for series_result in result.results:
            if series_result.error:
                self._print_error(series_result.error)
            for series in series_result.series:
                self.render_series(series)
                series_count += 1

        log_with_source(
            logger,
            "render",
            "debug",
            "Rendered result",
            results=len(result.results),
            series=series_count,
        )

    def render_series(self, series: Series) -> None:
        tags = sorted_tags(series.tags)

        if series.name:
            self.console.print(f"name: {series.name}", markup=False, highlight=False)
        if tags:
            self.console.print(f"tags: {', '.join(tags)}", markup=False, highlight=False)

        self.console.print(self.build_table(series))
        self.console.print(
            f"{len(series.columns)} columns, {len(series.values)} rows in set",
            markup=False,
            highlight=False,
        )
        self.console.print()

    def build_table(self, series: Series) -> Table:
        table = Table(box=box.ASCII, show_header=True, header_style="bold")
        for column in series.columns:
            table.add_column(Text(column), overflow="fold")

        width = len(series.columns)
        for row in series.values:
            table.add_row(*(Text(format_scalar(cell)) for cell in fit_row(row, width)))
        return table

    def _print_error(self, message: str) -> None:
        self.console.print(Text(f"ERR: {message}", style="red"))
