"""Plain-text table rendering for the CLI.

Numbers are rounded only here. Non-finite figures (gain % on a zero
investment, weights of a zero-value portfolio) print as the configured
placeholder.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import click

from stockfolio.config.defaults import DISPLAY_DEFAULTS
from stockfolio.config.schema import StockfolioConfig
from stockfolio.data.price_source import Quote, SearchResult
from stockfolio.portfolio.dates import format_date
from stockfolio.portfolio.performance import Performance
from stockfolio.portfolio.report import PortfolioReport


@dataclass
class TableStyle:
    decimals: int = DISPLAY_DEFAULTS["decimals"]
    color: bool = DISPLAY_DEFAULTS["color"]
    placeholder: str = DISPLAY_DEFAULTS["placeholder"]

    @classmethod
    def from_config(cls, config: StockfolioConfig) -> TableStyle:
        d = config.display
        return cls(decimals=d.decimals, color=d.color, placeholder=d.placeholder)

    def paint(self, text: str, **styles) -> str:
        return click.style(text, **styles) if self.color else text

    # ------------------------------------------------------------------
    # Cell formatters
    # ------------------------------------------------------------------

    def number(self, value: float | None) -> str:
        if value is None or not math.isfinite(value):
            return self.placeholder
        return f"{value:.{self.decimals}f}"

    def price(self, value: float | None) -> str:
        return self.paint(self.number(value), bold=True)

    def value(self, value: float) -> str:
        text = self.number(value)
        if not math.isfinite(value):
            return text
        return self.paint(text, fg="green" if value >= 0 else "red")

    def gain(self, value: float | None, suffix: str = "") -> str:
        if value is None or not math.isfinite(value):
            return self.placeholder
        if value >= 0:
            return self.paint(f"+{value:.{self.decimals}f}{suffix}", fg="green")
        return self.paint(f"{value:.{self.decimals}f}{suffix}", fg="red")

    def perc(self, value: float | None) -> str:
        return self.gain(value, "%")

    def weight(self, value: float) -> str:
        if not math.isfinite(value):
            return self.placeholder
        return f"{value:.{self.decimals}f}%"

    def symbol(self, text: str) -> str:
        return self.paint(text.upper(), fg="red", bold=True)


def render_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    separators: Sequence[int] = (),
) -> str:
    """Box-drawn table; *separators* are row indices preceded by a rule."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(click.unstyle(cell)))

    def line(left: str, mid: str, right: str) -> str:
        return left + mid.join("─" * (w + 2) for w in widths) + right

    def fmt(cells: Sequence[str]) -> str:
        padded = [
            " " + c + " " * (w - len(click.unstyle(c))) + " " for c, w in zip(cells, widths)
        ]
        return "│" + "│".join(padded) + "│"

    out = [line("┌", "┬", "┐"), fmt(headers), line("├", "┼", "┤")]
    for i, row in enumerate(rows):
        if i in separators:
            out.append(line("├", "┼", "┤"))
        out.append(fmt(row))
    out.append(line("└", "┴", "┘"))
    return "\n".join(out)


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def render_search(results: list[SearchResult], style: TableStyle | None = None) -> str:
    style = style or TableStyle()
    rows = [
        [r.type_disp, style.symbol(r.symbol), r.exchange, style.paint(r.name, fg="green")]
        for r in results
    ]
    return render_table(["asset", "ticker", "exchange", "description"], rows)


def render_quote(quote: Quote, style: TableStyle | None = None) -> str:
    style = style or TableStyle()
    row = [
        quote.type_disp,
        style.symbol(quote.symbol),
        quote.currency,
        style.price(quote.price),
        style.gain(quote.day_change),
        style.perc(quote.day_change_percent),
    ]
    return render_table(
        ["asset", "ticker", "currency", "price", "day gain", "day gain (%)"], [row]
    )


def _performance_cells(p: Performance, style: TableStyle) -> list[str]:
    return [
        style.value(p.invested_value),
        style.gain(p.gain),
        style.perc(p.gain_perc),
        style.value(p.latest_value),
    ]


def render_summary(performance: Performance, style: TableStyle | None = None) -> str:
    style = style or TableStyle()
    return render_table(
        ["invested", "gain", "gain (%)", "current value"],
        [_performance_cells(performance, style)],
    )


def render_portfolio(report: PortfolioReport, style: TableStyle | None = None) -> str:
    """Summary table followed by one table per asset."""
    style = style or TableStyle()
    blocks = [render_summary(report.performance, style)]
    headers = ["", "", "price", "quantity", "invested", "gain", "gain (%)", "current value"]

    for asset in report.assets:
        rows = [
            [
                style.weight(asset.weight),
                style.symbol(asset.symbol),
                style.price(asset.latest_price),
                str(asset.performance.quantity),
                *_performance_cells(asset.performance, style),
            ]
        ]
        for line in asset.lines:
            rows.append(
                [
                    str(line.index),
                    format_date(line.transaction.date),
                    style.price(line.transaction.price),
                    str(line.performance.quantity),
                    *_performance_cells(line.performance, style),
                ]
            )
        blocks.append(render_table(headers, rows, separators=(1,) if len(rows) > 1 else ()))

    return "\n".join(blocks)
