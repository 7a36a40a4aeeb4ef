"""
Interaction module: text shown when hovering an airport marker.
"""

from dataclasses import dataclass
import html
import math


@dataclass(frozen=True)
class DisplayText:
    title: str
    lines: tuple
    emphasized: tuple = ()

    def plain(self) -> str:
        return "\n".join((self.title,) + tuple(self.lines))

    def html(self) -> str:
        parts = [f"<strong>{html.escape(self.title)}</strong>"]
        for i, line in enumerate(self.lines):
            text = html.escape(line)
            parts.append(f"<strong>{text}</strong>" if i in self.emphasized else text)
        return "<br/>".join(parts)


def _format_count(value):
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "s/d"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def on_hover(record) -> DisplayText:
    """Tooltip for an AirportRecord: identifier, 2019 -> 2020 operations, reduction."""
    return DisplayText(
        title=record.identifier,
        lines=(
            f"Se redujo de {_format_count(record.prior_value)} a "
            f"{_format_count(record.current_value)} operaciones",
            f"Reducción de: {record.reduction_percent:.1f}%",
        ),
        emphasized=(1,),
    )
