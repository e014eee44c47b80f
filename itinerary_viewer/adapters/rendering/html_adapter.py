"""HTML itinerary renderer adapter.

Renders a view state as self-contained HTML (inline styles only) so it
can be dropped into a Gradio ``gr.HTML`` component or saved as a page.
All record text is escaped.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ...config import AppConfig, get_config
from ...domain.models import ItineraryRecord, ItineraryViewState, ViewStatus
from ...itinerary.query import filter_by_day
from ...presentation import (
    TRAVEL_TIPS,
    activity_category,
    has_value,
    map_search_url,
    transport_style,
    useful_links,
)

_CARD_STYLE = (
    "background:#fff;padding:16px;border-radius:8px;margin-bottom:12px;"
    "box-shadow:0 1px 3px rgba(0,0,0,.15);border-left:4px solid #9333ea;"
)
_BADGE_STYLE = (
    "display:inline-block;font-size:12px;padding:2px 8px;border-radius:9999px;"
    "margin-right:6px;background:{bg};color:{fg};"
)
_CENTERED_STYLE = "display:flex;justify-content:center;align-items:center;height:40vh;"


def _e(text: str) -> str:
    return html.escape(text, quote=True)


@dataclass
class HtmlItineraryRenderer:
    """Renders loading, error and ready states as HTML.

    Attributes:
        config: Application configuration (titles, messages, map links)
    """

    config: AppConfig = field(default_factory=get_config)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, state: ItineraryViewState) -> str:
        if state.status is ViewStatus.LOADING:
            return f'<div style="{_CENTERED_STYLE}">{_e(self.config.loading_message)}</div>'

        if state.status is ViewStatus.ERROR:
            message = state.error or self.config.error_message
            return (
                f'<div style="{_CENTERED_STYLE}color:#ef4444;">{_e(message)}</div>'
            )

        records = filter_by_day(state.itinerary, state.selected_day)
        self._logger.debug(
            "Rendering day",
            extra={"day": state.selected_day, "records": len(records)},
        )
        return self.render_records(records)

    def render_header(self) -> str:
        return (
            '<div style="background:linear-gradient(to right,#3b82f6,#9333ea);'
            'color:#fff;padding:24px;border-radius:8px;margin-bottom:16px;">'
            f'<h1 style="font-size:28px;font-weight:bold;margin:0;">{_e(self.config.title)}</h1>'
            f'<p style="margin:8px 0 0 0;">{_e(self.config.subtitle)}</p>'
            "</div>"
        )

    def render_records(self, records: Sequence[ItineraryRecord]) -> str:
        return "<div>" + "".join(self.render_card(r) for r in records) + "</div>"

    def render_card(self, record: ItineraryRecord) -> str:
        icon = activity_category(record.activity).icon
        parts: List[str] = [
            f'<div style="{_CARD_STYLE}">',
            '<div style="display:flex;justify-content:space-between;align-items:flex-start;">',
            '<div style="display:flex;gap:12px;">',
            f'<div style="padding:8px;background:#f3e8ff;border-radius:9999px;height:fit-content;">{icon}</div>',
            "<div>",
            f'<h3 style="font-weight:bold;font-size:18px;margin:0;">{_e(record.activity)}</h3>',
            f'<p style="color:#4b5563;margin:4px 0;">{_e(record.place)}</p>',
        ]

        url = map_search_url(record.place, self.config.maps)
        if url:
            parts.append(
                f'<a href="{_e(url)}" target="_blank" rel="noopener noreferrer" '
                'style="color:#2563eb;font-size:14px;">🗺️ Ver en Google Maps</a>'
            )

        parts.extend(
            [
                "</div>",
                "</div>",
                f'<div style="color:#374151;font-size:14px;white-space:nowrap;">🕒 {_e(record.time)}</div>',
                "</div>",
                '<div style="margin-top:12px;">',
            ]
        )

        if has_value(record.transport):
            style = transport_style(record.transport)
            badge = _BADGE_STYLE.format(bg=style.background, fg=style.foreground)
            parts.append(f'<span style="{badge}">📍 {_e(record.transport)}</span>')

        if has_value(record.alternative):
            badge = _BADGE_STYLE.format(bg="#e0e7ff", fg="#3730a3")
            parts.append(f'<span style="{badge}">⚠️ Alt: {_e(record.alternative)}</span>')

        parts.append("</div></div>")
        return "".join(parts)

    def render_tips(self) -> str:
        tips = "".join(f"<li>{_e(tip)}</li>" for tip in TRAVEL_TIPS)
        links = "".join(
            f'<a href="{_e(link.url)}" target="_blank" rel="noopener noreferrer" '
            'style="display:block;padding:8px;background:#fff;border:1px solid #bfdbfe;'
            f'border-radius:4px;color:#1d4ed8;margin-bottom:6px;">{link.icon} {_e(link.label)}</a>'
            for link in useful_links(self.config.maps)
        )
        return (
            '<div style="margin-top:24px;padding:16px;background:#eff6ff;'
            'border:1px solid #bfdbfe;border-radius:8px;color:#1d4ed8;">'
            '<h2 style="font-size:18px;font-weight:bold;color:#1e40af;">Consejos para tu viaje</h2>'
            f'<ul style="padding-left:20px;">{tips}</ul>'
            '<h3 style="font-weight:bold;color:#1e40af;">Enlaces útiles:</h3>'
            f"{links}"
            "</div>"
        )
