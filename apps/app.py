# -*- coding: utf-8 -*-
import html
import tempfile
from pathlib import Path
from typing import Any, Dict, Tuple

import gradio as gr

from itinerary_viewer.adapters.rendering import HtmlItineraryRenderer
from itinerary_viewer.container import get_container
from itinerary_viewer.domain.errors import RenderingError
from itinerary_viewer.domain.models import ItineraryViewState
from itinerary_viewer.monitoring import configure_logging
from itinerary_viewer.ports.cache import CachePort
from itinerary_viewer.ports.rendering import ItineraryRendererPort
from itinerary_viewer.services import ItineraryViewService

configure_logging()

CONTAINER = get_container()
SERVICE: ItineraryViewService = CONTAINER.resolve(ItineraryViewService)
RENDERER: HtmlItineraryRenderer = CONTAINER.resolve(ItineraryRendererPort)
CACHE: CachePort = CONTAINER.resolve(CachePort)


def _map_iframe_from_html(document_html: str, *, height_px: int = 520) -> str:
    escaped = html.escape(document_html, quote=True)
    return (
        f'<iframe srcdoc="{escaped}" '
        f'style="width: 100%; height: {height_px}px; border: 0;" '
        f'loading="lazy"></iframe>'
    )


def _view(state: ItineraryViewState) -> Tuple[ItineraryViewState, Dict[str, Any], str, Dict[str, Any], str]:
    """Component values for a state: state, day radio, cards, retry button, map."""
    labels = list(state.itinerary.day_labels)
    day_radio = gr.update(
        choices=labels,
        value=state.selected_day if state.selected_day in labels else None,
        visible=state.is_ready and bool(labels),
    )
    retry_btn = gr.update(visible=not state.is_ready)
    return state, day_radio, SERVICE.render(state), retry_btn, "<p></p>"


def load_itinerary() -> Tuple[ItineraryViewState, Dict[str, Any], str, Dict[str, Any], str]:
    return _view(SERVICE.load())


def select_day(day: str, state: ItineraryViewState) -> Tuple[str, ItineraryViewState, str]:
    if not day:
        return SERVICE.render(state), state, "<p></p>"
    new_state = SERVICE.select_day(state, day)
    return SERVICE.render(new_state), new_state, "<p></p>"


def show_day_map(state: ItineraryViewState) -> str:
    with tempfile.TemporaryDirectory() as tmp:
        map_path = Path(tmp) / "mapa.html"
        try:
            rendered = SERVICE.render_day_map(state, map_path)
        except RenderingError as exc:
            return f"<pre>{html.escape(f'Sin mapa: {exc.message}')}</pre>"
        if rendered is None:
            return "<p></p>"
        return _map_iframe_from_html(rendered.read_text(encoding="utf-8"))


def ui_clear_cache() -> str:
    removed = CACHE.clear()
    return f"🧹 Caché de mapas vaciada: {removed} lugar(es)."


# ============================ UI ============================
with gr.Blocks(title=SERVICE.config.title) as app:
    gr.HTML(RENDERER.render_header())

    view_state = gr.State(SERVICE.initial_state())

    day_radio = gr.Radio(choices=[], label="📅 Día", visible=False)
    retry_btn = gr.Button("🔄 Reintentar", visible=False)
    cards = gr.HTML(value=SERVICE.render(SERVICE.initial_state()))

    with gr.Row():
        btn_map = gr.Button("🗺️ Ver mapa del día")
        btn_clear = gr.Button("🧹 Vaciar caché de mapas")
    cache_status = gr.Markdown()
    map_view = gr.HTML(value="<p></p>")

    gr.HTML(RENDERER.render_tips())

    outputs = [view_state, day_radio, cards, retry_btn, map_view]
    app.load(load_itinerary, outputs=outputs)
    retry_btn.click(load_itinerary, outputs=outputs)

    day_radio.change(
        select_day,
        inputs=[day_radio, view_state],
        outputs=[cards, view_state, map_view],
    )
    btn_map.click(show_day_map, inputs=view_state, outputs=map_view)
    btn_clear.click(fn=ui_clear_cache, outputs=cache_status)


if __name__ == "__main__":
    app.launch()
