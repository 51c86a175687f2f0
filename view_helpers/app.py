"""Preview app — a gradio playground for the view helpers.

Launch:
    python -m view_helpers.app
"""

from __future__ import annotations

import logging
from datetime import datetime

import gradio as gr
from dotenv import load_dotenv

from view_helpers.components.dates import time_ago_in_words_or_date
from view_helpers.components.lists import convert_to_list_items
from view_helpers.components.numbers import commify
from view_helpers.components.tables import generate_table
from view_helpers.components.text import js_string, snakeify
from view_helpers.config import settings

logger = logging.getLogger(__name__)

PREVIEW_CSS = """
.preview li.first { font-weight: 600; }
.preview li.last { border-bottom: none; }
.preview li.odd { background: #f1f5f9; }
.preview li.even { background: #ffffff; }
.preview table { border-collapse: collapse; }
.preview th, .preview td { border: 1px solid #cbd5e1; padding: 4px 8px; }
"""


def preview_date(iso_text: str, short_format: str = "", long_format: str = "") -> str:
    """Format an ISO timestamp typed into the playground."""
    if not iso_text.strip():
        return ""
    try:
        value = datetime.fromisoformat(iso_text.strip().replace("Z", "+00:00"))
    except ValueError:
        return f"Not an ISO date: {iso_text}"
    return time_ago_in_words_or_date(
        value, short_format or None, long_format or None
    ) or ""


def preview_list(text: str, stripe: bool = True) -> str:
    """One list item per non-empty input line."""
    items = [line for line in text.splitlines() if line.strip()]
    return f'<ul class="preview">{convert_to_list_items(items, stripe)}</ul>'


def preview_table(text: str, has_header: bool = True) -> str:
    """Comma-separated rows; the first row is the header when requested."""
    rows = [
        [cell.strip() for cell in line.split(",")]
        for line in text.splitlines()
        if line.strip()
    ]
    headers = rows.pop(0) if has_header and rows else None
    html = generate_table(rows, headers)
    if html is None:
        return '<div class="preview">No rows</div>'
    return f'<div class="preview">{html}</div>'


def create_app() -> gr.Blocks:
    """Build the playground, one tab per helper."""
    with gr.Blocks(title="View Helpers") as app:
        gr.HTML('<div class="page-title">View Helpers</div>')

        with gr.Tabs():
            with gr.TabItem("Dates"):
                date_input = gr.Textbox(label="ISO timestamp", placeholder="2024-01-05T12:00:00")
                with gr.Row():
                    short_fmt = gr.Textbox(label="Short format", placeholder="%b %e")
                    long_fmt = gr.Textbox(label="Long format", placeholder="%b %e, %Y")
                date_output = gr.Textbox(label="Result", interactive=False)
                for component in (date_input, short_fmt, long_fmt):
                    component.change(
                        preview_date,
                        inputs=[date_input, short_fmt, long_fmt],
                        outputs=[date_output],
                    )

            with gr.TabItem("Numbers"):
                number_input = gr.Textbox(label="Numeral", placeholder="79593255.66")
                number_output = gr.Textbox(label="Result", interactive=False)
                number_input.change(commify, inputs=[number_input], outputs=[number_output])

            with gr.TabItem("Identifiers"):
                ident_input = gr.Textbox(label="Identifier", placeholder="Foo::HTMLParser")
                ident_output = gr.Textbox(label="Result", interactive=False)
                ident_input.change(snakeify, inputs=[ident_input], outputs=[ident_output])

            with gr.TabItem("JS strings"):
                js_input = gr.Textbox(label="Text", lines=3)
                js_output = gr.Textbox(label="Escaped", interactive=False)
                js_input.change(js_string, inputs=[js_input], outputs=[js_output])

            with gr.TabItem("Lists"):
                list_input = gr.Textbox(label="Items (one per line)", lines=5)
                list_stripe = gr.Checkbox(label="Stripe", value=True)
                list_output = gr.HTML()
                for component in (list_input, list_stripe):
                    component.change(
                        preview_list,
                        inputs=[list_input, list_stripe],
                        outputs=[list_output],
                    )

            with gr.TabItem("Tables"):
                table_input = gr.Textbox(label="Rows (comma separated)", lines=5)
                table_header = gr.Checkbox(label="First row is header", value=True)
                table_output = gr.HTML()
                for component in (table_input, table_header):
                    component.change(
                        preview_table,
                        inputs=[table_input, table_header],
                        outputs=[table_output],
                    )

    return app


def main():
    # GRADIO_* options (analytics, temp dir, ...) may live in .env
    load_dotenv()

    app = create_app()
    logger.info("Starting preview on %s:%d", settings.preview_host, settings.preview_port)
    app.launch(
        server_name=settings.preview_host,
        server_port=settings.preview_port,
        show_error=True,
        css=PREVIEW_CSS,
    )


if __name__ == "__main__":
    main()
