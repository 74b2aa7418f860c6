"""Pure rendering functions: view models -> HTML or text.

All renderers follow the same pattern:
  - Input: view models from ``schemas`` or a ``DashboardState``
  - Output: str (an HTML fragment, a full page, or plain text)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py and the CLI.

Public API:
  - page: build_current_html, build_highlights_html, build_hourly_html,
          build_daily_html, build_status_html, build_dashboard_html
  - text: build_dashboard_text
  - formatting: format_temperature, format_percent, format_wind,
                DateFormatters, DEFAULT_FORMATTERS

Adding a renderer (UI module)
-----------------------------
1. Create a build function that prepares plain values for the template::

       from weather_dashboard.renderers import render_template

       def build_mywidget_html(entries: Sequence[DailyEntry]) -> str:
           rows = [...]
           return render_template("mywidget.html.j2", rows=rows)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).
   CSS goes in ``templates/base.html.j2`` within the <style> block.

3. Call it from ``build_dashboard_html()`` and add the placeholder to
   ``base.html.j2``.

4. Add tests: call your build function with sample data and assert
   the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
