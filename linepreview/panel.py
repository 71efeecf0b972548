"""Standalone HTML page that hosts a preview fragment in a side panel."""

from __future__ import annotations

from .ui_theme import normalize_theme

NO_PREVIEW_HTML = '<span class="muted">No preview</span>'
DISABLED_HTML = '<span class="muted">Preview disabled</span>'

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta http-equiv="Content-Security-Policy" content="default-src 'none'; style-src 'unsafe-inline';" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Line Preview</title>
    <style>
      :root {{
        color-scheme: light dark;
      }}
      body {{
        margin: 0;
        padding: 12px 14px;
        font-family: ui-monospace, monospace;
        font-size: 13px;
      }}
      .container {{
        border: 1px solid rgba(128, 128, 128, 0.35);
        border-radius: 8px;
        padding: 10px 12px;
        box-shadow: 0 6px 18px rgba(0, 0, 0, 0.18);
      }}
      .muted {{
        opacity: 0.7;
        font-style: italic;
      }}
      code {{
        padding: 0 4px;
        border-radius: 4px;
        background: rgba(128, 128, 128, 0.18);
        font-family: ui-monospace, monospace;
      }}
      .link {{
        color: #3794ff;
        text-decoration: underline;
      }}
      del {{
        opacity: 0.7;
      }}
      body.theme-light {{
        color: #1a1a1a;
        background: #ffffff;
      }}
      body.theme-dark {{
        color: #e6e6e6;
        background: #1f1f1f;
      }}
    </style>
  </head>
  <body class="{theme_class}">
    <div class="container">{content}</div>
  </body>
</html>
"""


def theme_body_class(theme: str) -> str:
    """Return the body class for ``theme``; ``auto`` follows the viewer."""
    normalized = normalize_theme(theme)
    return "" if normalized == "auto" else f"theme-{normalized}"


def build_panel_html(fragment: str, *, enabled: bool, theme: str) -> str:
    """Wrap an already-escaped preview ``fragment`` in a full panel page.

    The page forbids scripts via CSP. ``fragment`` is inserted verbatim, so it
    must come from the inline HTML renderer.
    """
    if not enabled:
        content = DISABLED_HTML
    else:
        content = fragment or NO_PREVIEW_HTML
    return _PAGE_TEMPLATE.format(theme_class=theme_body_class(theme), content=content)


__all__ = ["DISABLED_HTML", "NO_PREVIEW_HTML", "build_panel_html", "theme_body_class"]
