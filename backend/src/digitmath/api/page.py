"""
HTML page for the calculator form.

The page is a single template with two forms (multiplication and factorial)
and optional result / error panels. Every dynamic value is escaped.
"""

from html import escape

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Number Operations</title>
    <style>
        body {{ font-family: sans-serif; background: #f4f4f4; }}
        .container {{ max-width: 640px; margin: 40px auto; background: #fff; padding: 24px; }}
        .result, .error {{ margin: 20px 0; padding: 12px; word-wrap: break-word; }}
        .result {{ background: #e8f5e9; }}
        .error {{ background: #ffebee; }}
    </style>
</head>
<body>

<div class="container">
    <h1 style="text-align:center;">Operations using addition only</h1>

    <h2>Multiplication</h2>
    <form method="post">
        <input type="hidden" name="action" value="multiply">
        <label><input type="text" name="a" placeholder="First number" required></label>
        <label><input type="text" name="b" placeholder="Second number" required></label>
        <button type="submit">Multiply</button>
    </form>

    <hr>

    <h2>Factorial</h2>
    <form method="post">
        <input type="hidden" name="action" value="factorial">
        <label><input type="number" name="n" placeholder="Number for factorial" min="0" required></label>
        <button type="submit">Calculate factorial</button>
    </form>
{panels}
</div>

</body>
</html>
"""

_RESULT_PANEL = """
    <div class="result">
        <strong>Result:</strong><br> {value}
    </div>
"""

_ERROR_PANEL = """
    <div class="error">
        <strong>Error:</strong><br> {value}
    </div>
"""


def render_page(result: str | None = None, error: str | None = None) -> str:
    """Render the calculator page with an optional result and error message."""
    panels = ""
    if result is not None:
        panels += _RESULT_PANEL.format(value=escape(result))
    if error is not None:
        panels += _ERROR_PANEL.format(value=escape(error))

    return _PAGE_TEMPLATE.format(panels=panels)
