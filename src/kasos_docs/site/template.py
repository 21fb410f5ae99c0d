"""Page template and placeholder substitution."""

from __future__ import annotations

PLACEHOLDER = "{{SECTIONS_CONTENT}}"

DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>KasOS Documentation</title>
    <link rel="stylesheet" href="assets/docs.css">
    <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.8.0/styles/github.min.css">
    <script src="https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.8.0/highlight.min.js"></script>
</head>
<body>
    <div class="documentation-container">
        <nav class="sidebar">
            <div class="logo">
                <img src="logo.jpg" alt="KasOS Logo">
                <h1>KasOS Docs</h1>
            </div>
            <ul class="nav-items">
                <!-- Navigation will be auto-generated -->
            </ul>
        </nav>
        <main class="content">
            {{SECTIONS_CONTENT}}
        </main>
    </div>
    <footer>
        <img src="logo.jpg" alt="KasOS Logo">
        <span>&copy; 2025 KasOS</span>
    </footer>
    <script src="assets/docs.js"></script>
</body>
</html>"""


def render_document(template: str, body: str) -> tuple[str, bool]:
    """Substitute ``body`` for the first placeholder in ``template``.

    Returns:
        ``(html, placeholder_found)``. Without a placeholder the template is
        returned unchanged.
    """
    if PLACEHOLDER not in template:
        return template, False
    return template.replace(PLACEHOLDER, body, 1), True
