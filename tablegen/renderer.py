# tablegen/renderer.py
EXPORT_FILENAME = "table.tex"
EXPORT_MEDIA_TYPE = "text/plain; charset=utf-8"


def attachment_header(filename: str = EXPORT_FILENAME) -> dict:
    """Content-Disposition header that makes browsers save the markup as a .tex file."""
    return {"Content-Disposition": f'attachment; filename="{filename}"'}
