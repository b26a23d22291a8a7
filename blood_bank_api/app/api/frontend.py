"""
Single-page frontend hosting.

``GET /`` and every GET path not claimed by the API answer with the
frontend's ``index.html``, so client-side routes survive a reload.
Paths naming an existing file inside the frontend directory (scripts,
stylesheets, images) are served as that file.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

router = APIRouter()

INDEX_DOCUMENT = "index.html"


def resolve_asset(frontend_dir: Path, path: str) -> Path:
    """Return the file to serve for ``path``.

    Falls back to the index document when ``path`` is empty, does not
    exist, is a directory or points outside ``frontend_dir``.
    """
    root = frontend_dir.resolve()
    if path:
        candidate = (root / path).resolve()
        if candidate.is_file() and root in candidate.parents:
            return candidate
    return root / INDEX_DOCUMENT


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, request: Request) -> FileResponse:
    frontend_dir = Path(request.app.state.settings.frontend_dir)
    target = resolve_asset(frontend_dir, full_path)
    if not target.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Frontend not found")
    return FileResponse(target)
