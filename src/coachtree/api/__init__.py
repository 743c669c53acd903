"""REST API exposing a positioned coaching tree to renderers."""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import Response

from coachtree.api.schemas import ConnectionResponse, RoleHistoryResponse, TreeResponse
from coachtree.config import LayoutSettings
from coachtree.errors import CoachTreeError
from coachtree.ingest import parse_rows, sample_rows
from coachtree.pipeline import CoachingTree


logger = logging.getLogger(__name__)


async def _read_upload(upload: UploadFile) -> str:
    contents = await upload.read()
    if not contents:
        raise HTTPException(status_code=400, detail="file is empty")
    try:
        return contents.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"file is not UTF-8 text: {exc}") from exc


def create_app(settings: LayoutSettings | None = None) -> FastAPI:
    # coachtree.export imports coachtree.api.schemas; a module-level import would cycle
    from coachtree.export import (
        connection_response,
        positions_to_csv,
        role_history_response,
        tree_to_response,
    )

    app = FastAPI(title="coachtree")
    tree = CoachingTree(settings)
    app.state.tree = tree

    def require_loaded() -> None:
        if not tree.loaded:
            raise HTTPException(status_code=404, detail="No coaching data loaded")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/tree", response_model=TreeResponse)
    async def load_tree(file: UploadFile = File(...)) -> TreeResponse:
        text = await _read_upload(file)
        try:
            tree.load(parse_rows(text))
        except CoachTreeError as exc:
            logger.warning("Rejected upload %s: %s", file.filename, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return tree_to_response(tree)

    @app.post("/tree/sample", response_model=TreeResponse)
    async def load_sample() -> TreeResponse:
        tree.load(sample_rows())
        return tree_to_response(tree)

    @app.get("/tree", response_model=TreeResponse)
    async def get_tree() -> TreeResponse:
        require_loaded()
        return tree_to_response(tree)

    @app.get("/tree/positions.csv")
    async def export_positions() -> Response:
        require_loaded()
        return Response(
            content=positions_to_csv(tree),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="positions.csv"'},
        )

    @app.get("/coaches/{name}/roles", response_model=RoleHistoryResponse)
    async def coach_roles(name: str) -> RoleHistoryResponse:
        try:
            return role_history_response(tree, name)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Coach not found") from exc

    @app.get("/connections/related", response_model=List[ConnectionResponse])
    async def related_connections(
        coach: str = Query(...),
        team: str = Query(...),
        season: int = Query(...),
    ) -> List[ConnectionResponse]:
        require_loaded()
        return [
            connection_response(connection)
            for connection in tree.related_connections(coach, team, season)
        ]

    return app
