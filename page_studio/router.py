"""
Router FastAPI — API d'édition du Page Studio.

GET    /page-studio/catalog                 → types de blocs + JSON schemas
GET    /page-studio/document                → blocs + sélection + état undo/redo
POST   /page-studio/blocks                  → {"kind"} ajoute un bloc en fin de page
PUT    /page-studio/blocks/{id}             → {"block": {...}} remplace un bloc
POST   /page-studio/blocks/{id}/move        → {"direction": "up"|"down"}
POST   /page-studio/blocks/{id}/duplicate
DELETE /page-studio/blocks/{id}
POST   /page-studio/undo | /redo
GET    /page-studio/settings | PUT          → réglages globaux (hors historique)
GET    /page-studio/preferences | PUT       → préférences éditeur (hors historique)
GET    /page-studio/export/{html|component} → fichier en pièce jointe

Un identifiant introuvable n'est pas une erreur : le document est renvoyé inchangé.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from .blocks import BLOCK_CLASSES, BlockUnion
from .core.document import Direction
from .core.errors import BlockIdMismatch
from .core.schemas import AppPreferences, BlockKind, GlobalSettings
from .editor import EditorSession
from .renderer.export import ExportTarget

log = logging.getLogger(__name__)

router = APIRouter(prefix="/page-studio", tags=["page_studio"])

_SESSION: Optional[EditorSession] = None


def get_session() -> EditorSession:
    """Session unique en mémoire (remplaçable via app.dependency_overrides)."""
    global _SESSION
    if _SESSION is None:
        _SESSION = EditorSession.with_starter_page()
        log.info("Session d'édition créée (%d blocs)", len(_SESSION.document.blocks))
    return _SESSION


class AddBlockRequest(BaseModel):
    kind: BlockKind


class UpdateBlockRequest(BaseModel):
    block: BlockUnion


class MoveRequest(BaseModel):
    direction: Direction


# ── Catalogue / document ────────────────────────────────────────────────────

@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    return JSONResponse({"blocks": [
        {"block_type": kind, "schema": cls.model_json_schema()}
        for kind, cls in BLOCK_CLASSES.items()
    ]})


@router.get("/document", summary="État courant du document")
def get_document(session: EditorSession = Depends(get_session)) -> dict:
    return session.state()


# ── Blocs ───────────────────────────────────────────────────────────────────

@router.post("/blocks", summary="Ajoute un bloc en fin de document")
def add_block(payload: AddBlockRequest, session: EditorSession = Depends(get_session)) -> dict:
    instance_id = session.add_block(payload.kind)
    return {"instance_id": instance_id, **session.state()}


@router.put("/blocks/{instance_id}", summary="Remplace un bloc")
def update_block(instance_id: str, payload: UpdateBlockRequest,
                 session: EditorSession = Depends(get_session)) -> dict:
    block = payload.block
    if block.instance_id is not None and block.instance_id != instance_id:
        error = BlockIdMismatch(instance_id, block.instance_id)
        log.warning("Mise à jour refusée : %s", error)
        raise HTTPException(status_code=400, detail=str(error))
    session.update_block(instance_id, block)
    return session.state()


@router.post("/blocks/{instance_id}/move", summary="Déplace un bloc d'un cran")
def move_block(instance_id: str, payload: MoveRequest, session: EditorSession = Depends(get_session)) -> dict:
    session.move_block(instance_id, payload.direction)
    return session.state()


@router.post("/blocks/{instance_id}/duplicate", summary="Duplique un bloc juste après l'original")
def duplicate_block(instance_id: str, session: EditorSession = Depends(get_session)) -> dict:
    new_id = session.duplicate_block(instance_id)
    return {"instance_id": new_id, **session.state()}


@router.delete("/blocks/{instance_id}", summary="Supprime un bloc")
def delete_block(instance_id: str, session: EditorSession = Depends(get_session)) -> dict:
    session.delete_block(instance_id)
    return session.state()


# ── Historique ──────────────────────────────────────────────────────────────

@router.post("/undo", summary="Annule la dernière mutation")
def undo(session: EditorSession = Depends(get_session)) -> dict:
    session.undo()
    return session.state()


@router.post("/redo", summary="Rétablit la mutation annulée")
def redo(session: EditorSession = Depends(get_session)) -> dict:
    session.redo()
    return session.state()


# ── Réglages ────────────────────────────────────────────────────────────────

@router.get("/settings", response_model=GlobalSettings)
def get_settings(session: EditorSession = Depends(get_session)) -> GlobalSettings:
    return session.settings


@router.put("/settings", response_model=GlobalSettings)
def put_settings(settings: GlobalSettings, session: EditorSession = Depends(get_session)) -> GlobalSettings:
    return session.update_settings(**settings.model_dump())


@router.get("/preferences", response_model=AppPreferences)
def get_preferences(session: EditorSession = Depends(get_session)) -> AppPreferences:
    return session.preferences


@router.put("/preferences", response_model=AppPreferences)
def put_preferences(preferences: AppPreferences, session: EditorSession = Depends(get_session)) -> AppPreferences:
    return session.update_preferences(**preferences.model_dump())


# ── Export ──────────────────────────────────────────────────────────────────

@router.get("/export/{target}", summary="Exporte le document (HTML ou composant React)")
def export(target: ExportTarget, session: EditorSession = Depends(get_session)) -> Response:
    artifact = session.export(target)
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": f'attachment; filename="{artifact.filename}"'},
    )
