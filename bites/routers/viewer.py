"""API routes driving bites viewer sessions."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Response, status

from ..models import Author, Item, MediaRef
from ..schemas import (
    AuthorPayload,
    AuthorRingResponse,
    AuthorSummary,
    CollectionPayload,
    ItemEngagementResponse,
    ItemFeedResponse,
    ItemResponse,
    OpenRequest,
    PlaybackResponse,
    ViewerSessionResponse,
)
from ..services import (
    InvalidDuration,
    NotFound,
    SessionLimitReached,
    ViewerController,
    format_time_ago,
    viewer_sessions,
)
from ..services.viewer_stream import viewer_stream_manager

router = APIRouter(prefix="/viewers", tags=["viewers"])

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _build_author(payload: AuthorPayload) -> Author:
    items = [
        Item(
            id=item.id,
            author_id=payload.id,
            media=MediaRef(type=item.media.type, url=item.media.url, thumbnail=item.media.thumbnail),
            duration_seconds=item.duration_seconds,
            caption=item.caption,
            view_count=item.view_count,
            like_count=item.like_count,
            liked_by_viewer=item.liked_by_viewer,
            tags=frozenset(item.tags),
            created_at=_as_utc(item.created_at),
        )
        for item in payload.items
    ]
    return Author(id=payload.id, display_name=payload.display_name, avatar_ref=payload.avatar_ref, items=items)


def _serialize_playback(session_id: str, controller: ViewerController) -> PlaybackResponse:
    snapshot = controller.snapshot()
    author = controller.current_author
    item = controller.current_item
    return PlaybackResponse(
        session_id=session_id,
        status=snapshot.status,
        author_index=snapshot.author_index,
        item_index=snapshot.item_index,
        progress=snapshot.progress,
        paused=snapshot.paused,
        author_id=author.id if author is not None else None,
        item_id=item.id if item is not None else None,
    )


def _serialize_item(item: Item, *, now: datetime) -> ItemResponse:
    return ItemResponse(
        id=item.id,
        author_id=item.author_id,
        media_type=item.media.type,
        media_url=item.media.url,
        thumbnail_url=item.media.thumbnail,
        caption=item.caption,
        duration_seconds=item.duration_seconds,
        view_count=item.view_count,
        like_count=item.like_count,
        liked_by_viewer=item.liked_by_viewer,
        tags=sorted(item.tags),
        created_at=item.created_at,
        time_ago=format_time_ago(item.created_at, now=now),
    )


def _serialize_author(author: Author) -> AuthorSummary:
    return AuthorSummary(
        id=author.id,
        display_name=author.display_name,
        avatar_ref=author.avatar_ref,
        item_count=len(author.items),
        seen=author.seen,
        has_unseen_items=author.has_unseen_items,
        unseen_count=len(author.items) if author.has_unseen_items else 0,
    )


def _get_controller(session_id: str) -> ViewerController:
    try:
        return viewer_sessions.get(session_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("", response_model=ViewerSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_viewer_session(payload: CollectionPayload) -> ViewerSessionResponse:
    authors = [_build_author(entry) for entry in payload.authors]
    try:
        session_id, controller = viewer_sessions.create(authors)
    except SessionLimitReached as exc:
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    controller.events.subscribe(viewer_stream_manager.forward(session_id))
    return ViewerSessionResponse(
        session_id=session_id,
        author_count=len(controller.collection),
        item_count=sum(len(author.items) for author in controller.collection),
        playback=_serialize_playback(session_id, controller),
    )


@router.get("/{session_id}", response_model=PlaybackResponse)
async def get_viewer_session(session_id: str) -> PlaybackResponse:
    return _serialize_playback(session_id, _get_controller(session_id))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_viewer_session(session_id: str) -> Response:
    try:
        viewer_sessions.discard(session_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{session_id}/open", response_model=PlaybackResponse)
async def open_viewer(session_id: str, payload: OpenRequest) -> PlaybackResponse:
    controller = _get_controller(session_id)
    try:
        controller.open(payload.author_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except InvalidDuration as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return _serialize_playback(session_id, controller)


@router.post("/{session_id}/close", response_model=PlaybackResponse)
async def close_viewer(session_id: str) -> PlaybackResponse:
    controller = _get_controller(session_id)
    controller.close()
    return _serialize_playback(session_id, controller)


@router.post("/{session_id}/next", response_model=PlaybackResponse)
async def next_item(session_id: str) -> PlaybackResponse:
    controller = _get_controller(session_id)
    controller.next()
    return _serialize_playback(session_id, controller)


@router.post("/{session_id}/previous", response_model=PlaybackResponse)
async def previous_item(session_id: str) -> PlaybackResponse:
    controller = _get_controller(session_id)
    controller.previous()
    return _serialize_playback(session_id, controller)


@router.post("/{session_id}/pause", response_model=PlaybackResponse)
async def pause_viewer(session_id: str) -> PlaybackResponse:
    controller = _get_controller(session_id)
    controller.pause()
    return _serialize_playback(session_id, controller)


@router.post("/{session_id}/resume", response_model=PlaybackResponse)
async def resume_viewer(session_id: str) -> PlaybackResponse:
    controller = _get_controller(session_id)
    controller.resume()
    return _serialize_playback(session_id, controller)


@router.post("/{session_id}/items/{item_id}/like", response_model=ItemEngagementResponse)
async def toggle_item_like(session_id: str, item_id: str) -> ItemEngagementResponse:
    controller = _get_controller(session_id)
    try:
        item = controller.toggle_like(item_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ItemEngagementResponse(item_id=item.id, like_count=item.like_count, liked_by_viewer=item.liked_by_viewer)


@router.get("/{session_id}/authors", response_model=AuthorRingResponse)
async def list_authors(session_id: str) -> AuthorRingResponse:
    controller = _get_controller(session_id)
    return AuthorRingResponse(items=[_serialize_author(author) for author in controller.collection])


@router.get("/{session_id}/items", response_model=ItemFeedResponse)
async def list_recent_items(session_id: str) -> ItemFeedResponse:
    controller = _get_controller(session_id)
    now = datetime.now(timezone.utc)
    items = [item for author in controller.collection for item in author.items]
    items.sort(key=lambda item: item.created_at, reverse=True)
    return ItemFeedResponse(items=[_serialize_item(item, now=now) for item in items])


__all__ = ["router"]
