"""POST /api/shadow — one-shot shadow; POST /api/shadow/stream — per-tick SSE run."""

from __future__ import annotations

import asyncio
import json
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from shadowcast.dependencies import get_shadow_config
from shadowcast.engine.config import ShadowConfig
from shadowcast.engine.projector import ShadowProjector
from shadowcast.engine.scene import create_scene
from shadowcast.models.requests import ShadowRequest, ShadowStreamRequest
from shadowcast.models.responses import ShadowResponse

router = APIRouter(prefix="/shadow")


_SENTINEL = object()  # marks end of queue


@router.post("", response_model=ShadowResponse)
async def shadow(
    req: ShadowRequest,
    config: ShadowConfig = Depends(get_shadow_config),
) -> ShadowResponse:
    start = time.perf_counter()
    try:
        projector = ShadowProjector(req.vertices, config=config, name="request")
        frame = projector.compute_shadow(req.viewer, projection_scale=req.projection_scale)
    except ValueError as e:  # malformed outline; geometry failures disable instead
        raise HTTPException(status_code=422, detail=str(e)) from e
    elapsed = round((time.perf_counter() - start) * 1000, 2)

    if frame is None:
        return ShadowResponse(
            active=projector.is_active, processing_time_ms=elapsed, error=projector.last_error
        )

    return ShadowResponse(
        active=True,
        hull=frame.hull.tolist(),
        hull_size=frame.hull_size,
        triangles=frame.triangles.tolist(),
        update_order=frame.update_order.value,
        processing_time_ms=elapsed,
    )


async def _stream_shadow(req: ShadowStreamRequest, config: ShadowConfig) -> AsyncGenerator[str, None]:
    """Drive scene.run_streaming() in a thread, yielding SSE events as ticks finish."""
    try:
        scene = create_scene(req.obstacles, config=config)
    except ValueError as e:
        data = json.dumps({"type": "error", "message": str(e)})
        yield f"event: error\ndata: {data}\n\n"
        return

    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def _run_scene() -> None:
        """Sync scene in thread — pushes per-tick dicts onto the async queue."""
        try:
            for progress in scene.run_streaming(req.viewer_path):
                loop.call_soon_threadsafe(queue.put_nowait, progress)
        finally:
            loop.call_soon_threadsafe(queue.put_nowait, _SENTINEL)

    # Only this worker thread touches the projectors
    worker = loop.run_in_executor(None, _run_scene)

    while True:
        item = await queue.get()
        if item is _SENTINEL:
            break
        yield f"event: tick\ndata: {json.dumps(item)}\n\n"

    try:
        await worker
    except ValueError as e:
        data = json.dumps({"type": "error", "message": str(e)})
        yield f"event: error\ndata: {data}\n\n"
        return

    summary = {"type": "done", "active": scene.active_count, "errors": scene.errors}
    yield f"event: done\ndata: {json.dumps(summary)}\n\n"


@router.post("/stream")
async def shadow_stream(
    req: ShadowStreamRequest,
    config: ShadowConfig = Depends(get_shadow_config),
) -> StreamingResponse:
    return StreamingResponse(_stream_shadow(req, config), media_type="text/event-stream")
