"""
Transform API routes.

Each route validates its query parameters, reads the whole request body,
runs the transform in the threadpool and answers with the encoded image.
Failures are raised as ``ImageResizerError`` and rendered by the
application's exception handler.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from ..containers import Container
from ..libs.image_utils import sniff_content_type
from ..schemas.formats import get_supported_formats
from ..schemas.request import ConvertParams, ResizeParams, ThumbnailParams
from ..services.transformer import ImageTransformer

router = APIRouter(tags=["transform"])

_BINARY = {"schema": {"type": "string", "format": "binary"}}
_IMAGE_CONTENT = {f"image/{fmt}": _BINARY for fmt in get_supported_formats()}

# The body is read raw, so document it explicitly
_IMAGE_BODY = {"requestBody": {"required": True, "content": _IMAGE_CONTENT}}

_RESPONSES = {
    200: {"description": "Transformed image", "content": _IMAGE_CONTENT},
    400: {"description": "Missing or invalid query parameters", "content": {"text/plain": {}}},
    422: {"description": "Unsupported image format", "content": {"text/plain": {}}},
    500: {"description": "Invalid image or encoding failure", "content": {"text/plain": {}}},
}


def _image_response(data: bytes) -> Response:
    """Build a 200 response whose content type is sniffed from the image bytes."""
    return Response(content=data, media_type=sniff_content_type(data))


@router.post("/resize", response_class=Response, responses=_RESPONSES, openapi_extra=_IMAGE_BODY)
@inject
async def resize_image(
    request: Request,
    transformer: ImageTransformer = Depends(Provide[Container.transformer]),
):
    """
    Resize an image to exactly ``width`` x ``height``.

    The aspect ratio is not preserved; the output keeps the upload's format.
    """
    params = ResizeParams.from_query(request.query_params)
    body = await request.body()

    resized = await run_in_threadpool(transformer.resize, body, params.height, params.width)
    return _image_response(resized)


@router.post("/convert", response_class=Response, responses=_RESPONSES, openapi_extra=_IMAGE_BODY)
@inject
async def convert_image(
    request: Request,
    transformer: ImageTransformer = Depends(Provide[Container.transformer]),
):
    """Re-encode an image as ``format`` (jpeg, png or gif)."""
    params = ConvertParams.from_query(request.query_params)
    body = await request.body()

    converted = await run_in_threadpool(transformer.convert, body, params.format)
    return _image_response(converted)


@router.post("/thumbnail", response_class=Response, responses=_RESPONSES, openapi_extra=_IMAGE_BODY)
@inject
async def thumbnail_image(
    request: Request,
    transformer: ImageTransformer = Depends(Provide[Container.transformer]),
):
    """
    Scale an image to ``width``, preserving its aspect ratio.

    The output keeps the upload's format.
    """
    params = ThumbnailParams.from_query(request.query_params)
    body = await request.body()

    thumbnail = await run_in_threadpool(transformer.thumbnail, body, params.width)
    return _image_response(thumbnail)
