"""Router serving the project homepage."""
import logging

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from app.config import Settings, get_settings
from app.services.fragment_client import get_fragment_client
from app.usecases import render_homepage
from app.utils.host import request_host

router = APIRouter()
logger = logging.getLogger(__name__)

HTML_MEDIA_TYPE = "text/html; charset=UTF-8"


@router.get("/", response_class=Response)
@router.get("/index.php", response_class=Response, include_in_schema=False)
def homepage(
    request: Request,
    client: httpx.Client = Depends(get_fragment_client),
    settings: Settings = Depends(get_settings),
):
    """Project homepage for the group named by the request's Host header."""
    body = render_homepage.execute(request_host(request.headers), client, settings)
    return Response(content=body, media_type=HTML_MEDIA_TYPE)
