# src/api/routes/github_router.py
import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from dependency_injector.wiring import Provide, inject
from github import GithubException
from requests import RequestException

from core.containers.app_containers import AppContainer
from core.logging.logger import get_logger
from upstream.github.client import HaystackGitHubClient
from upstream.github.lookup import LookupStatus

router = APIRouter(prefix="/github", tags=["GitHub"])
logger = get_logger(__name__)

# PyGithub raises GithubException for API errors and lets requests errors
# (connection, timeout) through untouched
UPSTREAM_ERRORS = (GithubException, RequestException)


@router.get("/stars")
@inject
async def stars(
    client: HaystackGitHubClient = Depends(Provide[AppContainer.haystack_client]),
):
    try:
        count = await asyncio.to_thread(client.get_stargazers_count)
    except UPSTREAM_ERRORS as e:
        logger.error(f"Failed to fetch star count: {e}")
        raise HTTPException(status_code=502, detail="GitHub star count unavailable")

    return {"stars": count}


@router.get("/releases")
@inject
async def releases(
    client: HaystackGitHubClient = Depends(Provide[AppContainer.haystack_client]),
):
    try:
        tags = await asyncio.to_thread(client.get_release_tag_names)
    except UPSTREAM_ERRORS as e:
        logger.error(f"Failed to list releases: {e}")
        raise HTTPException(status_code=502, detail="GitHub releases unavailable")

    return {"tags": tags}


@router.get("/docs/download-url")
@inject
async def docs_download_url(
    filename: str = Query(..., min_length=1),
    repo_path: str = "",
    version: Optional[str] = None,
    client: HaystackGitHubClient = Depends(Provide[AppContainer.haystack_client]),
):
    lookup = await asyncio.to_thread(client.lookup_download_url, filename, repo_path, version)

    if lookup.status is LookupStatus.LOOKUP_ERROR:
        raise HTTPException(status_code=502, detail=f"Could not check {lookup.path}")
    if not lookup.is_found:
        raise HTTPException(status_code=404, detail=f"{lookup.path} not found")

    return {"download_url": lookup.url, "path": lookup.path}
