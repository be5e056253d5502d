# src/upstream/github/client.py

from github import Auth, Github, GithubException, UnknownObjectException
from github.ContentFile import ContentFile
from github.Repository import Repository
from typing import List, Optional

from core.logging.logger import get_logger
from upstream.github.docs_path import build_docs_path
from upstream.github.lookup import DownloadUrlLookup


HAYSTACK_OWNER = "deepset-ai"
HAYSTACK_REPO = "haystack"
HAYSTACK_FULL_NAME = f"{HAYSTACK_OWNER}/{HAYSTACK_REPO}"


def build_github(token: Optional[str] = None, timeout: int = 15) -> Github:
    """
    Shared PyGithub client. Anonymous when no token is configured.
    """
    if token:
        return Github(auth=Auth.Token(token), timeout=timeout)
    return Github(timeout=timeout)


class HaystackGitHubClient:
    """
    Low-level GitHub API wrapper for deepset-ai/haystack.
    Every method issues a single API call.
    """

    def __init__(self, github: Github):
        self.client = github
        self.logger = get_logger(__name__)

    def _repo(self, lazy: bool = True) -> Repository:
        # lazy handles skip the GET /repos call
        return self.client.get_repo(HAYSTACK_FULL_NAME, lazy=lazy)

    def lookup_download_url(
        self,
        filename: str,
        repo_path: str,
        version: Optional[str] = None,
    ) -> DownloadUrlLookup:
        """
        Content lookup that keeps "missing" apart from "could not check".

        Args:
            filename: file name, e.g. intro.md
            repo_path: path between docs root and filename, e.g. /v2/
            version: docs version; None or "latest" reads the unversioned tree
        Returns:
            DownloadUrlLookup
        """
        path = build_docs_path(filename, repo_path, version)

        try:
            contents = self._repo().get_contents(path)
            if isinstance(contents, list):
                return DownloadUrlLookup.not_found(path, reason="directory")

            # a ContentFile missing download_url completes itself with another GET
            file: ContentFile = contents
            download_url = file.download_url
        except UnknownObjectException:
            return DownloadUrlLookup.not_found(path, reason="missing")
        except GithubException as e:
            self.logger.warning(f"GitHub API error ({e.status}) looking up {path}: {e}")
            return DownloadUrlLookup.error(path, reason=f"GitHub API error ({e.status})")
        except Exception as e:
            self.logger.warning(f"Failed to look up {path}: {e}")
            return DownloadUrlLookup.error(path, reason=str(e))

        if not download_url:
            return DownloadUrlLookup.not_found(path, reason="no download url")

        return DownloadUrlLookup.found(path, download_url)

    def get_download_url(
        self,
        filename: str,
        repo_path: str,
        version: Optional[str] = None,
    ) -> Optional[str]:
        """
        Direct download URL of a docs file, or None for any kind of miss
        """
        return self.lookup_download_url(filename, repo_path, version).url

    def get_stargazers_count(self) -> int:
        return self._repo(lazy=False).stargazers_count

    def get_release_tag_names(self) -> List[str]:
        """
        Tag names of the first page of releases, newest first as GitHub returns them
        """
        releases = self._repo().get_releases().get_page(0)
        return [release.tag_name for release in releases]
