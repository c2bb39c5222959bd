"""
Git helper utilities for repo-inspect.

Resolves which repository to inspect when none is given on the command line,
from the ``GH_REPO`` environment variable or the local clone's remote.
"""

import os
import re
import subprocess
from pathlib import Path

from repo_inspect.exceptions import ArgumentError, ResolutionError
from repo_inspect.types.repos import RepositoryIdentity

DEFAULT_REMOTE = "origin"

# https://host/owner/repo(.git), ssh://git@host(:port)/owner/repo(.git)
_URL_PATTERN = re.compile(r"^[a-z][a-z0-9+.-]*://[^/]+/(?P<path>.+?)/?$", re.IGNORECASE)
# git@host:owner/repo(.git)
_SCP_PATTERN = re.compile(r"^(?:[^@/]+@)?[^:/]+:(?P<path>[^/].*?)/?$")


def parse_repository(value: str) -> RepositoryIdentity:
    """
    Parse an ``owner/repo`` argument.

    Raises:
        ArgumentError: Unless the value has exactly one '/' with text on both sides
    """
    parts = value.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ArgumentError("repository must be in format 'owner/repo'")
    return RepositoryIdentity(owner=parts[0], name=parts[1])


def parse_remote_url(url: str) -> RepositoryIdentity:
    """
    Extract owner and repository name from a git remote URL.

    Accepts HTTPS, ``ssh://`` and scp-style (``git@host:owner/repo.git``) URLs.

    Raises:
        ResolutionError: If the URL does not end in ``owner/repo``
    """
    url = url.strip()
    match = _URL_PATTERN.match(url) or _SCP_PATTERN.match(url)
    if match is None:
        raise ResolutionError(f"unrecognized remote URL: {url}")

    path = match.group("path")
    if path.endswith(".git"):
        path = path[: -len(".git")]

    segments = path.split("/")
    if len(segments) < 2 or not segments[-2] or not segments[-1]:
        raise ResolutionError(f"remote URL does not name a repository: {url}")
    return RepositoryIdentity(owner=segments[-2], name=segments[-1])


def remote_url(cwd: str | Path | None = None, remote: str = DEFAULT_REMOTE) -> str:
    """
    Read a remote's URL from the git repository at ``cwd``.

    Raises:
        ResolutionError: If git is unavailable, ``cwd`` is not a repository,
            or the remote does not exist
    """
    try:
        result = subprocess.run(
            ["git", "remote", "get-url", remote],
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise ResolutionError("git executable not found") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"git exited with status {e.returncode}"
        raise ResolutionError(detail) from e

    return result.stdout.strip()


def current_repository(cwd: str | Path | None = None) -> RepositoryIdentity:
    """
    Determine the repository to inspect when none was specified.

    ``GH_REPO`` wins when set; otherwise the ``origin`` remote of the git
    repository in ``cwd`` is used. No API call is made.

    Raises:
        ResolutionError: If neither source yields a repository
    """
    env_repo = os.environ.get("GH_REPO")
    if env_repo:
        # [HOST/]OWNER/REPO
        if env_repo.count("/") == 2:
            env_repo = env_repo.split("/", 1)[1]
        try:
            return parse_repository(env_repo)
        except ArgumentError as e:
            raise ResolutionError(f"GH_REPO: {e.message}") from e

    return parse_remote_url(remote_url(cwd))
