"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException

from filetree.api.dependencies import get_list_tree_uc
from filetree.api.schemas import ErrorResponse, FileInfo
from filetree.exceptions import (
    BaseAppError,
    InvalidPathError,
    NotExpandableError,
    NotFoundError,
    UnsupportedContainerError,
)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    501: {"model": ErrorResponse},
}


def split_path(path: str) -> list[str]:
    """Split a request path into segments, dropping empty ones."""
    return [segment for segment in path.split("/") if segment]


def _list_tree(path_segments: list[str]) -> list[FileInfo]:
    try:
        files = get_list_tree_uc().execute(path_segments)
        return [FileInfo.from_entity(f) for f in files]
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e) or "File was not found")
    except UnsupportedContainerError as e:
        raise HTTPException(status_code=501, detail=str(e) or "Not implemented")
    except (InvalidPathError, NotExpandableError) as e:
        raise HTTPException(status_code=400, detail=str(e) or "Not a directory")
    except BaseAppError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/tree", response_model=list[FileInfo], responses=_ERROR_RESPONSES)
def list_root():
    """
    List the base directory.

    Returns:
        list[FileInfo]: Entries of the base directory
    """
    return _list_tree([])


@router.get(
    "/tree/{path:path}", response_model=list[FileInfo], responses=_ERROR_RESPONSES
)
def list_path(path: str):
    """
    List a directory, possibly inside (nested) archives.

    Args:
        path: Slash separated segments relative to the base directory

    Returns:
        list[FileInfo]: Entries of the requested location

    Raises:
        HTTPException: 404 for missing segments, 400 for invalid paths and
            plain files, 501 for unsupported containers
    """
    return _list_tree(split_path(path))
