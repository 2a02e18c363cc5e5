"""Project files: listing, download links and multipart upload with progress."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

import httpx

from ..errors import UploadError
from ..models import ProjectFile
from ._base import Resource

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "files"
UPLOAD_CHUNK_SIZE = 64 * 1024

FileSpec = Union[str, Path, Tuple[str, bytes], Tuple[str, bytes, str]]
ProgressCallback = Callable[[int], None]


def _file_part(item: FileSpec) -> Tuple[str, Tuple[Any, ...]]:
    if isinstance(item, (str, Path)):
        path = Path(item)
        return UPLOAD_FIELD, (path.name, path.read_bytes())
    return UPLOAD_FIELD, tuple(item)


def _percent(sent: int, total: int) -> int:
    return int(sent * 100 / total + 0.5) if total else 100


class ProjectsResource(Resource):
    """Files attached to a client project."""

    def files(self, project_id: Any) -> List[Dict[str, Any]]:
        data = self._api.get(f"/admin/projects/{project_id}")
        return (data.get("files") if isinstance(data, dict) else None) or []

    def file_download_url(self, project_id: Any, file_id: Any) -> Optional[str]:
        """Return ``file_url`` of the matching project file, or ``None``."""
        for raw in self.files(project_id):
            f = ProjectFile.model_validate(raw)
            if f.id == file_id:
                return f.file_url
        return None

    def delete_file(self, project_id: Any, file_id: Any) -> Any:
        return self._api.delete(f"/admin/projects/files/{file_id}")

    def upload_files(
        self,
        project_id: Any,
        files: Sequence[FileSpec],
        *,
        on_progress: Optional[ProgressCallback] = None,
    ) -> Any:
        """Upload files as multipart ``files`` fields to ``/admin/projects/{id}/files``.

        Args:
            project_id: Target project.
            files: Paths, or ``(filename, content[, content_type])`` tuples.
            on_progress: Called with the upload percentage (0-100) as the body is sent.

        Returns:
            The decoded JSON body, or ``{}`` when a 2xx body is not JSON.

        Raises:
            UploadError: When ``files`` is empty or the upload fails.
        """
        if not files:
            raise UploadError("No files to upload")
        api = self._api
        url = f"{api.base_url}/admin/projects/{project_id}/files"
        headers: Dict[str, str] = {}
        token = api.token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        encoded = api._client.build_request("POST", url, files=[_file_part(f) for f in files])
        body = encoded.read()
        total = len(body)
        headers["Content-Type"] = encoded.headers["Content-Type"]
        headers["Content-Length"] = str(total)

        def _chunks() -> Iterator[bytes]:
            sent = 0
            for start in range(0, total, UPLOAD_CHUNK_SIZE):
                chunk = body[start : start + UPLOAD_CHUNK_SIZE]
                sent += len(chunk)
                yield chunk
                if on_progress is not None:
                    on_progress(_percent(sent, total))

        logger.debug("ProjectsResource.upload_files: POST %s files=%d bytes=%d", url, len(files), total)
        try:
            r = api._client.post(url, content=_chunks(), headers=headers)
        except httpx.TransportError as e:
            raise UploadError("Network error", details=str(e)) from e

        if r.is_success:
            try:
                return r.json()
            except ValueError:
                return {}
        try:
            data = r.json()
        except ValueError:
            data = None
        message = f"Upload failed {r.status_code}"
        if isinstance(data, dict):
            message = data.get("error") or data.get("message") or message
        raise UploadError(str(message), status_code=r.status_code, details=data if data is not None else r.text)


__all__ = ["ProjectsResource", "FileSpec", "ProgressCallback"]
