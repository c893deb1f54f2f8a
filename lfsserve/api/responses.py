"""
Response bodies and how they are sent for GET and HEAD requests.

A body is either Empty, Text (a JSON document) or a Stream (an open object file).
For HEAD requests the body is never sent, but the headers are the same as for GET.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import BinaryIO

from starlette.background import BackgroundTask
from starlette.responses import Response, StreamingResponse

from lfsserve.objects import file_size

CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Stream:
    file: BinaryIO


Body = Empty | Text | Stream


def iter_file(file: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Read the file in chunks, closing it when done or when the consumer stops early"""
    try:
        while chunk := file.read(chunk_size):
            yield chunk
    finally:
        file.close()


def content_length(body: Body) -> int:
    if isinstance(body, Text):
        return len(body.text.encode("utf-8"))
    if isinstance(body, Stream):
        return file_size(body.file)
    return 0


def build_response(method: str, status_code: int, media_type: str, body: Body) -> Response:
    headers = {"content-length": str(content_length(body))}
    if method == "HEAD":
        if isinstance(body, Stream):
            body.file.close()
        return Response(status_code=status_code, media_type=media_type, headers=headers)
    if isinstance(body, Text):
        return Response(body.text, status_code=status_code, media_type=media_type, headers=headers)
    if isinstance(body, Stream):
        # The generator closes the file, unless streaming never starts (e.g. the client is gone)
        return StreamingResponse(
            iter_file(body.file),
            status_code=status_code,
            media_type=media_type,
            headers=headers,
            background=BackgroundTask(body.file.close),
        )
    return Response(status_code=status_code, media_type=media_type, headers=headers)
