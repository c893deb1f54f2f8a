"""
JSON documents sent to LFS clients.

The key names and nesting follow the Git LFS metadata format, clients depend on them.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

LFS_MEDIA_TYPE = "application/vnd.git-lfs+json"

UInt64 = Annotated[int, Field(ge=0, lt=2**64, title="Unsigned 64-bit integer")]


class ErrorMessage(BaseModel):
    message: str


class Href(BaseModel):
    href: str


class ObjectLinks(BaseModel):
    self: Href = Field(description="Location of this metadata document")
    download: Href = Field(description="Location of the object bytes")


class ObjectMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    oid: str
    size: UInt64
    links: ObjectLinks = Field(alias="_links")


def _to_json(model: BaseModel) -> str:
    return model.model_dump_json(by_alias=True, indent=2)


def render_error(message: str) -> str:
    return _to_json(ErrorMessage(message=message))


def render_metadata(oid: str, size: int, self_url: str, download_url: str) -> str:
    metadata = ObjectMetadata(
        oid=oid,
        size=size,
        links=ObjectLinks(self=Href(href=self_url), download=Href(href=download_url)),
    )
    return _to_json(metadata)
