"""
Model records for the cloud's WebDAV and REST payloads.

The PROPFIND results keep every property as the string the server
sent.  The boolean-like tag flags are thus "true", "false", "1" or "0"
on the wire; the accessors on SystemTagProperty reparse them.
"""

import json
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import unquote


TRUTHY = ("true", "1")


@dataclass
class Property:
    """One <d:prop> block of a propstat, describing a file or folder."""

    last_modified: str = ""
    etag: str = ""
    content_type: str = ""
    resource_type: str = ""
    content_length: str = ""
    has_preview: str = ""
    file_id: str = ""
    permissions: str = ""
    size: str = ""
    favorite: str = ""
    comments_unread: str = ""
    owner_display_name: str = ""
    share_types: str = ""
    status: Optional[str] = None

    @property
    def is_collection(self) -> bool:
        return self.resource_type == "collection"

    @property
    def content_length_int(self) -> Optional[int]:
        try:
            return int(self.content_length)
        except ValueError:
            return None


@dataclass
class PropResponse:
    href: str
    properties: List[Property] = field(default_factory=list)

    @property
    def path(self) -> str:
        """The href with percent escapes decoded"""
        return unquote(self.href)


@dataclass
class MultiStatusResponse:
    responses: List[PropResponse] = field(default_factory=list)


@dataclass
class Tag:
    """
    A system tag as sent to the server when creating or assigning it.
    """

    name: str
    can_assign: bool = True
    user_assignable: bool = True
    user_visible: bool = True

    def to_dict(self) -> dict:
        return {
            "canAssign": self.can_assign,
            "userAssignable": self.user_assignable,
            "userVisible": self.user_visible,
            "name": self.name,
        }

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict()).encode("utf-8")


@dataclass
class SystemTagProperty:
    id: str = ""
    display_name: str = ""
    user_visible: str = ""
    user_assignable: str = ""
    can_assign: str = ""

    @property
    def is_user_visible(self) -> bool:
        return self.user_visible.strip().lower() in TRUTHY

    @property
    def is_user_assignable(self) -> bool:
        return self.user_assignable.strip().lower() in TRUTHY

    @property
    def is_can_assign(self) -> bool:
        return self.can_assign.strip().lower() in TRUTHY

    def to_tag(self) -> Tag:
        return Tag(
            name=self.display_name,
            can_assign=self.is_can_assign,
            user_assignable=self.is_user_assignable,
            user_visible=self.is_user_visible,
        )


@dataclass
class TagPropResponse:
    href: str
    properties: List[SystemTagProperty] = field(default_factory=list)


@dataclass
class MultiStatusTagResponse:
    responses: List[TagPropResponse] = field(default_factory=list)


@dataclass
class ErrorEnvelope:
    """The <d:error> body sabre/dav sends along with failing requests."""

    exception: str = ""
    message: str = ""
