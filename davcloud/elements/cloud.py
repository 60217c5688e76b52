#!/usr/bin/env python
"""
Properties in the ownCloud (oc) and Nextcloud (nc) namespaces
"""
from typing import ClassVar

from .base import BaseElement
from davcloud.lib.namespace import ns


# File properties
class HasPreview(BaseElement):
    tag: ClassVar[str] = ns("nc", "has-preview")


class FileId(BaseElement):
    tag: ClassVar[str] = ns("oc", "fileid")


class Permissions(BaseElement):
    tag: ClassVar[str] = ns("oc", "permissions")


class Size(BaseElement):
    tag: ClassVar[str] = ns("oc", "size")


class Favorite(BaseElement):
    tag: ClassVar[str] = ns("oc", "favorite")


class CommentsUnread(BaseElement):
    tag: ClassVar[str] = ns("oc", "comments-unread")


class OwnerDisplayName(BaseElement):
    tag: ClassVar[str] = ns("oc", "owner-display-name")


class ShareTypes(BaseElement):
    tag: ClassVar[str] = ns("oc", "share-types")


# System tag properties
class Id(BaseElement):
    tag: ClassVar[str] = ns("oc", "id")


class DisplayName(BaseElement):
    tag: ClassVar[str] = ns("oc", "display-name")


class UserVisible(BaseElement):
    tag: ClassVar[str] = ns("oc", "user-visible")


class UserAssignable(BaseElement):
    tag: ClassVar[str] = ns("oc", "user-assignable")


class CanAssign(BaseElement):
    tag: ClassVar[str] = ns("oc", "can-assign")
