#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from davcloud.lib.namespace import ns


# Operations
class Propfind(BaseElement):
    tag: ClassVar[str] = ns("d", "propfind")


# Components / Data
class Prop(BaseElement):
    tag: ClassVar[str] = ns("d", "prop")


# Properties
class GetLastModified(BaseElement):
    tag: ClassVar[str] = ns("d", "getlastmodified")


class GetEtag(BaseElement):
    tag: ClassVar[str] = ns("d", "getetag")


class GetContentType(BaseElement):
    tag: ClassVar[str] = ns("d", "getcontenttype")


class ResourceType(BaseElement):
    tag: ClassVar[str] = ns("d", "resourcetype")


class GetContentLength(BaseElement):
    tag: ClassVar[str] = ns("d", "getcontentlength")
