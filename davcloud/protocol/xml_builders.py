"""
Pure functions for building the XML request bodies.
"""
from lxml import etree

from davcloud.elements import cloud
from davcloud.elements import dav
from davcloud.elements.base import BaseElement


def create_properties() -> BaseElement:
    """
    The property query used for directory listings: the standard
    WebDAV metadata plus the ownCloud/Nextcloud file properties.
    """
    return dav.Propfind() + (
        dav.Prop()
        + [
            dav.GetLastModified(),
            dav.GetEtag(),
            dav.GetContentType(),
            dav.ResourceType(),
            dav.GetContentLength(),
            cloud.HasPreview(),
            cloud.FileId(),
            cloud.Permissions(),
            cloud.Size(),
            cloud.Favorite(),
            cloud.CommentsUnread(),
            cloud.OwnerDisplayName(),
            cloud.ShareTypes(),
        ]
    )


def create_tag_properties() -> BaseElement:
    """The property query used against the system tag collection."""
    return dav.Propfind() + (
        dav.Prop()
        + [
            cloud.Id(),
            cloud.DisplayName(),
            cloud.UserVisible(),
            cloud.UserAssignable(),
            cloud.CanAssign(),
        ]
    )


def build_propfind_body(propfind: BaseElement) -> bytes:
    """
    Serializes a propfind element.

    Returns:
        UTF-8 encoded XML bytes
    """
    root = propfind.xmlelement()
    etree.cleanup_namespaces(root, keep_ns_prefixes=["d", "oc", "nc"])
    return etree.tostring(root, encoding="utf-8", xml_declaration=True)
