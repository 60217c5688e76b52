"""
Pure functions for parsing the XML response bodies.

Elements are matched the way the server's documents are laid out:
the multistatus skeleton (multistatus, response, href, propstat,
prop) by local name, the properties themselves by fully qualified tag.
"""
from typing import Dict
from typing import List
from typing import Tuple

from lxml import etree
from lxml.etree import _Element

from davcloud.elements import cloud
from davcloud.elements import dav
from davcloud.lib import error
from davcloud.lib.namespace import localname

from .types import ErrorEnvelope
from .types import MultiStatusResponse
from .types import MultiStatusTagResponse
from .types import Property
from .types import PropResponse
from .types import SystemTagProperty
from .types import TagPropResponse


FILE_PROPERTIES: Dict[str, str] = {
    dav.GetLastModified.tag: "last_modified",
    dav.GetEtag.tag: "etag",
    dav.GetContentType.tag: "content_type",
    dav.ResourceType.tag: "resource_type",
    dav.GetContentLength.tag: "content_length",
    cloud.HasPreview.tag: "has_preview",
    cloud.FileId.tag: "file_id",
    cloud.Permissions.tag: "permissions",
    cloud.Size.tag: "size",
    cloud.Favorite.tag: "favorite",
    cloud.CommentsUnread.tag: "comments_unread",
    cloud.OwnerDisplayName.tag: "owner_display_name",
    cloud.ShareTypes.tag: "share_types",
}

TAG_PROPERTIES: Dict[str, str] = {
    cloud.Id.tag: "id",
    cloud.DisplayName.tag: "display_name",
    cloud.UserVisible.tag: "user_visible",
    cloud.UserAssignable.tag: "user_assignable",
    cloud.CanAssign.tag: "can_assign",
}


def parse_xml(body: bytes, huge_tree: bool = False) -> _Element:
    """
    Raises:
        XMLSyntaxError: If body is not valid XML
    """
    parser = etree.XMLParser(remove_blank_text=True, huge_tree=huge_tree)
    return etree.fromstring(body, parser)


def _strip_to_multistatus(tree: _Element) -> _Element:
    ## Some servers wrap the multistatus in an <xml> element
    if localname(tree.tag) == "xml" and len(tree):
        tree = tree[0]
    if localname(tree.tag) != "multistatus":
        raise ValueError(
            "expected element type <multistatus> but have <%s>" % localname(tree.tag)
        )
    return tree


def _text(elem: _Element) -> str:
    """Text of a property; multi-valued properties are space separated"""
    children = [c for c in elem if isinstance(c.tag, str)]
    if not children:
        return "".join(elem.itertext()).strip()
    return " ".join(t for t in (_text(c) for c in children) if t)


def _property_value(elem: _Element) -> str:
    if elem.tag == dav.ResourceType.tag:
        if any(localname(c.tag) == "collection" for c in elem):
            return "collection"
    return _text(elem)


def _parse_responses(
    tree: _Element, properties: Dict[str, str], prop_class: type
) -> List[Tuple[str, list]]:
    results = []
    for response in _strip_to_multistatus(tree):
        if localname(response.tag) != "response":
            continue
        href = None
        props = []
        for elem in response:
            name = localname(elem.tag)
            if name == "href":
                href = elem.text or ""
            elif name == "propstat":
                status = None
                for child in elem:
                    if localname(child.tag) == "status":
                        status = child.text
                for prop in elem:
                    if localname(prop.tag) != "prop":
                        continue
                    values = {}
                    for theprop in prop:
                        if theprop.tag in properties:
                            values[properties[theprop.tag]] = _property_value(theprop)
                    if "status" in prop_class.__dataclass_fields__:
                        values["status"] = status
                    props.append(prop_class(**values))
        if href is None:
            error.weirdness("response without href", response)
            href = ""
        results.append((href, props))
    return results


def parse_multistatus(body: bytes, huge_tree: bool = False) -> MultiStatusResponse:
    """
    Parse the 207 Multi-Status answer to a directory listing.

    Raises:
        XMLSyntaxError: If body is not valid XML
        ValueError: If the document is not a multistatus
    """
    tree = parse_xml(body, huge_tree)
    return MultiStatusResponse(
        responses=[
            PropResponse(href=href, properties=props)
            for href, props in _parse_responses(tree, FILE_PROPERTIES, Property)
        ]
    )


def parse_tag_multistatus(
    body: bytes, huge_tree: bool = False
) -> MultiStatusTagResponse:
    """
    Parse the 207 Multi-Status answer from the system tag collection.

    Raises:
        XMLSyntaxError: If body is not valid XML
        ValueError: If the document is not a multistatus
    """
    tree = parse_xml(body, huge_tree)
    return MultiStatusTagResponse(
        responses=[
            TagPropResponse(href=href, properties=props)
            for href, props in _parse_responses(
                tree, TAG_PROPERTIES, SystemTagProperty
            )
        ]
    )


def parse_error(body: bytes) -> ErrorEnvelope:
    """
    Parse an error body like

    <d:error xmlns:d="DAV:" xmlns:s="http://sabredav.org/ns">
      <s:exception>Sabre\\DAV\\Exception\\NotFound</s:exception>
      <s:message>File with name Test could not be located</s:message>
    </d:error>

    Any well-formed document is accepted; exception and message are
    left empty when no such children exist.

    Raises:
        XMLSyntaxError: If body is not valid XML
    """
    tree = parse_xml(body)
    envelope = ErrorEnvelope()
    for elem in tree:
        name = localname(elem.tag)
        if name == "exception":
            envelope.exception = "".join(elem.itertext())
        elif name == "message":
            envelope.message = "".join(elem.itertext())
    return envelope
