"""
Request bodies, response decoding and model records.

- types: the model records (MultiStatusResponse, Tag, ...)
- xml_builders: the property-query bodies sent with PROPFIND
- xml_parsers: decoding of multistatus and error bodies
"""

from .types import (
    ErrorEnvelope,
    MultiStatusResponse,
    MultiStatusTagResponse,
    Property,
    PropResponse,
    SystemTagProperty,
    Tag,
    TagPropResponse,
)
from .xml_builders import (
    build_propfind_body,
    create_properties,
    create_tag_properties,
)
from .xml_parsers import (
    parse_error,
    parse_multistatus,
    parse_tag_multistatus,
)

__all__ = [
    "ErrorEnvelope",
    "MultiStatusResponse",
    "MultiStatusTagResponse",
    "Property",
    "PropResponse",
    "SystemTagProperty",
    "Tag",
    "TagPropResponse",
    "build_propfind_body",
    "create_properties",
    "create_tag_properties",
    "parse_error",
    "parse_multistatus",
    "parse_tag_multistatus",
]
