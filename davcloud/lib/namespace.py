#!/usr/bin/env python
from typing import Dict
from typing import Optional

## The prefixes are the ones used by the server in its own documents;
## ownCloud and Nextcloud both accept the ownCloud namespace for the
## file and tag properties.
nsmap: Dict[str, str] = {
    "d": "DAV:",
    "oc": "http://owncloud.org/ns",
    "nc": "http://nextcloud.org/ns",
}

## Only seen in error bodies, never sent
nsmap2: Dict[str, str] = nsmap.copy()
nsmap2["s"] = "http://sabredav.org/ns"


def ns(prefix: str, tag: Optional[str] = None) -> str:
    name = "{%s}" % nsmap2[prefix]
    if tag is not None:
        name = "%s%s" % (name, tag)
    return name


def localname(tag: str) -> str:
    """Strips the {namespace} part of an lxml tag.  Comments and
    processing instructions have no string tag and yield "".
    """
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag
