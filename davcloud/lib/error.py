#!/usr/bin/env python
import logging
import os
from collections import defaultdict
from typing import Any
from typing import Dict
from typing import Optional
from typing import Type

from davcloud import __version__

## Environmental variables prepended with "PYTHON_DAVCLOUD" are used for debug purposes,
## environmental variables prepended with "DAVCLOUD_" are for connection parameters
debug_dump_communication = os.environ.get("PYTHON_DAVCLOUD_COMMDUMP", False)

## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_DAVCLOUD_DEBUGMODE")
if not debugmode:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("davcloud")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def xmlstring(item: Any) -> str:
    from lxml import etree

    if isinstance(item, etree._Element):
        return etree.tostring(item, pretty_print=True).decode("utf-8")
    return str(item)


def weirdness(*reasons):
    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"
    response = None

    def __init__(
        self,
        url: Optional[str] = None,
        reason: Optional[str] = None,
        response: Any = None,
    ) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason
        if response is not None:
            self.response = response

    @property
    def status(self) -> Optional[int]:
        """HTTP status of the response that caused the error, if any"""
        if self.response is None:
            return None
        return self.response.status

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class AuthorizationError(DAVError):
    """
    The server answered 401 or 403.  The url property will contain
    the url in question, the reason property will contain the excuse
    the server sent.
    """

    pass


class PropfindError(DAVError):
    pass


class MkcolError(DAVError):
    pass


class PutError(DAVError):
    pass


class PostError(DAVError):
    pass


class GetError(DAVError):
    pass


class DeleteError(DAVError):
    pass


class NotFoundError(DAVError):
    pass


class TagNotFoundError(NotFoundError):
    """No system tag with the requested display name exists on the server"""

    pass


class DecodeError(DAVError):
    """
    The response body could be parsed neither as the expected document
    nor as an error envelope.  The body is embedded in the reason.
    """

    pass


exception_by_method: Dict[str, Type[DAVError]] = defaultdict(lambda: DAVError)
for method in (
    "delete",
    "put",
    "post",
    "get",
    "mkcol",
    "propfind",
):
    exception_by_method[method] = locals()[method[0].upper() + method[1:] + "Error"]
