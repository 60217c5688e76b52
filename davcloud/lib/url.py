#!/usr/bin/env python
import urllib.parse
from typing import Any
from typing import cast
from typing import Optional
from typing import Union
from urllib.parse import ParseResult
from urllib.parse import quote
from urllib.parse import SplitResult
from urllib.parse import unquote
from urllib.parse import urlparse
from urllib.parse import urlunparse

from davcloud.lib.python_utilities import to_normal_str
from davcloud.lib.python_utilities import to_unicode


class URL:
    """
    Wraps an URL string or urlparse result into an object.  Used
    internally for resolving request paths against the base URL of
    the cloud; end users should not need to know anything about it.

    A path handed to the client may be one out of three:

    1) a path relative to the DAV root, i.e. "files/admin/Test"
    refers to "https://cloud.example.com/remote.php/dav/files/admin/Test"
    when the client was set up with
    "https://cloud.example.com/remote.php/dav/".

    2) an absolute path, i.e. "/remote.php/dav/systemtags/"

    3) a fully qualified URL on the same host.
    """

    def __init__(self, url: Union[str, ParseResult, SplitResult]) -> None:
        if isinstance(url, ParseResult) or isinstance(url, SplitResult):
            self.url_parsed: Optional[Union[ParseResult, SplitResult]] = url
            self.url_raw = None
        else:
            self.url_raw = url
            self.url_parsed = None

    def __bool__(self) -> bool:
        return bool(self.url_raw or self.url_parsed)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __eq__(self, other: object) -> bool:
        if str(self) == str(other):
            return True
        me = self.canonical()
        if hasattr(other, "canonical"):
            other = other.canonical()
        return str(me) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    @classmethod
    def objectify(cls, url: Union["URL", str, ParseResult, SplitResult]) -> "URL":
        if url is None or isinstance(url, URL):
            return url
        return URL(url)

    ## gives access to scheme, netloc, path, username, port etc
    def __getattr__(self, attr: str):
        if "url_parsed" not in vars(self):
            raise AttributeError
        if self.url_parsed is None:
            self.url_parsed = cast(urllib.parse.ParseResult, urlparse(self.url_raw))
        if hasattr(self.url_parsed, attr):
            return getattr(self.url_parsed, attr)
        return getattr(str(self), attr)

    def __str__(self) -> str:
        if self.url_raw is None:
            if self.url_parsed is None:
                raise ValueError("Unexpected value None for self.url_parsed")
            self.url_raw = self.url_parsed.geturl()
        return to_normal_str(to_unicode(self.url_raw))

    def __repr__(self) -> str:
        return "URL(%s)" % str(self)

    def is_auth(self) -> bool:
        return self.username is not None

    def unauth(self) -> "URL":
        """Returns the URL without the user:password@ part"""
        if not self.is_auth():
            return self
        netloc = self.hostname
        if self.port:
            netloc = "%s:%s" % (netloc, self.port)
        return URL.objectify(
            ParseResult(
                self.scheme,
                netloc,
                self.path.replace("//", "/"),
                self.params,
                self.query,
                self.fragment,
            )
        )

    def canonical(self) -> "URL":
        """
        Removes authentication details and double slashes, adds the
        default port and makes sure the path is quoted the same way
        every time.
        """
        url = self.unauth()

        arr = list(cast(urllib.parse.ParseResult, urlparse(str(url))))
        arr[2] = quote(unquote(arr[2].replace("//", "/")))
        if not arr[0]:
            arr[0] = "https"
        if arr[1] and ":" not in arr[1]:
            arr[1] += {"https": ":443", "http": ":80"}.get(arr[0], "")
        return URL(urlunparse(arr))

    def join(self, path: Any) -> "URL":
        """
        Resolves path against this URL.  A relative path is appended
        to our path, an absolute path replaces it, and a full URL is
        accepted as long as it points to the same server.  Pointing to
        another server raises ValueError.

        Dot segments are removed from the result.  Unlike RFC 3986
        resolution, the last segment of a base path without a trailing
        slash is kept, so "dav" + "x" gives "dav/x".
        """
        if not path or not str(path):
            return self
        path = URL.objectify(path)
        if (
            (path.scheme and self.scheme and path.scheme != self.scheme)
            or (path.hostname and self.hostname and path.hostname != self.hostname)
            or (path.port and self.port and path.port != self.port)
        ):
            raise ValueError("%s can't be joined with %s" % (self, path))

        if path.path.startswith("/"):
            ret_path = path.path
        else:
            sep = "/"
            if self.path.endswith("/"):
                sep = ""
            ret_path = "%s%s%s" % (self.path, sep, path.path)
        return URL(
            ParseResult(
                self.scheme or path.scheme,
                self.netloc or path.netloc,
                _remove_dot_segments(ret_path),
                path.params,
                path.query,
                path.fragment,
            )
        )


def _remove_dot_segments(path: str) -> str:
    """
    Resolves "." and ".." segments as in RFC 3986 section 5.2.4; ".."
    never climbs above the root.
    """
    segments = path.split("/")
    if "." not in segments and ".." not in segments:
        return path
    out = []
    for segment in segments:
        if segment == "..":
            if out and out != [""]:
                out.pop()
        elif segment != ".":
            out.append(segment)
    if segments[-1] in (".", ".."):
        out.append("")
    return "/".join(out)
