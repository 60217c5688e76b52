"""
Unit tests for the protocol layer: request bodies, response decoding
and the model records.  No HTTP involved.
"""
import json

import pytest
from lxml import etree

from davcloud.protocol import build_propfind_body
from davcloud.protocol import create_properties
from davcloud.protocol import create_tag_properties
from davcloud.protocol import parse_error
from davcloud.protocol import parse_multistatus
from davcloud.protocol import parse_tag_multistatus
from davcloud.protocol import Property
from davcloud.protocol import PropResponse
from davcloud.protocol import SystemTagProperty
from davcloud.protocol import Tag


class TestXMLBuilders:
    def test_properties_body(self):
        body = build_propfind_body(create_properties())
        assert body.startswith(b"<?xml")
        root = etree.fromstring(body)
        assert root.tag == "{DAV:}propfind"
        assert root.nsmap == {
            "d": "DAV:",
            "oc": "http://owncloud.org/ns",
            "nc": "http://nextcloud.org/ns",
        }
        (prop,) = root
        assert prop.tag == "{DAV:}prop"
        assert [p.tag for p in prop] == [
            "{DAV:}getlastmodified",
            "{DAV:}getetag",
            "{DAV:}getcontenttype",
            "{DAV:}resourcetype",
            "{DAV:}getcontentlength",
            "{http://nextcloud.org/ns}has-preview",
            "{http://owncloud.org/ns}fileid",
            "{http://owncloud.org/ns}permissions",
            "{http://owncloud.org/ns}size",
            "{http://owncloud.org/ns}favorite",
            "{http://owncloud.org/ns}comments-unread",
            "{http://owncloud.org/ns}owner-display-name",
            "{http://owncloud.org/ns}share-types",
        ]
        ## properties are requested, not set
        assert all(p.text is None and len(p) == 0 for p in prop)

    def test_tag_properties_body(self):
        root = etree.fromstring(build_propfind_body(create_tag_properties()))
        assert root.tag == "{DAV:}propfind"
        assert [p.tag for p in root[0]] == [
            "{http://owncloud.org/ns}id",
            "{http://owncloud.org/ns}display-name",
            "{http://owncloud.org/ns}user-visible",
            "{http://owncloud.org/ns}user-assignable",
            "{http://owncloud.org/ns}can-assign",
        ]

    def test_str(self):
        assert "getetag" in str(create_properties())


class TestXMLParsers:
    def test_parse_multistatus_default_namespace(self):
        body = b"""<multistatus xmlns="DAV:">
  <response>
    <href>/remote.php/dav/files/admin/My%20Documents/</href>
    <propstat>
      <prop><resourcetype><collection/></resourcetype></prop>
      <status>HTTP/1.1 200 OK</status>
    </propstat>
  </response>
</multistatus>"""
        result = parse_multistatus(body)
        (response,) = result.responses
        assert response.href == "/remote.php/dav/files/admin/My%20Documents/"
        assert response.path == "/remote.php/dav/files/admin/My Documents/"
        assert response.properties[0].is_collection
        assert response.properties[0].status == "HTTP/1.1 200 OK"

    def test_parse_multistatus_wrapped(self):
        body = b"""<xml><d:multistatus xmlns:d="DAV:">
  <d:response><d:href>/a</d:href></d:response>
</d:multistatus></xml>"""
        assert [r.href for r in parse_multistatus(body).responses] == ["/a"]

    def test_parse_multistatus_wrong_document(self):
        with pytest.raises(ValueError):
            parse_multistatus(b"<d:error xmlns:d='DAV:'/>")
        with pytest.raises(etree.XMLSyntaxError):
            parse_multistatus(b"<d:multistatus xmlns:d='DAV:'>")

    def test_parse_multistatus_unknown_properties(self):
        body = b"""<d:multistatus xmlns:d="DAV:" xmlns:x="urn:example">
  <!-- a comment -->
  <d:response>
    <d:href>/a</d:href>
    <d:propstat>
      <d:prop><x:color>red</x:color><d:getetag>"1"</d:getetag></d:prop>
      <d:status>HTTP/1.1 200 OK</d:status>
    </d:propstat>
  </d:response>
</d:multistatus>"""
        (response,) = parse_multistatus(body).responses
        assert response.properties == [Property(etag='"1"', status="HTTP/1.1 200 OK")]

    def test_parse_multistatus_property_text(self):
        body = b"""<d:multistatus xmlns:d="DAV:" xmlns:oc="http://owncloud.org/ns">
  <d:response>
    <d:href>/a</d:href>
    <d:propstat>
      <d:prop>
        <oc:fileid>1<!-- c -->02</oc:fileid>
        <oc:owner-display-name> Alice Smith </oc:owner-display-name>
        <oc:share-types>
          <oc:share-type>0</oc:share-type>
          <!-- link -->
          <oc:share-type>3</oc:share-type>
        </oc:share-types>
      </d:prop>
    </d:propstat>
  </d:response>
</d:multistatus>"""
        (response,) = parse_multistatus(body).responses
        (prop,) = response.properties
        assert prop.file_id == "102"
        assert prop.owner_display_name == "Alice Smith"
        assert prop.share_types == "0 3"

    def test_parse_response_without_href(self):
        body = b"""<d:multistatus xmlns:d="DAV:"><d:response/></d:multistatus>"""
        assert parse_multistatus(body).responses == [PropResponse(href="")]

    def test_parse_tag_multistatus(self):
        body = b"""<d:multistatus xmlns:d="DAV:" xmlns:oc="http://owncloud.org/ns">
  <d:response>
    <d:href>/remote.php/dav/systemtags/3</d:href>
    <d:propstat>
      <d:prop>
        <oc:id>3</oc:id>
        <oc:display-name>Archive</oc:display-name>
        <oc:user-visible>1</oc:user-visible>
        <oc:user-assignable>0</oc:user-assignable>
      </d:prop>
      <d:status>HTTP/1.1 200 OK</d:status>
    </d:propstat>
  </d:response>
</d:multistatus>"""
        (response,) = parse_tag_multistatus(body).responses
        assert response.href == "/remote.php/dav/systemtags/3"
        assert response.properties == [
            SystemTagProperty(
                id="3",
                display_name="Archive",
                user_visible="1",
                user_assignable="0",
                can_assign="",
            )
        ]

    def test_parse_error(self):
        body = rb"""<?xml version="1.0" encoding="utf-8"?>
<d:error xmlns:d="DAV:" xmlns:s="http://sabredav.org/ns">
  <s:exception>Sabre\DAV\Exception\Forbidden</s:exception>
  <s:message>Permission denied</s:message>
</d:error>"""
        envelope = parse_error(body)
        assert envelope.exception == "Sabre\\DAV\\Exception\\Forbidden"
        assert envelope.message == "Permission denied"

    def test_parse_error_other_document(self):
        envelope = parse_error(b"<ocs><meta><status>ok</status></meta></ocs>")
        assert envelope.exception == ""
        assert envelope.message == ""

    def test_parse_error_no_markup(self):
        with pytest.raises(etree.XMLSyntaxError) as excinfo:
            parse_error(b"Hello World!\n")
        assert excinfo.value.code == etree.ErrorTypes.ERR_DOCUMENT_EMPTY


class TestTypes:
    def test_tag_json(self):
        tag = Tag(name="Test123", user_visible=False)
        assert json.loads(tag.to_json()) == {
            "canAssign": True,
            "userAssignable": True,
            "userVisible": False,
            "name": "Test123",
        }

    def test_system_tag_property_accessors(self):
        prop = SystemTagProperty(
            id="3",
            display_name="Archive",
            user_visible="true",
            user_assignable="FALSE",
            can_assign="1",
        )
        assert prop.is_user_visible
        assert not prop.is_user_assignable
        assert prop.is_can_assign
        assert prop.to_tag() == Tag(
            name="Archive", can_assign=True, user_assignable=False, user_visible=True
        )
        assert not SystemTagProperty().is_user_visible

    def test_property_accessors(self):
        assert Property(content_length="42").content_length_int == 42
        assert Property().content_length_int is None
        assert Property(resource_type="collection").is_collection
        assert not Property().is_collection
