import os, sys, pdb
import datetime as dt
import unittest as test
from decimal import Decimal
from io import BytesIO

from nistoar.cmis.browser import dispatch as disp
from nistoar.cmis.data import (PropertiesBag, PropertyData, Acl, Ace, ContentStream,
                               BulkUpdateObjectIdAndChangeToken)
from nistoar.cmis.enums import PropertyType, DateTimeFormat, UnfileObject
from nistoar.cmis.exceptions import (CmisConnectionException, CmisObjectNotFoundException,
                                     CmisConstraintException, CmisRuntimeException)

class FakeResponse:
    def __init__(self, status, content=b"", charset=None, message="OK", error_content=None):
        self.status = status
        self.content = content
        self.charset = charset
        self.message = message
        self.error_content = error_content
        self.closed = False

    def close(self):
        self.closed = True

class FakeInvoker:
    def __init__(self, resp):
        self.resp = resp
        self.calls = []

    def invoke_get(self, url, offset=None, length=None):
        self.calls.append(("GET", url, offset, length))
        return self.resp

    def invoke_post(self, url, form):
        self.calls.append(("POST", url, form))
        return self.resp

class TestFormDataComposer(test.TestCase):

    def test_action_and_params(self):
        comp = disp.FormDataComposer("delete")
        comp.parameters["objectId"] = "doc-1"
        comp.parameters["allVersions"] = True
        comp.parameters["unfileObjects"] = UnfileObject.DELETE
        comp.parameters["skipped"] = None
        comp.succinct = True

        self.assertEqual(comp.create_content(), [
            ("cmisaction", "delete"), ("objectId", "doc-1"), ("allVersions", "true"),
            ("unfileObjects", "delete"), ("succinct", "true")
        ])
        form = comp.create_form()
        self.assertIsNone(form.files)
        self.assertEqual(form.data[0], ("cmisaction", "delete"))

    def test_properties(self):
        when = dt.datetime(2010, 1, 1, tzinfo=dt.timezone.utc)
        props = PropertiesBag([
            PropertyData("cmis:name", PropertyType.STRING, ["annual.pdf"]),
            PropertyData("my:tags", PropertyType.STRING, ["science", "finance"]),
            PropertyData("my:approved", PropertyType.BOOLEAN, [False]),
            PropertyData("my:score", PropertyType.DECIMAL, [Decimal("1E+1")]),
            PropertyData("my:when", PropertyType.DATETIME, [when]),
        ])
        comp = disp.FormDataComposer("update")
        comp.properties = props

        self.assertEqual(comp.create_content(), [
            ("cmisaction", "update"),
            ("propertyId[0]", "cmis:name"), ("propertyValue[0]", "annual.pdf"),
            ("propertyId[1]", "my:tags"),
            ("propertyValue[1][0]", "science"), ("propertyValue[1][1]", "finance"),
            ("propertyId[2]", "my:approved"), ("propertyValue[2]", "false"),
            ("propertyId[3]", "my:score"), ("propertyValue[3]", "10"),
            ("propertyId[4]", "my:when"), ("propertyValue[4]", "1262304000000")
        ])

        comp = disp.FormDataComposer("update", DateTimeFormat.EXTENDED)
        self.assertTrue(comp.convert_property_value(when).startswith("2010-01-01T00:00:00"))
        self.assertIsNone(comp.convert_property_value(None))
        self.assertEqual(comp.convert_property_value(42), "42")

    def test_aces(self):
        comp = disp.FormDataComposer("applyACL")
        comp.add_aces = Acl([Ace("alice", ["cmis:read", "cmis:write"]),
                             Ace(None, ["cmis:read"]),
                             Ace("nobody", []),
                             Ace("bob", ["cmis:all"])])
        comp.remove_aces = Acl([Ace("eve", ["cmis:read"])])

        self.assertEqual(comp.create_content(), [
            ("cmisaction", "applyACL"),
            ("addACEPrincipal[0]", "alice"),
            ("addACEPermission[0][0]", "cmis:read"), ("addACEPermission[0][1]", "cmis:write"),
            ("addACEPrincipal[1]", "bob"), ("addACEPermission[1][0]", "cmis:all"),
            ("removeACEPrincipal[0]", "eve"), ("removeACEPermission[0][0]", "cmis:read")
        ])

    def test_policies_and_secondary_types(self):
        comp = disp.FormDataComposer("createDocument")
        comp.policies = ["pol-1", None, "pol-2"]
        comp.add_secondary_type_ids = ["my:classified", ""]
        comp.remove_secondary_type_ids = ["my:old"]
        self.assertEqual(comp.create_content(), [
            ("cmisaction", "createDocument"),
            ("policy[0]", "pol-1"), ("policy[1]", "pol-2"),
            ("addSecondaryTypeId[0]", "my:classified"),
            ("removeSecondaryTypeId[0]", "my:old")
        ])

        comp = disp.FormDataComposer("applyPolicy")
        comp.policy_id = "pol-1"
        self.assertEqual(comp.create_content(),
                         [("cmisaction", "applyPolicy"), ("policyId", "pol-1")])

    def test_bulk_ids(self):
        comp = disp.FormDataComposer("bulkUpdate")
        comp.object_ids_and_change_tokens = [
            BulkUpdateObjectIdAndChangeToken("doc-1", change_token="ct-1"),
            None,
            BulkUpdateObjectIdAndChangeToken(None),
            BulkUpdateObjectIdAndChangeToken("doc-2")
        ]
        self.assertEqual(comp.create_content(), [
            ("cmisaction", "bulkUpdate"),
            ("objectId[0]", "doc-1"), ("changeToken[0]", "ct-1"),
            ("objectId[1]", "doc-2"), ("changeToken[1]", "")
        ])

    def test_content(self):
        stream = BytesIO(b"hello")
        comp = disp.FormDataComposer("createDocument")
        comp.content_stream = ContentStream(stream, "hello.txt", "text/plain")
        form = comp.create_form()
        self.assertEqual(form.files, {"content": ("hello.txt", stream, "text/plain")})

        comp.content_stream = ContentStream(stream)
        form = comp.create_form()
        self.assertEqual(form.files, {"content": ("content", stream, "application/octet-stream")})

        comp.content_stream = ContentStream(None, "empty.txt")
        self.assertIsNone(comp.create_form().files)

class TestParse(test.TestCase):

    def test_parse_json(self):
        data = disp.parse_json(FakeResponse(200, b'{"score": 4.5, "ids": [1, 2]}'))
        self.assertEqual(data["score"], Decimal("4.5"))
        self.assertEqual(list(data.keys()), ["score", "ids"])

        data = disp.parse_json(FakeResponse(200, '{"name": "café"}'.encode("latin-1"),
                                            charset="ISO-8859-1"))
        self.assertEqual(data["name"], "café")

    def test_parse_errors(self):
        with self.assertRaises(CmisConnectionException) as cm:
            disp.parse_json(FakeResponse(200, b'{}', charset="x-goober"))
        self.assertEqual(str(cm.exception), "Unsupported charset: x-goober")

        with self.assertRaises(CmisConnectionException) as cm:
            disp.parse_json(FakeResponse(200, b'{"a": '))
        self.assertEqual(str(cm.exception), "Parsing exception!")

        with self.assertRaises(CmisConnectionException) as cm:
            disp.parse_object(FakeResponse(200, b'[1, 2]'))
        self.assertEqual(str(cm.exception), "Unexpected object!")

        with self.assertRaises(CmisConnectionException):
            disp.parse_array(FakeResponse(200, b'{"a": 1}'))

        self.assertEqual(disp.parse_array(FakeResponse(200, b'[1, 2]')), [1, 2])

class TestRequestDispatcher(test.TestCase):

    def test_read(self):
        inv = FakeInvoker(FakeResponse(200, b'{}'))
        rd = disp.RequestDispatcher(inv)
        resp = rd.read("https://x.org/A1")
        self.assertIs(resp, inv.resp)
        self.assertEqual(inv.calls, [("GET", "https://x.org/A1", None, None)])

        inv.resp = FakeResponse(206)
        with self.assertRaises(CmisRuntimeException):
            rd.read("https://x.org/A1")

    def test_read_failure(self):
        rd = disp.RequestDispatcher(FakeInvoker(FakeResponse(
            404, message="Not Found",
            error_content='{"exception": "objectNotFound", "message": "No doc-9"}')))
        with self.assertRaises(CmisObjectNotFoundException) as cm:
            rd.read("https://x.org/A1/root?objectId=doc-9")
        self.assertEqual(str(cm.exception), "No doc-9")

    def test_read_content(self):
        inv = FakeInvoker(FakeResponse(206, b"abc"))
        rd = disp.RequestDispatcher(inv)
        self.assertEqual(rd.read_content("https://x.org/A1/root", 10, 3).status, 206)
        self.assertEqual(inv.calls[0][2:], (10, 3))

    def test_post(self):
        inv = FakeInvoker(FakeResponse(201, b'{}'))
        rd = disp.RequestDispatcher(inv)
        comp = disp.FormDataComposer("delete")
        rd.post_and_consume("https://x.org/A1/root", comp)

        self.assertTrue(inv.resp.closed)
        method, url, form = inv.calls[0]
        self.assertEqual(method, "POST")
        self.assertIsInstance(form, disp.FormData)
        self.assertEqual(form.data, [("cmisaction", "delete")])

        inv.resp = FakeResponse(409, message="Conflict",
                                error_content='{"exception": "constraint"}')
        with self.assertRaises(CmisConstraintException):
            rd.post("https://x.org/A1/root", comp)


if __name__ == '__main__':
    test.main()
