import os, sys, pdb, json, tempfile, logging
import unittest as test
from unittest import mock
from pathlib import Path
from decimal import Decimal
from io import BytesIO
from urllib.parse import urlsplit, parse_qsl

from nistoar.cmis.browser.binding import BrowserBinding
from nistoar.cmis.data import (PropertiesBag, PropertyData, ContentStream, PartialContentStream,
                               TypeDefinition, BulkUpdateObjectIdAndChangeToken, Acl, Ace)
from nistoar.cmis.enums import (PropertyType, BaseTypeId, ChangeType, Action, VersioningState,
                               RelationshipDirection)
from nistoar.cmis.exceptions import (CmisObjectNotFoundException, CmisConnectionException,
                                     CmisInvalidArgumentException, CmisUpdateConflictException)

datadir = Path(__file__).parents[1] / "data"
endpoint = "https://cmis.example.org/browser"
repourl = endpoint + "/A1"
rooturl = repourl + "/root"

tmpdir = None
loghdlr = None
rootlog = None
def setUpModule():
    global tmpdir, loghdlr, rootlog
    tmpdir = tempfile.TemporaryDirectory(prefix="_test_cmissvc.")
    rootlog = logging.getLogger()
    loghdlr = logging.FileHandler(os.path.join(tmpdir.name, "test_services.log"))
    loghdlr.setLevel(logging.DEBUG)
    rootlog.addHandler(loghdlr)

def tearDownModule():
    global loghdlr
    if loghdlr:
        if rootlog:
            rootlog.removeHandler(loghdlr)
        loghdlr.flush()
        loghdlr.close()
        loghdlr = None
    tmpdir.cleanup()

def read_data(name):
    with open(datadir / name, 'rb') as fd:
        return fd.read()

class MockResponse:
    def __init__(self, status_code, content=b"", headers=None, reason=None):
        self.status_code = status_code
        self.reason = reason or ("OK" if status_code < 300 else "Error")
        self.content = content
        self.headers = headers
        if self.headers is None:
            self.headers = { "Content-Type": "application/json; charset=UTF-8" }
        self.closed = False

    @property
    def text(self):
        return self.content.decode("utf-8")

    def close(self):
        self.closed = True

def json_response(data, status_code=200):
    if not isinstance(data, bytes):
        data = json.dumps(data).encode("utf-8")
    return MockResponse(status_code, data)

class MockServer:
    """
    a stand-in for a Browser Binding server that answers GETs from the test data directory
    and records POSTs
    """
    types = { "cmis:document": "type_document.json", "cmis:folder": "type_folder.json",
              "my:report": "type_report.json", "my:classified": "type_classified.json" }

    def __init__(self):
        self.gets = []
        self.posts = []
        self.post_response = json_response({})
        self.canned = {}

    def get(self, url, **kw):
        self.gets.append(url)
        parts = urlsplit(url)
        base = parts.scheme + "://" + parts.netloc + parts.path
        params = dict(parse_qsl(parts.query))
        selector = params.get("cmisselector")

        if base in (endpoint, repourl) and selector in (None, "repositoryInfo"):
            return json_response(read_data("repositories.json"))
        if base == repourl and selector == "typeDefinition":
            if params.get("typeId") in self.types:
                return json_response(read_data(self.types[params["typeId"]]))
        if base == rooturl and params.get("objectId") == "doc-1":
            if selector == "object":
                return json_response(read_data("object_succinct.json"))
            if selector == "content":
                hdrs = { "Content-Type": "text/plain", "Content-Length": "5",
                         "Content-Disposition": 'attachment; filename="hello.txt"' }
                if kw.get("headers", {}).get("Range"):
                    return MockResponse(206, b"hello", hdrs)
                return MockResponse(200, b"hello", hdrs)
        if base == repourl and selector == "contentChanges":
            return json_response(self.changes)
        if selector in self.canned:
            return json_response(self.canned[selector])

        return json_response({"exception": "objectNotFound", "message": "No such thing: "+url},
                             404)

    def post(self, url, **kw):
        self.posts.append((url, kw))
        return self.post_response

    def form(self, i=-1):
        return dict(self.posts[i][1]["data"])

    def last_get(self, selector=None):
        """
        return the most recent GET URL with the given cmisselector.  If no selector is given,
        the type definition requests made while decoding a response are skipped.
        """
        for url in reversed(self.gets):
            sel = dict(parse_qsl(urlsplit(url).query)).get("cmisselector")
            if (selector and sel == selector) or (not selector and sel != "typeDefinition"):
                return url
        return None

class ServiceTestBase(test.TestCase):

    def setUp(self):
        self.server = MockServer()
        self.gpatch = mock.patch('nistoar.cmis.browser.http.requests.get',
                                 side_effect=self.server.get)
        self.ppatch = mock.patch('nistoar.cmis.browser.http.requests.post',
                                 side_effect=self.server.post)
        self.gpatch.start()
        self.ppatch.start()
        self.binding = BrowserBinding({"service_endpoint": endpoint})

    def tearDown(self):
        self.ppatch.stop()
        self.gpatch.stop()

class TestRepositoryService(ServiceTestBase):

    def test_get_repository_infos(self):
        infos = self.binding.repository.get_repository_infos()
        self.assertEqual(len(infos), 1)
        self.assertEqual(infos[0].id, "A1")
        self.assertEqual(infos[0].root_folder_id, "100")
        self.assertEqual(self.server.gets, [endpoint])
        self.assertIn("A1", self.binding.url_cache)

    def test_get_repository_info(self):
        info = self.binding.repository.get_repository_info("A1")
        self.assertEqual(info.latest_change_log_token, "cl-17")
        self.assertEqual(self.server.gets, [endpoint])

        # now that the repository is known, its own URL is used
        info = self.binding.repository.get_repository_info("A1")
        self.assertEqual(info.id, "A1")
        self.assertEqual(self.server.last_get(), repourl + "?cmisselector=repositoryInfo")

    def test_unknown_repository(self):
        with self.assertRaises(CmisObjectNotFoundException) as cm:
            self.binding.object.get_object("Z9", "doc-1")
        self.assertEqual(str(cm.exception), "Unknown repository!")

    def test_invalid_repository_info(self):
        self.server.get = lambda url, **kw: json_response({"A1": ["not", "an", "object"]})
        with mock.patch('nistoar.cmis.browser.http.requests.get', side_effect=self.server.get):
            with self.assertRaises(CmisConnectionException) as cm:
                self.binding.repository.get_repository_infos()
        self.assertEqual(str(cm.exception), "Found invalid Repository Info!")

    def test_get_type_definition(self):
        typedef = self.binding.repository.get_type_definition("A1", "my:report")
        self.assertEqual(typedef.id, "my:report")
        self.assertEqual(typedef.base_type_id, BaseTypeId.DOCUMENT)
        self.assertEqual(self.server.last_get("typeDefinition"),
                         repourl + "?cmisselector=typeDefinition&typeId=my%3Areport")

    def test_delete_type(self):
        tc = self.binding.get_type_cache("A1")
        self.assertIsNotNone(tc.get_type_definition("my:report"))
        self.assertIsNotNone(self.binding.type_cache.get("A1", "my:report"))

        self.binding.repository.delete_type("A1", "my:report")
        self.assertEqual(self.server.posts[-1][0], repourl)
        self.assertEqual(self.server.form(), {"cmisaction": "deleteType", "typeId": "my:report"})
        self.assertIsNone(self.binding.type_cache.get("A1", "my:report"))

class TestObjectService(ServiceTestBase):

    def test_get_object(self):
        obj = self.binding.object.get_object("A1", "doc-1", include_acl=True)
        self.assertEqual(obj.id, "doc-1")
        self.assertEqual(obj.type_id, "my:report")
        self.assertEqual(obj.properties.get("my:score").property_type, PropertyType.DECIMAL)
        self.assertEqual(obj.properties.get_value("my:score"), Decimal("4.5"))
        self.assertEqual(obj.properties.get("my:level").property_type, PropertyType.INTEGER)
        self.assertEqual(obj.acl.aces[0].principal_id, "alice")

        url = urlsplit(self.server.last_get())
        self.assertEqual(url.path, "/browser/A1/root")
        params = dict(parse_qsl(url.query))
        self.assertEqual(params["objectId"], "doc-1")
        self.assertEqual(params["cmisselector"], "object")
        self.assertEqual(params["includeACL"], "true")
        self.assertEqual(params["succinct"], "true")

        # the types needed to decode the object are now cached
        self.assertIsNotNone(self.binding.type_cache.get("A1", "my:report"))
        self.assertIsNotNone(self.binding.type_cache.get("A1", "my:classified"))

        ntypes = len([u for u in self.server.gets if "typeDefinition" in u])
        self.binding.object.get_object("A1", "doc-1")
        self.assertEqual(len([u for u in self.server.gets if "typeDefinition" in u]), ntypes)

    def test_object_not_found(self):
        with self.assertRaises(CmisObjectNotFoundException) as cm:
            self.binding.object.get_object("A1", "doc-9")
        self.assertTrue(str(cm.exception).startswith("No such thing: "))
        self.assertEqual(cm.exception.code, 404)

    def test_get_content_stream(self):
        cs = self.binding.object.get_content_stream("A1", "doc-1")
        self.assertNotIsInstance(cs, PartialContentStream)
        self.assertEqual(cs.filename, "hello.txt")
        self.assertEqual(cs.mime_type, "text/plain")
        self.assertEqual(cs.length, 5)
        self.assertEqual(cs.read(), b"hello")

        cs = self.binding.object.get_content_stream("A1", "doc-1", offset=0, length=5)
        self.assertIsInstance(cs, PartialContentStream)

    def test_update_properties(self):
        self.server.post_response = json_response(read_data("object_succinct.json"))
        props = PropertiesBag([PropertyData("cmis:name", PropertyType.STRING, ["new.pdf"])])
        id, token = self.binding.object.update_properties("A1", "doc-1", props, "ct-0")

        self.assertEqual(id, "doc-1")
        self.assertEqual(token, "ct-1")
        self.assertEqual(self.server.posts[-1][0], rooturl + "?objectId=doc-1")
        form = self.server.form()
        self.assertEqual(form["cmisaction"], "update")
        self.assertEqual(form["changeToken"], "ct-0")
        self.assertEqual(form["succinct"], "true")
        self.assertEqual(form["propertyId[0]"], "cmis:name")
        self.assertEqual(form["propertyValue[0]"], "new.pdf")

        with self.assertRaises(CmisInvalidArgumentException):
            self.binding.object.update_properties("A1", None, props)

    def test_omit_change_tokens(self):
        self.binding = BrowserBinding({"service_endpoint": endpoint, "omit_change_tokens": True})
        self.server.post_response = json_response(read_data("object_succinct.json"))
        props = PropertiesBag([PropertyData("cmis:name", PropertyType.STRING, ["new.pdf"])])
        self.binding.object.update_properties("A1", "doc-1", props, "ct-0")
        self.assertNotIn("changeToken", self.server.form())

    def test_update_conflict(self):
        self.server.post_response = json_response({"exception": "updateConflict",
                                                   "message": "stale token"}, 409)
        props = PropertiesBag([PropertyData("cmis:name", PropertyType.STRING, ["new.pdf"])])
        with self.assertRaises(CmisUpdateConflictException) as cm:
            self.binding.object.update_properties("A1", "doc-1", props, "ct-0")
        self.assertEqual(str(cm.exception), "stale token")

    def test_create_document(self):
        self.server.post_response = json_response(read_data("object_succinct.json"), 201)
        props = PropertiesBag([PropertyData("cmis:name", PropertyType.STRING, ["annual.pdf"]),
                               PropertyData("cmis:objectTypeId", PropertyType.ID, ["my:report"])])
        stream = BytesIO(b"%PDF")
        id = self.binding.object.create_document("A1", props, "100",
                                                 ContentStream(stream, "annual.pdf",
                                                               "application/pdf"))
        self.assertEqual(id, "doc-1")

        url, kw = self.server.posts[-1]
        self.assertEqual(url, rooturl + "?objectId=100")
        self.assertEqual(kw["files"], {"content": ("annual.pdf", stream, "application/pdf")})
        self.assertEqual(self.server.form()["cmisaction"], "createDocument")

    def test_delete_tree(self):
        self.server.post_response = json_response({"ids": ["doc-7", "doc-8"]})
        failed = self.binding.object.delete_tree("A1", "100", continue_on_failure=True)
        self.assertEqual(failed.ids, ["doc-7", "doc-8"])
        form = self.server.form()
        self.assertEqual(form["cmisaction"], "deleteTree")
        self.assertEqual(form["continueOnFailure"], "true")

        self.server.post_response = MockResponse(200, b"")
        self.assertEqual(self.binding.object.delete_tree("A1", "100").ids, [])

    def test_bulk_update(self):
        self.server.post_response = json_response([{"id": "doc-1", "newId": "doc-1a",
                                                    "changeToken": "ct-2"}])
        out = self.binding.object.bulk_update_properties(
            "A1", [BulkUpdateObjectIdAndChangeToken("doc-1", change_token="ct-1")],
            add_secondary_type_ids=["my:classified"])
        self.assertEqual(out[0].new_id, "doc-1a")
        self.assertEqual(self.server.posts[-1][0], repourl)
        form = self.server.form()
        self.assertEqual(form["objectId[0]"], "doc-1")
        self.assertEqual(form["addSecondaryTypeId[0]"], "my:classified")

        with self.assertRaises(CmisInvalidArgumentException):
            self.binding.object.bulk_update_properties("A1", [])

class TestOtherServices(ServiceTestBase):

    def test_get_content_changes(self):
        self.server.changes = {
            "objects": [{
                "succinctProperties": { "cmis:objectId": "doc-1" },
                "changeEventInfo": { "changeType": "updated", "changeTime": 1262304000000 }
            }],
            "hasMoreItems": True,
            "changeLogToken": "cl-18"
        }
        changes, token = self.binding.discovery.get_content_changes("A1", "cl-17", max_items=1)
        self.assertEqual(token, "cl-18")
        self.assertTrue(changes.has_more_items)
        self.assertEqual(changes.objects[0].change_event_info.change_type, ChangeType.UPDATED)
        params = dict(parse_qsl(urlsplit(self.server.last_get()).query))
        self.assertEqual(params["changeLogToken"], "cl-17")
        self.assertEqual(params["maxItems"], "1")

        del self.server.changes["changeLogToken"]
        changes, token = self.binding.discovery.get_content_changes("A1", "cl-17")
        self.assertEqual(token, "cl-17")

    def test_query(self):
        self.server.post_response = json_response({"results": [], "hasMoreItems": False,
                                                   "numItems": 0})
        out = self.binding.discovery.query("A1", "SELECT * FROM cmis:document", max_items=10)
        self.assertEqual(out.objects, [])
        self.assertEqual(out.num_items, 0)
        form = self.server.form()
        self.assertEqual(form["cmisaction"], "query")
        self.assertEqual(form["statement"], "SELECT * FROM cmis:document")
        self.assertEqual(form["maxItems"], "10")
        self.assertNotIn("succinct", form)

    def test_add_object_to_folder(self):
        self.binding.multifiling.add_object_to_folder("A1", "doc-1", "200", True)
        self.assertEqual(self.server.form(), {"cmisaction": "addObjectToFolder",
                                              "folderId": "200", "allVersions": "true"})
        self.assertTrue(self.server.post_response.closed)

    def test_apply_policy(self):
        self.binding.policy.apply_policy("A1", "pol-1", "doc-1")
        self.assertEqual(self.server.form(), {"cmisaction": "applyPolicy", "policyId": "pol-1"})

    def test_apply_acl(self):
        self.server.post_response = json_response({
            "aces": [{ "principal": { "principalId": "bob" }, "permissions": ["cmis:all"],
                       "isDirect": True }],
            "isExact": True
        })
        acl = self.binding.acl.apply_acl("A1", "doc-1", Acl([Ace("bob", ["cmis:all"])]))
        self.assertEqual(acl.aces[0].principal_id, "bob")
        self.assertEqual(self.server.form()["addACEPermission[0][0]"], "cmis:all")

folder = { "succinctProperties": { "cmis:objectId": "f1", "cmis:objectTypeId": "cmis:folder",
                                   "cmis:baseTypeId": "cmis:folder", "cmis:name": "reports" } }

def load_data(name):
    return json.loads(read_data(name))

class TestRepositoryTypes(ServiceTestBase):

    def test_get_type_children(self):
        self.server.canned["typeChildren"] = { "types": [load_data("type_report.json")],
                                               "hasMoreItems": False, "numItems": 1 }
        out = self.binding.repository.get_type_children("A1", "cmis:document", True, 10)
        self.assertEqual([t.id for t in out.types], ["my:report"])
        self.assertEqual(out.num_items, 1)
        params = dict(parse_qsl(urlsplit(self.server.last_get()).query))
        self.assertEqual(params["typeId"], "cmis:document")
        self.assertEqual(params["includePropertyDefinitions"], "true")
        self.assertEqual(params["maxItems"], "10")

    def test_get_type_descendants(self):
        self.server.canned["typeDescendants"] = [
            { "type": load_data("type_document.json"),
              "children": [ { "type": load_data("type_report.json") } ] }
        ]
        out = self.binding.repository.get_type_descendants("A1", depth=-1)
        self.assertEqual(out[0].type_definition.id, "cmis:document")
        self.assertEqual(out[0].children[0].type_definition.id, "my:report")
        params = dict(parse_qsl(urlsplit(self.server.last_get()).query))
        self.assertEqual(params["depth"], "-1")

    def test_create_update_type(self):
        report = load_data("type_report.json")
        self.server.post_response = json_response(report, 201)
        typedef = self.binding.repository.get_type_definition("A1", "my:report")

        out = self.binding.repository.create_type("A1", typedef)
        self.assertEqual(out.id, "my:report")
        form = self.server.form()
        self.assertEqual(form["cmisaction"], "createType")
        self.assertEqual(json.loads(form["type"])["id"], "my:report")

        self.server.post_response = json_response(report, 200)
        self.binding.repository.update_type("A1", typedef)
        self.assertEqual(self.server.form()["cmisaction"], "updateType")

class TestNavigationService(ServiceTestBase):

    def test_get_children(self):
        self.server.canned["children"] = { "objects": [{"object": folder, "pathSegment": "reports"}],
                                           "hasMoreItems": False, "numItems": 1 }
        out = self.binding.navigation.get_children("A1", "100", include_path_segment=True,
                                                   max_items=5)
        self.assertEqual(out.objects[0].object.id, "f1")
        self.assertEqual(out.objects[0].path_segment, "reports")
        params = dict(parse_qsl(urlsplit(self.server.last_get()).query))
        self.assertEqual(params["objectId"], "100")
        self.assertEqual(params["cmisselector"], "children")
        self.assertEqual(params["includePathSegment"], "true")
        self.assertEqual(params["succinct"], "true")

    def test_trees(self):
        tree = [{ "object": {"object": folder, "pathSegment": "reports"}, "children": [] }]
        self.server.canned["descendants"] = tree
        self.server.canned["folderTree"] = tree
        out = self.binding.navigation.get_descendants("A1", "100", depth=2)
        self.assertEqual(out[0].object.object.id, "f1")
        out = self.binding.navigation.get_folder_tree("A1", "100", depth=2)
        self.assertEqual(out[0].object.path_segment, "reports")
        self.assertEqual(dict(parse_qsl(urlsplit(self.server.last_get()).query))["cmisselector"],
                         "folderTree")

    def test_parents(self):
        self.server.canned["parents"] = [{ "object": folder, "relativePathSegment": "annual.pdf" }]
        self.server.canned["parent"] = folder
        out = self.binding.navigation.get_object_parents("A1", "doc-1",
                                                         include_relative_path_segment=True)
        self.assertEqual(out[0].object.id, "f1")
        self.assertEqual(out[0].relative_path_segment, "annual.pdf")

        self.assertEqual(self.binding.navigation.get_folder_parent("A1", "f2").id, "f1")

    def test_get_checked_out_docs(self):
        self.server.canned["checkedout"] = { "objects": [ folder ], "numItems": 1 }
        out = self.binding.navigation.get_checked_out_docs("A1")
        self.assertEqual(out.objects[0].id, "f1")
        self.assertEqual(urlsplit(self.server.last_get()).path, "/browser/A1")

        self.binding.navigation.get_checked_out_docs("A1", "100")
        self.assertEqual(urlsplit(self.server.last_get()).path, "/browser/A1/root")

class TestObjectReads(ServiceTestBase):

    def test_get_properties(self):
        self.server.canned["properties"] = load_data("object_succinct.json")["succinctProperties"]
        props = self.binding.object.get_properties("A1", "doc-1")
        self.assertEqual(props.get_value("cmis:name"), "annual.pdf")
        self.assertEqual(props.get("my:approved").property_type, PropertyType.BOOLEAN)

    def test_get_properties_verbose(self):
        self.binding = BrowserBinding({"service_endpoint": endpoint, "succinct": False})
        self.server.canned["properties"] = load_data("object_verbose.json")["properties"]
        props = self.binding.object.get_properties("A1", "doc-1")
        self.assertEqual(props.get_value("my:level"), 3)
        self.assertNotIn("succinct", dict(parse_qsl(urlsplit(self.server.last_get()).query)))

    def test_allowable_actions_and_renditions(self):
        data = load_data("object_succinct.json")
        self.server.canned["allowableActions"] = data["allowableActions"]
        self.server.canned["renditions"] = data["renditions"]

        actions = self.binding.object.get_allowable_actions("A1", "doc-1")
        self.assertIn(Action.CAN_GET_PROPERTIES, actions)
        self.assertNotIn(Action.CAN_DELETE_OBJECT, actions)

        rends = self.binding.object.get_renditions("A1", "doc-1", "cmis:thumbnail")
        self.assertEqual(rends[0].stream_id, "r-1")

    def test_get_object_by_path(self):
        self.server.canned["object"] = folder
        obj = self.binding.object.get_object_by_path("A1", "/reports")
        self.assertEqual(obj.id, "f1")
        self.assertEqual(urlsplit(self.server.last_get()).path, "/browser/A1/root/reports")

    def test_get_acl(self):
        self.server.canned["acl"] = load_data("object_succinct.json")["acl"]
        acl = self.binding.acl.get_acl("A1", "doc-1", True)
        self.assertEqual([a.principal_id for a in acl.aces], ["alice", "anyone"])
        self.assertTrue(acl.is_exact)
        params = dict(parse_qsl(urlsplit(self.server.last_get()).query))
        self.assertEqual(params["onlyBasicPermissions"], "true")

    def test_relationships_and_policies(self):
        self.server.canned["relationships"] = { "objects": [], "hasMoreItems": False }
        self.server.canned["policies"] = [ folder ]
        out = self.binding.relationship.get_object_relationships(
            "A1", "doc-1", relationship_direction=RelationshipDirection.EITHER)
        self.assertEqual(out.objects, [])
        params = dict(parse_qsl(urlsplit(self.server.last_get()).query))
        self.assertEqual(params["relationshipDirection"], "either")

        self.assertEqual(self.binding.policy.get_applied_policies("A1", "doc-1")[0].id, "f1")

class TestObjectWrites(ServiceTestBase):

    def setUp(self):
        super(TestObjectWrites, self).setUp()
        self.server.post_response = json_response(read_data("object_succinct.json"))

    def test_create_others(self):
        props = PropertiesBag([PropertyData("cmis:name", PropertyType.STRING, ["x"])])
        self.binding.object.create_folder("A1", props, "100")
        self.assertEqual(self.server.form()["cmisaction"], "createFolder")
        self.assertEqual(self.server.posts[-1][0], rooturl + "?objectId=100")

        self.binding.object.create_relationship("A1", props)
        self.assertEqual(self.server.form()["cmisaction"], "createRelationship")
        self.assertEqual(self.server.posts[-1][0], repourl)

        self.binding.object.create_policy("A1", props)
        self.assertEqual(self.server.form()["cmisaction"], "createPolicy")
        self.binding.object.create_item("A1", props, "100")
        self.assertEqual(self.server.form()["cmisaction"], "createItem")

        id = self.binding.object.create_document_from_source("A1", "doc-0", props, "100",
                                                             VersioningState.MAJOR)
        self.assertEqual(id, "doc-1")
        form = self.server.form()
        self.assertEqual(form["cmisaction"], "createDocumentFromSource")
        self.assertEqual(form["sourceId"], "doc-0")
        self.assertEqual(form["versioningState"], "major")

    def test_move_and_delete(self):
        self.assertEqual(self.binding.object.move_object("A1", "doc-1", "200", "100"), "doc-1")
        form = self.server.form()
        self.assertEqual((form["targetFolderId"], form["sourceFolderId"]), ("200", "100"))

        self.binding.object.delete_object("A1", "doc-1", True)
        self.assertEqual(self.server.form(), {"cmisaction": "delete", "allVersions": "true"})

    def test_content_changes(self):
        cs = ContentStream(BytesIO(b"more"), "more.txt", "text/plain")
        self.assertEqual(self.binding.object.set_content_stream("A1", "doc-1", cs, True, "ct-0"),
                         ("doc-1", "ct-1"))
        form = self.server.form()
        self.assertEqual(form["cmisaction"], "setContent")
        self.assertEqual(form["overwriteFlag"], "true")
        self.assertIsNotNone(self.server.posts[-1][1]["files"])

        self.binding.object.append_content_stream("A1", "doc-1", cs, is_last_chunk=True)
        self.assertEqual(self.server.form()["isLastChunk"], "true")

        self.binding.object.delete_content_stream("A1", "doc-1")
        self.assertEqual(self.server.form()["cmisaction"], "deleteContent")
        self.assertIsNone(self.server.posts[-1][1]["files"])

class TestVersioningService(ServiceTestBase):

    def test_check_out_in(self):
        self.server.post_response = json_response(read_data("object_succinct.json"))
        self.assertEqual(self.binding.versioning.check_out("A1", "doc-1"), "doc-1")
        self.assertEqual(self.server.form()["cmisaction"], "checkOut")

        id = self.binding.versioning.check_in("A1", "doc-1", major=True,
                                              checkin_comment="fixed typos")
        self.assertEqual(id, "doc-1")
        form = self.server.form()
        self.assertEqual(form["cmisaction"], "checkIn")
        self.assertEqual(form["major"], "true")
        self.assertEqual(form["checkinComment"], "fixed typos")

        self.binding.versioning.cancel_check_out("A1", "doc-1")
        self.assertEqual(self.server.form(), {"cmisaction": "cancelCheckOut"})

    def test_latest_version(self):
        data = load_data("object_succinct.json")
        self.server.canned["versions"] = [ data ]
        self.server.canned["properties"] = data["succinctProperties"]

        versions = self.binding.versioning.get_all_versions("A1", "doc-1")
        self.assertEqual(versions[0].id, "doc-1")

        props = self.binding.versioning.get_properties_of_latest_version("A1", "doc-1", True)
        self.assertEqual(props.get_value("cmis:changeToken"), "ct-1")
        params = dict(parse_qsl(urlsplit(self.server.last_get()).query))
        self.assertEqual(params["returnVersion"], "latestmajor")

        obj = self.binding.versioning.get_object_of_latest_version("A1", "doc-1")
        self.assertEqual(obj.id, "doc-1")
        params = dict(parse_qsl(urlsplit(self.server.last_get()).query))
        self.assertEqual(params["returnVersion"], "latest")
        self.assertEqual(params["cmisselector"], "object")

class TestFilingServices(ServiceTestBase):

    def test_remove_object_from_folder(self):
        self.binding.multifiling.remove_object_from_folder("A1", "doc-1", "200")
        self.assertEqual(self.server.form(), {"cmisaction": "removeObjectFromFolder",
                                              "folderId": "200"})

    def test_remove_policy(self):
        self.binding.policy.remove_policy("A1", "pol-1", "doc-1")
        self.assertEqual(self.server.form(), {"cmisaction": "removePolicy", "policyId": "pol-1"})
        self.assertEqual(self.server.posts[-1][0], rooturl + "?objectId=doc-1")


if __name__ == '__main__':
    test.main()
