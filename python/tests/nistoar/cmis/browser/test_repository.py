import os, sys, pdb
from pathlib import Path
import unittest as test

from nistoar.cmis.browser import repository as repo
from nistoar.cmis.browser.utils import loads, dumps
from nistoar.cmis.enums import (BaseTypeId, CapabilityChanges, CapabilityQuery, CapabilityJoin,
                                CapabilityAcl, CapabilityContentStreamUpdates,
                                SupportedPermissions, AclPropagation)

datadir = Path(__file__).parents[1] / "data"

def load(filename):
    with open(datadir/filename) as fd:
        return loads(fd.read())

class TestRepositoryInfo(test.TestCase):

    def setUp(self):
        self.data = load("repositories.json")["A1"]

    def test_convert(self):
        info = repo.convert_repository_info(self.data)
        self.assertEqual(info.id, "A1")
        self.assertEqual(info.name, "Reports")
        self.assertEqual(info.vendor_name, "Example Corp.")
        self.assertEqual(info.product_version, "2.3")
        self.assertEqual(info.root_folder_id, "100")
        self.assertEqual(info.repository_url, "https://cmis.example.org/browser/A1")
        self.assertEqual(info.root_url, "https://cmis.example.org/browser/A1/root")
        self.assertEqual(info.latest_change_log_token, "cl-17")
        self.assertEqual(info.cmis_version_supported, "1.1")
        self.assertIs(info.changes_incomplete, False)
        self.assertEqual(info.changes_on_type, [BaseTypeId.DOCUMENT, BaseTypeId.FOLDER])
        self.assertEqual(info.principal_id_anyone, "anyone")
        self.assertIsNone(info.thin_client_uri)

        self.assertEqual(len(info.extensions), 1)
        self.assertEqual(info.extensions[0].name, "vendorStatus")
        self.assertEqual(info.extensions[0].get_child("nodes").value, 3)

    def test_capabilities(self):
        caps = repo.convert_repository_info(self.data).capabilities
        self.assertEqual(caps.content_stream_updates, CapabilityContentStreamUpdates.ANYTIME)
        self.assertEqual(caps.changes, CapabilityChanges.OBJECTIDSONLY)
        self.assertEqual(caps.query, CapabilityQuery.BOTHCOMBINED)
        self.assertEqual(caps.join, CapabilityJoin.NONE)
        self.assertEqual(caps.acl, CapabilityAcl.MANAGE)
        self.assertIs(caps.get_descendants, True)
        self.assertIs(caps.multifiling, False)
        self.assertIsNone(caps.creatable_property_types)

    def test_acl_capabilities(self):
        aclcaps = repo.convert_repository_info(self.data).acl_capabilities
        self.assertEqual(aclcaps.supported_permissions, SupportedPermissions.BASIC)
        self.assertEqual(aclcaps.acl_propagation, AclPropagation.OBJECTONLY)
        self.assertEqual([p.id for p in aclcaps.permissions], ["cmis:read", "cmis:write"])
        self.assertEqual(aclcaps.permissions[1].description, "Write")
        self.assertEqual(list(aclcaps.permission_mapping.keys()), ["canGetProperties.Object"])
        self.assertEqual(aclcaps.permission_mapping["canGetProperties.Object"].permissions,
                         ["cmis:read"])

    def test_to_json(self):
        info = repo.convert_repository_info(self.data)
        out = repo.repository_info_to_json(info)
        self.assertEqual(out["repositoryId"], "A1")
        self.assertEqual(out["repositoryUrl"], "https://cmis.example.org/browser/A1")
        self.assertEqual(out["rootFolderUrl"], "https://cmis.example.org/browser/A1/root")
        self.assertEqual(out["changesOnType"], ["cmis:document", "cmis:folder"])
        self.assertEqual(out["capabilities"]["capabilityQuery"], "bothcombined")
        self.assertEqual(out["aclCapabilities"]["propagation"], "objectonly")
        self.assertEqual(out["vendorStatus"], {"healthy": True, "nodes": 3})

        self.assertEqual(repo.convert_repository_info(loads(dumps(out))), info)

    def test_none(self):
        self.assertIsNone(repo.convert_repository_info(None))
        self.assertIsNone(repo.repository_info_to_json(None))


if __name__ == '__main__':
    test.main()
