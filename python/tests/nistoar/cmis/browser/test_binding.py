import os, sys, pdb, logging
import unittest as test

from nistoar.cmis.browser.binding import BrowserBinding
from nistoar.cmis.browser.typecache import ClientTypeCache, TypeDefinitionCache
from nistoar.cmis.browser import services as svcs
from nistoar.cmis.data import TypeDefinition
from nistoar.cmis.enums import DateTimeFormat
from nistoar.cmis.exceptions import ConfigurationException

endpoint = "https://cmis.example.org/browser"

class TestBrowserBinding(test.TestCase):

    def test_ctor(self):
        binding = BrowserBinding({"service_endpoint": endpoint})
        self.assertEqual(binding.service_endpoint, endpoint)
        self.assertEqual(binding.log.name, "nistoar.cmis")
        self.assertIsInstance(binding.type_cache, TypeDefinitionCache)
        self.assertEqual(binding.type_cache.max_repositories, 10)
        self.assertEqual(binding.type_cache.max_types, 100)
        self.assertEqual(len(binding.url_cache), 0)
        self.assertIs(binding.dispatcher.invoker, binding.http)

        self.assertIsInstance(binding.repository, svcs.RepositoryService)
        self.assertIsInstance(binding.navigation, svcs.NavigationService)
        self.assertIsInstance(binding.object, svcs.ObjectService)
        self.assertIsInstance(binding.versioning, svcs.VersioningService)
        self.assertIsInstance(binding.discovery, svcs.DiscoveryService)
        self.assertIsInstance(binding.relationship, svcs.RelationshipService)
        self.assertIsInstance(binding.multifiling, svcs.MultiFilingService)
        self.assertIsInstance(binding.policy, svcs.PolicyService)
        self.assertIsInstance(binding.acl, svcs.AclService)
        self.assertIs(binding.object.binding, binding)
        self.assertEqual(binding.object.log.name, "nistoar.cmis.ObjectService")

    def test_service_settings(self):
        binding = BrowserBinding({"service_endpoint": endpoint})
        self.assertTrue(binding.object.succinct)
        self.assertEqual(binding.object.succinct_parameter, "true")
        self.assertEqual(binding.object.datetime_format, DateTimeFormat.SIMPLE)
        self.assertIsNone(binding.object.datetime_format_parameter)
        self.assertFalse(binding.object.omit_change_tokens)

        binding = BrowserBinding({"service_endpoint": endpoint, "succinct": False,
                                  "datetime_format": "extended", "omit_change_tokens": True})
        self.assertFalse(binding.navigation.succinct)
        self.assertIsNone(binding.navigation.succinct_parameter)
        self.assertEqual(binding.navigation.datetime_format_parameter, DateTimeFormat.EXTENDED)
        self.assertTrue(binding.navigation.omit_change_tokens)

    def test_custom_log(self):
        log = logging.getLogger("goober")
        binding = BrowserBinding({"service_endpoint": endpoint}, log)
        self.assertIs(binding.log, log)
        self.assertEqual(binding.acl.log.name, "goober.AclService")

    def test_bad_config(self):
        with self.assertRaises(ConfigurationException):
            BrowserBinding(None)
        with self.assertRaises(ConfigurationException):
            BrowserBinding([("service_endpoint", endpoint)])
        with self.assertRaises(ConfigurationException) as cm:
            BrowserBinding({"succinct": True})
        self.assertEqual(cm.exception.param, "service_endpoint")
        with self.assertRaises(ConfigurationException):
            BrowserBinding({"service_endpoint": endpoint, "cache": {"types": "lots"}})
        with self.assertRaises(ConfigurationException):
            BrowserBinding({"service_endpoint": endpoint, "cache": {"repositories": 0}})
        with self.assertRaises(ConfigurationException):
            BrowserBinding({"service_endpoint": endpoint, "auth": {"type": "magic"}})

    def test_cache_config(self):
        binding = BrowserBinding({"service_endpoint": endpoint, "cache": {"types": 5}})
        self.assertEqual(binding.type_cache.max_types, 5)
        self.assertEqual(binding.type_cache.max_repositories, 10)

    def test_clear_caches(self):
        binding = BrowserBinding({"service_endpoint": endpoint})
        for repo in ("A1", "B2"):
            binding.url_cache.add_repository(repo, endpoint+"/"+repo, endpoint+"/"+repo+"/root")
            binding.type_cache.put(repo, TypeDefinition("my:report"))

        binding.clear_repository_cache("A1")
        self.assertNotIn("A1", binding.url_cache)
        self.assertIn("B2", binding.url_cache)
        self.assertIsNone(binding.type_cache.get("A1", "my:report"))
        self.assertIsNotNone(binding.type_cache.get("B2", "my:report"))

        binding.clear_all_caches()
        self.assertEqual(len(binding.url_cache), 0)
        self.assertEqual(len(binding.type_cache), 0)

    def test_get_type_cache(self):
        binding = BrowserBinding({"service_endpoint": endpoint})
        tc = binding.get_type_cache("A1")
        self.assertIsInstance(tc, ClientTypeCache)
        self.assertEqual(tc.repo_id, "A1")
        self.assertIs(tc.service, binding.repository)

        binding.type_cache.put("A1", TypeDefinition("my:report"))
        self.assertEqual(tc.get_type_definition("my:report").id, "my:report")


if __name__ == '__main__':
    test.main()
