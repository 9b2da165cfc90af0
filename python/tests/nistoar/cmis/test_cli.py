import os, sys, pdb, json, tempfile, logging
import unittest as test
from unittest import mock
from pathlib import Path
from io import StringIO

import requests

from nistoar.cmis import cli

datadir = Path(__file__).parent / "data"
endpoint = "https://cmis.example.org/browser"

class MockResponse:
    def __init__(self, status_code, content=b"", reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self.content = content
        self.headers = { "Content-Type": "application/json" }

    @property
    def text(self):
        return self.content.decode("utf-8")

    def close(self):
        pass

def repositories(url, **kw):
    with open(datadir / "repositories.json", 'rb') as fd:
        return MockResponse(200, fd.read())

class TestCLI(test.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory(prefix="_test_cmiscli.")
        self.rootlog = logging.getLogger()
        self.handlers = list(self.rootlog.handlers)
        self.level = self.rootlog.level
        self.out = StringIO()

    def tearDown(self):
        for hdlr in list(self.rootlog.handlers):
            if hdlr not in self.handlers:
                self.rootlog.removeHandler(hdlr)
                hdlr.close()
        self.rootlog.setLevel(self.level)
        self.tmpdir.cleanup()

    def test_define_options(self):
        parser = cli.define_options("cmisinfo")
        opts = parser.parse_args(["-u", endpoint, "-r", "A1", "-v"])
        self.assertEqual(opts.url, endpoint)
        self.assertEqual(opts.repoid, "A1")
        self.assertTrue(opts.verbose)
        self.assertFalse(opts.quiet)
        self.assertIsNone(opts.cfgfile)

    def test_no_endpoint(self):
        with self.assertRaises(cli.Failure) as cm:
            cli.main("cmisinfo", ["-q"], self.out)
        self.assertEqual(cm.exception.exitcode, 3)

    def test_run(self):
        with mock.patch.object(cli, "main") as main:
            cli.run("cmisinfo", ["-u", endpoint])
        main.assert_called_once_with("cmisinfo", ["-u", endpoint])

        with mock.patch.object(cli, "main", side_effect=cli.Failure("no endpoint", 3)), \
             mock.patch.object(cli, "_report") as report:
            with self.assertRaises(SystemExit) as cm:
                cli.run("cmisinfo", [])
        self.assertEqual(cm.exception.code, 3)
        report.assert_called_once_with("no endpoint", "cmisinfo")

        with mock.patch.object(cli, "main", side_effect=ValueError("oops")), \
             mock.patch.object(cli, "_report") as report, \
             mock.patch.object(cli.tb, "print_exc"):
            with self.assertRaises(SystemExit) as cm:
                cli.run("cmisinfo", [])
        self.assertEqual(cm.exception.code, 1)
        report.assert_called_once_with("oops", "cmisinfo")

    def test_report(self):
        err = StringIO()
        with mock.patch.object(self.rootlog, "handlers", []), \
             mock.patch.object(cli.sys, "stderr", err):
            cli._report("gone", "cmisinfo")
        self.assertEqual(err.getvalue(), "cmisinfo: gone\n")

    def test_read_config(self):
        cfgfile = os.path.join(self.tmpdir.name, "cmis.yml")
        with open(cfgfile, 'w') as fd:
            fd.write("service_endpoint: %s\nsuccinct: false\n" % endpoint)
        cfg = cli.read_config(cfgfile)
        self.assertEqual(cfg["service_endpoint"], endpoint)
        self.assertIs(cfg["succinct"], False)

        with self.assertRaises(cli.Failure) as cm:
            cli.read_config(os.path.join(self.tmpdir.name, "missing.yml"))
        self.assertEqual(cm.exception.exitcode, 3)

        with open(cfgfile, 'w') as fd:
            fd.write("[ service_endpoint")
        with self.assertRaises(cli.Failure) as cm:
            cli.read_config(cfgfile)
        self.assertEqual(cm.exception.exitcode, 3)

    @mock.patch('nistoar.cmis.browser.http.requests.get', side_effect=repositories)
    def test_all_repositories(self, mock_get):
        cli.main("cmisinfo", ["-q", "-u", endpoint], self.out)
        data = json.loads(self.out.getvalue())
        self.assertEqual(list(data.keys()), ["A1"])
        self.assertEqual(data["A1"]["repositoryId"], "A1")
        self.assertEqual(data["A1"]["rootFolderId"], "100")
        self.assertEqual(mock_get.call_args[0][0], endpoint)

    @mock.patch('nistoar.cmis.browser.http.requests.get', side_effect=repositories)
    def test_one_repository(self, mock_get):
        cfgfile = os.path.join(self.tmpdir.name, "cmis.json")
        logfile = os.path.join(self.tmpdir.name, "cmisinfo.log")
        with open(cfgfile, 'w') as fd:
            json.dump({"service_endpoint": endpoint}, fd)

        cli.main("cmisinfo", ["-q", "-v", "-c", cfgfile, "-r", "A1", "-l", logfile], self.out)
        data = json.loads(self.out.getvalue())
        self.assertEqual(data["repositoryId"], "A1")
        self.assertEqual(data["latestChangeLogToken"], "cl-17")
        self.assertTrue(os.path.exists(logfile))

    @mock.patch('nistoar.cmis.browser.http.requests.get')
    def test_server_failure(self, mock_get):
        mock_get.return_value = MockResponse(
            404, b'{"exception": "objectNotFound", "message": "gone"}', "Not Found")
        with self.assertRaises(cli.Failure) as cm:
            cli.main("cmisinfo", ["-q", "-u", endpoint], self.out)
        self.assertEqual(cm.exception.exitcode, 2)
        self.assertEqual(str(cm.exception), "Failed to retrieve repository info: gone")

        mock_get.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(cli.Failure) as cm:
            cli.main("cmisinfo", ["-q", "-u", endpoint], self.out)
        self.assertEqual(cm.exception.exitcode, 2)

    def test_bad_config(self):
        cfgfile = os.path.join(self.tmpdir.name, "cmis.yml")
        with open(cfgfile, 'w') as fd:
            fd.write("service_endpoint: %s\nauth:\n  type: magic\n" % endpoint)
        with self.assertRaises(cli.Failure) as cm:
            cli.main("cmisinfo", ["-q", "-c", cfgfile], self.out)
        self.assertEqual(cm.exception.exitcode, 3)


if __name__ == '__main__':
    test.main()
