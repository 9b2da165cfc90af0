import os, sys, pdb
import unittest as test

from nistoar.cmis.browser import faults
from nistoar.cmis.exceptions import *

class TestFaults(test.TestCase):

    def test_exception_for_name(self):
        self.assertIs(faults.exception_for_name("objectNotFound"), CmisObjectNotFoundException)
        self.assertIs(faults.exception_for_name("NAMECONSTRAINTVIOLATION"),
                      CmisNameConstraintViolationException)
        self.assertIsNone(faults.exception_for_name("goober"))
        self.assertIsNone(faults.exception_for_name(None))

    def test_exception_for_status(self):
        self.assertIs(faults.exception_for_status(400), CmisInvalidArgumentException)
        self.assertIs(faults.exception_for_status(401), CmisUnauthorizedException)
        self.assertIs(faults.exception_for_status(403), CmisPermissionDeniedException)
        self.assertIs(faults.exception_for_status(404), CmisObjectNotFoundException)
        self.assertIs(faults.exception_for_status(405), CmisNotSupportedException)
        self.assertIs(faults.exception_for_status(407), CmisProxyAuthenticationException)
        self.assertIs(faults.exception_for_status(409), CmisConstraintException)
        self.assertIs(faults.exception_for_status(503), CmisServiceUnavailableException)
        self.assertIs(faults.exception_for_status(500), CmisRuntimeException)
        self.assertIs(faults.exception_for_status(302), CmisConnectionException)

    def test_status_only(self):
        ex = faults.convert_status_code(404, "Not Found")
        self.assertIsInstance(ex, CmisObjectNotFoundException)
        self.assertEqual(str(ex), "Not Found")
        self.assertEqual(ex.code, 404)
        self.assertIsNone(ex.error_content)

        ex = faults.convert_status_code(500, "Server Error", "<html>oops</html>")
        self.assertIsInstance(ex, CmisRuntimeException)
        self.assertEqual(ex.message, "Server Error")
        self.assertEqual(ex.error_content, "<html>oops</html>")

    def test_named_exception(self):
        body = '{"exception": "nameConstraintViolation", "message": "dup"}'
        ex = faults.convert_status_code(409, "Conflict", body)
        self.assertIsInstance(ex, CmisNameConstraintViolationException)
        self.assertEqual(str(ex), "dup")
        self.assertEqual(ex.code, 409)
        self.assertEqual(ex.error_content, body)

        # the name overrides the status
        ex = faults.convert_status_code(500, "Server Error",
                                        '{"exception": "updateConflict", "message": "stale"}')
        self.assertIsInstance(ex, CmisUpdateConflictException)

    def test_unknown_name(self):
        ex = faults.convert_status_code(503, "Unavailable",
                                        '{"exception": "overloaded", "message": "busy"}')
        self.assertIsInstance(ex, CmisServiceUnavailableException)
        self.assertEqual(str(ex), "busy")

        ex = faults.convert_status_code(403, "Forbidden",
                                        '{"exception": "goober", "message": "nope"}')
        self.assertIsInstance(ex, CmisPermissionDeniedException)
        self.assertEqual(str(ex), "nope")

        ex = faults.convert_status_code(400, "Bad", '["exception"]')
        self.assertIsInstance(ex, CmisInvalidArgumentException)
        self.assertEqual(str(ex), "Bad")

    def test_redirect(self):
        ex = faults.convert_status_code(301, "Moved Permanently")
        self.assertIsInstance(ex, CmisConnectionException)
        self.assertEqual(str(ex),
                         "Redirects are not supported (HTTP status code 301): Moved Permanently")
        self.assertEqual(ex.code, 301)

    def test_hierarchy(self):
        for cls in (CmisObjectNotFoundException, CmisConnectionException,
                    CmisServiceUnavailableException):
            self.assertTrue(issubclass(cls, CmisBaseException))
        self.assertTrue(issubclass(CmisBaseException, CMISException))
        self.assertEqual(str(CmisConstraintException()), "CMIS error (constraint)")


if __name__ == '__main__':
    test.main()
