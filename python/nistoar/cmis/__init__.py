"""
A client for content repositories that speak the CMIS Browser Binding (CMIS over JSON/HTTP).

The :py:mod:`nistoar.cmis.browser` subpackage provides the wire codecs that translate between
the typed CMIS data model (:py:mod:`nistoar.cmis.data`) and its JSON representation as well as
the binding services that carry out requests against a repository server.  Most applications
will only need :py:class:`~nistoar.cmis.browser.binding.BrowserBinding`:

.. code-block:: python

   from nistoar.cmis.browser import BrowserBinding

   binding = BrowserBinding({ "service_endpoint": "https://cmis.example.org/browser" })
   info = binding.repository.get_repository_info("A1")
"""
from .exceptions import *

try:
    from .version import __version__
except ImportError:
    __version__ = "(unset)"
