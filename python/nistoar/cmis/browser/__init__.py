"""
The CMIS Browser Binding:  the JSON wire codecs and the HTTP services that use them.

The codecs are organized by the kind of data they handle:

:py:mod:`~nistoar.cmis.browser.repository`
    repository descriptions and capabilities
:py:mod:`~nistoar.cmis.browser.types`
    type and property definitions
:py:mod:`~nistoar.cmis.browser.properties`
    object properties in the verbose and succinct encodings
:py:mod:`~nistoar.cmis.browser.objects`
    objects, ACLs, allowable actions, renditions, and the lists and trees they appear in

:py:class:`~nistoar.cmis.browser.binding.BrowserBinding` is the client session that puts
these to work.
"""
from .binding import BrowserBinding
from .typecache import TypeCache, TypeDefinitionCache, ClientTypeCache
from .urls import RepositoryUrlCache, UrlBuilder
