"""
Utilities for loading and combining the configuration of a CMIS client.

A client configuration is a plain dictionary.  The parameters recognized by
:py:class:`~nistoar.cmis.browser.binding.BrowserBinding` are:

``service_endpoint``
    (str) *required*.  the base URL of the repository's Browser Binding service
``succinct``
    (bool) if True (default), request the compact property encoding
``datetime_format``
    (str) either ``simple`` (default; milliseconds since the epoch) or ``extended`` (ISO-8601)
``omit_change_tokens``
    (bool) if True, never send change tokens with updates (default: False)
``auth``
    (dict) the authentication credentials; see :py:mod:`nistoar.cmis.browser.http`
``user_agent``
    (str) the value to send as the User-Agent header
``headers``
    (dict) additional HTTP headers to send with every request
``compression``
    (bool) if True, ask the server to compress responses (default: False)
``connect_timeout``, ``read_timeout``
    (float) timeouts in seconds for establishing a connection and waiting for data
``cache``
    (dict) sizes of the type-definition cache: ``repositories`` (default: 10) and
    ``types`` (per repository; default: 100)
"""
import json
from collections.abc import Mapping
from copy import deepcopy

import yaml

from .exceptions import ConfigurationException

DEFAULT_CACHE_SIZE_REPOSITORIES = 10
DEFAULT_CACHE_SIZE_TYPES = 100

DEFAULTS = {
    "succinct": True,
    "datetime_format": "simple",
    "omit_change_tokens": False,
    "compression": False,
    "headers": {},
    "cache": {
        "repositories": DEFAULT_CACHE_SIZE_REPOSITORIES,
        "types": DEFAULT_CACHE_SIZE_TYPES
    }
}

def load_from_file(configfile):
    """
    read the configuration from the given file and return it as a dictionary.
    The file format is determined by its extension: ``.json`` files are read as JSON;
    all others are read as YAML.

    :param str configfile:  the path to the configuration file
    :raises ConfigurationException:  if the file contents cannot be parsed
    :raises OSError:  if the file cannot be opened or read
    """
    with open(configfile) as fd:
        try:
            if configfile.endswith(".json"):
                out = json.load(fd)
            else:
                out = yaml.safe_load(fd)
        except (ValueError, yaml.YAMLError) as ex:
            raise ConfigurationException("%s: config parsing error: %s" % (configfile, str(ex)),
                                         cause=ex) from ex

    if out is None:
        out = {}
    if not isinstance(out, Mapping):
        raise ConfigurationException("%s: config file does not contain a dictionary" % configfile)
    return out

def merge_config(primary, defconf):
    """
    merge two configurations, returning a new one.  Values in ``primary`` override those
    in ``defconf``; dictionary values are merged recursively.  Neither input is modified.
    """
    out = deepcopy(defconf) if defconf else {}
    if not primary:
        return out
    for key, val in primary.items():
        if isinstance(val, Mapping) and isinstance(out.get(key), Mapping):
            out[key] = merge_config(val, out[key])
        else:
            out[key] = deepcopy(val)
    return out

def with_defaults(config):
    """
    return a copy of the given client configuration with all unset parameters filled in
    with their default values
    """
    if config is None:
        config = {}
    if not isinstance(config, Mapping):
        raise TypeError("with_defaults(): config is not a dictionary: " + str(type(config)))
    return merge_config(config, DEFAULTS)

def get_bool(config, param, default=False):
    """
    return a boolean-valued configuration parameter, accepting common string spellings
    (e.g. "true", "False", "1") as well as native booleans
    """
    val = config.get(param, default)
    if val is None:
        return default
    if isinstance(val, str):
        if val.strip().lower() in ("true", "yes", "1", "on"):
            return True
        if val.strip().lower() in ("false", "no", "0", "off", ""):
            return False
        raise ConfigurationException("%s: not a boolean value: %s" % (param, val), param)
    return bool(val)
