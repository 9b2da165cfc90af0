"""
Support for extension data:  JSON content that a repository returns but that is not part of the
CMIS data model (e.g. vendor-specific members).

Extension data is captured as a list of :py:class:`ExtensionNode` trees so that it can be
carried alongside the modeled data and written back out unchanged.  A JSON object (including an
empty one) becomes a node with a list of children; a JSON array becomes a sequence of sibling
nodes sharing the array's name, each marked as an array element; any other JSON value becomes a
leaf node holding that value.  An empty array has no elements to carry, so its member is
dropped; nested arrays are flattened into a single run of siblings.
"""
from collections import OrderedDict
from collections.abc import Mapping

__all__ = [ "ExtensionNode", "convert_extensions", "extensions_to_json", "add_extensions_to_json" ]

class ExtensionNode(object):
    """
    a named element of extension data.  A node either has a scalar :py:attr:`value` (which
    may be None) or a list of :py:attr:`children` (which may be empty); :py:attr:`children`
    is None for a scalar node.
    """

    def __init__(self, name: str, value=None, children=None, in_array: bool = False):
        """
        create the node
        :param str name:   the element name (i.e. its JSON member name)
        :param value:      the scalar JSON value (str, int, Decimal, bool, or None); ignored
                           if ``children`` is given
        :param children:   the child nodes, for an element representing a JSON object
        :param bool in_array:  True if this node is an element of a JSON array
        """
        self.name = name
        self.children = list(children) if children is not None else None
        self.value = None if self.children is not None else value
        self.in_array = in_array

    @property
    def is_leaf(self) -> bool:
        """
        True if this node carries a scalar value rather than child nodes
        """
        return self.children is None

    @property
    def text(self) -> str:
        """
        the scalar value rendered as a string, as it appears in JSON, or None if the node has
        children or a null value.
        """
        if self.children is not None or self.value is None:
            return None
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)

    def get_child(self, name):
        """
        return the first child with the given name or None if there is no such child
        """
        for child in self.children or []:
            if child.name == name:
                return child
        return None

    def __eq__(self, other):
        if not isinstance(other, ExtensionNode):
            return NotImplemented
        return self.name == other.name and self.value == other.value and \
               type(self.value) == type(other.value) and self.children == other.children and \
               self.in_array == other.in_array

    __hash__ = None

    def __repr__(self):
        arr = ", in_array=True" if self.in_array else ""
        if self.children is not None:
            return "ExtensionNode(%r, children=%r%s)" % (self.name, self.children, arr)
        return "ExtensionNode(%r, %r%s)" % (self.name, self.value, arr)

def _convert_value(name, value, out, in_array=False):
    if isinstance(value, Mapping):
        out.append(ExtensionNode(name, children=convert_extensions(value), in_array=in_array))
    elif isinstance(value, list):
        for item in value:
            _convert_value(name, item, out, True)
    else:
        out.append(ExtensionNode(name, value, in_array=in_array))

def convert_extensions(jsonobj: Mapping, modeled_keys=None) -> list:
    """
    convert the members of a JSON object that are not part of the data model into a list of
    :py:class:`ExtensionNode` instances.
    :param Mapping jsonobj:  the JSON object to extract extensions from
    :param modeled_keys:     the member names that the data model understands; these are
                             skipped.  If None, all members are converted.
    :return:  the list of extension nodes, in member order (empty if there are none)
    """
    out = []
    if not jsonobj:
        return out
    for key, value in jsonobj.items():
        if modeled_keys and key in modeled_keys:
            continue
        _convert_value(key, value, out)
    return out

def add_extensions_to_json(extensions, target: dict) -> dict:
    """
    write the given extension nodes into a JSON object.  Array-element nodes, and sibling nodes
    sharing a name, are gathered into a JSON array.
    :param extensions:   a list of :py:class:`ExtensionNode` instances (may be None)
    :param dict target:  the JSON object to add members to
    :return:  the target object
    """
    if not extensions:
        return target
    for ext in extensions:
        if ext is None:
            continue
        if ext.children is not None:
            value = extensions_to_json(ext.children)
        else:
            value = ext.value

        if ext.name not in target:
            target[ext.name] = [value] if ext.in_array else value
        elif isinstance(target[ext.name], list):
            target[ext.name].append(value)
        else:
            target[ext.name] = [target[ext.name], value]
    return target

def extensions_to_json(extensions) -> OrderedDict:
    """
    convert a list of extension nodes into a new JSON object
    """
    return add_extensions_to_json(extensions, OrderedDict())
