"""
MIT License

Copyright (c) 2026 Mario Dimitri Capuozzo

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated documentation files (the “Software”), 
to deal in the Software without restriction, including without limitation the rights to use, copy, modify, merge, publish, distribute, sublicense, 
and/or sell copies of the Software, and to permit persons to whom the Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, 
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, 
WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE. 

SCL element helpers
"""

from typing import Dict, List, Optional, Union

from lxml import etree as ET

from .dom import child_elements, document_root, get_namespace_uri, tag_name
from .equality import is_public


def create_element(owner: ET._Element, tag: str, attrs: Dict[str, Optional[str]]) -> ET._Element:
    """New element in the namespace of owner's document; None values are skipped."""
    root = document_root(owner)
    namespace = get_namespace_uri(root.tag)
    qname = f"{{{namespace}}}{tag}" if namespace else tag
    element = root.makeelement(qname, nsmap={None: namespace} if namespace else None)
    for name, value in attrs.items():
        if value is not None:
            element.set(name, value)
    return element


def clone_element(element: ET._Element, attrs: Dict[str, Optional[str]]) -> ET._Element:
    """Shallow copy of element with attrs applied. None removes an attribute."""
    clone = element.makeelement(element.tag, dict(element.attrib), nsmap=element.nsmap)
    for name, value in attrs.items():
        if value is None:
            clone.attrib.pop(name, None)
        else:
            clone.set(name, value)
    return clone


def get_child_elements_by_tag_name(element: ET._Element, tag: str) -> List[ET._Element]:
    return [child for child in child_elements(element) if tag_name(child) == tag]


def get_version(element: ET._Element) -> str:
    for header in document_root(element).iter():
        if tag_name(header) == "Header" and is_public(header):
            return header.get("version") or "2003"
    return "2003"


def reference_path(element: ET._Element) -> str:
    # "/Substation/VoltageLevel/Bay" style path of the named ancestors
    path = ""
    parent = element.getparent()
    while parent is not None and parent.get("name"):
        path = "/" + parent.get("name") + path
        parent = parent.getparent()
    return path


def _name(value: Union[ET._Element, str]) -> str:
    return value if isinstance(value, str) else value.get("name", "")


def compare_names(a: Union[ET._Element, str], b: Union[ET._Element, str]) -> int:
    """cmp style ordering by name, for functools.cmp_to_key.

    Names are compared by code point, not by locale collation, so the order
    is the same on every machine and upper case sorts before lower case.
    """
    a_name, b_name = _name(a), _name(b)
    return (a_name > b_name) - (a_name < b_name)
