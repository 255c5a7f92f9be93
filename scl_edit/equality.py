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

SCL element equality
"""

from typing import Optional

from lxml import etree as ET

from .dom import child_elements, closest, tag_name, text_content
from .identity import identity


def is_public(element: ET._Element) -> bool:
    return closest(element, "Private") is None


def _same_node(a: ET._Element, b: ET._Element) -> bool:
    # Exact node equality: same tag, attributes, text and children in order
    if a.tag != b.tag or a.text != b.text:
        return False
    if dict(a.attrib) != dict(b.attrib) or len(a) != len(b):
        return False
    return all(x.tail == y.tail and _same_node(x, y) for x, y in zip(a, b))


def _same_parent(a: Optional[ET._Element], b: Optional[ET._Element]) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return is_same(a, b)


def is_same(a: ET._Element, b: ET._Element) -> bool:
    """True when a and b stand for the same schema object.

    Private sections have no identity, they are the same when their
    parents are and their content is identical.
    """
    if tag_name(a) == "Private":
        return (
            tag_name(b) == "Private"
            and _same_parent(a.getparent(), b.getparent())
            and _same_node(a, b)
        )
    id_a, id_b = identity(a), identity(b)
    return tag_name(a) == tag_name(b) and isinstance(id_a, str) and id_a == id_b


def is_equal(a: ET._Element, b: ET._Element) -> bool:
    """Deep equality ignoring the order of child elements."""
    if not is_public(a) or not is_public(b):
        return _same_node(a, b)

    if tag_name(a) != tag_name(b) or dict(a.attrib) != dict(b.attrib):
        return False

    a_children, b_children = child_elements(a), child_elements(b)
    if not a_children:
        return not b_children and text_content(a).strip() == text_content(b).strip()

    unmatched = list(b_children)
    for child in a_children:
        twin = next((i for i, other in enumerate(unmatched) if is_equal(child, other)), None)
        if twin is None:
            return False
        del unmatched[twin]
    return not unmatched
