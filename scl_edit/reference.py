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

SCL child insertion references
"""

import logging
from typing import Optional

from lxml import etree as ET

from .dom import child_elements, tag_name
from .errors import InvalidChildError
from .schema import UNORDERED_CONTAINERS, children_of, is_scl_tag

logger = logging.getLogger(__name__)


def get_reference(parent: ET._Element, tag: str, strict: bool = False) -> Optional[ET._Element]:
    """Sibling a new tag child of parent has to be inserted before.

    None means append. For a tag the parent's child sequence does not list,
    None is returned as well unless strict is set.
    """
    parent_tag = tag_name(parent)
    children = child_elements(parent)

    if parent_tag in UNORDERED_CONTAINERS or not is_scl_tag(parent_tag):
        return next((child for child in children if tag_name(child) == tag), None)

    sequence = children_of(parent_tag)
    if tag not in sequence:
        if strict:
            raise InvalidChildError(parent_tag, tag)
        logger.debug("%s is not a child of %s, no insertion point", tag, parent_tag)
        return None

    for following in sequence[sequence.index(tag):]:
        for child in children:
            if tag_name(child) == following:
                return child
    return None
