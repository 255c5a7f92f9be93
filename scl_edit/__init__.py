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

IEC 61850 SCL Edit
"""

from .actions import (
    ComplexAction,
    Create,
    Delete,
    Destination,
    ElementRef,
    Move,
    Placement,
    Update,
    check_validity,
    create_action,
    delete_action,
    invert,
    is_create,
    is_delete,
    is_move,
    is_simple,
    is_update,
    move_action,
    update_action,
)
from .dom import SCL_NS, parse_string, parse_xml, query_selector, query_selector_all
from .equality import is_equal, is_public, is_same
from .errors import InvalidChildError, MalformedActionError, SCLEditError, UnknownTagError
from .identity import (
    SEPARATOR,
    VOID_SELECTOR,
    cross_product,
    find_element,
    identity,
    is_identifiable,
    path_parts,
    selector,
)
from .reference import get_reference
from .registry import REGISTRY, SchemaEntry, lookup
from .schema import SCL_TAGS, is_scl_tag

__version__ = "0.1.0"
