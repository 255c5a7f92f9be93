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

SCL schema registry
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List, Mapping, Tuple

from lxml import etree as ET

from .errors import UnknownTagError
from .identity import IDENTITY_FUNCTIONS, SELECTOR_FUNCTIONS, VOID_SELECTOR, Identity, is_identifiable
from .schema import SCHEMA, SCL_TAGS, Family


@dataclass(frozen=True)
class SchemaEntry:
    """Everything known about one SCL tag."""

    tag: str
    family: Family
    identity: Callable[[ET._Element], Identity]
    branches: Callable[[str, str], List[str]]
    parents: Tuple[str, ...]
    children: Tuple[str, ...]

    def selector(self, identity: Identity) -> str:
        if not is_identifiable(identity):
            return VOID_SELECTOR
        return ",".join(self.branches(self.tag, identity)) or VOID_SELECTOR


def _build() -> Mapping[str, SchemaEntry]:
    entries = {}
    for tag in SCL_TAGS:
        schema = SCHEMA[tag]
        entries[tag] = SchemaEntry(
            tag=tag,
            family=schema.family,
            identity=IDENTITY_FUNCTIONS[schema.family],
            branches=SELECTOR_FUNCTIONS[schema.family],
            parents=schema.parents,
            children=schema.children,
        )
    return MappingProxyType(entries)


REGISTRY = _build()


def lookup(tag: str) -> SchemaEntry:
    try:
        return REGISTRY[tag]
    except KeyError:
        raise UnknownTagError(tag) from None
