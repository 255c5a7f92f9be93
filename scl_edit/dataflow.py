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

SCL data flow lookups
"""

from typing import Dict, List, Tuple

from lxml import etree as ET

from .dom import document_root, tag_name
from .equality import is_public
from .keys import attr

# Control block tags an ExtRef may subscribe to, by its serviceType
SERVICE_TYPE_CONTROL_BLOCKS: Dict[str, Tuple[str, ...]] = {
    "GOOSE": ("GSEControl",),
    "SMV": ("SampledValueControl",),
    "Report": ("ReportControl",),
    "NONE": ("LogControl", "GSEControl", "SampledValueControl", "ReportControl"),
}

DATA_REFERENCE = ("ldInst", "prefix", "lnClass", "lnInst", "doName", "daName")


def _public_descendants(element: ET._Element, tag: str) -> List[ET._Element]:
    return [e for e in element.iter() if tag_name(e) == tag and is_public(e)]


def find_fcdas(ext_ref: ET._Element) -> List[ET._Element]:
    """FCDAs of the source IED carrying the data an ExtRef refers to."""
    if tag_name(ext_ref) != "ExtRef" or not is_public(ext_ref):
        return []

    ied_name = ext_ref.get("iedName")
    ied = next(
        (e for e in _public_descendants(document_root(ext_ref), "IED") if e.get("name") == ied_name),
        None,
    )
    if ied is None:
        return []

    wanted = [attr(ext_ref, name) for name in DATA_REFERENCE]
    return [
        fcda
        for fcda in _public_descendants(ied, "FCDA")
        if [attr(fcda, name) for name in DATA_REFERENCE] == wanted
    ]


def find_control_blocks(ext_ref: ET._Element) -> List[ET._Element]:
    """Control blocks sending a data set that contains the ExtRef's data."""
    cb_tags = SERVICE_TYPE_CONTROL_BLOCKS.get(ext_ref.get("serviceType") or "NONE", ())
    found: Dict[ET._Element, None] = {}
    for fcda in find_fcdas(ext_ref):
        data_set = fcda.getparent()
        ds_name = data_set.get("name", "")
        any_ln = data_set.getparent()
        for cb_tag in cb_tags:
            for cb in _public_descendants(any_ln, cb_tag):
                if cb.get("datSet") == ds_name:
                    found.setdefault(cb, None)
    return list(found)
