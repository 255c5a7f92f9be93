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

SCL element identities and selectors
"""

import logging
import math
from itertools import product
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from lxml import etree as ET

from .dom import closest, query_selector, tag_name, text_content
from .keys import (
    ExtRefKey,
    FCDAKey,
    LNKey,
    LNodeKey,
    LNReference,
    SiblingKey,
    UnboundLNodeKey,
    attr,
    decode_int_addr,
    decode_typed,
    decode_val,
    encode_int_addr,
    encode_typed,
    encode_val,
    exact,
    ied_name_text,
    optional,
)
from .schema import Family, family_of, is_scl_tag, parents_of

logger = logging.getLogger(__name__)

# An identity is a string, or NaN for elements that cannot be identified
Identity = Union[str, float]

NAN: float = math.nan
SEPARATOR = ">"
VOID_SELECTOR = ":not(*)"


def is_identifiable(value) -> bool:
    return isinstance(value, str)


def path_parts(identity: str) -> Tuple[str, str]:
    """Split an identity into (parent identity, local part) on its last '>'."""
    start, _, end = identity.rpartition(SEPARATOR)
    return start, end


def cross_product(*groups: Sequence[str]) -> List[Tuple[str, ...]]:
    return list(product(*groups))


def _join(*groups: Sequence[str]) -> List[str]:
    return ["".join(parts) for parts in cross_product(*groups)]


def _child_identity(element: ET._Element, local: str) -> Identity:
    parent_identity = identity(element.getparent())
    if not is_identifiable(parent_identity):
        return NAN
    return f"{parent_identity}{SEPARATOR}{local}"


def _same_tag_siblings(element: ET._Element) -> List[ET._Element]:
    parent = element.getparent()
    if parent is None:
        return [element]
    tag = tag_name(element)
    return [c for c in parent.iterchildren(tag=ET.Element) if tag_name(c) == tag]


def _sibling_index(element: ET._Element, name: str) -> int:
    # Earlier siblings with the same tag and the same value for name
    value = attr(element, name)
    siblings = [s for s in _same_tag_siblings(element) if attr(s, name) == value]
    return siblings.index(element)


def _sibling_chain(tag: str, name: str, key: SiblingKey) -> List[str]:
    """Compound selectors for the sibling at position key.index.

    Earlier siblings are matched with the general sibling combinator so the
    first match in document order is the element itself.
    """
    # Absent and empty discriminators count as the same value at every position
    position = _join([tag], optional(name, key.value))
    groups = []
    for _ in range(key.index):
        groups += [position, ["~"]]
    return _join(*groups, position)


def _parent_branches(tag: str, parent_identity: Identity) -> List[str]:
    return [
        branch
        for parent in parents_of(tag)
        for branch in _branches(parent, parent_identity)
    ]


def _depth(identity: str) -> int:
    return len(identity.split(SEPARATOR))


# SCL and Private


def scl_identity(element: ET._Element) -> Identity:
    return ""


def scl_selector(tag: str, identity: str) -> List[str]:
    return [] if identity else ["SCL"]


def private_identity(element: ET._Element) -> Identity:
    return NAN


def private_selector(tag: str, identity: str) -> List[str]:
    return []


# Name based families


def naming_identity(element: ET._Element) -> Identity:
    name = element.get("name")
    if not name:
        return NAN
    parent = element.getparent()
    if parent is not None and tag_name(parent) == "SCL":
        return name
    return _child_identity(element, name)


def naming_selector(tag: str, identity: str, depth: int = -1) -> List[str]:
    if depth == -1:
        depth = _depth(identity)
    parent_identity, name = path_parts(identity)
    if not name:
        return []
    if depth == 0:
        return [f'{tag}[name="{name}"]']

    parents = []
    for parent in parents_of(tag):
        if family_of(parent) is Family.NAMING:
            parents.extend(naming_selector(parent, parent_identity, depth - 1))
        else:
            parents.extend(_branches(parent, parent_identity))
    return _join(parents, [SEPARATOR], [tag], [f'[name="{name}"]'])


def id_naming_identity(element: ET._Element) -> Identity:
    id_ = element.get("id")
    return f"#{id_}" if id_ else NAN


def id_naming_selector(tag: str, identity: str) -> List[str]:
    id_ = identity[1:] if identity.startswith("#") else identity
    if not id_:
        return []
    return [f'{tag}[id="{id_}"]']


def ix_naming_identity(element: ET._Element) -> Identity:
    name = element.get("name")
    if not name:
        return NAN
    ix = element.get("ix")
    return _child_identity(element, f"{name}[{ix}]" if ix else name)


def ix_naming_selector(tag: str, identity: str, depth: int = -1) -> List[str]:
    if depth == -1:
        depth = _depth(identity)
    parent_identity, child = path_parts(identity)
    name, _, ix = child.partition("[")
    ix = ix[:-1] if ix.endswith("]") else ix
    if not name:
        return []
    if depth == 0:
        return [f'{tag}[name="{name}"]']

    parents = []
    for parent in parents_of(tag):
        if parent == "SDI":
            parents.extend(ix_naming_selector(parent, parent_identity, depth - 1))
        else:
            parents.extend(_branches(parent, parent_identity))
    return _join(parents, [SEPARATOR], [tag], [f'[name="{name}"]'], optional("ix", ix))


def singleton_identity(element: ET._Element) -> Identity:
    return identity(element.getparent())


def singleton_selector(tag: str, identity: str) -> List[str]:
    return _join(_parent_branches(tag, identity), [SEPARATOR], [tag])


# Substation section


def hitem_identity(element: ET._Element) -> Identity:
    version, revision = attr(element, "version"), attr(element, "revision")
    if not version or not revision:
        return NAN
    return f"{version}\t{revision}"


def hitem_selector(tag: str, identity: str) -> List[str]:
    version, _, revision = identity.partition("\t")
    if not version or not revision:
        return []
    return [f'{tag}[version="{version}"][revision="{revision}"]']


def terminal_identity(element: ET._Element) -> Identity:
    node = element.get("connectivityNode")
    return _child_identity(element, node) if node else NAN


def terminal_selector(tag: str, identity: str) -> List[str]:
    parent_identity, node = path_parts(identity)
    if not node:
        return []
    return _join(
        _parent_branches(tag, parent_identity),
        [SEPARATOR],
        [f'{tag}[connectivityNode="{node}"]'],
    )


def lnode_identity(element: ET._Element) -> Identity:
    if element.get("iedName") == "None":
        unbound = UnboundLNodeKey.from_element(element)
        if not unbound.ln_class or not unbound.ln_type:
            return NAN
        return _child_identity(element, unbound.encode())
    key = LNodeKey.from_element(element)
    if not key.ied_name or not key.ln_class:
        return NAN
    return key.encode()


def lnode_selector(tag: str, identity: str) -> List[str]:
    if identity.endswith(")"):
        parent_identity, child = path_parts(identity)
        unbound = UnboundLNodeKey.decode(child)
        if unbound is None:
            return []
        return _join(
            _parent_branches(tag, parent_identity), [SEPARATOR], [tag], *unbound.filters()
        )
    key = LNodeKey.decode(identity)
    if key is None:
        return []
    return _join([tag], *key.filters())


# IED section


def kdc_identity(element: ET._Element) -> Identity:
    ied_name, ap_name = attr(element, "iedName"), attr(element, "apName")
    if not ied_name or not ap_name:
        return NAN
    return _child_identity(element, f"{ied_name} {ap_name}")


def kdc_selector(tag: str, identity: str) -> List[str]:
    parent_identity, child = path_parts(identity)
    ied_name, _, ap_name = child.partition(" ")
    if not ied_name or not ap_name:
        return []
    return _join(
        _parent_branches(tag, parent_identity),
        [SEPARATOR],
        [f'{tag}[iedName="{ied_name}"][apName="{ap_name}"]'],
    )


def association_identity(element: ET._Element) -> Identity:
    association_id = element.get("associationID")
    return _child_identity(element, association_id) if association_id else NAN


def association_selector(tag: str, identity: str) -> List[str]:
    parent_identity, association_id = path_parts(identity)
    if not association_id:
        return []
    return _join(
        _parent_branches(tag, parent_identity),
        [SEPARATOR],
        [f'{tag}[associationID="{association_id}"]'],
    )


def ldevice_identity(element: ET._Element) -> Identity:
    inst = element.get("inst")
    ied_identity = identity(closest(element, "IED"))
    if not inst or not is_identifiable(ied_identity):
        return NAN
    return f"{ied_identity}>>{inst}"


def ldevice_selector(tag: str, identity: str) -> List[str]:
    ied_name, _, inst = identity.partition(">>")
    if not ied_name or not inst:
        return []
    return [f'IED[name="{ied_name}"] {tag}[inst="{inst}"]']


def ln_identity(element: ET._Element) -> Identity:
    key = LNKey.from_element(element)
    if not key.ln_class:
        return NAN
    return _child_identity(element, key.encode())


def ln_selector(tag: str, identity: str) -> List[str]:
    parent_identity, child = path_parts(identity)
    key = LNKey.decode(child)
    if key is None or not key.ln_class:
        return []
    return _join(_parent_branches(tag, parent_identity), [SEPARATOR], [tag], *key.filters())


def client_ln_identity(element: ET._Element) -> Identity:
    key = LNReference.from_element(element, attr(element, "iedName"))
    if not key.ied_name or not key.ln_class:
        return NAN
    return _child_identity(element, key.encode())


def client_ln_selector(tag: str, identity: str) -> List[str]:
    parent_identity, child = path_parts(identity)
    key = LNReference.decode(child)
    if key is None or not key.ied_name:
        return []
    return _join(
        _parent_branches(tag, parent_identity),
        [SEPARATOR],
        [tag],
        exact("iedName", key.ied_name),
        *key.filters(),
    )


def ied_name_identity(element: ET._Element) -> Identity:
    key = LNReference.from_element(element, ied_name_text(element))
    if not key.ied_name:
        return NAN
    return _child_identity(element, key.encode())


def ied_name_selector(tag: str, identity: str) -> List[str]:
    # The element text is part of the identity but cannot be matched in CSS
    parent_identity, child = path_parts(identity)
    key = LNReference.decode(child)
    if key is None:
        return []
    return _join(_parent_branches(tag, parent_identity), [SEPARATOR], [tag], *key.filters())


def fcda_identity(element: ET._Element) -> Identity:
    key = FCDAKey.from_element(element)
    if not key.fc:
        return NAN
    return _child_identity(element, key.encode())


def fcda_selector(tag: str, identity: str) -> List[str]:
    parent_identity, child = path_parts(identity)
    key = FCDAKey.decode(child)
    if key is None or not key.fc:
        return []
    return _join(_parent_branches(tag, parent_identity), [SEPARATOR], [tag], *key.filters())


def ext_ref_identity(element: ET._Element) -> Identity:
    if not element.get("iedName"):
        key = SiblingKey(attr(element, "intAddr"), _sibling_index(element, "intAddr"))
        return _child_identity(element, encode_int_addr(key))
    return _child_identity(element, ExtRefKey.from_element(element).encode())


def ext_ref_selector(tag: str, identity: str) -> List[str]:
    parent_identity, child = path_parts(identity)
    parents = _parent_branches(tag, parent_identity)

    if child.endswith("]"):
        indexed = decode_int_addr(child)
        if indexed is None:
            return []
        return _join(parents, [SEPARATOR], _sibling_chain(tag, "intAddr", indexed))

    key = ExtRefKey.decode(child)
    if key is None:
        return []
    return _join(parents, [SEPARATOR], [tag], *key.filters())


def val_identity(element: ET._Element) -> Identity:
    key = SiblingKey(attr(element, "sGroup"), _sibling_index(element, "sGroup"))
    return _child_identity(element, encode_val(key))


def val_selector(tag: str, identity: str) -> List[str]:
    parent_identity, child = path_parts(identity)
    key = decode_val(child)
    if key is None:
        return []
    return _join(
        _parent_branches(tag, parent_identity), [SEPARATOR], _sibling_chain(tag, "sGroup", key)
    )


def enum_val_identity(element: ET._Element) -> Identity:
    ord_ = element.get("ord")
    return _child_identity(element, ord_) if ord_ else NAN


def enum_val_selector(tag: str, identity: str) -> List[str]:
    parent_identity, ord_ = path_parts(identity)
    if not ord_:
        return []
    return _join(
        _parent_branches(tag, parent_identity), [SEPARATOR], [f'{tag}[ord="{ord_}"]']
    )


def prot_ns_identity(element: ET._Element) -> Identity:
    type_ = element.get("type") or "8-MMS"
    return _child_identity(element, f"{type_}\t{text_content(element).strip()}")


def prot_ns_selector(tag: str, identity: str) -> List[str]:
    # The namespace text is not matched
    parent_identity, child = path_parts(identity)
    type_, _, _ = child.partition("\t")
    if not type_:
        return []
    types = [f'[type="{type_}"]']
    if type_ == "8-MMS":
        types.append(":not([type])")
    return _join(_parent_branches(tag, parent_identity), [SEPARATOR], [tag], types)


# Communication section


def connected_ap_identity(element: ET._Element) -> Identity:
    ied_name, ap_name = attr(element, "iedName"), attr(element, "apName")
    if not ied_name or not ap_name:
        return NAN
    return f"{ied_name} {ap_name}"


def connected_ap_selector(tag: str, identity: str) -> List[str]:
    ied_name, _, ap_name = identity.partition(" ")
    if not ied_name or not ap_name:
        return []
    return [f'{tag}[iedName="{ied_name}"][apName="{ap_name}"]']


def control_block_identity(element: ET._Element) -> Identity:
    ld_inst, cb_name = attr(element, "ldInst"), attr(element, "cbName")
    if not ld_inst or not cb_name:
        return NAN
    return f"{ld_inst} {cb_name}"


def control_block_selector(tag: str, identity: str) -> List[str]:
    ld_inst, _, cb_name = identity.partition(" ")
    if not ld_inst or not cb_name:
        return []
    return [f'{tag}[ldInst="{ld_inst}"][cbName="{cb_name}"]']


def _typed_identity(element: ET._Element, indexed: bool) -> Identity:
    type_ = element.get("type")
    if not type_:
        return NAN
    if not indexed:
        return _child_identity(element, type_)
    return _child_identity(element, encode_typed(SiblingKey(type_, _sibling_index(element, "type"))))


def _typed_selector(tag: str, identity: str) -> List[str]:
    parent_identity, child = path_parts(identity)
    key = decode_typed(child)
    if key is None:
        return []
    return _join(
        _parent_branches(tag, parent_identity), [SEPARATOR], _sibling_chain(tag, "type", key)
    )


def phys_conn_identity(element: ET._Element) -> Identity:
    # The sibling position is only written when the type repeats
    type_ = attr(element, "type")
    repeated = sum(1 for s in _same_tag_siblings(element) if attr(s, "type") == type_) > 1
    return _typed_identity(element, repeated)


def p_identity(element: ET._Element) -> Identity:
    parent = element.getparent()
    return _typed_identity(element, parent is None or tag_name(parent) != "PhysConn")


IDENTITY_FUNCTIONS: Dict[Family, Callable[[ET._Element], Identity]] = {
    Family.SCL: scl_identity,
    Family.NAMING: naming_identity,
    Family.SINGLETON: singleton_identity,
    Family.ID_NAMING: id_naming_identity,
    Family.IX_NAMING: ix_naming_identity,
    Family.PRIVATE: private_identity,
    Family.HITEM: hitem_identity,
    Family.TERMINAL: terminal_identity,
    Family.LNODE: lnode_identity,
    Family.KDC: kdc_identity,
    Family.ASSOCIATION: association_identity,
    Family.LDEVICE: ldevice_identity,
    Family.IED_NAME: ied_name_identity,
    Family.FCDA: fcda_identity,
    Family.EXT_REF: ext_ref_identity,
    Family.LN: ln_identity,
    Family.CLIENT_LN: client_ln_identity,
    Family.VAL: val_identity,
    Family.CONNECTED_AP: connected_ap_identity,
    Family.CONTROL_BLOCK: control_block_identity,
    Family.PHYS_CONN: phys_conn_identity,
    Family.P: p_identity,
    Family.ENUM_VAL: enum_val_identity,
    Family.PROT_NS: prot_ns_identity,
}

SELECTOR_FUNCTIONS: Dict[Family, Callable[[str, str], List[str]]] = {
    Family.SCL: scl_selector,
    Family.NAMING: naming_selector,
    Family.SINGLETON: singleton_selector,
    Family.ID_NAMING: id_naming_selector,
    Family.IX_NAMING: ix_naming_selector,
    Family.PRIVATE: private_selector,
    Family.HITEM: hitem_selector,
    Family.TERMINAL: terminal_selector,
    Family.LNODE: lnode_selector,
    Family.KDC: kdc_selector,
    Family.ASSOCIATION: association_selector,
    Family.LDEVICE: ldevice_selector,
    Family.IED_NAME: ied_name_selector,
    Family.FCDA: fcda_selector,
    Family.EXT_REF: ext_ref_selector,
    Family.LN: ln_selector,
    Family.CLIENT_LN: client_ln_selector,
    Family.VAL: val_selector,
    Family.CONNECTED_AP: connected_ap_selector,
    Family.CONTROL_BLOCK: control_block_selector,
    Family.PHYS_CONN: _typed_selector,
    Family.P: _typed_selector,
    Family.ENUM_VAL: enum_val_selector,
    Family.PROT_NS: prot_ns_selector,
}


def _branches(tag: str, identity: Identity) -> List[str]:
    if not is_identifiable(identity):
        return []
    if not is_scl_tag(tag):
        return [tag]
    return SELECTOR_FUNCTIONS[family_of(tag)](tag, identity)


def identity(element: Optional[ET._Element]) -> Identity:
    """Stable, document-unique key of an element, or NaN.

    Elements inside a Private section and elements outside the SCL schema
    have no identity.
    """
    if element is None:
        return NAN
    tag = tag_name(element)
    if not is_scl_tag(tag) or closest(element, "Private") is not None:
        return NAN
    result = IDENTITY_FUNCTIONS[family_of(tag)](element)
    if not is_identifiable(result):
        logger.debug("No identity for %s element on line %s", tag, element.sourceline)
    return result


def selector(tag: str, identity: Identity) -> str:
    """CSS selector matching the element of the given tag and identity.

    Tags outside the SCL schema select by tag name alone. Identities that
    cannot be decoded give a selector matching nothing.
    """
    if not is_identifiable(identity):
        return VOID_SELECTOR
    if not is_scl_tag(tag):
        return tag
    branches = _branches(tag, identity)
    if not branches:
        logger.debug("Identity %r of %s decodes to no selector", identity, tag)
        return VOID_SELECTOR
    return ",".join(branches)


def find_element(root, tag: str, identity: Identity) -> Optional[ET._Element]:
    css = selector(tag, identity)
    if css == VOID_SELECTOR:
        return None
    return query_selector(root, css)
