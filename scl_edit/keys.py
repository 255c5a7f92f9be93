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

SCL compound identity keys
"""

import re
from typing import List, NamedTuple, Optional

from lxml import etree as ET

from .dom import text_content


def attr(element: ET._Element, name: str) -> str:
    return element.get(name) or ""


def exact(name: str, value: str) -> List[str]:
    return [f'[{name}="{value}"]']


def optional(name: str, value: str) -> List[str]:
    # SCL writes defaults either as an absent or as an empty attribute
    if value:
        return exact(name, value)
    return [f":not([{name}])", f'[{name}=""]']


def required_or_absent(name: str, value: str) -> List[str]:
    if value:
        return exact(name, value)
    return [f":not([{name}])"]


def _fields(text: str, count: int) -> Optional[List[str]]:
    parts = text.split(" ")
    return parts if len(parts) == count else None


class LNKey(NamedTuple):
    prefix: str
    ln_class: str
    inst: str

    @classmethod
    def from_element(cls, element: ET._Element) -> "LNKey":
        return cls(attr(element, "prefix"), attr(element, "lnClass"), attr(element, "inst"))

    def encode(self) -> str:
        return f"{self.prefix} {self.ln_class} {self.inst}"

    @classmethod
    def decode(cls, text: str) -> Optional["LNKey"]:
        parts = _fields(text, 3)
        return cls(*parts) if parts else None

    def filters(self) -> List[List[str]]:
        return [
            optional("prefix", self.prefix),
            exact("lnClass", self.ln_class),
            optional("inst", self.inst),
        ]


class LNodeKey(NamedTuple):
    """Reference from an LNode to a logical node of an IED."""

    ied_name: str
    ld_inst: str
    prefix: str
    ln_class: str
    ln_inst: str

    CLIENT = "(Client)"

    @classmethod
    def from_element(cls, element: ET._Element) -> "LNodeKey":
        return cls(
            attr(element, "iedName"),
            attr(element, "ldInst") or cls.CLIENT,
            attr(element, "prefix"),
            attr(element, "lnClass"),
            attr(element, "lnInst"),
        )

    def encode(self) -> str:
        return f"{self.ied_name} {self.ld_inst}/{self.prefix} {self.ln_class} {self.ln_inst}"

    @classmethod
    def decode(cls, text: str) -> Optional["LNodeKey"]:
        head, sep, tail = text.partition("/")
        first, rest = _fields(head, 2), _fields(tail, 3)
        if not sep or first is None or rest is None:
            return None
        return cls(*first, *rest)

    def filters(self) -> List[List[str]]:
        if self.ld_inst == self.CLIENT:
            ld_inst = [":not([ldInst])", '[ldInst=""]']
        else:
            ld_inst = exact("ldInst", self.ld_inst)
        return [
            exact("iedName", self.ied_name),
            ld_inst,
            optional("prefix", self.prefix),
            exact("lnClass", self.ln_class),
            optional("lnInst", self.ln_inst),
        ]


class UnboundLNodeKey(NamedTuple):
    """LNode with iedName="None": a placeholder keyed on its type."""

    ln_class: str
    ln_type: str

    @classmethod
    def from_element(cls, element: ET._Element) -> "UnboundLNodeKey":
        return cls(attr(element, "lnClass"), attr(element, "lnType"))

    def encode(self) -> str:
        return f"({self.ln_class} {self.ln_type})"

    @classmethod
    def decode(cls, text: str) -> Optional["UnboundLNodeKey"]:
        if not (text.startswith("(") and text.endswith(")")):
            return None
        parts = _fields(text[1:-1], 2)
        return cls(*parts) if parts else None

    def filters(self) -> List[List[str]]:
        return [
            ['[iedName="None"]'],
            exact("lnClass", self.ln_class),
            exact("lnType", self.ln_type),
        ]


class LNReference(NamedTuple):
    """Logical node reference shared by ClientLN and IEDName."""

    ied_name: str
    ap_ref: str
    ld_inst: str
    prefix: str
    ln_class: str
    ln_inst: str

    @classmethod
    def from_element(cls, element: ET._Element, ied_name: str) -> "LNReference":
        return cls(
            ied_name,
            attr(element, "apRef"),
            attr(element, "ldInst"),
            attr(element, "prefix"),
            attr(element, "lnClass"),
            attr(element, "lnInst"),
        )

    def encode(self) -> str:
        return (
            f"{self.ied_name} {self.ap_ref} {self.ld_inst}/"
            f"{self.prefix} {self.ln_class} {self.ln_inst}"
        )

    @classmethod
    def decode(cls, text: str) -> Optional["LNReference"]:
        head, sep, tail = text.partition("/")
        first, rest = _fields(head, 3), _fields(tail, 3)
        if not sep or first is None or rest is None:
            return None
        return cls(*first, *rest)

    def filters(self) -> List[List[str]]:
        return [
            optional("apRef", self.ap_ref),
            optional("ldInst", self.ld_inst),
            optional("prefix", self.prefix),
            optional("lnClass", self.ln_class),
            optional("lnInst", self.ln_inst),
        ]


class FCDAKey(NamedTuple):
    ld_inst: str
    prefix: str
    ln_class: str
    ln_inst: str
    do_name: str
    da_name: str
    fc: str
    ix: str

    @classmethod
    def from_element(cls, element: ET._Element) -> "FCDAKey":
        return cls(*(attr(element, name) for name in (
            "ldInst", "prefix", "lnClass", "lnInst", "doName", "daName", "fc", "ix",
        )))

    def encode(self) -> str:
        data_path = (
            f"{self.ld_inst}/{self.prefix} {self.ln_class} {self.ln_inst}"
            f".{self.do_name} {self.da_name}"
        )
        ix = f" [{self.ix}]" if self.ix else ""
        return f"{data_path} ({self.fc}{ix})"

    @classmethod
    def decode(cls, text: str) -> Optional["FCDAKey"]:
        data_path, sep, fc_part = text.rpartition(" (")
        if not sep or not fc_part.endswith(")"):
            return None
        fc, _, ix = fc_part[:-1].partition(" [")
        ld_inst, sep, rest = data_path.partition("/")
        if not sep:
            return None
        ln_part, _, do_da = rest.partition(".")
        ln = _fields(ln_part, 3)
        if ln is None:
            return None
        do_name, _, da_name = do_da.partition(" ")
        return cls(ld_inst, *ln, do_name, da_name, fc, ix.rstrip("]"))

    def filters(self) -> List[List[str]]:
        return [
            optional("ldInst", self.ld_inst),
            optional("prefix", self.prefix),
            optional("lnClass", self.ln_class),
            optional("lnInst", self.ln_inst),
            optional("doName", self.do_name),
            optional("daName", self.da_name),
            exact("fc", self.fc),
            optional("ix", self.ix),
        ]


_EXT_REF_SOURCE = ("serviceType", "srcCBName", "srcLDInst", "srcPrefix", "srcLNClass", "srcLNInst")
_EXT_REF_DATA = ("iedName", "ldInst", "prefix", "lnClass", "lnInst", "doName", "daName")


class ExtRefKey(NamedTuple):
    """Full data reference of a bound ExtRef, optionally with its control block."""

    service_type: str
    src_cb_name: str
    src_ld_inst: str
    src_prefix: str
    src_ln_class: str
    src_ln_inst: str
    ied_name: str
    ld_inst: str
    prefix: str
    ln_class: str
    ln_inst: str
    do_name: str
    da_name: str
    int_addr: str

    @classmethod
    def from_element(cls, element: ET._Element) -> "ExtRefKey":
        values = [attr(element, name) for name in _EXT_REF_SOURCE + _EXT_REF_DATA]
        return cls(*values, attr(element, "intAddr"))

    def encode(self) -> str:
        cb_path = ""
        if self.src_cb_name:
            cb_path = (
                f"{self.service_type}:{self.src_cb_name} {self.src_ld_inst}/"
                f"{self.src_prefix} {self.src_ln_class} {self.src_ln_inst}"
            )
        data_path = (
            f"{self.ied_name} {self.ld_inst}/{self.prefix} {self.ln_class} "
            f"{self.ln_inst} {self.do_name} {self.da_name}"
        )
        int_addr = f"@{self.int_addr}" if self.int_addr else ""
        return f"{cb_path} {data_path}{int_addr}"

    @classmethod
    def decode(cls, text: str) -> Optional["ExtRefKey"]:
        # The shape is guessed from the ':' and '@' markers anywhere in the
        # text; values containing either character are misread.
        has_source, has_int_addr = ":" in text, "@" in text
        head, int_addr = text, ""
        if has_int_addr:
            head, _, int_addr = text.partition("@")

        if has_source:
            service_type, _, rest = head.partition(":")
            parts = rest.split("/")
            if len(parts) != 3:
                return None
            cb, middle, data = _fields(parts[0], 2), _fields(parts[1], 5), _fields(parts[2], 5)
            if cb is None or middle is None or data is None:
                return None
            return cls(service_type, *cb, *middle, *data, int_addr)

        parts = head.split("/")
        if len(parts) != 2 or not parts[0].startswith(" "):
            return None
        ied = _fields(parts[0][1:], 2)
        data = _fields(parts[1], 5)
        if ied is None or data is None:
            return None
        return cls("", "", "", "", "", "", *ied, *data, int_addr)

    def filters(self) -> List[List[str]]:
        return [
            required_or_absent("iedName", self.ied_name),
            optional("ldInst", self.ld_inst),
            optional("prefix", self.prefix),
            required_or_absent("lnClass", self.ln_class),
            optional("lnInst", self.ln_inst),
            required_or_absent("doName", self.do_name),
            optional("daName", self.da_name),
            optional("serviceType", self.service_type),
            optional("srcCBName", self.src_cb_name),
            optional("srcLDInst", self.src_ld_inst),
            optional("srcPrefix", self.src_prefix),
            optional("srcLNClass", self.src_ln_class),
            optional("srcLNInst", self.src_ln_inst),
            optional("intAddr", self.int_addr),
        ]


class SiblingKey(NamedTuple):
    """A discriminator value plus the count of earlier siblings sharing it."""

    value: str
    index: int


_INDEXED = re.compile(r"^(.*)\[([0-9]+)\]$")
_BRACKET_INDEX = re.compile(r"\[([0-9]+)\]")


def decode_int_addr(text: str) -> Optional[SiblingKey]:
    # "intAddr[index]"
    match = _INDEXED.match(text)
    if not match:
        return None
    return SiblingKey(match.group(1), int(match.group(2)))


def encode_int_addr(key: SiblingKey) -> str:
    return f"{key.value}[{key.index}]"


def decode_typed(text: str) -> Optional[SiblingKey]:
    # "type [index]" or a bare "type" (index 0, no sibling count)
    type_, _, rest = text.partition(" ")
    if not type_:
        return None
    match = _BRACKET_INDEX.search(rest)
    return SiblingKey(type_, int(match.group(1)) if match else 0)


def encode_typed(key: SiblingKey) -> str:
    return f"{key.value} [{key.index}]"


def decode_val(text: str) -> Optional[SiblingKey]:
    # "sGroup. index" or " index"
    head, sep, index = text.rpartition(" ")
    if not sep or not index.isdigit():
        return None
    return SiblingKey(head[:-1] if head.endswith(".") else head, int(index))


def encode_val(key: SiblingKey) -> str:
    group = f"{key.value}." if key.value else ""
    return f"{group} {key.index}"


def ied_name_text(element: ET._Element) -> str:
    return text_content(element).strip()
