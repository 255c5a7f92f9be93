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

SCL tree provider
"""

from functools import lru_cache
from typing import Iterator, List, Optional, Union

from lxml import etree as ET
from lxml.cssselect import CSSSelector, LxmlTranslator

SCL_NS = "http://www.iec.ch/61850/2003/SCL"


def parse_xml(path: str) -> ET._ElementTree:
    # Comments are kept so that editing never drops them
    parser = ET.XMLParser(remove_blank_text=False, remove_comments=False)
    return ET.parse(path, parser)


def parse_string(text: Union[str, bytes]) -> ET._Element:
    parser = ET.XMLParser(remove_blank_text=False, remove_comments=False)
    if isinstance(text, str):
        text = text.encode("utf-8")
    return ET.fromstring(text, parser)


def get_namespace_uri(tag: str) -> Optional[str]:
    if not isinstance(tag, str):
        return None
    if tag.startswith("{"):
        return tag[1:].split("}")[0]
    return None


def is_scl_element(node) -> bool:
    if not isinstance(node, ET._Element) or not isinstance(node.tag, str):
        return False
    uri = get_namespace_uri(node.tag)
    return uri is None or uri == SCL_NS


def tag_name(element) -> Optional[str]:
    """Local name of an SCL element, Clark notation for foreign ones.

    Comments and processing instructions have no tag name.
    """
    if element is None or not isinstance(element.tag, str):
        return None
    if is_scl_element(element):
        return ET.QName(element).localname
    return element.tag


def child_elements(element: ET._Element) -> List[ET._Element]:
    return list(element.iterchildren(tag=ET.Element))


def ancestors_or_self(element: ET._Element) -> Iterator[ET._Element]:
    yield element
    yield from element.iterancestors()


def closest(element: Optional[ET._Element], tag: str) -> Optional[ET._Element]:
    if element is None:
        return None
    for node in ancestors_or_self(element):
        if tag_name(node) == tag:
            return node
    return None


def next_element_sibling(element: ET._Element) -> Optional[ET._Element]:
    return next(element.itersiblings(tag=ET.Element), None)


def text_content(element: ET._Element) -> str:
    return element.xpath("string()")


def document_root(element: ET._Element) -> ET._Element:
    # Topmost ancestor; a detached subtree is its own document
    top = element
    for top in element.iterancestors():
        pass
    return top


class SCLTranslator(LxmlTranslator):
    """Matches type selectors on the local name of SCL elements.

    SCL documents normally carry a default namespace, which plain CSS type
    selectors would never match.
    """

    def xpath_element(self, selector):
        xpath = super().xpath_element(selector)
        if selector.element and not selector.namespace:
            xpath.element = "*"
            xpath.add_condition(
                "local-name() = %s and (namespace-uri() = %s or namespace-uri() = '')"
                % (self.xpath_literal(selector.element), self.xpath_literal(SCL_NS))
            )
        return xpath


_translator = SCLTranslator()


@lru_cache(maxsize=1024)
def compile_selector(css: str) -> CSSSelector:
    return CSSSelector(css, translator=_translator)


def query_selector_all(root, css: str) -> List[ET._Element]:
    """Elements matching css, in document order.

    Selectors are matched against the tree root holds on to, which for a
    detached subtree is that subtree. Given the root element every match is
    returned, given any other element only its descendants are, as with the
    DOM's querySelectorAll.
    """
    if isinstance(root, ET._ElementTree):
        root = root.getroot()
    top = document_root(root)
    matches = compile_selector(css)(top)
    if root is top:
        return matches
    return [m for m in matches if root in m.iterancestors()]


def query_selector(root, css: str) -> Optional[ET._Element]:
    matches = query_selector_all(root, css)
    return matches[0] if matches else None
