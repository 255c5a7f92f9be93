"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
from lxml import etree as ET

from scl_edit.actions import is_create, is_delete, is_move, is_simple, is_update
from scl_edit.dom import SCL_NS, parse_string, parse_xml


def scl(body: str) -> ET._Element:
    """Parse an SCL document from the inner markup of its root element."""
    return parse_string(f'<SCL xmlns="{SCL_NS}" version="2007" revision="B">{body}</SCL>')


def apply(action) -> None:
    """Minimal applier mutating the tree the way an editor would."""
    if not is_simple(action):
        for a in action.actions:
            apply(a)
        return
    if is_create(action):
        _insert(action.new.parent, action.new.element, action.new.reference)
    elif is_delete(action):
        action.old.parent.remove(action.old.element)
    elif is_move(action):
        action.old.parent.remove(action.old.element)
        _insert(action.new.parent, action.old.element, action.new.reference)
    elif is_update(action):
        old, new = action.old.element, action.new.element
        for child in list(old):
            new.append(child)
        old.getparent().replace(old, new)


def _insert(parent, element, reference) -> None:
    if reference is None:
        parent.append(element)
    else:
        reference.addprevious(element)


@pytest.fixture
def sample_path() -> Path:
    """Path to the sample substation document."""
    return Path(__file__).parent / "fixtures" / "sample.scd"


@pytest.fixture
def sample(sample_path: Path) -> ET._Element:
    """Root element of the sample document."""
    return parse_xml(str(sample_path)).getroot()
