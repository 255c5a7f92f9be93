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

SCL edit actions
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union

from lxml import etree as ET

from .dom import next_element_sibling, tag_name
from .elements import clone_element
from .errors import unreachable
from .reference import get_reference


@dataclass(frozen=True)
class Placement:
    parent: ET._Element
    element: ET._Element
    reference: Optional[ET._Element]


@dataclass(frozen=True)
class Destination:
    parent: ET._Element
    reference: Optional[ET._Element]


@dataclass(frozen=True)
class ElementRef:
    element: ET._Element


@dataclass(frozen=True)
class Create:
    """Inserts new.element into new.parent before new.reference."""

    new: Placement
    derived: bool = False
    check_validity: Optional[Callable[[], bool]] = None


@dataclass(frozen=True)
class Delete:
    """Removes old.element from old.parent, where it stood before old.reference."""

    old: Placement
    derived: bool = False
    check_validity: Optional[Callable[[], bool]] = None


@dataclass(frozen=True)
class Move:
    """Reparents old.element to new.parent before new.reference."""

    old: Placement
    new: Destination
    derived: bool = False
    check_validity: Optional[Callable[[], bool]] = None


@dataclass(frozen=True)
class Update:
    """Replaces old.element with new.element, keeping element children."""

    old: ElementRef
    new: ElementRef
    derived: bool = False
    check_validity: Optional[Callable[[], bool]] = None


SimpleAction = Union[Create, Delete, Move, Update]


@dataclass(frozen=True)
class ComplexAction:
    actions: Tuple[SimpleAction, ...]
    title: str
    derived: bool = False


EditorAction = Union[SimpleAction, ComplexAction]


# Classification looks at the shape of old and new only


def _has(part, *fields: str) -> bool:
    return part is not None and all(hasattr(part, f) for f in fields)


def is_create(action) -> bool:
    new = getattr(action, "new", None)
    return getattr(action, "old", None) is None and _has(new, "parent", "element", "reference")


def is_delete(action) -> bool:
    old = getattr(action, "old", None)
    return _has(old, "parent", "element", "reference") and getattr(action, "new", None) is None


def is_move(action) -> bool:
    old, new = getattr(action, "old", None), getattr(action, "new", None)
    return (
        _has(old, "parent", "element", "reference")
        and _has(new, "parent", "reference")
        and not hasattr(new, "element")
    )


def is_update(action) -> bool:
    old, new = getattr(action, "old", None), getattr(action, "new", None)
    return (
        _has(old, "element")
        and not hasattr(old, "parent")
        and _has(new, "element")
        and not hasattr(new, "parent")
    )


def is_simple(action) -> bool:
    return not isinstance(getattr(action, "actions", None), (list, tuple))


def invert(action: EditorAction) -> EditorAction:
    """Action undoing action. Complex actions are undone last step first."""
    if not is_simple(action):
        return ComplexAction(
            actions=tuple(invert(a) for a in reversed(action.actions)),
            title=action.title,
            derived=action.derived,
        )

    meta = {
        "derived": getattr(action, "derived", False),
        "check_validity": getattr(action, "check_validity", None),
    }
    if is_create(action):
        return Delete(old=action.new, **meta)
    if is_delete(action):
        return Create(new=action.old, **meta)
    if is_move(action):
        return Move(
            old=Placement(action.new.parent, action.old.element, action.new.reference),
            new=Destination(action.old.parent, action.old.reference),
            **meta,
        )
    if is_update(action):
        return Update(old=action.new, new=action.old, **meta)
    return unreachable("Unknown EditorAction type in invert.")


# Builders


def create_action(parent: ET._Element, element: ET._Element, **meta) -> Create:
    reference = get_reference(parent, tag_name(element))
    return Create(new=Placement(parent, element, reference), **meta)


def delete_action(element: ET._Element, **meta) -> Delete:
    old = Placement(element.getparent(), element, next_element_sibling(element))
    return Delete(old=old, **meta)


def move_action(element: ET._Element, new_parent: ET._Element, **meta) -> Move:
    old = Placement(element.getparent(), element, next_element_sibling(element))
    new = Destination(new_parent, get_reference(new_parent, tag_name(element)))
    return Move(old=old, new=new, **meta)


def update_action(element: ET._Element, attrs: Dict[str, Optional[str]], **meta) -> Optional[Update]:
    if all(element.get(name) == value for name, value in attrs.items()):
        return None
    new = clone_element(element, attrs)
    return Update(old=ElementRef(element), new=ElementRef(new), **meta)


def check_validity(action: EditorAction) -> bool:
    if not is_simple(action):
        return all(check_validity(a) for a in action.actions)
    predicate = getattr(action, "check_validity", None)
    return predicate is None or bool(predicate())
