import pytest

from conftest import apply, scl
from scl_edit.actions import create_action
from scl_edit.dom import child_elements, query_selector, tag_name
from scl_edit.elements import create_element
from scl_edit.errors import InvalidChildError
from scl_edit.reference import get_reference


@pytest.fixture
def bay():
    root = scl(
        '<Substation name="S"><VoltageLevel name="V"><Bay name="B">'
        '<LNode iedName="None" lnClass="CSWI" lnType="T"/>'
        '<ConductingEquipment name="QA1" type="CBR"/>'
        '<ConnectivityNode name="CN1" pathName="S/V/B/CN1"/>'
        "</Bay></VoltageLevel></Substation>"
    )
    return query_selector(root, "Bay")


def test_reference_is_next_existing_sibling_in_sequence(bay):
    assert tag_name(get_reference(bay, "Text")) == "LNode"
    assert tag_name(get_reference(bay, "PowerTransformer")) == "ConductingEquipment"
    assert tag_name(get_reference(bay, "ConductingEquipment")) == "ConductingEquipment"
    assert get_reference(bay, "Function") is None


def test_unknown_child_tag(bay):
    assert get_reference(bay, "IED") is None
    with pytest.raises(InvalidChildError) as info:
        get_reference(bay, "IED", strict=True)
    assert info.value.parent_tag == "Bay"
    assert info.value.tag == "IED"
    assert isinstance(info.value, ValueError)


def test_unordered_container_returns_first_of_tag():
    root = scl(
        '<IED name="I"><Services><GOOSE max="1"/><GetDirectory/><ConfLNs/></Services></IED>'
    )
    services = query_selector(root, "Services")
    assert tag_name(get_reference(services, "GetDirectory")) == "GetDirectory"
    assert get_reference(services, "DynAssociation") is None


def test_foreign_parent_returns_first_of_tag():
    root = scl(
        '<Private type="x" xmlns:v="urn:v"><v:A><v:C/><v:B/><v:B/></v:A></Private>'
    )
    foreign = root[0][0]
    assert get_reference(foreign, "{urn:v}B") is foreign[1]
    assert get_reference(foreign, "{urn:v}D") is None


def test_inserts_keep_sequence_order(bay):
    for tag, attrs in [
        ("Function", {"name": "F1"}),
        ("PowerTransformer", {"name": "TR1", "type": "PTR"}),
        ("Text", {}),
        ("LNode", {"iedName": "None", "lnClass": "XCBR", "lnType": "T2"}),
        ("ConnectivityNode", {"name": "CN0", "pathName": "S/V/B/CN0"}),
    ]:
        apply(create_action(bay, create_element(bay, tag, attrs)))

    assert [tag_name(c) for c in child_elements(bay)] == [
        "Text",
        "LNode",
        "LNode",
        "PowerTransformer",
        "ConductingEquipment",
        "ConnectivityNode",
        "ConnectivityNode",
        "Function",
    ]
    # same tag goes before the existing ones
    assert [c.get("name") for c in child_elements(bay) if tag_name(c) == "ConnectivityNode"] == [
        "CN0",
        "CN1",
    ]
