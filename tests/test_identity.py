import math

import pytest

from conftest import scl
from scl_edit.dom import parse_xml, query_selector, query_selector_all, tag_name
from scl_edit.equality import is_public
from scl_edit.identity import (
    VOID_SELECTOR,
    cross_product,
    find_element,
    identity,
    is_identifiable,
    path_parts,
    selector,
)
from scl_edit.schema import is_scl_tag


def public_scl_elements(root):
    return [e for e in root.iter() if is_scl_tag(tag_name(e)) and is_public(e)]


# Round trip over the sample document


def test_every_public_element_is_identifiable(sample):
    unidentified = [
        (tag_name(e), e.sourceline)
        for e in public_scl_elements(sample)
        if tag_name(e) != "Private" and not is_identifiable(identity(e))
    ]
    assert unidentified == []


def test_selector_of_identity_matches_element(sample):
    misses = []
    for element in public_scl_elements(sample):
        tag, value = tag_name(element), identity(element)
        if not is_identifiable(value):
            continue
        matches = query_selector_all(sample, selector(tag, value))
        if not matches or matches[0] is not element:
            misses.append((tag, value, element.sourceline))
    assert misses == []


def test_find_element_relocates_after_reparse(sample, sample_path):
    fresh = parse_xml(str(sample_path)).getroot()
    bay = query_selector(sample, 'Bay[name="Bay1"]')
    found = find_element(fresh, "Bay", identity(bay))
    assert found is not None
    assert found.sourceline == bay.sourceline


# Identity strings of the sample document


@pytest.mark.parametrize("css,expected", [
    ('Substation[name="Sub1"]', "Sub1"),
    ('Bay[name="Bay1"]', "Sub1>VL1>Bay1"),
    ('EqSubFunction[name="ESF1"]', "Sub1>VL1>Bay1>QA1>EF1>ESF1"),
    ('SubNetwork[name="StationBus"]', ">StationBus"),
    ('LDevice[inst="LD1"]', "IED1>>LD1"),
    ('LN[lnClass="XCBR"]', "IED1>>LD1> XCBR 1"),
    ('LN[prefix="PH"]', "IED1>>LD1>PH PTOC 1"),
    ('DataSet[name="GooseDS"]', "IED1>>LD1>GooseDS"),
    ('ConnectedAP[iedName="IED2"]', "IED2 AP1"),
    ('GSE[cbName="gcb1"]', "LD1 gcb1"),
    ('KDC', "IED1>IED2 AP1"),
    ('Association', "IED1>AP1>A1"),
    ('ClientLN', "IED1>>LD1>rcb1>IED2 AP1 LD1/ IHMI 1"),
    ('IEDName', "IED1>>LD1>gcb1>IED2  /  "),
    ('LNodeType[id="LLN0_T"]', "#LLN0_T"),
    ('DOType[id="WYE"]>SDO[name="phsB"]', "#WYE>phsB"),
    ('EnumType[id="CtlModels"]>EnumVal[ord="1"]', "#CtlModels>1"),
    ('Substation>Text', "Sub1"),
    ('Header', ""),
    ('SCL', ""),
])
def test_sample_identities(sample, css, expected):
    assert identity(query_selector(sample, css)) == expected


def test_hitem_identity_joins_version_and_revision(sample):
    second = query_selector(sample, 'Hitem[revision="B"]')
    assert identity(second) == "1\tB"
    assert selector("Hitem", "1\tB") == 'Hitem[version="1"][revision="B"]'


def test_terminal_identity_uses_connectivity_node(sample):
    terminal = query_selector(sample, 'ConductingEquipment[name="QA1"]>Terminal[name="T2"]')
    assert identity(terminal) == "Sub1>VL1>Bay1>QA1>Sub1/VL1/Bay1/CN2"
    neutral = query_selector(sample, "NeutralPoint")
    assert identity(neutral) == "Sub1>TR1>W1>Sub1/VL1/Bay1/CN2"


def test_lnode_identities(sample):
    bound = query_selector(sample, 'LNode[lnClass="XCBR"]')
    assert identity(bound) == "IED1 LD1/ XCBR 1"
    assert selector("LNode", identity(bound)) == (
        'LNode[iedName="IED1"][ldInst="LD1"]:not([prefix])[lnClass="XCBR"][lnInst="1"],'
        'LNode[iedName="IED1"][ldInst="LD1"][prefix=""][lnClass="XCBR"][lnInst="1"]'
    )
    unbound = query_selector(sample, 'Bay>LNode[iedName="None"]')
    assert identity(unbound) == "Sub1>VL1>Bay1>(CSWI CSWI_T)"


def test_fcda_identities(sample):
    fcda = query_selector(sample, 'FCDA[daName="stVal"]')
    assert identity(fcda) == "IED1>>LD1>GooseDS>LD1/ XCBR 1.Pos stVal (ST)"
    nested = query_selector(sample, 'FCDA[doName="A.phsA"]')
    assert identity(nested) == "IED1>>LD1>MeasDS>LD1/ MMXU 1.A.phsA cVal.mag.f (MX)"
    no_da = query_selector(sample, 'FCDA[doName="TotW"]')
    assert identity(no_da) == "IED1>>LD1>MeasDS>LD1/ MMXU 1.TotW  (MX)"


def test_ext_ref_compound_identities(sample):
    goose = query_selector(sample, 'ExtRef[intAddr="Pos"]')
    assert identity(goose) == (
        "IED2>>LD1> GGIO 1>GOOSE:gcb1 LD1/ LLN0  IED1 LD1/ XCBR 1 Pos stVal@Pos"
    )
    plain = query_selector(sample, 'ExtRef[doName="TotW"]')
    assert identity(plain) == "IED2>>LD1> GGIO 1> IED1 LD1/ MMXU 1 TotW "


def test_sibling_counted_identities(sample):
    phys_conns = query_selector_all(sample, "PhysConn")
    assert [identity(p) for p in phys_conns] == [
        "IED1 AP1>Connection [0]",
        "IED1 AP1>Connection [1]",
        "IED1 AP1>RedConn",
    ]
    assert identity(query_selector(sample, 'GSE Address>P[type="APPID"]')) == "LD1 gcb1>APPID [0]"
    assert identity(query_selector(sample, 'PhysConn[type="RedConn"]>P')) == "IED1 AP1>RedConn>Port"

    grouped = query_selector_all(sample, 'SDI[name="setMag"] Val')
    assert [identity(v)[-4:] for v in grouped] == ["1. 0", "2. 0"]
    plain = query_selector_all(sample, 'SDI[name="vals"] Val')
    assert [identity(v) for v in plain] == [
        "IED1>>LD1>PH PTOC 1>Arr>vals[1]>f> 0",
        "IED1>>LD1>PH PTOC 1>Arr>vals[1]>f> 1",
    ]


def test_second_phys_conn_port_is_found_first(sample):
    port = query_selector_all(sample, 'PhysConn>P[type="Port"]')[1]
    assert find_element(sample, "P", identity(port)) is port


def test_prot_ns_identity_defaults_type(sample):
    typed = query_selector(sample, "DA>ProtNs")
    untyped = query_selector(sample, "DAType>ProtNs")
    assert identity(typed) == "#ENC_Mod>Oper>8-MMS\tIEC 61850-8-1:2003"
    assert identity(untyped) == "#ModOper>8-MMS\tIEC 61850-8-1:2007"
    assert query_selector_all(sample, selector("ProtNs", identity(untyped))) == [untyped]


# Concrete scenarios


def test_sdo_in_dotype():
    root = scl(
        '<DataTypeTemplates><DOType id="X" cdc="WYE">'
        '<SDO name="a" type="CMV"/><SDO name="b" type="CMV"/>'
        "</DOType></DataTypeTemplates>"
    )
    a, b = query_selector_all(root, "SDO")
    assert identity(b) == "#X>b"
    assert selector("SDO", "#X>b") == 'DOType[id="X"]>SDO[name="b"]'
    assert query_selector_all(root, selector("SDO", "#X>b")) == [b]


def test_ext_refs_sharing_int_addr():
    root = scl(
        '<IED name="IED2"><AccessPoint name="AP1"><Server><LDevice inst="LD1">'
        '<LN0 lnClass="LLN0" inst="" lnType="LLN0_T"><Inputs>'
        '<ExtRef intAddr="Ind1"/><ExtRef intAddr="Ind1"/>'
        "</Inputs></LN0></LDevice></Server></AccessPoint></IED>"
    )
    first, second = query_selector_all(root, "ExtRef")
    assert identity(first) == "IED2>>LD1>Ind1[0]"
    assert identity(second) == "IED2>>LD1>Ind1[1]"
    assert query_selector_all(root, selector("ExtRef", identity(second))) == [second]


def test_bay_selector_is_a_single_chain():
    assert selector("Bay", "Sub1>VL1>Bay1") == (
        'SCL>Substation[name="Sub1"]>VoltageLevel[name="VL1"]>Bay[name="Bay1"]'
    )


def test_optional_attributes_match_absent_and_empty():
    root = scl(
        '<IED name="IED1"><AccessPoint name="AP1"><Server><LDevice inst="LD1">'
        '<LN lnClass="XCBR" inst="1" lnType="T"/>'
        '<LN prefix="" lnClass="XCBR" inst="2" lnType="T"/>'
        "</LDevice></Server></AccessPoint></IED>"
    )
    assert selector("LN", "IED1>>LD1> XCBR 1") == (
        'IED[name="IED1"] LDevice[inst="LD1"]>LN:not([prefix])[lnClass="XCBR"][inst="1"],'
        'IED[name="IED1"] LDevice[inst="LD1"]>LN[prefix=""][lnClass="XCBR"][inst="1"]'
    )
    second = query_selector_all(root, "LN")[1]
    assert identity(second) == "IED1>>LD1> XCBR 2"
    assert find_element(root, "LN", identity(second)) is second


def test_ix_naming():
    root = scl(
        '<IED name="I"><AccessPoint name="A"><Server><LDevice inst="L">'
        '<LN0 lnClass="LLN0" inst="" lnType="T"><DOI name="D">'
        '<SDI name="s" ix="2"><DAI name="v"/></SDI><SDI name="s"/>'
        "</DOI></LN0></LDevice></Server></AccessPoint></IED>"
    )
    indexed, plain = query_selector_all(root, "SDI")
    assert identity(indexed) == "I>>L>D>s[2]"
    assert identity(plain) == "I>>L>D>s"
    assert find_element(root, "SDI", "I>>L>D>s") is plain
    assert find_element(root, "DAI", "I>>L>D>s[2]>v") is query_selector(root, "DAI")


def test_val_groups_are_counted_separately():
    root = scl(
        '<DataTypeTemplates><DOType id="T" cdc="ASG"><DA name="setMag" fc="SP">'
        '<Val sGroup="1">1</Val><Val sGroup="2">2</Val><Val sGroup="1">3</Val>'
        "</DA></DOType></DataTypeTemplates>"
    )
    values = query_selector_all(root, "Val")
    assert [identity(v) for v in values] == ["#T>setMag>1. 0", "#T>setMag>2. 0", "#T>setMag>1. 1"]
    for value in values:
        assert find_element(root, "Val", identity(value)) is value


def test_empty_and_absent_val_groups_count_together():
    root = scl(
        '<DataTypeTemplates><DOType id="T" cdc="ASG"><DA name="v" fc="SP">'
        '<Val sGroup="">a</Val><Val>b</Val><Val sGroup="">c</Val>'
        "</DA></DOType></DataTypeTemplates>"
    )
    values = query_selector_all(root, "Val")
    assert [identity(v) for v in values] == ["#T>v> 0", "#T>v> 1", "#T>v> 2"]
    for value in values:
        assert value in query_selector_all(root, selector("Val", identity(value)))
        assert find_element(root, "Val", identity(value)) is value


def test_empty_and_absent_int_addr_count_together():
    root = scl(
        '<IED name="I"><AccessPoint name="A"><Server><LDevice inst="L">'
        '<LN0 lnClass="LLN0" inst="" lnType="T"><Inputs>'
        '<ExtRef intAddr=""/><ExtRef/>'
        "</Inputs></LN0></LDevice></Server></AccessPoint></IED>"
    )
    first, second = query_selector_all(root, "ExtRef")
    assert identity(second) == "I>>L>[1]"
    assert query_selector_all(root, selector("ExtRef", identity(second))) == [second]
    assert find_element(root, "ExtRef", identity(first)) is first


# Unidentifiable elements and degraded selectors


def test_private_content_has_no_identity(sample):
    private = query_selector(sample, "Private")
    assert math.isnan(identity(private))
    for element in private.iter():
        assert math.isnan(identity(element))


def test_missing_required_attribute_gives_nan():
    root = scl('<IED manufacturer="x"><AccessPoint name="AP1"/></IED>')
    ied = query_selector(root, "IED")
    assert math.isnan(identity(ied))
    # children of an unidentifiable parent
    assert math.isnan(identity(query_selector(root, "AccessPoint")))


def test_foreign_and_missing_elements_have_no_identity():
    root = scl('<Foo xmlns="http://example.com/other"/>')
    assert math.isnan(identity(root[0]))
    assert math.isnan(identity(None))


@pytest.mark.parametrize("tag,value", [
    ("IED", math.nan),
    ("IED", ""),
    ("LN", "garbage"),
    ("Hitem", "1"),
    ("ConnectedAP", "IED1"),
    ("FCDA", "IED1>>LD1>DS>nothing"),
    ("ExtRef", "IED1>>LD1> GGIO 1>no structure"),
    ("Private", "x"),
])
def test_undecodable_identities_select_nothing(tag, value):
    assert selector(tag, value) == VOID_SELECTOR


def test_unknown_tag_selects_by_name():
    assert selector("Foo", "anything") == "Foo"
    assert selector("Foo", math.nan) == VOID_SELECTOR


def test_void_selector_matches_nothing(sample):
    assert query_selector_all(sample, VOID_SELECTOR) == []
    assert find_element(sample, "IED", "") is None


# Helpers


@pytest.mark.parametrize("value,expected", [
    ("a>b>c", ("a>b", "c")),
    ("IED1>>LD1", ("IED1>", "LD1")),
    ("single", ("", "single")),
    ("", ("", "")),
])
def test_path_parts(value, expected):
    assert path_parts(value) == expected


def test_cross_product():
    assert cross_product(["a", "b"], [">"], ["x", "y"]) == [
        ("a", ">", "x"), ("a", ">", "y"), ("b", ">", "x"), ("b", ">", "y"),
    ]
    assert cross_product(["a"], []) == []
