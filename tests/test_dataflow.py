from conftest import scl
from scl_edit.dataflow import find_control_blocks, find_fcdas
from scl_edit.dom import query_selector


def test_goose_subscription(sample):
    ext_ref = query_selector(sample, 'ExtRef[serviceType="GOOSE"]')
    fcdas = find_fcdas(ext_ref)
    assert [(f.get("doName"), f.get("daName")) for f in fcdas] == [("Pos", "stVal")]
    assert [cb.get("name") for cb in find_control_blocks(ext_ref)] == ["gcb1"]


def test_extref_without_service_type_considers_all_blocks(sample):
    ext_ref = query_selector(sample, 'ExtRef[doName="TotW"]')
    fcdas = find_fcdas(ext_ref)
    assert [f.getparent().get("name") for f in fcdas] == ["MeasDS"]
    assert [cb.get("name") for cb in find_control_blocks(ext_ref)] == ["log1", "svcb1", "rcb1"]


def test_unbound_extref(sample):
    ext_ref = query_selector(sample, 'ExtRef[intAddr="Ind2"]')
    assert find_fcdas(ext_ref) == []
    assert find_control_blocks(ext_ref) == []


def test_non_extref_has_no_fcdas(sample):
    assert find_fcdas(query_selector(sample, "FCDA")) == []


def test_control_block_listed_once():
    root = scl(
        '<IED name="S"><AccessPoint name="A"><Server><LDevice inst="L">'
        '<LN0 lnClass="LLN0" inst="" lnType="T"><DataSet name="DS">'
        '<FCDA ldInst="L" lnClass="XCBR" lnInst="1" doName="Pos" daName="stVal" fc="ST"/>'
        '<FCDA ldInst="L" lnClass="XCBR" lnInst="1" doName="Pos" daName="stVal" fc="ST"/>'
        '</DataSet><GSEControl name="g" datSet="DS"/></LN0>'
        "</LDevice></Server></AccessPoint></IED>"
        '<ExtRef iedName="S" serviceType="GOOSE" ldInst="L" lnClass="XCBR" lnInst="1" '
        'doName="Pos" daName="stVal"/>'
    )
    ext_ref = query_selector(root, "ExtRef")
    assert len(find_fcdas(ext_ref)) == 2
    assert [cb.get("name") for cb in find_control_blocks(ext_ref)] == ["g"]
