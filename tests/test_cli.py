import pytest

from scl_edit.cli import count_tags, find, list_identities, main


def test_count_tags(sample):
    counts = count_tags(sample)
    assert counts["IED"] == 2
    assert counts["ExtRef"] == 5
    assert "Private" not in counts
    assert "Setting" not in counts
    assert list(counts) == sorted(counts)


def test_list_identities(sample):
    assert list_identities(sample, "ConnectedAP") == [("IED1 AP1", 50), ("IED2 AP1", 83)]


def test_find(sample):
    css, matches = find(sample, "IED", "IED2")
    assert css == 'SCL>IED[name="IED2"]'
    assert [m.get("name") for m in matches] == ["IED2"]


def test_main_counts_tags(sample_path, capsys):
    main([str(sample_path)])
    out = capsys.readouterr().out
    assert "Bay\t1\n" in out
    assert "ConductingEquipment\t3\n" in out


def test_main_lists_identities(sample_path, capsys):
    main([str(sample_path), "--tag", "Bay"])
    assert capsys.readouterr().out == "Sub1>VL1>Bay1\t22\n"


def test_main_find(sample_path, capsys):
    main([str(sample_path), "--find", "GSE", "LD1 gcb1"])
    out = capsys.readouterr().out.splitlines()
    assert out == ['GSE[ldInst="LD1"][cbName="gcb1"]', "GSE\t55"]


def test_main_find_without_match(sample_path, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(sample_path), "--find", "IED", "IED9"])
    assert info.value.code == 3


def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "missing.scd")])
    assert info.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_main_malformed_file(tmp_path, capsys):
    broken = tmp_path / "broken.scd"
    broken.write_text("<SCL><Substation></SCL>")
    with pytest.raises(SystemExit) as info:
        main([str(broken)])
    assert info.value.code == 2
    assert capsys.readouterr().err.startswith("Error: ")


def test_main_skips_unidentified_elements(tmp_path, capsys):
    document = tmp_path / "nameless.scd"
    document.write_text('<SCL xmlns="http://www.iec.ch/61850/2003/SCL"><IED/></SCL>')
    main([str(document), "--tag", "IED", "--debug"])
    captured = capsys.readouterr()
    assert captured.out == ""
