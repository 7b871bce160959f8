from pedchart.main import main


def test_basic_sample_renders(tmp_path, capsys):
    output = tmp_path / "basic.svg"
    assert main(["--sample", "basic", "-o", str(output)]) == 0

    out = capsys.readouterr().out
    assert "Found 5 individuals and 1 couples" in out
    assert "No validation issues found" in out
    assert "canvas 380x260" in out
    assert output.exists()


def test_extended_sample_reports_cross_generation_couple(tmp_path, capsys):
    output = tmp_path / "extended.png"
    assert main(["--sample", "extended", "-o", str(output)]) == 0

    out = capsys.readouterr().out
    assert "ERROR: Couple couple-001 spans generations 1 and 0" in out
    assert output.exists()
