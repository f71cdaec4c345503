from bstlab.main import run_smoke_test


def test_smoke_test_output(capsys):
    run_smoke_test()
    out = capsys.readouterr().out
    assert "in-order [1, 7, 8, 9, 11]" in out
    assert "node_count=5 height=2 is_full=True" in out
    assert "t.equals(t.copy()): True" in out
    assert "t is t.copy(): False" in out
    assert "t.is_mirror(t.mirror()): True" in out
    assert "After remove(7): in-order [1, 8, 9, 11], root=8" in out
    assert out.rstrip().endswith("1\n8\n9\n11")
