from listgame.reachable import count_reachable_workfunctions, main


def test_size_one_has_single_function():
    assert count_reachable_workfunctions(1, seed=1) == 1


def test_size_two_merges_mirror_images():
    assert count_reachable_workfunctions(2, seed=1) == 2


def test_count_independent_of_seed():
    assert count_reachable_workfunctions(3, seed=1) == count_reachable_workfunctions(3, seed=2)


def test_main_reports_count(capsys):
    assert main(["--size", "2", "--seed", "5"]) == 0
    err = capsys.readouterr().err
    assert "Total permutations 2." in err
    assert "Reachable work functions: 2." in err