import pytest

from osalgos.allocation import Placement, best_fit, first_fit, format_table, main

BLOCKS = [100, 500, 200, 300, 600]
FILES = [212, 417, 112, 426]


def test_best_fit_choices():
    assert [p.block for p in best_fit(BLOCKS, FILES)] == [3, 1, 2, 4]


def test_first_fit_choices():
    placements = first_fit(BLOCKS, FILES)
    assert [p.block for p in placements] == [1, 4, 2, None]
    assert placements[3].fragment is None
    assert not placements[3].allocated


@pytest.mark.parametrize("method", [best_fit, first_fit])
def test_fragments_and_block_reuse(method):
    placements = method(BLOCKS, FILES)
    chosen = [p.block for p in placements if p.allocated]
    assert len(chosen) == len(set(chosen))
    for placement, size in zip(placements, FILES):
        assert placement.file_size == size
        if placement.allocated:
            assert placement.fragment == BLOCKS[placement.block] - size
            assert placement.fragment >= 0


def test_best_fit_fragment_is_minimal_among_free_blocks():
    placements = best_fit(BLOCKS, FILES)
    used = set()
    for placement in placements:
        free = [b - placement.file_size for i, b in enumerate(BLOCKS)
                if i not in used and b >= placement.file_size]
        assert placement.fragment == min(free)
        used.add(placement.block)


def test_best_fit_bounded_fragment():
    assert best_fit([20000], [1]) == [Placement(1)]
    assert first_fit([20000], [1])[0].block == 0


def test_no_blocks_nothing_allocated():
    assert all(not p.allocated for p in first_fit([], [5, 6]))
    assert all(not p.allocated for p in best_fit([], [5, 6]))


def test_format_table_rows():
    lines = format_table("Best Fit Allocation", BLOCKS, best_fit(BLOCKS, FILES)).splitlines()
    assert lines[0] == "Best Fit Allocation:"
    assert lines[2] == "File No\tFile Size\tBlock No\tBlock Size\tFragment"
    assert lines[3] == "1\t\t212\t\t4\t\t300\t\t88"
    assert len(lines) == 3 + len(FILES)


def test_format_table_not_allocated_row():
    lines = format_table("First Fit Allocation", BLOCKS, first_fit(BLOCKS, FILES)).splitlines()
    assert lines[-1] == "4\t\t426\t\tNot Allocated"


def test_main_prints_table(capsys):
    args = ["first", "--blocks", *map(str, BLOCKS), "--files", *map(str, FILES)]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "First Fit Allocation:" in out
    assert format_table("First Fit Allocation", BLOCKS, first_fit(BLOCKS, FILES)) in out


def test_main_rejects_unknown_method():
    with pytest.raises(SystemExit):
        main(["worst", "--blocks", "10", "--files", "5"])