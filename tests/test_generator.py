import pytest

from wangtiler.mapgen.check import is_seamless
from wangtiler.mapgen.generator import WangTiler, generate_grid
from wangtiler.rng import PMRandom, RandomExhausted, ScriptedRandom
from wangtiler.tiles import bottom_color, left_color, right_color, top_color

def assert_seamless(tiler):
    for i in range(tiler.height):
        for j in range(tiler.width):
            t = tiler.tile_at(i, j)
            assert 0 <= t <= 7
            if j > 0:
                assert right_color(tiler.tile_at(i, j - 1)) == left_color(t), f"left seam at ({i},{j})"
            if i > 0:
                assert bottom_color(tiler.tile_at(i - 1, j)) == top_color(t), f"top seam at ({i},{j})"

def test_2x2_scripted_scenario():
    # origin 4; (0,1) filler 6 + bit 0; (1,0) filler 2 + bit 1; (1,1) bit 1
    rng = ScriptedRandom([4, 6, 0, 2, 1, 1])
    tiler = WangTiler(2, 2, rng)
    tiler.generate()
    assert tiler.as_matrix() == [[4, 4], [7, 5]]
    assert rng.remaining == 0

def test_draw_count_per_cell():
    # 1 origin + 2 per edge cell + 1 per interior cell
    w, h = 5, 3
    script = [0] * (1 + 2 * (w - 1) + 2 * (h - 1) + (w - 1) * (h - 1))
    rng = ScriptedRandom(script)
    WangTiler(w, h, rng).generate()
    assert rng.remaining == 0

def test_short_script_runs_out():
    with pytest.raises(RandomExhausted):
        WangTiler(2, 2, ScriptedRandom([4, 6, 0])).generate()

@pytest.mark.parametrize("w,h", [(1, 1), (1, 9), (9, 1), (16, 16), (31, 7)])
def test_edges_match_across_seeds(w, h):
    for seed in range(1, 40):
        tiler = WangTiler(w, h, PMRandom(seed))
        tiler.generate()
        assert_seamless(tiler)

def test_deterministic_for_equal_streams():
    a = WangTiler(16, 16, PMRandom(777))
    b = WangTiler(16, 16, PMRandom(777))
    a.generate()
    b.generate()
    assert a.as_matrix() == b.as_matrix()

def test_dimensions_fixed_by_construction():
    tiler = WangTiler(16, 16, PMRandom(1))
    assert (tiler.width, tiler.height) == (16, 16)
    for _ in range(3):
        tiler.generate()
        assert (tiler.width, tiler.height) == (16, 16)

def test_regeneration_changes_output():
    tiler = WangTiler(16, 16, PMRandom(42))
    tiler.generate()
    first = tiler.as_matrix()
    tiler.generate()
    second = tiler.as_matrix()
    assert first != second
    assert_seamless(tiler)

def test_cells_zero_before_first_generate():
    tiler = WangTiler(3, 2, PMRandom(5))
    assert tiler.generated is False
    assert tiler.as_matrix() == [[0, 0, 0], [0, 0, 0]]
    tiler.generate()
    assert tiler.generated is True

@pytest.mark.parametrize("w,h", [(0, 4), (4, 0), (-1, 3), (2.5, 2), (True, 3)])
def test_invalid_dimensions_rejected(w, h):
    with pytest.raises(ValueError):
        WangTiler(w, h, PMRandom(1))

@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_read_fails_fast(row, col):
    tiler = WangTiler(3, 4, PMRandom(1))
    tiler.generate()
    with pytest.raises(IndexError):
        tiler.tile_at(row, col)

def test_resize_reallocates():
    tiler = WangTiler(4, 4, PMRandom(3))
    tiler.generate()
    tiler.resize(6, 2)
    assert (tiler.width, tiler.height) == (6, 2)
    assert tiler.generated is False
    assert tiler.as_matrix() == [[0] * 6, [0] * 6]
    tiler.generate()
    assert_seamless(tiler)
    with pytest.raises(ValueError):
        tiler.resize(0, 1)

def test_custom_matcher_is_used():
    calls = []
    def matcher(above, left, rng):
        calls.append((above, left))
        return 0
    tiler = WangTiler(3, 3, ScriptedRandom([5] + [1] * 4), matcher=matcher)
    tiler.generate()
    assert len(calls) == 8
    assert tiler.tile_at(0, 0) == 5

def test_generate_grid_convenience():
    mat = generate_grid(seed=2020)
    assert len(mat) == 16 and all(len(r) == 16 for r in mat)
    assert mat == generate_grid(16, 16, seed=2020)
    assert is_seamless(mat)
    assert is_seamless(generate_grid(5, 7))
