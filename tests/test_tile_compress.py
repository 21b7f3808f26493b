from tilesynth.utils.tile_compress import compress_cells, decompress_cells, encode_raw


def test_empty_input():
    assert compress_cells([]) == ""
    assert decompress_cells("") == []


def test_short_lists_stay_raw():
    cells = [(0, 0), (1, 0), (2, 0), (2, 1)]
    out = compress_cells(cells)
    assert out == "0,0;1,0;2,0;2,1"
    assert decompress_cells(out) == cells


def test_long_path_with_large_coordinates_uses_deltas():
    cells = [(100 + i, 200) for i in range(4)] + [(103, 201), (103, 202)]
    out = compress_cells(cells)
    assert out.startswith("D:100,200|1,0")
    assert len(out) < len(encode_raw(cells))
    assert decompress_cells(out) == cells


def test_sort_option():
    cells = [(5, 5), (1, 1), (3, 2)]
    assert decompress_cells(compress_cells(cells, sort=True)) == sorted(cells)
    assert decompress_cells(compress_cells(cells)) == cells


def test_malformed_input_decodes_to_empty():
    assert decompress_cells("D:1,2|x,y") == []
    assert decompress_cells("1;2") == []
