# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
import numpy as np
import pytest

import vgplot.numtext as numtext
from vgplot.errors import FormatError

@pytest.mark.parametrize('line, separator', [
    ('1,2,3', ','),
    ('1 2 3', numtext.WHITESPACE),
    ('\t-1.5e3  +2.0d-1\n', numtext.WHITESPACE),
    ('1;2', ';'),
    ('1 2 # a, b', numtext.WHITESPACE),
    ('# comment', None),
    ('   # 1,2', None),
    ('', None),
    ('\n', None),
])
def test_get_separator(line, separator):
    assert numtext.get_separator(line) == separator

def test_count_data_columns():
    assert numtext.count_data_columns('1 2 3 # x') == 3
    assert numtext.count_data_columns('1\t2  3') == 3
    assert numtext.count_data_columns('# 1 2 3') == 0

def test_count_data_columns_skips_empty_fields():
    assert numtext.count_data_columns('1,2,,3', ',') == 3
    assert numtext.count_data_columns('1, 2 ,3', ',') == 3

def test_parse_line():
    assert numtext.parse_line('1 2.5 -3e2 # 4') == [1.0, 2.5, -300.0]
    assert numtext.parse_line('1,2,,3', ',') == [1.0, 2.0, 3.0]
    assert numtext.parse_line('1.5D2') == [150.0]

def test_load_data_file_round_trip(tmp_path):
    rng = np.random.default_rng(1)
    data = rng.normal(size=(7, 4))
    for sep in [' ', ',', ';', '\t']:
        fn = tmp_path / 'data.txt'
        with open(fn, 'w') as f:
            f.write('# header\n\n')
            for row in data:
                f.write(sep.join(f'{v:.17g}' for v in row) + '\n')
        columns = numtext.load_data_file(str(fn))
        assert len(columns) == 4
        for j, c in enumerate(columns):
            np.testing.assert_allclose(c, data[:, j])

def test_load_data_file_skips_comments(tmp_path):
    fn = tmp_path / 'data.txt'
    fn.write_text('# x y\n1 2\n\n# middle\n3 4 # trailing\n')
    x, y = numtext.load_data_file(str(fn))
    np.testing.assert_array_equal(x, [1, 3])
    np.testing.assert_array_equal(y, [2, 4])

def test_load_data_file_column_mismatch(tmp_path):
    fn = tmp_path / 'bad.txt'
    fn.write_text('1,2,3\n4,5,6\n7,8\n')
    with pytest.raises(FormatError) as info:
        numtext.load_data_file(str(fn))
    assert info.value.lineNum == 3
    assert info.value.filename == str(fn)
    assert 'line 3' in str(info.value)

def test_load_data_file_bad_number(tmp_path):
    fn = tmp_path / 'bad.txt'
    fn.write_text('1 2\n3 x4\n')
    with pytest.raises(FormatError):
        numtext.load_data_file(str(fn))

def test_load_data_file_explicit_separator(tmp_path):
    fn = tmp_path / 'data.txt'
    fn.write_text('1|2\n3|4\n')
    columns = numtext.load_data_file(str(fn), '|')
    np.testing.assert_array_equal(columns[1], [2, 4])

def test_load_empty_file(tmp_path):
    fn = tmp_path / 'empty.txt'
    fn.write_text('# nothing\n\n')
    assert numtext.load_data_file(str(fn)) == []
