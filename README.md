# dsakit

Classic algorithm routines for lists, matrices and strings, grouped by technique. Every routine
is a plain function that takes ordinary Python sequences and returns new values; inputs are
never modified. There are no runtime dependencies.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `dsakit.arrays`: `has_pair_with_sum`, `zero_sum_triplets`, `find_duplicates`,
  `max_consecutive_ones`, `first_unique`, `second_largest`, `left_rotate`, `majority_elements`,
  `min_height_difference`, `push_zeros_to_end`, `remove_duplicates`, `remove_element`,
  `smallest_missing_positive`, `max_profit`, `sorted_union`
- `dsakit.hashing`: `count_subarrays_with_xor`, `count_subarrays_with_sum`,
  `count_pairs_with_sum`, `intersection`, `union_size`, `longest_consecutive`
- `dsakit.matrix`: `rotate_anticlockwise`, `contains`, `search_flattened`, `search_row_sorted`,
  `search_staircase`, `set_zeroes`, `spiral_order`
- `dsakit.searching`: `can_place`, `aggressive_cows`, `students_needed`, `allocate_pages`,
  `kth_element`, `kth_missing`, `count_occurrences`, `peak_element`, `search_rotated`
- `dsakit.triangle`: `triangle_type`
- `dsakit.sorting`: `count_inversions`, `h_index`, `insert_interval`,
  `merge_without_extra_space`, `min_removals`, `merge_overlapping`
- `dsakit.strings`: `add_binary`, `group_anagrams`, `atoi`, `kmp_search`,
  `min_chars_for_palindrome`, `first_non_repeating`, `are_rotations`
- `dsakit.two_pointer`: `count_pairs_below`, `count_triplets_with_sum`,
  `count_distinct_in_windows`, `subarray_with_sum`, `count_pairs_with_sum_sorted`

## Examples

```python
from dsakit.strings import add_binary, kmp_search
from dsakit.matrix import spiral_order
from dsakit.searching import aggressive_cows

add_binary("1101", "111")                  # "10100"
kmp_search("aba", "abababa")               # [0, 2, 4]
spiral_order([[1, 2, 3], [4, 5, 6]])       # [1, 2, 3, 6, 5, 4]
aggressive_cows([1, 2, 4, 8, 9], 3)        # 3
```

## Return values and errors

- Matrix routines such as `rotate_anticlockwise` and `set_zeroes` return a new matrix;
  `merge_without_extra_space` returns the two redistributed lists as a tuple.
- `subarray_with_sum` returns 1-based `(start, end)` bounds, or `None` when no subarray fits.
- Some routines answer "nothing found" with a marker value: `second_largest` and
  `peak_element` give `-1`, `first_unique` gives `0`, `first_non_repeating` gives `"$"`,
  `search_rotated` gives `-1`, and `allocate_pages` gives `-1` when there are fewer books
  than students.
- `ValueError` is raised for inputs with no answer: an empty list passed to
  `min_height_difference`, `max_profit`, `aggressive_cows`, `allocate_pages` or
  `peak_element`; a `k` outside the combined length in `kth_element`; a window size below 1 in
  `count_distinct_in_windows`; anything but three sides in `triangle_type`; and a non-binary
  string in `add_binary`.

## What it does not do

The package is a library only: it has no command-line program and reads no files or input.