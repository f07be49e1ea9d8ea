"""Tests for shortest-unique-prefix indexing."""

from __future__ import annotations

import itertools

from dockps.services.prefix_index import PrefixIndex, unique_prefix_lengths


class TestPrefixIndex:
    def test_shared_prefixes(self):
        assert unique_prefix_lengths(["ab12cd", "ab12ef", "ab9999"]) == [5, 5, 3]

    def test_single_identifier_needs_one_char(self):
        assert unique_prefix_lengths(["deadbeef"]) == [1]

    def test_empty_batch(self):
        assert unique_prefix_lengths([]) == []

    def test_offsets(self):
        index = PrefixIndex(["abc", "abd", "x"])
        assert index.offset("abc") == 3
        assert index.offset("abd") == 3
        assert index.offset("x") == 1

    def test_duplicates_resolve_to_max_length(self):
        ids = ["0123456789abcdef", "0123456789abcdef", "f00"]
        assert unique_prefix_lengths(ids) == [10, 10, 1]

    def test_equal_up_to_max_length(self):
        ids = ["0123456789aaaa", "0123456789bbbb"]
        assert unique_prefix_lengths(ids) == [10, 10]

    def test_custom_max_length(self):
        assert unique_prefix_lengths(["aaaa1", "aaaa2"], max_length=3) == [3, 3]

    def test_short_identifier_is_clamped(self):
        index = PrefixIndex(["ab", "abcdef"])
        assert index.offset("ab") == 2
        assert index.offset("abcdef") == 3

    def test_empty_identifier(self):
        assert PrefixIndex([""]).offset("") == 0

    def test_does_not_mutate_input(self):
        ids = ["b2", "a1"]
        unique_prefix_lengths(ids)
        assert ids == ["b2", "a1"]

    def test_lengths_within_bounds(self):
        ids = ["3f9a01", "3f9a02", "3e0000", "7c1111", "7c1112", "0000000000000"]
        for length in unique_prefix_lengths(ids):
            assert 1 <= length <= 10

    def test_prefixes_are_unique(self):
        ids = ["3f9a01", "3f9a02", "3e0000", "7c1111", "7c1112", "a"]
        lengths = unique_prefix_lengths(ids)
        prefixes = [i[:n] for i, n in zip(ids, lengths)]
        assert len(set(prefixes)) == len(prefixes)

    def test_order_independent(self):
        ids = ["3f9a01", "3f9a02", "3e0000", "7c1111"]
        expected = dict(zip(ids, unique_prefix_lengths(ids)))
        for perm in itertools.permutations(ids):
            perm = list(perm)
            assert dict(zip(perm, unique_prefix_lengths(perm))) == expected
