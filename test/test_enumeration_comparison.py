"""
Unit tests for Enumeration equality, hashing, ordering and text conversion
"""

import pytest
from sample_enumerations import Level, Priority, Status

from rich_enum import Enumeration, absolute_difference


@pytest.mark.unit
class TestEquality:
    def test_same_member_is_equal(self):
        assert Status.ACTIVE == Status.ACTIVE
        assert Status.ACTIVE != Status.INACTIVE

    def test_separate_instance_with_same_value_is_equal(self):
        assert Status(1, 'Active') == Status.ACTIVE

    def test_display_name_is_not_part_of_equality(self):
        assert Status(1, 'Renamed') == Status.ACTIVE

    def test_same_value_in_different_sets_is_not_equal(self):
        assert Status.ACTIVE.value == Level.ACTIVE.value
        assert Status.ACTIVE != Level.ACTIVE
        assert Level.ACTIVE != Status.ACTIVE

    def test_subclass_instance_is_not_equal(self):
        class ExtendedStatus(Status):
            pass

        assert ExtendedStatus(1, 'Active') != Status.ACTIVE

    @pytest.mark.parametrize('other', [None, 1, 'Active', object()])
    def test_never_equal_to_non_enumeration(self, other):
        assert Status.ACTIVE != other
        assert not (Status.ACTIVE == other)

    def test_equal_members_hash_identically(self):
        assert hash(Status(2, 'Inactive')) == hash(Status.INACTIVE)

    def test_usable_in_sets_and_as_dict_keys(self):
        members = {Status.ACTIVE, Status(1, 'Active'), Status.INACTIVE, Level.ACTIVE}
        labels = {Status.ACTIVE: 'on', Status.INACTIVE: 'off'}

        assert len(members) == 3
        assert labels[Status(1, 'whatever')] == 'on'


@pytest.mark.unit
class TestOrdering:
    def test_compare_to_follows_value(self):
        assert Priority.LOW.compare_to(Priority.HIGH) < 0
        assert Priority.HIGH.compare_to(Priority.LOW) > 0
        assert Priority.MEDIUM.compare_to(Priority(5, 'Medium')) == 0

    def test_rich_comparisons(self):
        assert Priority.LOW < Priority.MEDIUM < Priority.HIGH
        assert Priority.HIGH > Priority.MEDIUM
        assert Priority.LOW <= Priority(1, 'Low')
        assert Priority.HIGH >= Priority.HIGH

    def test_sorting_orders_by_value(self):
        shuffled = [Priority.HIGH, Priority.LOW, Priority.MEDIUM]

        assert sorted(shuffled) == [Priority.LOW, Priority.MEDIUM, Priority.HIGH]
        assert max(shuffled) is Priority.HIGH

    def test_order_is_total_over_all_pairs(self):
        members = list(Priority.get_all())
        for left in members:
            for right in members:
                assert (left < right) == (left.value < right.value)
                assert (left.compare_to(right) < 0) == (left.value < right.value)

    def test_ordering_against_non_enumeration_is_unsupported(self):
        with pytest.raises(TypeError):
            Status.ACTIVE < 2  # noqa: B015


@pytest.mark.unit
class TestText:
    def test_str_is_display_name(self):
        assert str(Status.ACTIVE) == 'Active'
        assert f'{Priority.HIGH}' == 'High'

    def test_repr_names_declared_member(self):
        assert repr(Status.INACTIVE) == "<Status.INACTIVE: 2 'Inactive'>"

    def test_repr_of_undeclared_instance(self):
        assert repr(Status(7, 'Seven')) == '<Status: 7>'


@pytest.mark.unit
class TestAbsoluteDifference:
    def test_example_scenario(self):
        assert Enumeration.absolute_difference(Status.ACTIVE, Status.INACTIVE) == 1

    def test_is_symmetric(self):
        members = list(Priority.get_all())
        for left in members:
            for right in members:
                expected = abs(left.value - right.value)
                assert absolute_difference(left, right) == expected
                assert absolute_difference(right, left) == expected

    def test_allows_different_sets(self):
        assert absolute_difference(Priority.HIGH, Status.INACTIVE) == 8
