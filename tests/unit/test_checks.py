from __future__ import annotations

from tambola.engine import Checks

TARGET = {4, 16, 48, 63, 76}


def test_last_announced_number_membership():
    assert Checks.over([90, 4], TARGET).has_last_announced_number()
    assert not Checks.over([4, 90], TARGET).has_last_announced_number()


def test_empty_history_has_no_last_number():
    checks = Checks.over([], TARGET)

    assert not checks.has_last_announced_number()
    assert not checks.has_all_numbers()
    assert checks.matched_first_n_numbers(0)


def test_has_all_numbers_ignores_order_and_repeats():
    assert Checks.over([76, 63, 48, 16, 4, 4, 90], TARGET).has_all_numbers()
    assert not Checks.over([76, 63, 48, 16], TARGET).has_all_numbers()


def test_empty_target_is_trivially_covered_but_never_last():
    checks = Checks.over([1, 2], [])

    assert checks.has_all_numbers()
    assert not checks.has_last_announced_number()


def test_matched_first_n_numbers_is_an_exact_total_count():
    checks = Checks.over([4, 90, 16, 48, 1, 63], TARGET)

    assert checks.matched_first_n_numbers(4)
    assert not checks.matched_first_n_numbers(3)
    assert not checks.matched_first_n_numbers(5)


def test_matched_first_n_numbers_counts_repeats():
    assert Checks.over([4, 4], TARGET).matched_first_n_numbers(2)
