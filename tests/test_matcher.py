"""Tests for ingredient name matching and match scoring."""

import pytest

from grocery_matcher.matcher import (
    blended_score,
    boosted_score,
    coverage_score,
    is_available,
    missing_ingredients,
    names_match,
    normalize_name,
    utilization_score,
)
from grocery_matcher.models import Ingredient, Recipe


class TestNamesMatch:
    """Tests for names_match function."""

    def test_exact_match_ignores_case_and_whitespace(self):
        assert names_match("Milk", "milk")
        assert names_match("  Milk ", "MILK")

    def test_shared_long_word_matches(self):
        """A shared word longer than 3 characters anchors a match."""
        assert names_match("chicken breast", "whole chicken")
        assert names_match("red onion", "onion")

    def test_shared_short_word_does_not_match(self):
        """Short words like 'oil' are too common to anchor a match."""
        assert not names_match("olive oil", "vegetable oil")

    def test_substring_match_with_long_contained_name(self):
        assert names_match("tomatoes", "tomato")
        assert names_match("tomato", "tomatoes")

    def test_substring_match_requires_more_than_three_characters(self):
        assert not names_match("oil", "olive oil")
        assert not names_match("pea", "peanut")

    def test_eggs_does_not_match_egg(self):
        """'egg' is only 3 characters, so neither the word nor substring rule applies."""
        assert not names_match("Eggs", "egg")
        assert not names_match("egg", "Eggs")

    def test_unrelated_names(self):
        assert not names_match("flour", "milk")

    def test_substring_rule_is_not_stemming(self):
        """Substring matching is intentionally naive."""
        assert names_match("salt", "salted butter")

    def test_empty_candidate_never_matches_other_name(self):
        assert not names_match("", "milk")
        assert not names_match("milk", "")


class TestIsAvailable:
    """Tests for is_available function."""

    def test_accepts_ingredients_and_strings(self):
        assert is_available("Milk", [Ingredient(name="milk")])
        assert is_available("Milk", ["bread", "milk"])

    def test_empty_available(self):
        assert not is_available("Milk", [])

    def test_normalize_name(self):
        assert normalize_name("  Whole Milk ") == "whole milk"


class TestCoverageScore:
    """Tests for coverage_score function."""

    def test_pancakes_with_milk_and_egg(self, pancakes):
        """Only Milk matches: 'egg' is too short to match 'Eggs'."""
        assert coverage_score(pancakes, ["milk", "egg"]) == pytest.approx(1 / 3)

    def test_empty_recipe_scores_zero(self):
        recipe = Recipe(name="Nothing")
        assert coverage_score(recipe, ["milk"]) == 0.0
        assert coverage_score(recipe, []) == 0.0

    def test_exact_names_score_one(self, pancakes):
        assert coverage_score(pancakes, ["Flour", "Milk", "Eggs"]) == 1.0

    def test_nothing_available_scores_zero(self, pancakes):
        assert coverage_score(pancakes, []) == 0.0

    def test_accepts_ingredient_objects(self, pancakes):
        available = [Ingredient(name="flour"), Ingredient(name="milk")]
        assert coverage_score(pancakes, available) == pytest.approx(2 / 3)


class TestUtilizationScore:
    """Tests for utilization_score function."""

    def test_share_of_available_used(self, pancakes):
        assert utilization_score(pancakes, ["milk", "egg"]) == pytest.approx(0.5)

    def test_empty_available_scores_zero(self, pancakes):
        assert utilization_score(pancakes, []) == 0.0

    def test_empty_recipe_uses_nothing(self):
        assert utilization_score(Recipe(name="Nothing"), ["milk"]) == 0.0


class TestBlendedScore:
    """Tests for blended_score function."""

    def test_weights_coverage_and_utilization(self, pancakes):
        expected = 0.7 * (1 / 3) + 0.3 * 0.5
        assert blended_score(pancakes, ["milk", "egg"]) == pytest.approx(expected)

    def test_perfect_match_using_whole_list(self, pancakes):
        assert blended_score(pancakes, ["flour", "milk", "eggs"]) == pytest.approx(1.0)

    def test_empty_inputs_score_zero(self, pancakes):
        assert blended_score(pancakes, []) == 0.0
        assert blended_score(Recipe(name="Nothing"), []) == 0.0

    @pytest.mark.parametrize(
        "available",
        [
            [],
            ["milk"],
            ["milk", "milk", "milk"],
            ["flour", "milk", "eggs", "bread", "jam"],
            ["whole milk", "plain flour", "eggs"],
        ],
    )
    def test_always_within_unit_interval(self, pancakes, available):
        score = blended_score(pancakes, available)
        assert 0.0 <= score <= 1.0


class TestBoostedScore:
    """Tests for boosted_score function."""

    def test_perfect_match_is_exactly_one(self, pancakes):
        assert boosted_score(pancakes, ["flour", "milk", "eggs"]) == 1.0

    def test_partial_match_is_boosted(self, pancakes):
        assert boosted_score(pancakes, ["milk"]) == pytest.approx(0.4)

    def test_near_perfect_match_is_capped_below_one(self, make_recipe):
        recipe = make_recipe("Big Salad", ["a1111", "b2222", "c3333", "d4444", "e5555", "f6666"])
        score = boosted_score(recipe, ["a1111", "b2222", "c3333", "d4444", "e5555"])
        assert score == 0.99

    def test_empty_recipe_scores_zero(self):
        assert boosted_score(Recipe(name="Nothing"), ["milk"]) == 0.0


class TestMissingIngredients:
    """Tests for missing_ingredients function."""

    def test_pancakes_with_milk_and_egg(self, pancakes):
        missing = missing_ingredients(pancakes, ["milk", "egg"])
        assert [ing.name for ing in missing] == ["Flour", "Eggs"]

    def test_keeps_recipe_order(self, chocolate_cake):
        missing = missing_ingredients(chocolate_cake, ["sugar"])
        assert [ing.name for ing in missing] == ["flour", "cocoa powder", "eggs", "butter"]

    def test_nothing_missing_when_all_available(self, pancakes):
        assert missing_ingredients(pancakes, ["flour", "milk", "eggs"]) == []

    def test_everything_missing_when_nothing_available(self, pancakes):
        assert missing_ingredients(pancakes, []) == list(pancakes.ingredients)

    def test_empty_recipe(self):
        assert missing_ingredients(Recipe(name="Nothing"), ["milk"]) == []

    def test_does_not_modify_recipe(self, pancakes):
        missing_ingredients(pancakes, ["milk"])
        assert pancakes.missing_ingredients == ()
        assert pancakes.match_score == 0.0
