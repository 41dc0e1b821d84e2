import pytest

from dudes_in_space.items import InputRecipe, Item, OutputRecipe, Recipe


def test_item_wire_format():
    assert Item("steel", 10).to_dict() == {"name": "steel", "count": 10}


def test_item_round_trip():
    item = Item("copper", 3)
    assert Item.from_dict(item.to_dict()) == item


def test_item_negative_count_raises():
    with pytest.raises(ValueError):
        Item("steel", -1)


def test_item_missing_field_raises():
    with pytest.raises(ValueError):
        Item.from_dict({"name": "steel"})


def test_input_recipe_wire_format():
    recipe = InputRecipe([Item("steel", 10)])
    assert recipe.to_dict() == {"input": [{"name": "steel", "count": 10}]}


def test_input_recipe_round_trip():
    recipe = InputRecipe([Item("steel", 10), Item("glass", 2)])
    assert InputRecipe.from_dict(recipe.to_dict()) == recipe


def test_input_recipe_missing_input_raises():
    with pytest.raises(ValueError):
        InputRecipe.from_dict({})


def test_recipe_and_output_recipe_hold_items():
    steel = Item("steel", 1)
    recipe = Recipe(input=[steel], output=[Item("plate", 2)])
    assert recipe.input == [steel]
    assert OutputRecipe([steel]).output == [steel]