from scorecard.shared.models.enums import RatingCategory


def test_registry_order_is_declaration_order():
    assert RatingCategory.all() == [
        RatingCategory.CLARITY,
        RatingCategory.DIFFICULTY,
        RatingCategory.USEFULNESS,
        RatingCategory.ENGAGEMENT,
    ]
    assert RatingCategory.values() == ["clarity", "difficulty", "usefulness", "engagement"]


def test_is_valid_accepts_registered_values_only():
    assert RatingCategory.is_valid("clarity")
    assert RatingCategory.is_valid(RatingCategory.USEFULNESS)
    assert not RatingCategory.is_valid("Clarity")
    assert not RatingCategory.is_valid("")
    assert not RatingCategory.is_valid(None)
    assert not RatingCategory.is_valid(3)
