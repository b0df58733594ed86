"""Unit tests for form schemas and ownership checks."""

import pytest
from pydantic import ValidationError

from food_registration.models.producer import ProducerForm
from food_registration.models.product import ProductForm

from tests.helpers.mock_factories import make_producer


class TestProductForm:
    def test_blank_optionals_become_none(self):
        form = ProductForm.model_validate(
            {
                "name": " Apple ",
                "producer_id": "1",
                "category": "",
                "calories": "",
                "description": "   ",
                "nutrition_score": "",
            }
        )

        assert form.name == "Apple"
        assert form.category is None
        assert form.calories is None
        assert form.description is None
        assert form.nutrition_score is None

    def test_nutrition_score_is_uppercased(self):
        form = ProductForm.model_validate({"name": "Apple", "producer_id": 1, "nutrition_score": "b"})
        assert form.nutrition_score == "B"

    def test_rejects_unknown_nutrition_score(self):
        with pytest.raises(ValidationError):
            ProductForm.model_validate({"name": "Apple", "producer_id": 1, "nutrition_score": "F"})

    def test_rejects_unknown_category(self):
        with pytest.raises(ValidationError):
            ProductForm.model_validate({"name": "Apple", "producer_id": 1, "category": "Rocks"})

    def test_rejects_negative_nutrients(self):
        with pytest.raises(ValidationError):
            ProductForm.model_validate({"name": "Apple", "producer_id": 1, "fat": -1})

    def test_requires_producer(self):
        with pytest.raises(ValidationError, match="Producer is required"):
            ProductForm.model_validate({"name": "Apple", "producer_id": ""})


class TestProducerForm:
    def test_strips_name(self):
        assert ProducerForm.model_validate({"name": "  Farm "}).name == "Farm"

    def test_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            ProducerForm.model_validate({"name": "   "})


class TestOwnership:
    def test_owner_matches_email(self):
        assert make_producer(owner_id="a@test.com").is_owned_by("a@test.com") is True

    def test_other_user_does_not_own(self):
        assert make_producer(owner_id="a@test.com").is_owned_by("b@test.com") is False

    def test_anonymous_does_not_own(self):
        assert make_producer(owner_id="a@test.com").is_owned_by(None) is False
