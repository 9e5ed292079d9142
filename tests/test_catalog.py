"""Unit tests for the category catalog."""

import pytest

from needahand.models.category import CategoryId, FaqType
from needahand.services.catalog import (
    CATEGORY_DEFS,
    FALLBACK_CATEGORY,
    SPECIALTY_SKILLS,
    coerce_category,
    lookup
)


class TestCatalog:
    """Test suite for the static catalog."""

    @pytest.mark.unit
    @pytest.mark.parametrize("category_id", list(CategoryId))
    def test_every_category_has_questions(self, category_id):
        definition = lookup(category_id)

        assert definition.id == category_id
        assert len(definition.faqs) > 0

    @pytest.mark.unit
    def test_lookup_accepts_plain_string(self):
        assert lookup("Painter").id == CategoryId.PAINTER

    @pytest.mark.unit
    def test_enumeration_order(self):
        assert [c.id for c in CATEGORY_DEFS] == [
            CategoryId.PLUMBER,
            CategoryId.ELECTRICIAN,
            CategoryId.PAINTER,
            CategoryId.DRIVER,
            CategoryId.GENERAL,
        ]

    @pytest.mark.unit
    def test_faq_ids_unique_and_selects_have_options(self):
        for definition in CATEGORY_DEFS:
            ids = [faq.id for faq in definition.faqs]
            assert len(ids) == len(set(ids))
            for faq in definition.faqs:
                if faq.type == FaqType.SELECT:
                    assert faq.options
                else:
                    assert faq.options == ()

    @pytest.mark.unit
    def test_keywords_are_lowercase(self):
        for definition in CATEGORY_DEFS:
            assert all(k == k.lower() for k in definition.keywords)

    @pytest.mark.unit
    def test_definitions_are_immutable(self):
        with pytest.raises(Exception):
            lookup(CategoryId.PLUMBER).title = "Changed"

    @pytest.mark.unit
    def test_fallback_is_general(self):
        assert FALLBACK_CATEGORY == CategoryId.GENERAL
        assert lookup(FALLBACK_CATEGORY).title == "General Help"

    @pytest.mark.unit
    def test_coerce_category(self):
        assert coerce_category("Electrician") == CategoryId.ELECTRICIAN
        assert coerce_category("Gardener") == CategoryId.GENERAL
        assert coerce_category(None) == CategoryId.GENERAL

    @pytest.mark.unit
    def test_every_specialty_has_default_skills(self):
        assert set(SPECIALTY_SKILLS) == set(CategoryId)
