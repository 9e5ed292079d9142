"""Unit tests for keyword classification."""

import pytest

from needahand.models.category import CategoryId
from needahand.services.catalog import CATEGORY_DEFS
from needahand.services.classifier import ServiceClassifier, classify


class TestClassifier:
    """Test suite for ServiceClassifier."""

    @pytest.mark.unit
    def test_empty_text_falls_back(self):
        assert classify("") == CategoryId.GENERAL
        assert classify("   ") == CategoryId.GENERAL

    @pytest.mark.unit
    def test_no_keywords_falls_back(self):
        assert classify("something odd is happening") == CategoryId.GENERAL

    @pytest.mark.unit
    @pytest.mark.parametrize("definition", CATEGORY_DEFS, ids=lambda d: d.id.value)
    def test_own_keywords_pick_own_category(self, definition):
        assert classify(" ".join(definition.keywords)) == definition.id

    @pytest.mark.unit
    def test_kitchen_sink_is_plumbing(self):
        assert classify("My kitchen sink is leaking badly") == CategoryId.PLUMBER

    @pytest.mark.unit
    def test_case_insensitive(self):
        assert classify("The OUTLET keeps sparking") == CategoryId.ELECTRICIAN

    @pytest.mark.unit
    def test_highest_count_wins(self):
        # one plumbing keyword, two painting keywords
        assert classify("paint the wall near the pipe") == CategoryId.PAINTER

    @pytest.mark.unit
    def test_tie_goes_to_earlier_category(self):
        assert classify("leak near the outlet") == CategoryId.PLUMBER
        assert classify("outlet near the leak") == CategoryId.PLUMBER
        assert classify("light on the wall") == CategoryId.ELECTRICIAN

    @pytest.mark.unit
    def test_keyword_inside_another_word_counts(self):
        assert classify("carpet stain") == CategoryId.DRIVER

    @pytest.mark.unit
    def test_score_counts_each_keyword_once(self):
        scores = ServiceClassifier.score("leak leak leak")

        assert scores[CategoryId.PLUMBER] == 1
        assert scores[CategoryId.GENERAL] == 0
