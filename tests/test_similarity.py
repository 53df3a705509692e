"""
Tests for the similarity scorer.
"""

import pytest

from luxe_valuation.models.similarity import score, sqft_score


class TestBounds:

    @pytest.mark.parametrize("sqft,beds,baths,ptype,city", [
        (500, 0, 0, "condo", "Kailua"),
        (20_000, 12, 10, "estate", "Waialua"),
        (2000, 3, 2, "HOUSE", "honolulu"),
        (1, 1, 1, "land", "Hilo"),
    ])
    def test_score_within_unit_interval(self, make_request, make_record, sqft, beds, baths, ptype, city):
        target = make_request()
        candidate = make_record(square_feet=sqft, bedrooms=beds, bathrooms=baths, property_type=ptype, city=city)

        result = score(target, candidate)

        assert 0.0 <= result <= 1.0

    def test_identical_attributes_score_exactly_one(self, make_request, make_record):
        target = make_request(square_feet=3150, bedrooms=4, bathrooms=3.5, property_type="estate", city="Kailua")
        candidate = make_record(square_feet=3150, bedrooms=4, bathrooms=3.5, property_type="estate", city="Kailua")

        assert score(target, candidate) == 1.0

    def test_completely_different_scores_zero(self, make_request, make_record):
        target = make_request(square_feet=2000, bedrooms=3, bathrooms=2)
        candidate = make_record(square_feet=9000, bedrooms=9, bathrooms=8, property_type="condo", city="Hilo")

        assert score(target, candidate) == 0.0


class TestSubScores:

    def test_zero_target_sqft_contributes_nothing(self, make_request, make_record):
        """Living-area term is defined as 0 rather than dividing by zero."""
        target = make_request(square_feet=0)
        candidate = make_record(square_feet=0)

        assert sqft_score(0, 0) == 0.0
        assert score(target, candidate) == pytest.approx(0.70)

    def test_sqft_difference_scales_linearly(self):
        assert sqft_score(2000, 1500) == pytest.approx(0.75)
        assert sqft_score(2000, 2500) == pytest.approx(0.75)
        assert sqft_score(2000, 6000) == 0.0

    def test_bedroom_gap_of_four_zeroes_bedroom_term(self, make_request, make_record):
        target = make_request(bedrooms=3)
        candidate = make_record(bedrooms=7)

        assert score(target, candidate) == pytest.approx(0.80)

    def test_bathroom_gap_of_one_and_a_half(self, make_request, make_record):
        target = make_request(bathrooms=2)
        candidate = make_record(bathrooms=3.5)

        # bathroom term (3 - 1.5) / 3 = 0.5, weighted 0.2
        assert score(target, candidate) == pytest.approx(0.90)

    def test_type_and_city_match_ignore_case(self, make_request, make_record):
        target = make_request(property_type="House", city="HONOLULU")
        candidate = make_record(property_type="house", city="honolulu")

        assert score(target, candidate) == 1.0

    def test_type_and_city_mismatch_cost_fifteen_points_each(self, make_request, make_record):
        target = make_request()

        assert score(target, make_record(property_type="condo")) == pytest.approx(0.85)
        assert score(target, make_record(city="Kailua")) == pytest.approx(0.85)
        assert score(target, make_record(property_type="condo", city="Kailua")) == pytest.approx(0.70)
