"""
Test Suite for the Scoring Engine

Tests the keyword classifier and the Opportunity Score:
- Keyword category detection
- Keyword bonuses
- Rank adjustments
- Reseller bonus
- Clamping to [3, 10]
"""

import pytest
from src.models import TEAM_RANK_NOT_FOUND
from src.scoring import (
    KeywordCategory,
    categorize_keyword,
    is_first_timer,
    calculate_opportunity_score,
    calculate_opportunity_breakdown,
    clamp_score,
    get_rank_adjustment,
    get_rank_tier,
    MIN_SCORE,
    MAX_SCORE,
)


class TestKeywordCategories:
    """Test the shared keyword classifier."""

    def test_generic_keyword_has_no_categories(self):
        """Keywords without known phrases are uncategorized."""
        assert categorize_keyword("bruins schedule") == frozenset()

    def test_multiple_categories(self):
        """Categories are not mutually exclusive."""
        categories = categorize_keyword("cheap bruins tickets and parking")

        assert KeywordCategory.CHEAP in categories
        assert KeywordCategory.TICKETS in categories
        assert KeywordCategory.PARKING in categories
        assert KeywordCategory.SEATING not in categories

    def test_case_sensitive(self):
        """Phrases must appear in lowercase to match."""
        assert categorize_keyword("TD Garden Parking") == frozenset()
        assert categorize_keyword("First Time at TD Garden") == frozenset()

    def test_mixed_case_keyword_gets_no_bonus(self):
        """Capitalized phrases earn no keyword bonus."""
        # 5 + 3 (not found)
        assert calculate_opportunity_score("Bruins Tickets", TEAM_RANK_NOT_FOUND, []) == 8
        assert calculate_opportunity_score("bruins tickets", TEAM_RANK_NOT_FOUND, []) == 10

    @pytest.mark.parametrize("keyword", [
        "first time at td garden",
        "what to expect at a bruins game",
    ])
    def test_first_timer_phrases(self, keyword):
        """Both first-timer phrases count as first-timer intent."""
        assert is_first_timer(categorize_keyword(keyword))

    def test_ticket_singular_is_not_tickets(self):
        """The phrase is "tickets"; a lone "ticket" does not match."""
        assert KeywordCategory.TICKETS not in categorize_keyword("bruins ticket office")


class TestRankAdjustment:
    """Test rank tiers."""

    @pytest.mark.parametrize("rank,expected", [
        (TEAM_RANK_NOT_FOUND, 3),
        (25, 2),
        (11, 2),
        (10, 1),
        (6, 1),
        (5, 0),
        (4, 0),
        (3, -1),
        (1, -1),
    ])
    def test_rank_adjustment(self, rank, expected):
        """Each position bucket gets its adjustment."""
        assert get_rank_adjustment(rank) == expected

    def test_not_found_tier(self):
        """The -1 sentinel is the not-found tier, not a top-three rank."""
        assert get_rank_tier(TEAM_RANK_NOT_FOUND) == "not_found"


class TestOpportunityScore:
    """Test Opportunity Score calculation."""

    def test_first_timer_not_ranking_is_clamped(self):
        """5 + 3 (first time) + 3 (not found) = 11, clamped to 10."""
        score = calculate_opportunity_score(
            "first time at td garden",
            TEAM_RANK_NOT_FOUND,
            ["reddit.com", "tripadvisor.com", "hockeyforum.com"],
        )
        assert score == 10

    def test_tickets_with_resellers_ranking_well(self):
        """5 + 2 (tickets) - 1 (top three) + 1 (reseller) = 7."""
        score = calculate_opportunity_score(
            "bruins tickets",
            2,
            ["stubhub.com", "ticketmaster.com", "seatgeek.com"],
        )
        assert score == 7

    def test_generic_keyword_top_rank(self):
        """5 - 1 = 4 for a generic keyword where the team ranks first."""
        assert calculate_opportunity_score("bruins schedule", 1, ["nhl.com"]) == 4

    def test_cheap_and_tickets_share_one_bonus(self):
        """"cheap" and "tickets" together still add +2 only."""
        score = calculate_opportunity_score("cheap bruins tickets", 4, [])
        assert score == 7

    def test_first_timer_phrases_share_one_bonus(self):
        """Both first-timer phrases together add +3 only."""
        score = calculate_opportunity_score("first time - what to expect", 4, [])
        assert score == 8

    def test_seating_bonus(self):
        """5 + 1 (seating) + 1 (rank 6-10) = 7."""
        assert calculate_opportunity_score("td garden seating", 8, []) == 7

    def test_reseller_substring_match(self):
        """Reseller bonus matches domains containing a reseller."""
        with_reseller = calculate_opportunity_score("bruins schedule", 4, ["www.vividseats.com"])
        without = calculate_opportunity_score("bruins schedule", 4, ["www.nhl.com"])

        assert with_reseller == without + 1

    def test_bonuses_are_additive(self):
        """Parking + tickets + seating + page two + reseller all add up."""
        breakdown = calculate_opportunity_breakdown(
            "parking tickets seating", 15, ["stubhub.com"]
        )

        assert breakdown.keyword_bonus == 5
        assert breakdown.rank_adjustment == 2
        assert breakdown.reseller_bonus == 1
        assert breakdown.raw_score == 13
        assert breakdown.score == MAX_SCORE

    @pytest.mark.parametrize("keyword", [
        "bruins schedule",
        "cheap bruins tickets",
        "first time at td garden",
        "td garden parking",
        "seating chart",
    ])
    @pytest.mark.parametrize("rank", [TEAM_RANK_NOT_FOUND, 1, 3, 5, 7, 10, 12, 50])
    def test_score_always_in_bounds(self, keyword, rank):
        """Score stays within [3, 10] for every combination."""
        score = calculate_opportunity_score(keyword, rank, ["stubhub.com"])
        assert MIN_SCORE <= score <= MAX_SCORE

    def test_deterministic(self):
        """Repeated calls with identical inputs return identical scores."""
        args = ("bruins parking", 7, ["spothero.com", "parkwhiz.com"])
        scores = {calculate_opportunity_score(*args) for _ in range(20)}
        assert len(scores) == 1


class TestClamp:
    """Test score clamping."""

    def test_clamp_low(self):
        assert clamp_score(1) == 3

    def test_clamp_high(self):
        assert clamp_score(14) == 10

    def test_clamp_passthrough(self):
        assert clamp_score(6) == 6
