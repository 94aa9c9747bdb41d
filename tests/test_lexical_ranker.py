"""Tests for lexical_ranker.py: tokenization, scoring, ordering and context."""
from __future__ import annotations

import pytest

from core.domain import Document, DocumentKind, Hotel, Room
from core.errors import InvalidArgumentError
from services.corpus_builder import build_corpus
from services.lexical_ranker import LexicalRanker, build_context, tokenize


def _doc(doc_id: str, title: str, text: str, kind: DocumentKind = DocumentKind.ROOM) -> Document:
    payload = {"roomType": title, "pricePerNight": 10, "amenities": []}
    return Document(id=doc_id, kind=kind, title=title, text=text, payload=payload)


# ---------------------------------------------------------------------------
# tokenize
# ---------------------------------------------------------------------------

class TestTokenize:
    def test_lowercases_and_splits_on_whitespace_runs(self):
        assert tokenize("  Suite\t GOA \n pool ") == ["suite", "goa", "pool"]

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query_rejected(self, query):
        with pytest.raises(InvalidArgumentError):
            tokenize(query)

    @pytest.mark.parametrize("query", [None, 42, ["suite"]])
    def test_non_string_rejected(self, query):
        with pytest.raises(InvalidArgumentError):
            tokenize(query)


# ---------------------------------------------------------------------------
# LexicalRanker
# ---------------------------------------------------------------------------

class TestScoring:
    def test_text_only_match_scores_one(self):
        ranker = LexicalRanker()
        assert ranker.score(["goa"], _doc("1", "Sea View", "sea view goa")) == 1.0

    def test_title_match_adds_bonus(self):
        ranker = LexicalRanker()
        assert ranker.score(["suite"], _doc("1", "Suite", "Suite wifi 100")) == 2.5

    def test_repeated_occurrences_count_once(self):
        ranker = LexicalRanker()
        doc = _doc("1", "Pool", "pool pool pool pool")
        assert ranker.score(["pool"], doc) == 2.5

    def test_substring_match(self):
        ranker = LexicalRanker()
        assert ranker.score(["wifi"], _doc("1", "Suite", "Suite Free WiFi 300")) == 1.0

    def test_no_match_scores_zero(self):
        ranker = LexicalRanker()
        assert ranker.score(["castle"], _doc("1", "Suite", "Suite")) == 0.0


class TestSearch:
    def test_scenario_room_outranks_hotel(self):
        hotel = Hotel(id="H-1", name="Sea View", city="Goa")
        room = Room(id="R-1", hotel_id="H-1", room_type="Suite", price_per_night=100,
                    amenities=["wifi"])
        outcome = LexicalRanker().search("suite goa", build_corpus([hotel], [room]))

        assert [r.document.id for r in outcome.results] == ["R-1", "H-1"]
        assert [r.score for r in outcome.results] == [2.5, 1.0]

    def test_non_matching_documents_dropped(self, sample_hotels, sample_rooms):
        outcome = LexicalRanker().search("manali", build_corpus(sample_hotels, sample_rooms))
        assert [r.document.id for r in outcome.results] == ["H-2"]
        assert all(r.score > 0 for r in outcome.results)

    def test_results_sorted_non_increasing(self, sample_hotels, sample_rooms):
        outcome = LexicalRanker().search(
            "sea view suite wifi", build_corpus(sample_hotels, sample_rooms)
        )
        scores = [r.score for r in outcome.results]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_enumeration_order(self):
        docs = [_doc(str(i), "Room", "deluxe room") for i in range(5)]
        outcome = LexicalRanker().search("deluxe", docs)
        assert [r.document.id for r in outcome.results] == ["0", "1", "2", "3", "4"]

    def test_at_most_ten_results(self):
        docs = [_doc(str(i), "Suite", "suite") for i in range(25)]
        outcome = LexicalRanker().search("suite", docs)
        assert len(outcome.results) == 10
        assert [r.document.id for r in outcome.results] == [str(i) for i in range(10)]

    def test_top_k_configurable(self):
        docs = [_doc(str(i), "Suite", "suite") for i in range(5)]
        assert len(LexicalRanker(top_k=2).search("suite", docs).results) == 2

    def test_no_matches_gives_empty_outcome(self, sample_hotels, sample_rooms):
        outcome = LexicalRanker().search("castle", build_corpus(sample_hotels, sample_rooms))
        assert outcome.results == []
        assert outcome.context == ""

    def test_empty_corpus(self):
        outcome = LexicalRanker().search("suite", [])
        assert outcome.results == []
        assert outcome.context == ""

    def test_blank_query_rejected(self, sample_hotels):
        with pytest.raises(InvalidArgumentError):
            LexicalRanker().search("   ", build_corpus(sample_hotels, []))


class TestContext:
    def test_lines_follow_rank_order(self, sample_hotels, sample_rooms):
        outcome = LexicalRanker().search("suite goa", build_corpus(sample_hotels, sample_rooms))
        assert outcome.context.split("\n") == [
            "Room 1: Suite | PricePerNight: 300 | Amenities: Free WiFi, Sea View",
            "Hotel 2: Sea View | Address: 12 Beach Road, Goa. Contact: +91 555 0100.",
        ]

    def test_empty_results(self):
        assert build_context([]) == ""

    def test_to_source_shape(self, sea_view):
        outcome = LexicalRanker().search("goa", build_corpus([sea_view], []))
        source = outcome.results[0].to_source()
        assert source["id"] == "H-1"
        assert source["type"] == "hotel"
        assert source["title"] == "Sea View"
        assert source["score"] == 1.0
        assert source["payload"]["city"] == "Goa"
