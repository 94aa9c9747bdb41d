# services/search_service.py
import logging

from config import settings
from core.domain import SearchOutcome
from core.interfaces import IHotelRepository, IRoomRepository, ISearchService
from services.corpus_builder import build_corpus
from services.lexical_ranker import LexicalRanker, tokenize

logger = logging.getLogger(settings.LOGGER_NAME)

class SearchService(ISearchService):
    def __init__(
        self,
        hotel_repo: IHotelRepository,
        room_repo: IRoomRepository,
        ranker: LexicalRanker
    ):
        self.hotel_repo = hotel_repo
        self.room_repo = room_repo
        self.ranker = ranker

    async def search(self, query: str) -> SearchOutcome:
        # Reject bad queries before touching the store
        tokenize(query)

        hotels = await self.hotel_repo.list_hotels()
        rooms = await self.room_repo.list_rooms()
        corpus = build_corpus(hotels, rooms)

        outcome = self.ranker.search(query, corpus)
        logger.info(
            f"Search '{query}' over {len(hotels)} hotels and {len(rooms)} rooms "
            f"returned {len(outcome.results)} results"
        )
        return outcome
