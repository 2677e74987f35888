from newstracker.search.base import NewsSearcher
from newstracker.search.normalize import fallback_article, normalize_article, normalize_response
from newstracker.search.url import extract_host
from newstracker.search.worldnews import WorldNewsClient

__all__ = [
    "NewsSearcher",
    "WorldNewsClient",
    "extract_host",
    "fallback_article",
    "normalize_article",
    "normalize_response",
]
