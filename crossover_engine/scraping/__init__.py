from .cap_parser import parse_cap
from .fetchers import BrowserFetcher, DirectFetcher, ProxyFetcher, build_fetcher
from .table_extractor import extract_cap_texts, parse_document

__all__ = [
    "parse_cap", "extract_cap_texts", "parse_document",
    "DirectFetcher", "ProxyFetcher", "BrowserFetcher", "build_fetcher",
]
