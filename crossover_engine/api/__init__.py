from .scrape_endpoint import SCRAPE_ERROR, get_scrape_response, scrape_body

__all__ = ["SCRAPE_ERROR", "get_scrape_response", "scrape_body"]
