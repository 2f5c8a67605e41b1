from enum import Enum


class Freshness(str, Enum):
    FRESH = "fresh"
    STALE = "stale"
    NEVER_SCRAPED = "never-scraped"
