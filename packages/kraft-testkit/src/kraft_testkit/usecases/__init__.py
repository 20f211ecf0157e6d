"""Use cases: Catalog, activity gate and seed parsing."""

from kraft_testkit.usecases.activity_gate import ActivityGate
from kraft_testkit.usecases.seed_parser import SeedParser
from kraft_testkit.usecases.topic_catalog import TopicCatalog

__all__ = [
    "ActivityGate",
    "SeedParser",
    "TopicCatalog",
]
