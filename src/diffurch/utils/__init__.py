from .stableindexdeque import StableIndexDeque
