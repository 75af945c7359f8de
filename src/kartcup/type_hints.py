"""Type hints used in Kart Cup."""

from typing import Dict, List, Tuple

# Unique player identifier
PlayerId = str
# Finish positions keyed by player id
RaceResults = Dict[PlayerId, int]
# Seeded player ids for (Semi-Final A, Semi-Final B)
Seeding = Tuple[List[PlayerId], List[PlayerId]]

#  LocalWords:  PlayerId RaceResults
