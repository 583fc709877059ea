"""Static vocabulary for sport classification and keyword relevance.

Every table here is read-only and shared across requests:
- SPORT_KEYWORDS: sport label -> trigger terms, in classification order
- STOP_WORDS: words ignored when tokenizing a question
- TERM_MAPPINGS: question token -> domain phrases counted as a synonym match
- CONTEXT_SCENARIOS: question-phrase / sport / content-phrase patterns that
  earn a scenario bonus during ranking
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

# ============================================================================
# Sport classification
# ============================================================================

SPORT_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "golf": (
        "water hazard", "green", "tee", "fairway", "putt", "golf ball",
        "stroke", "par", "birdie", "eagle", "bunker", "rough", "club",
    ),
    "baseball": (
        "pitcher", "batter", "home plate", "base", "inning", "strike",
        "ball count", "foul ball", "home run", "diamond",
    ),
    "football": (
        "touchdown", "field goal", "down", "yard", "quarterback", "snap",
        "penalty", "endzone",
    ),
    "basketball": (
        "basket", "hoop", "court", "dribble", "foul", "free throw",
        "rebound", "three-pointer",
    ),
    "tennis": (
        "serve", "court", "net", "set", "match", "deuce", "advantage", "ace",
    ),
    "soccer": (
        "goal", "offside", "penalty kick", "yellow card", "red card",
        "corner kick", "free kick",
    ),
    "hockey": (
        "puck", "icing", "power play", "face-off", "faceoff", "goaltender",
        "blue line", "slapshot", "penalty box",
    ),
})

KNOWN_SPORTS: Tuple[str, ...] = tuple(SPORT_KEYWORDS)

# ============================================================================
# Question tokenization
# ============================================================================

STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might", "must",
    "can", "and", "or", "but", "if", "then", "else", "when", "where", "why", "how",
    "what", "which", "who", "whom", "whose", "this", "that", "these", "those",
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "my", "your", "his", "its", "our", "their", "a", "an", "as", "at", "by",
    "for", "from", "in", "into", "of", "on", "to", "with", "about",
})

MIN_TOKEN_LENGTH = 3

# Substring matching only considers words at least this long
MIN_PARTIAL_MATCH_LENGTH = 4

# ============================================================================
# Synonym table
# ============================================================================

TERM_MAPPINGS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "water": ("water hazard", "pond", "lake", "stream", "river", "lateral water hazard", "penalty area"),
    "ball": ("golf ball", "ball in water", "lost ball"),
    "hit": ("stroke", "shot", "play"),
    "penalty": ("penalty stroke", "drop", "relief"),
    "goal": ("field goal", "touchdown", "scoring", "endzone", "goalpost"),
    "field": ("field goal", "playing field", "football field", "gridiron"),
    "down": ("first down", "second down", "third down", "fourth down", "downs"),
    "player": ("players", "team member", "athlete"),
    "score": ("scoring", "points", "touchdown", "field goal"),
    "time": ("clock", "timer", "timeout", "quarter", "period"),
    "pass": ("passing", "throw", "forward pass", "incomplete"),
    "run": ("running", "rush", "carry", "ground game"),
    "fence": ("home run", "out of the park", "boundary"),
})


# ============================================================================
# Contextual scenarios
# ============================================================================

@dataclass(frozen=True)
class ContextScenario:
    """A known disambiguation pattern between question phrasing and a sport."""
    name: str
    question_triggers: Tuple[str, ...]
    sport: str
    content_phrases: Tuple[str, ...]
    bonus: float = 0.5


CONTEXT_SCENARIOS: Tuple[ContextScenario, ...] = (
    ContextScenario(
        name="ball_in_water",
        question_triggers=("water", "pond", "lake", "ball into the water"),
        sport="golf",
        content_phrases=("water hazard", "penalty area"),
    ),
    ContextScenario(
        name="ball_over_fence",
        question_triggers=("fence", "over the fence", "home run"),
        sport="baseball",
        content_phrases=("home run", "fence"),
    ),
)
