"""
Forum keyword weights and negation words for sentiment scoring.

Keys are Porter stems (see text.stemmer), so "solved", "solves" and
"solving" all hit "solv". Positive weights mark solutions, gratitude and
good outcomes; negative weights mark problems and failures; interrogatives
sit near zero so questions count as keyword matches without pushing polarity.
"""

from types import MappingProxyType
from typing import Mapping

FORUM_KEYWORDS: Mapping[str, float] = MappingProxyType({
    # Solutions, gratitude, positive outcomes
    "solv": 2.5, "fix": 2.0, "work": 1.5, "help": 1.5,
    "thank": 2.0, "great": 2.0, "excel": 2.0, "awesom": 2.0,
    "perfect": 2.0, "appreci": 1.5, "us": 1.5, "brilliant": 2.0,
    "recommend": 1.5, "answer": 1.5, "resolv": 2.0,
    # Problems and failures
    "problem": -1.5, "issu": -1.5, "bug": -2.0, "error": -2.0,
    "fail": -2.5, "broken": -2.0, "stuck": -2.0, "confus": -1.5,
    "unclear": -1.5, "difficult": -1.5, "troubl": -1.5,
    "crash": -2.0, "wrong": -1.5, "bad": -1.5, "poor": -1.5,
    # Interrogatives ("why" stems to "whi")
    "how": -0.3, "what": 0.0, "when": 0.0, "where": 0.0, "whi": -0.2, "question": 0.0,
})

# A negation inverts lexicon polarity for every token after it
NEGATIONS = frozenset([
    "not", "no", "never", "neither", "nobody", "none", "nor", "nothing", "nowhere",
    "cannot", "cant", "dont", "doesnt", "didnt", "isnt", "wasnt", "arent",
    "wont", "wouldnt", "couldnt", "shouldnt",
])
