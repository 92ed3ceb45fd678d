"""
Porter stemmer for English (via NLTK).

Used for synonym stems during query expansion and for the stemmed forum
keyword table in sentiment scoring, so both sides must agree on the same
algorithm. NLTK's default mode leaves words of two characters or fewer
untouched, which keeps stem(stem(w)) == stem(w) for short tokens like "us".

Examples:
- "solved" → "solv"
- "issues" → "issu"
- "thanks" → "thank"
- "connection" → "connect"
"""

from nltk.stem.porter import PorterStemmer

# Initialize stemmer once (stateless after construction, reusable)
_stemmer = PorterStemmer()


def stem(word: str) -> str:
    """
    Stem a single word using the Porter algorithm.

    Args:
        word: Word to stem (lower-cased by the stemmer)

    Returns:
        Stemmed word

    Examples:
        >>> stem("solved")
        'solv'
        >>> stem("appreciate")
        'appreci'
    """
    return _stemmer.stem(word)
