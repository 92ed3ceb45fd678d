"""
Tokenizer for sentiment scoring and intent classification.

Tokenization pipeline:
1. Lowercase conversion
2. Split on whitespace
3. Strip every non-word character from each piece ("wifi?" → "wifi", "don't" → "dont")
4. Drop pieces that end up empty
5. Run each token through the spelling corrector (when one is given)

Stopwords are kept on purpose: interrogatives such as "how" and "why" carry
intent, and negations flip lexicon polarity.
"""

import re
from typing import Callable, List, Optional

_NON_WORD = re.compile(r"[^\w]")


def tokenize(text: str, correct: Optional[Callable[[str], str]] = None) -> List[str]:
    """
    Split text into cleaned, optionally spell-corrected tokens.

    Args:
        text: Raw text (query, post title/content)
        correct: Per-token correction function, usually SpellingCorrector.correct

    Returns:
        List of lowercase tokens in input order; empty list for empty or non-string input

    Examples:
        >>> tokenize("How do I fix the WiFi?")
        ['how', 'do', 'i', 'fix', 'the', 'wifi']

        >>> tokenize("  ...  ")
        []
    """
    if not text or not isinstance(text, str):
        return []

    tokens = []
    for piece in text.lower().split():
        token = _NON_WORD.sub("", piece)
        if not token:
            continue
        if correct is not None:
            token = correct(token)
        tokens.append(token)

    return tokens
