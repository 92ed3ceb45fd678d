"""
Query expansion: spelling correction + synonyms + stems.

Turns exact-keyword search into a fuzzy/semantic one by widening every query
word into corrections, manual-table synonyms, lexical-database synonyms and
their Porter stems.

Expansion pipeline (per query):
1. Lower-case, whitespace-split, drop words of 2 characters or fewer
2. Seed the term set with the lower-cased full query
3. Per word, in query order: the word, its correction, manual synonyms and
   their stems, external synonyms and their stems, the stem of the correction
4. Deduplicate, drop terms of 1 character or fewer, keep the first 100

External lookups for all words are issued concurrently, each with its own
deadline; results are assembled in query order afterwards, so the output is
the same as looking words up one after another. A deadline abandons the
wait, not the work: a blocking database keeps running an expired lookup on
its own worker (see lexical_db.wordnet).
"""

import asyncio
import logging
import re
from typing import Dict, List, Mapping, Optional, Set, Tuple

from ..lexical_db import BaseLexicalDatabase, LexicalDatabaseError, NullLexicalDatabase
from ..text import stem
from .spelling import SpellingCorrector
from .synonyms import MANUAL_SYNONYMS

logger = logging.getLogger(__name__)

_QUOTED = re.compile(r'"([^"]+)"')


def _clean_phrase(value: str) -> str:
    return value.lower().replace("_", " ").strip()


def _accept_phrase(phrase: str) -> bool:
    """Keep single words and two-word phrases of at least 3 characters"""
    return len(phrase) >= 3 and len(phrase.split(" ")) <= 2


class SynonymExpander:
    """
    Expands words and queries into related search terms.

    Holds only read-only tables and settings; safe to share across requests.
    """

    def __init__(
        self,
        corrector: SpellingCorrector,
        lexical_db: Optional[BaseLexicalDatabase] = None,
        manual_synonyms: Mapping[str, Tuple[str, ...]] = MANUAL_SYNONYMS,
        lookup_timeout: float = 3.0,
        max_external_synonyms: int = 15,
        max_terms: int = 100,
    ):
        """
        Args:
            corrector: Spelling corrector applied to every query word
            lexical_db: External synonym source (no external synonyms when omitted)
            manual_synonyms: Static synonym table keyed by corrected word
            lookup_timeout: Deadline in seconds for each external lookup
            max_external_synonyms: Cap on the synonyms kept from one external lookup
            max_terms: Cap on the terms returned for a whole query
        """
        self.corrector = corrector
        self.lexical_db = lexical_db if lexical_db is not None else NullLexicalDatabase()
        self.manual_synonyms = manual_synonyms
        self.lookup_timeout = lookup_timeout
        self.max_external_synonyms = max_external_synonyms
        self.max_terms = max_terms
        logger.info(
            f"Synonym expander ready: {len(self.manual_synonyms)} manual entries, "
            f"lexical db={self.lexical_db.get_info().get('name')}, timeout={lookup_timeout}s"
        )

    def manual_synonyms_for(self, word: str) -> Tuple[str, ...]:
        return tuple(self.manual_synonyms.get(word, ()))

    async def lookup_external(self, word: str) -> List[str]:
        """
        Fetch synonyms for a word from the lexical database.

        The lookup is abandoned (not retried) once the deadline passes; failures
        and timeouts both fall back to the seed, so this never raises.

        Returns:
            Up to max_external_synonyms phrases, the lower-cased word first
        """
        seed = word.lower()
        synonyms: Dict[str, None] = {seed: None}

        try:
            entries = await asyncio.wait_for(self.lexical_db.lookup(seed), timeout=self.lookup_timeout)
        except asyncio.TimeoutError:
            logger.debug(f"Lexical lookup timed out for '{seed}' after {self.lookup_timeout}s")
            return [seed]
        except LexicalDatabaseError as e:
            logger.warning(f"Lexical database unavailable for '{seed}': {e}")
            return [seed]
        except Exception as e:
            logger.warning(f"Lexical lookup failed for '{seed}': {e}")
            return [seed]

        for entry in entries or ():
            for synonym in entry.synonyms or ():
                clean = _clean_phrase(synonym)
                if _accept_phrase(clean):
                    synonyms[clean] = None

            if entry.lemma:
                lemma = _clean_phrase(entry.lemma)
                if _accept_phrase(lemma):
                    synonyms[lemma] = None

            # Usage examples and alternative names are quoted inside the gloss
            if entry.gloss:
                for quoted in _QUOTED.findall(entry.gloss.lower()):
                    phrase = quoted.strip()
                    if _accept_phrase(phrase):
                        synonyms[phrase] = None

        return list(synonyms)[:self.max_external_synonyms]

    async def expand_synonyms(self, word: str) -> Set[str]:
        """
        All synonyms of a single (already corrected) word.

        Returns:
            Set containing the word, its manual synonyms and their stems,
            and its external synonyms
        """
        expanded = {word}
        for synonym in self.manual_synonyms_for(word):
            expanded.add(synonym)
            expanded.add(stem(synonym))
        expanded.update(await self.lookup_external(word))
        return expanded

    async def expand_query(self, query: str) -> List[str]:
        """
        Expand a raw query into a capped list of search terms.

        Args:
            query: Raw user query

        Returns:
            Unique terms in insertion order, the lower-cased query first,
            at most max_terms entries

        Example:
            >>> await expander.expand_query("hostle rules")
            ['hostle rules', 'hostle', 'hostel', 'dormitory', 'dormitori', ...]
        """
        lowered = query.lower()
        words = [w for w in lowered.split() if len(w) > 2]
        corrections = [self.corrector.correct(w) for w in words]

        external = await asyncio.gather(*(self.lookup_external(c) for c in corrections))

        terms: Dict[str, None] = {lowered: None}
        for word, corrected, external_synonyms in zip(words, corrections, external):
            terms[word] = None
            terms[corrected] = None

            for synonym in self.manual_synonyms_for(corrected):
                terms[synonym] = None
                terms[stem(synonym)] = None

            for synonym in external_synonyms:
                terms[synonym] = None
                terms[stem(synonym)] = None

            terms[stem(corrected)] = None

        final_terms = [t for t in terms if t and len(t) > 1][:self.max_terms]

        logger.debug(f"Expanded '{query}' ({len(words)} words) → {len(final_terms)} terms: {final_terms[:20]}")

        return final_terms
