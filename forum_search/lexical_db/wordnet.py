"""
WordNet lexical database via NLTK.

The corpus loads lazily on first lookup (avoids startup overhead) and is
downloaded once when missing and auto-download is enabled. NLTK's corpus
reader is blocking and not thread-safe (every synset read seeks a shared
file handle), so lookups run one at a time on a dedicated single-worker
executor, and a lock serializes any direct synchronous use as well. A lookup
abandoned by its caller's deadline keeps that worker until it finishes;
later lookups queue behind it rather than taking threads from the default
executor.

Each synset becomes one LexicalEntry:
- synonyms: the synset's lemma names ("living_quarters", "dorm", ...)
- lemma: the synset's head lemma
- gloss: definition followed by the quoted usage examples, the same layout
  as the raw WordNet data files ('a room ...; "the dorm was noisy"')
"""

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List

import nltk

from .base import BaseLexicalDatabase, LexicalDatabaseError, LexicalEntry

logger = logging.getLogger(__name__)


class WordNetLexicalDatabase(BaseLexicalDatabase):
    """Synonym lookups backed by the Princeton WordNet corpus"""

    CORPUS = "wordnet"

    def __init__(self, auto_download: bool = True):
        """
        Args:
            auto_download: Fetch the corpus with nltk.download() when it is not installed
        """
        self.auto_download = auto_download
        self._wordnet = None  # Lazy loading
        self._lock = threading.Lock()
        self._executor = None  # Created on first lookup
        logger.info(f"WordNetLexicalDatabase initialized (corpus will load on first use, auto_download={auto_download})")

    def _ensure_loaded(self):
        """Load the corpus on first use, downloading it once if allowed"""
        if self._wordnet is not None:
            return

        try:
            nltk.data.find(f"corpora/{self.CORPUS}")
        except LookupError:
            if not self.auto_download:
                raise LexicalDatabaseError(f"NLTK corpus '{self.CORPUS}' is not installed")
            logger.info(f"Downloading NLTK corpus: {self.CORPUS}")
            if not nltk.download(self.CORPUS, quiet=True):
                raise LexicalDatabaseError(f"Failed to download NLTK corpus '{self.CORPUS}'")

        try:
            from nltk.corpus import wordnet
            version = wordnet.get_version()  # Forces the lazy corpus reader to load
        except LookupError as e:
            raise LexicalDatabaseError(f"Failed to load NLTK corpus '{self.CORPUS}': {e}") from e

        self._wordnet = wordnet
        logger.info(f"WordNet corpus loaded (version {version})")

    def _lookup_sync(self, word: str) -> List[LexicalEntry]:
        # Loading and reading share the corpus file handles
        with self._lock:
            self._ensure_loaded()
            return self._read_synsets(word)

    def _read_synsets(self, word: str) -> List[LexicalEntry]:
        entries = []
        for synset in self._wordnet.synsets(word):
            lemma_names = tuple(synset.lemma_names())
            gloss = synset.definition()
            examples = synset.examples()
            if examples:
                gloss = gloss + "; " + "; ".join(f'"{example}"' for example in examples)
            entries.append(LexicalEntry(
                synonyms=lemma_names,
                lemma=lemma_names[0] if lemma_names else None,
                gloss=gloss,
            ))
        return entries

    async def lookup(self, word: str) -> List[LexicalEntry]:
        """Look up all WordNet senses of a word (runs on the corpus worker thread)."""
        if not word:
            return []
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="wordnet")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._lookup_sync, word)

    def get_info(self) -> dict:
        return {
            "name": self.CORPUS,
            "type": "nltk_corpus",
            "loaded": self._wordnet is not None,
        }

    def close(self):
        """Drop the corpus reference and stop the worker thread."""
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None
        if self._wordnet is not None:
            logger.info("Closing WordNet corpus")
            self._wordnet = None
