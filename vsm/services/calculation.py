import math
import logging

from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence, Union
from nltk.tokenize import RegexpTokenizer

logger = logging.getLogger(__name__)

PRECISION = 4

# Split on runs of anything that is not an ASCII letter, digit or underscore.
word_splitter = RegexpTokenizer(r"[^A-Za-z0-9_]+", gaps=True)

Text = Union[str, Sequence[str]]

def tokenize(text: str) -> List[str]:
    return word_splitter.tokenize(text.lower())

def as_terms(text: Text) -> Sequence[str]:
    # Accept either raw text or an already tokenized text
    if isinstance(text, str):
        return tokenize(text)
    return text

def to_fixed(value: Optional[float], digits: int = PRECISION) -> str:
    """Render a number with a fixed number of decimals, rounding half up."""
    if value is None or math.isnan(value):
        return "NaN"
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

def round_fixed(value: float, digits: int = PRECISION) -> float:
    """Round the way the report does: format to a fixed string, then parse it back."""
    return float(to_fixed(value, digits))

def term_frequency(term: str, text: Text) -> int:
    return Counter(as_terms(text))[term]

def document_frequency(term: str, documents: Sequence[Text]) -> int:
    return sum(1 for doc in documents if term in as_terms(doc))

def compute_idf(term: str, documents: Sequence[Text]) -> float:
    """
    Inverse document frequency, log10(N / DF).

    A term that appears in no document gets 0 instead of a division error.
    """
    df = document_frequency(term, documents)
    if df == 0:
        return 0
    return math.log10(len(documents) / df)

def compute_tfidf(term: str, text: Text, documents: Sequence[Text]) -> float:
    idf = round_fixed(compute_idf(term, documents))
    return round_fixed(term_frequency(term, text) * idf)

def vector_magnitude(vector: Sequence[float]) -> float:
    return round_fixed(math.sqrt(sum(value * value for value in vector)))

def dot_product(vector1: Sequence[float], vector2: Sequence[float]) -> float:
    if len(vector1) != len(vector2):
        raise ValueError(f"Vector length mismatch: {len(vector1)} != {len(vector2)}")
    return round_fixed(sum(a * b for a, b in zip(vector1, vector2)))

def cosine_similarity(query_vector: Sequence[float], document_vector: Sequence[float]) -> Optional[float]:
    """
    Cosine similarity between the query vector and a document vector.

    Returns None when either vector has zero magnitude, since 0 / 0 has no
    meaningful score. Callers render that as "NaN".
    """
    dot = dot_product(query_vector, document_vector)
    denominator = vector_magnitude(query_vector) * vector_magnitude(document_vector)
    if denominator == 0:
        logger.debug("Zero magnitude vector, similarity is undefined")
        return None
    return round_fixed(dot / denominator)
