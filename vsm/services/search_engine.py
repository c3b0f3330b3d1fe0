import logging

from typing import Dict, List, Mapping, Optional, Sequence, Union

from vsm.services.calculation import (
    Text,
    as_terms,
    tokenize,
    term_frequency,
    document_frequency,
    compute_idf,
    to_fixed,
    vector_magnitude,
    dot_product,
    cosine_similarity,
)
from vsm.schemas.vsm import TermRow, RankedResult, VSMResult

logger = logging.getLogger(__name__)

def document_label(index: int) -> str:
    return f"D{index}"

def build_vocabulary(query: Text, documents: Sequence[Text]) -> List[str]:
    """Unique terms of the query and every document, in order of first appearance"""
    return list(dict.fromkeys(
        term
        for text in [query, *documents]
        for term in as_terms(text)
    ))

def calculate_tfidf(
    query: Text,
    documents: Sequence[Text],
    vocabulary: Optional[List[str]] = None
) -> List[TermRow]:
    """
    Build one TermRow per vocabulary term, in vocabulary order.

    IDF is rounded to 4 decimals before it is multiplied by TF, so every
    TF-IDF weight is derived from the rounded IDF shown in the table.
    """
    query_terms = as_terms(query)
    doc_terms = [as_terms(doc) for doc in documents]
    if vocabulary is None:
        vocabulary = build_vocabulary(query_terms, doc_terms)

    rows = []
    for term in vocabulary:
        tf_query = term_frequency(term, query_terms)
        tf_documents = {
            index: term_frequency(term, terms)
            for index, terms in enumerate(doc_terms, start=1)
        }
        df = document_frequency(term, doc_terms)

        idf = to_fixed(compute_idf(term, doc_terms))
        idf_value = float(idf)

        rows.append(TermRow(
            term=term,
            tf_query=tf_query,
            tf_documents=tf_documents,
            df=df,
            idf=idf,
            tf_idf_query=to_fixed(tf_query * idf_value),
            tf_idf_documents={
                index: to_fixed(tf * idf_value) for index, tf in tf_documents.items()
            },
            containing_docs=", ".join(
                document_label(index) for index, tf in tf_documents.items() if tf > 0
            ),
        ))

    return rows

def assemble_vector(weights: Mapping[str, Union[float, str]], vocabulary: Sequence[str]) -> List[float]:
    return [float(weights.get(term, 0)) for term in vocabulary]

def _rank_key(result: RankedResult):
    # Undefined similarities go last; ties keep the original document order
    if result.similarity is None:
        return (1, 0.0, result.doc_index)
    return (0, -result.similarity, result.doc_index)

def rank_documents(
    documents: Sequence[str],
    vectors: Sequence[List[float]],
    query_vector: List[float]
) -> List[RankedResult]:
    if len(documents) != len(vectors):
        raise ValueError(f"Expected {len(documents)} document vectors, got {len(vectors)}")

    query_magnitude = vector_magnitude(query_vector)
    query_nonzero = [weight for weight in query_vector if weight > 0]

    results = []
    for index, vector in enumerate(vectors, start=1):
        results.append(RankedResult(
            doc_index=index,
            label=document_label(index),
            vector=vector,
            nonzero_vector=[weight for weight in vector if weight > 0],
            query_nonzero_vector=query_nonzero,
            dot_product_terms=[
                (weight, query_weight)
                for weight, query_weight in zip(vector, query_vector)
                if weight > 0 and query_weight > 0
            ],
            magnitude=vector_magnitude(vector),
            query_magnitude=query_magnitude,
            dot_product=dot_product(query_vector, vector),
            similarity=cosine_similarity(query_vector, vector),
        ))

    return sorted(results, key=_rank_key)

def search(query: str, documents: Sequence[str]) -> VSMResult:
    # Tokenize every text once and reuse the terms for every statistic
    query_terms = tokenize(query)
    doc_terms = [tokenize(doc) for doc in documents]

    vocabulary = build_vocabulary(query_terms, doc_terms)
    term_rows = calculate_tfidf(query_terms, doc_terms, vocabulary)
    logger.debug("Vocabulary size %d over %d documents", len(vocabulary), len(documents))

    query_vector = assemble_vector({row.term: row.tf_idf_query for row in term_rows}, vocabulary)
    doc_weights: List[Dict[str, str]] = [
        {row.term: row.tf_idf_documents[index] for row in term_rows}
        for index in range(1, len(documents) + 1)
    ]
    vectors = [assemble_vector(weights, vocabulary) for weights in doc_weights]

    ranked = rank_documents(documents, vectors, query_vector)
    undefined = [result.label for result in ranked if result.similarity is None]
    if undefined:
        logger.debug("Undefined similarity for %s", ", ".join(undefined))

    return VSMResult(
        query=query,
        documents=list(documents),
        vocabulary=vocabulary,
        term_rows=term_rows,
        query_vector=query_vector,
        query_magnitude=vector_magnitude(query_vector),
        ranked_results=ranked,
    )
