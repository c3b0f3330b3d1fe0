import pytest

from vsm.services.search_engine import (
    build_vocabulary,
    calculate_tfidf,
    assemble_vector,
    rank_documents,
    search,
)

def test_build_vocabulary_first_appearance_order(query, documents):
    vocabulary = build_vocabulary(query, documents)
    assert vocabulary == ["the", "cat", "sat", "on", "mat", "a", "dog", "there", "cats", "and", "dogs"]

def test_build_vocabulary_includes_query_only_terms():
    assert build_vocabulary("zebra", ["a b"]) == ["zebra", "a", "b"]

def test_term_rows(query, documents):
    rows = {row.term: row for row in calculate_tfidf(query, documents)}

    sat = rows["sat"]
    assert sat.tf_query == 1
    assert sat.tf_documents == {1: 1, 2: 1, 3: 0, 4: 0}
    assert sat.df == 2
    assert sat.idf == "0.3010"
    assert sat.tf_idf_query == "0.3010"
    assert sat.tf_idf_documents == {1: "0.3010", 2: "0.3010", 3: "0.0000", 4: "0.0000"}
    assert sat.containing_docs == "D1, D2"

    the = rows["the"]
    assert the.tf_documents[1] == 2
    assert the.tf_idf_documents[1] == "0.6020"
    assert the.containing_docs == "D1, D4"

def test_query_only_term_has_zero_idf():
    rows = calculate_tfidf("zebra cat", ["cat dog", "dog"])
    zebra = rows[0]
    assert zebra.term == "zebra"
    assert zebra.df == 0
    assert zebra.idf == "0.0000"
    assert zebra.tf_idf_query == "0.0000"
    assert zebra.containing_docs == ""

def test_assemble_vector_follows_vocabulary_order():
    vocabulary = ["b", "a", "c"]
    assert assemble_vector({"a": "0.5000", "b": 1.25}, vocabulary) == [1.25, 0.5, 0.0]

def test_vectors_align_with_vocabulary(query, documents):
    result = search(query, documents)
    size = len(result.vocabulary)
    assert len(result.query_vector) == size
    for ranked in result.ranked_results:
        assert len(ranked.vector) == size

    index = result.vocabulary.index("cat")
    by_doc = {ranked.doc_index: ranked for ranked in result.ranked_results}
    assert result.query_vector[index] == 0.6021
    assert by_doc[1].vector[index] == 0.6021
    assert by_doc[2].vector[index] == 0.0

def test_search_example(query, documents):
    result = search(query, documents)
    ranked = result.ranked_results

    assert [r.doc_index for r in ranked] == [1, 4, 2, 3]
    assert result.query_magnitude == 0.7374

    first = ranked[0]
    assert first.label == "D1"
    assert first.dot_product == 0.6343
    assert first.magnitude == 1.1263
    assert first.similarity == 0.7637
    assert first.nonzero_vector == [0.602, 0.6021, 0.301, 0.6021, 0.301]
    assert first.query_nonzero_vector == [0.301, 0.6021, 0.301]
    assert first.dot_product_terms == [(0.602, 0.301), (0.6021, 0.6021), (0.301, 0.301)]

    assert ranked[1].similarity == 0.2886
    assert ranked[2].similarity == 0.1132
    assert ranked[3].similarity == 0.0

def test_ranking_is_sorted_descending(query, documents):
    scores = [r.similarity for r in search(query, documents).ranked_results]
    assert scores == sorted(scores, reverse=True)

def test_ties_keep_document_order():
    result = search("x", ["x y", "x y", "z"])
    assert [r.doc_index for r in result.ranked_results] == [1, 2, 3]

    result = search("x", ["z", "x y", "x y"])
    assert [r.doc_index for r in result.ranked_results] == [2, 3, 1]

def test_zero_query_vector_leaves_similarity_undefined():
    result = search("zzz", ["a b", "c"])
    assert result.query_magnitude == 0.0
    assert [r.doc_index for r in result.ranked_results] == [1, 2]
    assert all(r.similarity is None for r in result.ranked_results)

def test_undefined_similarity_ranks_last():
    result = search("b", ["a", "a b"])
    ranked = result.ranked_results
    assert [r.doc_index for r in ranked] == [2, 1]
    assert ranked[0].similarity == 1.0
    assert ranked[1].similarity is None

def test_rank_documents_requires_one_vector_per_document():
    with pytest.raises(ValueError):
        rank_documents(["a", "b"], [[1.0]], [1.0])

def test_search_is_deterministic(query, documents):
    assert search(query, documents) == search(query, documents)

def test_result_is_immutable(query, documents):
    result = search(query, documents)
    with pytest.raises(Exception):
        result.query = "other"
