from typing import List, Sequence

from vsm.schemas.vsm import TermRow, RankedResult, VSMResult
from vsm.services.calculation import to_fixed
from vsm.services.search_engine import document_label

def sort_term_rows(rows: Sequence[TermRow]) -> List[TermRow]:
    """Order term rows alphabetically for display"""
    return sorted(rows, key=lambda row: row.term)

def format_magnitude(name: str, weights: Sequence[float], magnitude: float) -> str:
    squares = " + ".join(f"({to_fixed(w)})^2" for w in weights) or "0"
    return f"|{name}| = sqrt({squares}) = {to_fixed(magnitude)}"

def format_dot_product(result: RankedResult) -> str:
    products = " + ".join(
        f"{to_fixed(weight)} x {to_fixed(query_weight)}"
        for weight, query_weight in result.dot_product_terms
    ) or "0"
    return f"Q*d{result.doc_index} = {products} = {to_fixed(result.dot_product)}"

def format_similarity(rank: int, result: RankedResult) -> str:
    return (
        f"Rank {rank}: Sim(q,d{result.doc_index}) = "
        f"{to_fixed(result.dot_product)} / "
        f"({to_fixed(result.query_magnitude)} x {to_fixed(result.magnitude)}) = "
        f"{to_fixed(result.similarity)}"
    )

def generate_term_table(rows: Sequence[TermRow], document_count: int) -> List[str]:
    labels = [document_label(i) for i in range(1, document_count + 1)]
    header = (
        ["Term", "Q"]
        + [f"TF {label}" for label in labels]
        + ["DF", "IDF", "W Q"]
        + [f"W {label}" for label in labels]
        + ["Docs"]
    )
    lines = ["\t".join(header)]
    for row in rows:
        cells = (
            [row.term, str(row.tf_query)]
            + [str(row.tf_documents[i]) for i in range(1, document_count + 1)]
            + [str(row.df), row.idf, row.tf_idf_query]
            + [row.tf_idf_documents[i] for i in range(1, document_count + 1)]
            + [row.containing_docs]
        )
        lines.append("\t".join(cells))
    return lines

def generate_formatted_output(result: VSMResult) -> str:
    """Step by step plain text report of one vector space model calculation"""
    output_lines = []

    output_lines.append(f"Query: {result.query}")
    for index, document in enumerate(result.documents, start=1):
        output_lines.append(f"Document {document_label(index)}: {document}")
    output_lines.append("")

    output_lines.append(f"Unique terms ({len(result.vocabulary)}): {', '.join(sorted(result.vocabulary))}")
    output_lines.append(f"N = {len(result.documents)}, IDF(t) = log10(N / DF(t))")
    output_lines.append("")

    output_lines.append("TF-IDF (W = TF * IDF):")
    output_lines.extend(generate_term_table(sort_term_rows(result.term_rows), len(result.documents)))
    output_lines.append("")

    output_lines.append("Vector magnitudes:")
    output_lines.append(format_magnitude(
        "q",
        [w for w in result.query_vector if w > 0],
        result.query_magnitude,
    ))
    for ranked in result.ranked_results:
        output_lines.append(format_magnitude(f"d{ranked.doc_index}", ranked.nonzero_vector, ranked.magnitude))
    output_lines.append("")

    output_lines.append("Dot products:")
    for ranked in result.ranked_results:
        output_lines.append(format_dot_product(ranked))
    output_lines.append("")

    output_lines.append("Cosine similarity:")
    for rank, ranked in enumerate(result.ranked_results, start=1):
        output_lines.append(format_similarity(rank, ranked))

    return "\n".join(output_lines)
