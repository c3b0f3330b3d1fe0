from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict

class VSMRequest(BaseModel):
    # Missing fields are reported by input validation as a 400
    query: str = ""
    documents: List[str] = []

class TermRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    tf_query: int
    tf_documents: Dict[int, int]
    df: int
    idf: str
    tf_idf_query: str
    tf_idf_documents: Dict[int, str]
    containing_docs: str

class RankedResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_index: int
    label: str
    vector: List[float]
    nonzero_vector: List[float]
    query_nonzero_vector: List[float]
    dot_product_terms: List[Tuple[float, float]]
    magnitude: float
    query_magnitude: float
    dot_product: float
    # None when the similarity is undefined (zero magnitude)
    similarity: Optional[float]

class VSMResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    documents: List[str]
    vocabulary: List[str]
    term_rows: List[TermRow]
    query_vector: List[float]
    query_magnitude: float
    ranked_results: List[RankedResult]
