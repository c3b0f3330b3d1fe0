import re
from typing import List, Mapping, Optional, Sequence

# No leading zeros, so document_01 cannot shadow document_1
DOCUMENT_FIELD = re.compile(r"^document_([1-9]\d*)$")

def collect_form_documents(form: Mapping[str, str], max_documents: int) -> List[str]:
    """
    Gather document_1 .. document_N form fields into an ordered collection.

    Fields are ordered by their numeric suffix. A gap in the numbering
    (document_1, document_3) is kept as an empty document so validation
    can report it. Raises ValueError when the highest suffix is above
    max_documents, before any list is built.
    """
    slots = {}
    for key, value in form.items():
        match = DOCUMENT_FIELD.match(key)
        if match:
            slots[int(match.group(1))] = value

    if not slots:
        return []

    highest = max(slots)
    if highest > max_documents:
        raise ValueError(f"Too many documents: {highest} (maximum {max_documents})")

    return [slots.get(i, "") for i in range(1, highest + 1)]

def validate_input(query, documents: Sequence, max_documents: int) -> Optional[str]:
    if not query or not isinstance(query, str):
        return "Query cannot be empty"
    if not documents:
        return "At least one document is required"
    if len(documents) > max_documents:
        return f"Too many documents: {len(documents)} (maximum {max_documents})"
    for index, document in enumerate(documents, start=1):
        if not document or not isinstance(document, str):
            return f"Document {index} cannot be empty"
    return None
