import logging
from collections.abc import Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from stepmatch.template import Template

logger = logging.getLogger(__name__)


def literal_text(template: Template) -> str:
    return " ".join(token.value for token in template.tokens if not token.is_identifier)


def similarity(string: str, templates: Sequence[Template]) -> np.ndarray:
    """Cosine similarity of `string` to the literal text of each template."""
    documents = [literal_text(template) for template in templates]
    try:
        vectors = TfidfVectorizer().fit_transform([*documents, string])
    except ValueError as error:
        # nothing but stop words or one letter words
        logger.debug(f"no vocabulary for {string=}: {error=}")
        return np.zeros(len(templates))
    return cosine_similarity(vectors[-1], vectors[:-1])[0]


def nearest(string: str, templates: Sequence[Template], n: int = 3) -> list[int]:
    """Indexes of the `n` most similar templates, best first."""
    if n <= 0 or len(templates) == 0 or not string.strip():
        return []

    scores = similarity(string, templates)
    order = np.argsort(-scores, kind="stable")
    return [int(i) for i in order[:n] if scores[i] > 0]


def suggest(string: str, templates: Sequence[Template], n: int = 3) -> list[Template]:
    return [templates[i] for i in nearest(string, templates, n)]
