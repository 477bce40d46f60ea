# factchecker/sources.py
import logging
from typing import Any, Iterable, List

from .models import Citation, Source

logger = logging.getLogger(__name__)


def citations_from_response(response: Any) -> List[Citation]:
    """Pull the Google Search grounding chunks out of a generate_content response."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    citations = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is None:
            continue
        citations.append(Citation(uri=getattr(web, "uri", None), title=getattr(web, "title", None)))
    return citations


def merge_sources(primary: Iterable[Source], secondary: Iterable[Citation]) -> List[Source]:
    """
    Model-declared sources first, in order, then grounding citations whose URL
    has not been seen yet. URLs compare exactly. Citations without a URL are
    dropped; citations without a title are kept and display as their URL.
    """
    merged: List[Source] = []
    seen = set()

    for s in primary:
        if s.url in seen:
            continue
        seen.add(s.url)
        merged.append(s)

    declared = len(merged)

    for c in secondary:
        url = c.uri
        if not url or not url.strip():
            continue
        if url in seen:
            continue
        seen.add(url)
        merged.append(Source(title=c.title or None, url=url))

    logger.debug("Merged %d sources (%d declared by the model)", len(merged), declared)
    return merged
