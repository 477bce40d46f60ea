# factchecker/prompt.py
from dataclasses import dataclass
from typing import List

from google.genai import types

from .models import VERDICTS

DEFAULT_MODEL = "gemini-3-flash-preview"

SYSTEM_INSTRUCTION = (
    "You are a highly accurate Real-Time Fact Checker. Your goal is to critically evaluate "
    "news headlines, article links, or messages provided by the user. You must use Google "
    "Search to find relevant, up-to-date information from reputable sources."
)

PROMPT_TEMPLATE = """
Based on the following input: "{input}", perform a comprehensive fact check.

1. Determine the credibility and classify it as one of the following:
   - **REAL**: Verified by multiple reputable sources.
   - **FAKE**: Clearly debunked, satirical, or a known hoax/scam.
   - **UNVERIFIED**: Insufficient evidence from reputable sources to confirm or deny.

2. Provide a concise, clear explanation for your determination. If it's fake or a scam, explain precisely why (e.g., clickbait, satirical site, debunked by fact-checkers, misleading information).

3. Identify and list at least 2 reputable news sources (e.g., Reuters, BBC, AP, official government sites, well-established academic institutions). For each source, provide its title and the direct URL. Prioritize sources that directly address the veracity of the input.

4. Return the response strictly as a JSON object conforming to the provided schema. Do not include any additional text or formatting outside the JSON object.
"""

MIN_SOURCES = 2


@dataclass(frozen=True)
class RemoteRequest:
    model: str
    contents: List[types.Content]
    config: types.GenerateContentConfig


def response_schema() -> types.Schema:
    """Output contract: status enum, explanation, and a list of {title, url} sources."""
    source = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "title": types.Schema(type=types.Type.STRING, description="Title of the reputable source."),
            "url": types.Schema(type=types.Type.STRING, description="URL of the reputable source."),
        },
        required=["title", "url"],
    )
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "status": types.Schema(
                type=types.Type.STRING,
                enum=[v.value for v in VERDICTS],
                description="The fact-check status of the input: REAL, FAKE, or UNVERIFIED.",
            ),
            "explanation": types.Schema(
                type=types.Type.STRING,
                description="A detailed explanation for the fact-check determination.",
            ),
            "sources": types.Schema(
                type=types.Type.ARRAY,
                items=source,
                min_items=MIN_SOURCES,
                description="An array of at least two reputable source objects, each with a title and URL.",
            ),
        },
        required=["status", "explanation", "sources"],
        property_ordering=["status", "explanation", "sources"],
    )


def build_prompt(text: str) -> str:
    return PROMPT_TEMPLATE.format(input=text)


def build_request(text: str, model: str = DEFAULT_MODEL) -> RemoteRequest:
    """
    Shape one grounded generate_content call for `text`.
    No validation happens here; callers reject blank input.
    """
    config = types.GenerateContentConfig(
        system_instruction=SYSTEM_INSTRUCTION,
        tools=[types.Tool(google_search=types.GoogleSearch())],
        response_mime_type="application/json",
        response_schema=response_schema(),
    )
    contents = [types.Content(role="user", parts=[types.Part(text=build_prompt(text))])]
    return RemoteRequest(model=model, contents=contents, config=config)
