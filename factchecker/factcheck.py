# factchecker/factcheck.py
import logging
from typing import Any, Optional

from google import genai
from pydantic import ValidationError

from .config import Settings, load_settings
from .errors import (
    ConfigurationError,
    EmptyResponseError,
    FactCheckError,
    MalformedResponseError,
    RemoteCallError,
)
from .models import FactCheckResult, ModelVerdict
from .prompt import build_request
from .sources import citations_from_response, merge_sources

logger = logging.getLogger(__name__)


def parse_verdict(payload: str) -> ModelVerdict:
    """Parse the model's JSON text into the verdict contract."""
    try:
        return ModelVerdict.model_validate_json(payload)
    except ValidationError as e:
        logger.error("Failed to parse JSON response: %r (%s)", payload, e)
        raise MalformedResponseError(
            "Failed to parse the model's response. It did not return valid JSON.", payload=payload
        ) from e


def error_message(exc: BaseException) -> str:
    return f"An error occurred: {str(exc) or 'Unknown error.'}. Please try again."


class FactChecker:
    """
    Runs one grounded Gemini call per claim and folds every failure into an
    ERROR result, so `check` never raises.
    """

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        self.settings = settings
        self._client = client

    def _get_client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.settings.API_KEY)
        return self._client

    async def _generate(self, text: str):
        if not self.settings.has_api_key:
            raise ConfigurationError("API_KEY is not defined. Please ensure it's set in your environment.")

        request = build_request(text, model=self.settings.MODEL_NAME)
        try:
            return await self._get_client().aio.models.generate_content(
                model=request.model,
                contents=request.contents,
                config=request.config,
            )
        except Exception as e:
            raise RemoteCallError(str(e) or e.__class__.__name__) from e

    async def check(self, text: str) -> FactCheckResult:
        try:
            response = await self._generate(text)

            payload = (getattr(response, "text", None) or "").strip()
            if not payload:
                raise EmptyResponseError("No response text received from the model.")

            verdict = parse_verdict(payload)
            sources = merge_sources(verdict.sources, citations_from_response(response))
        except FactCheckError as e:
            logger.error("Error during fact-checking (%s): %s", e.__class__.__name__, e)
            return FactCheckResult.failure(error_message(e))
        except Exception as e:
            logger.exception("Unexpected error during fact-checking")
            return FactCheckResult.failure(error_message(e))

        logger.info("Fact check finished: %s with %d sources", verdict.status.value, len(sources))
        return FactCheckResult(status=verdict.status, explanation=verdict.explanation, sources=sources)


async def fact_check_news(text: str, settings: Optional[Settings] = None) -> FactCheckResult:
    """One-shot check using settings from the environment unless given."""
    return await FactChecker(settings or load_settings()).check(text)
