"""Enrichment of a first name with age, gender and nationality guesses."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Literal

from pes.core.models import Enrichment

from .extraction import Found, Path, decode
from .lookup import LookupClient, LookupServiceError

logger = logging.getLogger(__name__)

EnrichmentMode = Literal["sequential", "parallel"]

AGE_PATH: Path = ("age",)
GENDER_PATH: Path = ("gender",)
NATIONALITY_PATH: Path = ("country", 0, "country_id")


@dataclass(frozen=True)
class DerivedField:
    """One enrichment field: where it is looked up and how it is read."""

    field: str
    client: LookupClient
    path: Path
    default: Any


class Enricher:
    """Runs the age, gender and nationality lookups for a name and merges them.

    Each lookup is independent: a failed request or an unexpected response
    shape only leaves its own field at the default.
    """

    def __init__(
        self,
        age_client: LookupClient,
        gender_client: LookupClient,
        nationality_client: LookupClient,
        mode: EnrichmentMode = "sequential",
    ):
        if mode not in ("sequential", "parallel"):
            raise ValueError(f"Unknown enrichment mode: {mode!r}")
        self.mode = mode
        self.fields = (
            DerivedField("age", age_client, AGE_PATH, 0),
            DerivedField("gender", gender_client, GENDER_PATH, ""),
            DerivedField("nationality", nationality_client, NATIONALITY_PATH, ""),
        )

    @classmethod
    def from_settings(cls, settings) -> "Enricher":
        timeout = settings.lookup_timeout_seconds
        return cls(
            age_client=LookupClient("agify", settings.agify_api, timeout),
            gender_client=LookupClient("genderize", settings.genderize_api, timeout),
            nationality_client=LookupClient(
                "nationalize", settings.nationalize_api, timeout
            ),
            mode=settings.enrichment_mode,
        )

    async def enrich(self, name: str) -> Enrichment:
        if self.mode == "parallel":
            values = await asyncio.gather(
                *(self._resolve(field, name) for field in self.fields)
            )
        else:
            values = [await self._resolve(field, name) for field in self.fields]

        return Enrichment(**{f.field: v for f, v in zip(self.fields, values)})

    async def _resolve(self, field: DerivedField, name: str) -> Any:
        try:
            document = await field.client.lookup(name)
        except LookupServiceError as e:
            logger.warning("Lookup for %s of %r failed: %s", field.field, name, e)
            document = None

        result = decode(document, field.path, type(field.default))
        if isinstance(result, Found):
            return result.value

        if document is not None:
            logger.info(
                "No %s for %r from %s: %s",
                field.field,
                name,
                field.client.service,
                result.reason,
            )
        return field.default
