"""
Scoring clients. Both implementations share one contract:

    response = await client.send(request)

HttpScoringClient talks to the live /model-risk endpoint; LocalSimulationClient
fabricates a response of the same shape after a short delay, for demos and
environments without network access to the scorer.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Literal, Optional

import httpx
import numpy as np

from core.config import ScoringConfig
from core.errors import ScoringRequestFailed
from core.log import get_logger
from core.schema import PREDICTION_FIELDS, RISK_LABELS

from .envelopes import ScoringRequest, ScoringResponse

logger = get_logger(__name__)

ResponseShape = Literal["nested", "flat"]


class ScoringClient:
    """Interface for anything that can score a ScoringRequest."""

    engine: str = ""

    async def send(self, request: ScoringRequest) -> ScoringResponse:
        raise NotImplementedError


class HttpScoringClient(ScoringClient):
    """
    POST {base_url}/model-risk with a bearer token.

    `engine` is passed as a query parameter when set (the watsonx backend
    expects engine=watson; the GPT backend takes none). One round trip,
    no retries: any transport error, non-2xx status or non-JSON body
    becomes ScoringRequestFailed.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        engine: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.engine = engine or ""
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport)

    async def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with self._client() as client:
                resp = await client.request(method, url, headers=self._headers(), **kwargs)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as exc:
            raise ScoringRequestFailed(
                f"{method} {url} returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ScoringRequestFailed(f"{method} {url} failed: {exc}") from exc
        except ValueError as exc:
            raise ScoringRequestFailed(f"{method} {url} returned a non-JSON body") from exc

    async def send(self, request: ScoringRequest) -> ScoringResponse:
        params = {"engine": self.engine} if self.engine else None
        logger.info("scoring_request_sent", base_url=self.base_url, engine=self.engine, rows=request.row_count)
        data = await self._request_json("POST", "/model-risk", json=request.to_wire(), params=params)
        if not isinstance(data, dict):
            raise ScoringRequestFailed("Scoring response is not a JSON object.")
        return data

    async def list_models(self) -> Any:
        """GET {base_url}/models: the models the backend reports as available."""
        return await self._request_json("GET", "/models")


class LocalSimulationClient(ScoringClient):
    """
    Stand-in scorer: one random label and probability pair per input row.

    Probabilities are returned as [p, 1 - p] with p uniform in [0, 1).
    shape="nested" wraps predictions in `result` (watsonx-style);
    shape="flat" puts them at the top level with a `model` field (GPT-style).
    """

    engine = "local-simulation"

    def __init__(
        self,
        delay_seconds: float = 2.0,
        *,
        seed: Optional[int] = None,
        shape: ResponseShape = "nested",
    ):
        if shape not in ("nested", "flat"):
            raise ValueError(f"Unknown response shape {shape!r}")
        self.delay_seconds = delay_seconds
        self.shape = shape
        self.rng = np.random.default_rng(seed)

    def _random_row(self) -> List[Any]:
        label = RISK_LABELS[int(self.rng.integers(len(RISK_LABELS)))]
        p = float(self.rng.random())
        return [label, [p, 1.0 - p]]

    async def send(self, request: ScoringRequest) -> ScoringResponse:
        await asyncio.sleep(self.delay_seconds)

        values = [self._random_row() for _ in range(request.row_count)]
        predictions = [{"fields": list(PREDICTION_FIELDS), "values": values}]
        logger.info("simulation_completed", rows=len(values), shape=self.shape)

        if self.shape == "flat":
            return {
                "engine": self.engine,
                "ok": True,
                "model": "gpt-simulated-model",
                "predictions": predictions,
            }
        return {
            "engine": self.engine,
            "ok": True,
            "result": {"predictions": predictions},
        }


def build_client(config: ScoringConfig) -> ScoringClient:
    """Pick the client implementation named by config.backend."""
    if config.backend == "local":
        return LocalSimulationClient(
            config.simulation_delay_seconds,
            seed=config.simulation_seed,
        )
    if not config.base_url:
        raise ValueError(f"Backend {config.backend!r} needs a base URL.")
    return HttpScoringClient(
        config.base_url,
        config.api_key,
        engine="watson" if config.backend == "watson" else None,
        timeout=config.timeout_seconds,
    )
