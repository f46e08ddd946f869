"""Sequential HTTP dispatch of a templated request, one call per recipient."""

import json
import logging
from contextlib import AsyncExitStack
from collections.abc import Mapping
from typing import Any

import httpx

from event_notifier.dispatch.config import RequestConfig
from event_notifier.dispatch.errors import ResponseError, TransportError
from event_notifier.template import resolve

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def _build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient()


def _merge_headers(headers: Mapping[str, str]) -> dict[str, str]:
    # Header names are case-insensitive; a caller's content-type replaces ours.
    merged = {
        key: value
        for key, value in DEFAULT_HEADERS.items()
        if key.lower() not in {name.lower() for name in headers}
    }
    merged.update(headers)
    return merged


def _encode_body(body: Any) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


def _response_payload(response: httpx.Response) -> Any:
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


def render_bodies(config: RequestConfig, recipients: list[Mapping]) -> list[Any]:
    """Resolve the body template for every recipient without sending anything."""
    return [resolve(config.body_template, record) for record in recipients]


async def _send_one(
    client: httpx.AsyncClient,
    config: RequestConfig,
    headers: dict[str, str],
    record: Mapping,
    index: int,
) -> Any:
    body = resolve(config.body_template, record)
    logger.debug("%s %s [recipient %d]", config.method, config.url, index)

    try:
        response = await client.request(
            config.method,
            config.url,
            headers=headers,
            content=_encode_body(body),
        )
    except httpx.RequestError as exc:
        raise TransportError(
            f"{config.method} {config.url} failed for recipient {index}: {exc}",
            method=config.method,
            url=config.url,
            index=index,
        ) from exc

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise ResponseError(
            f"{config.method} {config.url} returned {response.status_code} for recipient {index}",
            status_code=response.status_code,
            body=_response_payload(response),
            method=config.method,
            url=config.url,
            index=index,
        ) from exc

    return _response_payload(response)


async def dispatch(
    config: RequestConfig,
    recipients: list[Mapping],
    client: httpx.AsyncClient | None = None,
) -> list[Any]:
    """Send one request per recipient, strictly in order.

    Each recipient's body is the config's template resolved against that
    recipient. Requests are awaited one at a time, so results line up with
    *recipients*. The first failure aborts the loop and propagates; no
    partial results are returned.

    Args:
        config: Target URL, method, headers and body template.
        recipients: Recipient records, one request each.
        client: Optional HTTP client. When omitted a client is created for
            this call and closed afterwards.

    Returns:
        Response payloads in recipient order.

    Raises:
        TransportError: If no usable response was received for a recipient
            (connection failure, timeout, undecodable body, redirect loop).
        ResponseError: If a response carried a non-success status.
    """
    headers = _merge_headers(config.headers)
    results: list[Any] = []

    async with AsyncExitStack() as stack:
        if client is None:
            client = await stack.enter_async_context(_build_client())
        for index, record in enumerate(recipients):
            results.append(await _send_one(client, config, headers, record, index))

    logger.info("Dispatched %d request(s) to %s %s", len(results), config.method, config.url)
    return results


class Event:
    """An event definition ready to be sent to every recipient.

    The definition uses the keys ``eventRequestUrl``, ``eventRequestType``,
    ``eventRequestHeaders`` (optional), ``eventRequestData`` and
    ``eventData``. It is validated on construction.
    """

    def __init__(self, event: Mapping):
        self.config = RequestConfig.from_event(event)
        self.recipients: list[Mapping] = list(event["eventData"])

    @property
    def request_url(self) -> str:
        return self.config.url

    @property
    def request_type(self) -> str:
        return self.config.method

    @property
    def request_headers(self) -> dict[str, str]:
        return self.config.headers

    @property
    def request_data(self) -> Any:
        return self.config.body_template

    def render(self) -> list[Any]:
        return render_bodies(self.config, self.recipients)

    async def handle_event(self, client: httpx.AsyncClient | None = None) -> list[Any]:
        """Send the notification to every recipient and collect the responses."""
        return await dispatch(self.config, self.recipients, client=client)

