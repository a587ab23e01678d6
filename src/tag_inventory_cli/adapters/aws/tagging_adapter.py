# src/tag_inventory_cli/adapters/aws/tagging_adapter.py
"""
AWS Resource Groups Tagging API adapter — lists every tagged resource in a region.
"""

import logging
import threading
from typing import Iterator, Optional

from botocore.exceptions import BotoCoreError, ClientError

from tag_inventory_cli.config import RESOURCES_PER_PAGE
from tag_inventory_cli.core.classifier import classify_arn
from tag_inventory_cli.core.errors import (
    ApiError,
    Cancelled,
    InvalidArnFormat,
    MalformedResourcePath,
)
from tag_inventory_cli.core.models import (
    InventoryResult,
    PaginationState,
    SkippedRecord,
    SkipPolicy,
)

logger = logging.getLogger(__name__)


def tags_to_dict(tags: Optional[list[dict]]) -> dict[str, str]:
    """[{"Key": k, "Value": v}, ...] -> {k: v}"""
    return {t["Key"]: t.get("Value", "") for t in tags or [] if "Key" in t}


def iter_pages(
    tagging,
    page_size: int = RESOURCES_PER_PAGE,
    cancel_event: Optional[threading.Event] = None,
) -> Iterator[list[dict]]:
    """
    Yields each page's ResourceTagMappingList, following PaginationToken until the
    API returns no (or an empty) token.

    Raises:
        ApiError:  the request for a page failed, or the API repeated a token.
        Cancelled: `cancel_event` was set before the next page was requested.
    """
    state = PaginationState(page_size=page_size)
    seen_tokens: set[str] = set()

    while not state.done:
        if cancel_event is not None and cancel_event.is_set():
            raise Cancelled(state.page_index)

        params = {"ResourcesPerPage": state.page_size}
        if state.token is not None:
            params["PaginationToken"] = state.token

        logger.debug("Requesting page %d (token=%r)", state.page_index, state.token)
        try:
            response = tagging.get_resources(**params)
        except ClientError as e:
            error = e.response.get("Error", {})
            raise ApiError(state.page_index, error.get("Message", str(e)), error.get("Code")) from e
        except BotoCoreError as e:
            raise ApiError(state.page_index, str(e)) from e

        next_token = response.get("PaginationToken") or None
        if next_token is not None:
            if next_token in seen_tokens:
                raise ApiError(state.page_index, f"pagination token {next_token!r} repeated")
            seen_tokens.add(next_token)

        yield response.get("ResourceTagMappingList", [])
        state.advance(next_token)


def collect_inventory(
    tagging,
    region: str,
    policy: SkipPolicy = SkipPolicy.SKIP,
    page_size: int = RESOURCES_PER_PAGE,
    cancel_event: Optional[threading.Event] = None,
    progress_callback=None,
) -> InventoryResult:
    """
    Classifies every resource returned by the tagging API, in the order received.

    Malformed ARNs are skipped and logged under SkipPolicy.SKIP, or re-raised under
    SkipPolicy.STRICT.

    progress_callback: Optional callable(pages_fetched: int, records: int) invoked
                       after each page.
    """
    result = InventoryResult(region=region)

    for page in iter_pages(tagging, page_size=page_size, cancel_event=cancel_event):
        result.pages_fetched += 1
        for resource in page:
            arn = resource.get("ResourceARN", "")
            try:
                record = classify_arn(arn, region, tags_to_dict(resource.get("Tags")))
            except (InvalidArnFormat, MalformedResourcePath) as e:
                if policy is SkipPolicy.STRICT:
                    raise
                logger.warning("Skipping %s: %s", arn, e)
                result.skipped.append(SkippedRecord(arn=arn, reason=str(e)))
                continue
            result.records.append(record)

        logger.debug("Page %d: %d records so far", result.pages_fetched, len(result.records))
        if progress_callback:
            progress_callback(result.pages_fetched, len(result.records))

    return result
