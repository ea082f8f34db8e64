"""
DataForSEO API Client

Async HTTP client for the SERP task workflow:
- task_post submits a Google organic search for one keyword
- fixed wait while DataForSEO processes the task
- task_get retrieves the ranked result items and cost

Every failure (transport, HTTP status, API status_code, missing task or
result) surfaces to callers of get_serp_results() as None. Nothing is
retried: each keyword gets exactly one attempt.
"""

import asyncio
import httpx
import base64
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional
from dataclasses import dataclass, field

from src.utils.config import (
    SERP_DEVICE,
    SERP_LANGUAGE_CODE,
    SERP_LOCATION_CODE,
)

logger = logging.getLogger(__name__)

# Task-level codes: 20000 = Ok, 20100 = Task Created
TASK_OK_CODES = (20000, 20100)


def safe_get_result(response: Dict, get_items: bool = True) -> Any:
    """
    Safely extract result data from DataForSEO API response.

    Handles cases where result is None, empty, or malformed.

    Args:
        response: Raw API response dict
        get_items: If True, returns items list. If False, returns first result object.

    Returns:
        List of items, result dict, or empty list/dict on failure
    """
    try:
        tasks = response.get("tasks")
        if not tasks or not isinstance(tasks, list):
            return [] if get_items else {}

        task = tasks[0] if tasks else {}
        result = task.get("result")

        if not result or not isinstance(result, list):
            return [] if get_items else {}

        first_result = result[0] if result else {}
        if not first_result or not isinstance(first_result, dict):
            return [] if get_items else {}

        if get_items:
            items = first_result.get("items")
            return items if items and isinstance(items, list) else []
        else:
            return first_result
    except (TypeError, IndexError, KeyError, AttributeError) as e:
        logger.debug(f"Safe result extraction failed: {e}")
        return [] if get_items else {}


@dataclass
class SerpResult:
    """Normalized organic SERP for one keyword."""
    keyword: str
    task_id: str
    items: List[Dict[str, Any]] = field(default_factory=list)
    cost: float = 0.0


class DataForSEOError(Exception):
    """Custom exception for DataForSEO API errors."""
    def __init__(self, message: str, status_code: int = None, response: dict = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class DataForSEOClient:
    """
    Async client for the DataForSEO SERP task API.

    Usage:
        async with DataForSEOClient(login="your_login", password="your_password") as client:
            serp = await client.get_serp_results("bruins tickets")
            if serp:
                print([item.get("domain") for item in serp.items])
    """

    BASE_URL = "https://api.dataforseo.com/v3"

    def __init__(
        self,
        login: str,
        password: str,
        base_url: Optional[str] = None,
        task_wait_seconds: float = 5.0,
        max_connections: int = 10,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize DataForSEO client.

        Args:
            login: DataForSEO login email
            password: DataForSEO API password
            base_url: API base URL (defaults to BASE_URL)
            task_wait_seconds: Delay between task_post and task_get
            max_connections: Maximum concurrent connections
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
            sleep: Coroutine used for the task wait
        """
        self.login = login
        self.password = password
        self.task_wait_seconds = task_wait_seconds
        self._sleep = sleep

        # Create auth header
        credentials = f"{login}:{password}"
        auth_token = base64.b64encode(credentials.encode()).decode()

        # Configure HTTP client with connection pooling
        self._client = httpx.AsyncClient(
            base_url=base_url or self.BASE_URL,
            headers={
                "Authorization": f"Basic {auth_token}",
                "Content-Type": "application/json",
            },
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_connections // 2,
            ),
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

        self._closed = False

    async def post(self, endpoint: str, data: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Make POST request to DataForSEO API.

        Args:
            endpoint: API endpoint path (e.g., "serp/google/organic/task_post")
            data: Request payload (list of task objects)

        Returns:
            API response as dictionary

        Raises:
            DataForSEOError: On transport, HTTP or API error
        """
        return await self._make_request("POST", endpoint, data)

    async def get(self, endpoint: str) -> Dict[str, Any]:
        """
        Make GET request to DataForSEO API.

        Raises:
            DataForSEOError: On transport, HTTP or API error
        """
        return await self._make_request("GET", endpoint)

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[List[Dict]] = None,
    ) -> Dict[str, Any]:
        """Make a single HTTP request."""
        if self._closed:
            raise DataForSEOError("Client is closed")

        url = f"/{endpoint.lstrip('/')}"
        logger.debug(f"{method} {url}")

        try:
            if method == "POST":
                response = await self._client.post(url, json=data)
            else:
                response = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise DataForSEOError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise DataForSEOError(f"HTTP error: {e}") from e

        if response.status_code != 200:
            raise DataForSEOError(
                f"API request failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise DataForSEOError(f"Invalid JSON in response: {e}") from e

        # Check for API-level errors
        if result.get("status_code") != 20000:
            error_msg = result.get("status_message", "Unknown error")
            raise DataForSEOError(
                f"API error: {error_msg} ({result.get('status_code')})",
                status_code=result.get("status_code"),
                response=result,
            )

        # Task-level errors are logged; callers decide what an empty task means
        for task in result.get("tasks") or []:
            task_status = task.get("status_code")
            if task_status not in TASK_OK_CODES:
                logger.warning(
                    f"DataForSEO task error in {url}: "
                    f"{task.get('status_message', 'Task error')} (status: {task_status})"
                )

        return result

    async def close(self):
        """Close the HTTP client."""
        if not self._closed:
            await self._client.aclose()
            self._closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================================================
    # SERP TASK WORKFLOW
    # ========================================================================

    async def submit_serp_task(self, keyword: str) -> Optional[str]:
        """
        Submit a Google organic SERP task.

        Args:
            keyword: Search query

        Returns:
            Task ID if DataForSEO accepted the task, otherwise None

        Raises:
            DataForSEOError: On transport, HTTP or API error
        """
        result = await self.post(
            "serp/google/organic/task_post",
            [{
                "keyword": keyword,
                "location_code": SERP_LOCATION_CODE,
                "language_code": SERP_LANGUAGE_CODE,
                "device": SERP_DEVICE,
            }]
        )

        tasks = result.get("tasks") or []
        if not tasks:
            return None

        task = tasks[0]
        if task.get("status_code") not in TASK_OK_CODES:
            return None

        return task.get("id")

    async def get_serp_task(self, task_id: str, keyword: str = "") -> Optional[SerpResult]:
        """
        Retrieve the result of a submitted SERP task.

        Args:
            task_id: ID returned by submit_serp_task
            keyword: Keyword the task was submitted for (carried into the result)

        Returns:
            SerpResult with at least one item, otherwise None

        Raises:
            DataForSEOError: On transport, HTTP or API error
        """
        response = await self.get(f"serp/google/organic/task_get/{task_id}")

        first_result = safe_get_result(response, get_items=False)
        items = safe_get_result(response, get_items=True)
        if not items:
            return None

        tasks = response.get("tasks") or [{}]
        cost = first_result.get("cost") or tasks[0].get("cost") or 0

        return SerpResult(
            keyword=first_result.get("keyword") or keyword,
            task_id=task_id,
            items=items,
            cost=float(cost),
        )

    async def get_serp_results(self, keyword: str) -> Optional[SerpResult]:
        """
        Get SERP results for a keyword: submit, wait, retrieve.

        The wait is a single fixed delay, not a readiness poll; a task that
        is still queued when task_get runs yields None.

        Args:
            keyword: Search query

        Returns:
            SerpResult, or None if no usable data could be obtained
        """
        try:
            logger.info(f"Submitting SERP task for: {keyword}")
            task_id = await self.submit_serp_task(keyword)
            if not task_id:
                logger.warning(f"SERP task for '{keyword}' was not accepted")
                return None

            logger.info(f"Task submitted with ID: {task_id}")
            await self._sleep(self.task_wait_seconds)

            logger.info(f"Getting results for task: {task_id}")
            serp = await self.get_serp_task(task_id, keyword=keyword)
            if serp is None:
                logger.warning(f"No SERP items returned for '{keyword}' (task {task_id})")
            return serp

        except DataForSEOError as e:
            logger.warning(f"SERP query failed for '{keyword}': {e}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error in SERP query for '{keyword}': {e}")
            return None


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def create_client(settings) -> DataForSEOClient:
    """Create a DataForSEO client from application settings."""
    return DataForSEOClient(
        login=settings.DATAFORSEO_LOGIN,
        password=settings.DATAFORSEO_PASSWORD,
        base_url=settings.DATAFORSEO_BASE_URL,
        task_wait_seconds=settings.SERP_TASK_WAIT_SECONDS,
        timeout=settings.API_TIMEOUT,
    )
