import contextlib
from contextlib import asynccontextmanager
import asyncio
import logging
from typing import Callable

from app.ai.factory import get_default_ai_client
from app.core.client_rate_limit import sweep_client_rate_limits
from app.core.config import settings
from app.resume.loader import ResumeLoadError, load_resume

logger = logging.getLogger(__name__)


async def periodic_sweep(
    stop_event: asyncio.Event,
    interval_s: float,
    sweep: Callable[[], int] | None = None,
) -> None:
    """Sweep expired rate-limit keys every ``interval_s`` until ``stop_event`` is set."""
    sweep = sweep or sweep_client_rate_limits
    while not stop_event.is_set():
        try:
            await asyncio.wait_for(stop_event.wait(), timeout=interval_s)
        except asyncio.TimeoutError:
            removed = sweep()
            if removed:
                logger.info("rate_limit_sweep removed=%s", removed)


@asynccontextmanager
async def lifespan(app):
    # Raises on provider misconfiguration, aborting startup.
    client = get_default_ai_client()
    logger.info("llm_provider_ready provider=%s client=%s", settings.llm_provider, type(client).__name__)
    if not settings.model_name:
        logger.warning("llm_model_missing: MODEL_NAME is not set; chat requests will fail")

    try:
        resume = load_resume()
        logger.info("resume_loaded name=%s experiences=%s", resume.name, len(resume.experience))
    except ResumeLoadError as exc:
        logger.warning("resume_not_loaded: %s", exc)

    stop_event = asyncio.Event()
    sweep_task = asyncio.create_task(
        periodic_sweep(stop_event, settings.rate_limit_sweep_interval_s, sweep_client_rate_limits)
    )
    yield
    stop_event.set()
    if not sweep_task.done():
        sweep_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweep_task
