"""
Periodic sweep that deletes long-inactive accounts.

A user is inactive when their last login (signup counts as one) is older than
`inactive_after_months` calendar months. The sweep runs on its own asyncio
task, started by the app lifespan; it has no HTTP entry point.
"""

from __future__ import annotations

import asyncio
import calendar
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from shopfront_api.core.context import AppContext

from . import repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepResult:
    cutoff: datetime
    deleted_user_ids: list[int]

    @property
    def deleted(self) -> int:
        return len(self.deleted_user_ids)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def months_before(moment: datetime, months: int) -> datetime:
    """
    Same wall-clock time `months` calendar months earlier, with the day
    clamped to the target month (May 31 minus 3 months is Feb 28/29).
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


async def sweep_inactive_accounts(context: AppContext, *, now: datetime | None = None) -> SweepResult:
    cutoff = months_before(now or _utc_now(), context.settings.inactive_after_months)
    deleted = await repository.delete_inactive_users(context.database, cutoff=cutoff)
    return SweepResult(cutoff=cutoff, deleted_user_ids=deleted)


async def run_sweep(context: AppContext) -> SweepResult | None:
    """
    One guarded iteration. Failures are logged, never raised, and not retried.
    """
    try:
        result = await sweep_inactive_accounts(context)
    except Exception:
        logger.exception("inactive_sweep_failed")
        return None

    logger.info(
        "inactive_sweep_complete deleted=%s cutoff=%s",
        result.deleted,
        result.cutoff.isoformat(),
    )
    return result


async def run_forever(context: AppContext) -> None:
    interval_s = max(context.settings.sweep_interval_hours, 1) * 3600
    logger.info("inactive_sweep_scheduled interval_hours=%s", interval_s // 3600)
    while True:
        await asyncio.sleep(interval_s)
        await run_sweep(context)


def start(context: AppContext) -> asyncio.Task:
    return asyncio.create_task(run_forever(context), name="inactive-account-sweep")
