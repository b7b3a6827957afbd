"""
Background sweep of expired app-user sessions.
"""

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError

from primeauth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from primeauth.app.use_cases.sessions import SweepSessionsUseCase

logger = logging.getLogger(__name__)


async def run_session_sweeper(session_factory, interval_seconds: float, stop: asyncio.Event) -> None:
    """
    Run the sweep every interval_seconds until stop is set.

    Store errors are logged and the loop keeps going.
    """
    while not stop.is_set():
        try:
            async with session_factory() as session:
                await SweepSessionsUseCase(SqlAlchemyUnitOfWork(session)).execute()
        except SQLAlchemyError:
            logger.exception("Session sweep failed")

        try:
            await asyncio.wait_for(stop.wait(), timeout=interval_seconds)
        except asyncio.TimeoutError:
            pass
