#!/usr/bin/env python3
"""
Database Seed Script
Populate the desk inventory

Features:
1. Create tables if missing
2. Create desks - `DESKS` environment variable controls how many (default 15)

Usage:
    DESKS=20 python -m script.seed_data
"""

import asyncio
import os
from typing import AsyncContextManager, Callable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.config.di import container
from src.platform.database.db_setting import create_db_and_tables, dispose_engine
from src.platform.logging.loguru_io import Logger
from src.service.desk_booking.app.command.create_desk_use_case import CreateDeskUseCase
from src.service.desk_booking.driven_adapter.model.desk_model import DeskModel
from src.service.desk_booking.driven_adapter.repo.desk_command_repo_impl import (
    DeskCommandRepoImpl,
)


DEFAULT_DESK_COUNT = 15


async def seed_desks(
    *,
    session_factory: Callable[..., AsyncContextManager[AsyncSession]],
    desk_count: int,
) -> int:
    """Create desks until the inventory holds `desk_count` of them. Returns how many were added."""
    async with session_factory() as session:
        existing = (await session.execute(select(func.count()).select_from(DeskModel))).scalar_one()

    if existing >= desk_count:
        Logger.base.info(f'⏭️  [SEED] {existing} desks already present, nothing to do')
        return 0

    use_case = CreateDeskUseCase(desk_command_repo=DeskCommandRepoImpl(session_factory))
    for number in range(existing + 1, desk_count + 1):
        await use_case.create_desk(description=f'Desk {number}')

    created = desk_count - existing
    Logger.base.info(f'✅ [SEED] Created {created} desks')
    return created


async def main() -> None:
    desk_count = int(os.getenv('DESKS', str(DEFAULT_DESK_COUNT)))
    await create_db_and_tables()
    try:
        await seed_desks(session_factory=container.database().session, desk_count=desk_count)
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
