from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


MAX_DESCRIPTION_LENGTH = 100


@attrs.define
class Desk:
    description: str
    id: Optional[int] = None

    @classmethod
    @Logger.io
    def create(cls, *, description: str) -> 'Desk':
        description = description.strip()
        if not description:
            raise DomainError('Desk description is required')
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise DomainError(
                f'Desk description must be at most {MAX_DESCRIPTION_LENGTH} characters'
            )
        return cls(description=description)
